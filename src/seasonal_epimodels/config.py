"""
===========================================================
config.py
Last Updated: 2026-10-19
===========================================================

Description:
    YAML configuration of a multi-year run: model variant and
    parameters, calendar, solver settings, initial state and
    number of years.

    base.yaml -> optional override dict (deep-merged)

Example config:
    simulation:
      nyears: 10
    model:
      variant: compact_airborne
      params: {alpha: 0.1, beta: 0.01, n: 1000}
    time: {T: 365, tau: 180, dt: 1}
    solver: {method: RK45, rtol: 1.0e-6, atol: 1.0e-8}
    initial_state: {S: 999, I: 1}

Notes:
    - Write exponents with a decimal point (1.0e-6): PyYAML reads
      1e-6 as a string. Solver tolerances are coerced to float anyway.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import copy
import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import yaml

from .errors import ContractViolation
from .solver import SolverOptions
from .parameters import TimeParam
from .simulate import simulate_years
from .variants import SeasonalModel, build_params


# ==================== Configuration sections ==================================

@dataclass
class SimulationSection:
    nyears: int = 5


@dataclass
class ModelSection:
    variant: str = "compact_airborne"
    params: Dict[str, float] = field(default_factory=lambda: {"alpha": 0.1, "beta": 0.01, "n": 1000.0})


@dataclass
class TimeSection:
    T: float = 365.0    # days in a year
    tau: float = 180.0  # growing season length
    dt: float = 1.0     # output step


@dataclass
class SolverSection:
    method: str = "RK45"
    rtol: float = 1e-6
    atol: float = 1e-8
    max_step: Optional[float] = None    # None: unbounded


@dataclass
class SimulationConfig:
    simulation: SimulationSection = field(default_factory=SimulationSection)
    model: ModelSection = field(default_factory=ModelSection)
    time: TimeSection = field(default_factory=TimeSection)
    solver: SolverSection = field(default_factory=SolverSection)
    initial_state: Dict[str, float] = field(default_factory=lambda: {"S": 999.0, "I": 1.0})


# ==================== YAML loading & merging ==================================

def deep_merge(base: Dict, override: Dict) -> Dict:
    """Recursively merge override into base (modified in place) and return it"""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _dict_to_section(section_cls, data: Dict) -> Any:
    valid_fields = {f.name for f in dataclasses.fields(section_cls)}
    unknown = set(data) - valid_fields
    if unknown:
        raise ContractViolation(f"unknown keys in '{section_cls.__name__}': {sorted(unknown)}")
    return section_cls(**data)


def _dict_to_config(data: Dict) -> SimulationConfig:
    section_map = {
        "simulation": SimulationSection,
        "model": ModelSection,
        "time": TimeSection,
        "solver": SolverSection,
    }
    unknown = set(data) - set(section_map) - {"initial_state"}
    if unknown:
        raise ContractViolation(f"unknown configuration sections: {sorted(unknown)}")

    sections = {}
    for key, cls in section_map.items():
        value = data.get(key)
        if value is None:
            sections[key] = cls()
        elif isinstance(value, dict):
            sections[key] = _dict_to_section(cls, value)
        else:
            raise ContractViolation(f"section '{key}' must be a mapping, got {type(value).__name__}")

    initial_state = data.get("initial_state")
    if initial_state is not None:
        if not isinstance(initial_state, dict):
            raise ContractViolation("initial_state must be a mapping of compartment -> value")
        sections["initial_state"] = dict(initial_state)
    return SimulationConfig(**sections)


# ==================== Builders ================================================

def build_time_param(config: SimulationConfig) -> TimeParam:
    return TimeParam(T=config.time.T, tau=config.time.tau, dt=config.time.dt)


def build_solver(config: SimulationConfig) -> SolverOptions:
    s = config.solver
    try:
        max_step = np.inf if s.max_step is None else float(s.max_step)
        return SolverOptions(method=str(s.method), rtol=float(s.rtol), atol=float(s.atol), max_step=max_step)
    except (TypeError, ValueError) as e:
        raise ContractViolation(f"invalid solver settings: {e}") from e


def build_model(config: SimulationConfig) -> SeasonalModel:
    params = build_params(config.model.variant, **(config.model.params or {}))
    return SeasonalModel(params, solver=build_solver(config))


def build_initial_state(config: SimulationConfig, model: SeasonalModel):
    """Initial state of year 1, keyed by compartment name"""
    values = config.initial_state or {}
    expected = model.compartments
    if set(values) != set(expected):
        raise ContractViolation(
            f"initial_state for {model.variant.value} needs compartments {list(expected)}, "
            f"got {sorted(values)}",
            variant=model.variant,
        )
    return model.state_type(**{name: float(values[name]) for name in expected})


def validate_config(config: SimulationConfig) -> None:
    """
    Validate a configuration by building every object it describes.
    Raises ContractViolation (a ValueError) on failure.
    """
    nyears = config.simulation.nyears
    if isinstance(nyears, bool) or not isinstance(nyears, int) or nyears < 1:
        raise ContractViolation(f"simulation.nyears must be an integer >= 1, got {nyears!r}")
    build_time_param(config)
    model = build_model(config)
    build_initial_state(config, model)


def load_config(path: Union[str, Path], overrides: Optional[Dict] = None) -> SimulationConfig:
    """
    Load a YAML configuration, optionally deep-merging overrides on top.

    Raises:
    FileNotFoundError: if path doesn't exist
    ContractViolation: if the configuration is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        config_dict = yaml.safe_load(f) or {}
    if not isinstance(config_dict, dict):
        raise ContractViolation(f"{path} does not contain a mapping")

    if overrides is not None:
        deep_merge(config_dict, copy.deepcopy(overrides))

    config = _dict_to_config(config_dict)
    validate_config(config)
    return config


def default_config() -> SimulationConfig:
    """Compact airborne model, 5 years, one infected host among 1000"""
    config = SimulationConfig()
    validate_config(config)
    return config


def run_from_config(config: SimulationConfig):
    """Build everything a configuration describes and run it"""
    validate_config(config)
    model = build_model(config)
    tp = build_time_param(config)
    state0 = build_initial_state(config, model)
    return simulate_years(config.simulation.nyears, state0, model, tp)
