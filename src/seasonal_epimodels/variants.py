"""
===========================================================
variants.py
Last Updated: 2026-10-19
===========================================================

Description:
    Variant dispatch. Each ModelVariant is bound once to a
    VariantStrategy (state type, growing RHS, optional winter RHS,
    year transition); a SeasonalModel carries its parameters and
    the selected strategy through the simulation.

Example Usage:
    from seasonal_epimodels.variants import make_model
    model = make_model("compact_soilborne", alpha=0.1, beta=0.01, n=1000,
                       theta=0.05, Pi=2.0, mu=0.01, lam=0.1)
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Callable, Dict, Optional, Tuple, Type, Union

import numpy as np

from . import rhs, transitions
from .errors import ContractViolation
from .solver import DEFAULT_SOLVER, SolverOptions
from .parameters import PARAMS_BY_VARIANT, ModelVariant
from .states import CompactState, ElaborateState, _State


@dataclass(frozen=True)
class VariantStrategy:
    state_type: Type[_State]
    growing_rhs: Callable
    winter_rhs: Optional[Callable]
    year_transition: Callable


STRATEGIES: Dict[ModelVariant, VariantStrategy] = {
    ModelVariant.COMPACT_AIRBORNE: VariantStrategy(
        state_type=CompactState,
        growing_rhs=rhs.growing_compact,
        winter_rhs=None,
        year_transition=transitions.carry_over_transition,
    ),
    ModelVariant.ELABORATE_AIRBORNE: VariantStrategy(
        state_type=ElaborateState,
        growing_rhs=rhs.growing_elaborate_airborne,
        winter_rhs=rhs.winter_elaborate,
        year_transition=transitions.elaborate_year_transition,
    ),
    ModelVariant.COMPACT_SOILBORNE: VariantStrategy(
        state_type=CompactState,
        growing_rhs=rhs.growing_compact,
        winter_rhs=None,
        year_transition=transitions.soilborne_compact_transition,
    ),
    ModelVariant.ELABORATE_SOILBORNE: VariantStrategy(
        state_type=ElaborateState,
        growing_rhs=rhs.growing_elaborate_soilborne,
        winter_rhs=rhs.winter_elaborate,
        year_transition=transitions.elaborate_year_transition,
    ),
}


class SeasonalModel:
    """
    A model variant bound to its parameters.

    Parameters:
    params : one of the *Params dataclasses. Selects the variant
    solver : SolverOptions, optional. Settings for solve_ivp
    """

    def __init__(self, params, solver: SolverOptions = DEFAULT_SOLVER):
        variant = getattr(params, "variant", None)
        if variant not in STRATEGIES or not isinstance(params, PARAMS_BY_VARIANT[variant]):
            raise ContractViolation(f"unsupported parameter object {type(params).__name__}")
        self.params = params
        self.solver = solver
        self.strategy = STRATEGIES[variant]

    @property
    def variant(self) -> ModelVariant:
        return self.params.variant

    @property
    def statelength(self) -> int:
        return self.params.statelength

    @property
    def is_elaborate(self) -> bool:
        return self.params.is_elaborate

    @property
    def state_type(self) -> Type[_State]:
        return self.strategy.state_type

    @property
    def compartments(self) -> Tuple[str, ...]:
        return self.strategy.state_type.compartments

    def coerce_state(self, state) -> _State:
        """Return state as this model's state type; dimension mismatches fail fast"""
        if isinstance(state, _State):
            if not isinstance(state, self.state_type):
                raise ContractViolation(
                    f"statelength mismatch: {type(state).__name__} has {len(state)} compartments, "
                    f"{self.variant.name} expects {self.statelength}",
                    variant=self.variant,
                )
            return state
        values = np.asarray(state, dtype=float).ravel()
        if values.shape[0] != self.statelength:
            raise ContractViolation(
                f"statelength mismatch: got {values.shape[0]} values, "
                f"{self.variant.name} expects {self.statelength}",
                variant=self.variant,
            )
        return self.state_type.from_array(values)

    def __repr__(self) -> str:
        return f"SeasonalModel({self.params!r}, solver={self.solver.method})"


def build_params(variant: Union[str, ModelVariant], **values):
    """Build the parameter dataclass of a variant from keyword values"""
    try:
        variant = ModelVariant(variant)
    except ValueError:
        valid = [v.value for v in ModelVariant]
        raise ContractViolation(f"unknown model variant {variant!r}; expected one of {valid}") from None

    params_cls = PARAMS_BY_VARIANT[variant]
    expected = {f.name for f in fields(params_cls)}
    unknown = set(values) - expected
    missing = expected - set(values)
    if unknown:
        raise ContractViolation(f"unknown parameters for {variant.value}: {sorted(unknown)}", variant=variant)
    if missing:
        raise ContractViolation(f"missing parameters for {variant.value}: {sorted(missing)}", variant=variant)
    return params_cls(**values)


def make_model(variant: Union[str, ModelVariant], solver: SolverOptions = DEFAULT_SOLVER, **values) -> SeasonalModel:
    return SeasonalModel(build_params(variant, **values), solver=solver)
