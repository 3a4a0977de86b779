"""
===========================================================
parameters.py
Last Updated: 2026-10-19
===========================================================

Description:
    Parameter bundles for the seasonal plant epidemic models,
    one immutable dataclass per model variant, plus the calendar
    configuration (TimeParam).

    Variants:
        - CompactAirborneParams     (S, I)       alpha, beta, n
        - ElaborateAirborneParams   (P, S, I)    + Lambda, Theta, mu, Pi
        - CompactSoilborneParams    (S, I)       + theta, Pi, mu, lam
        - ElaborateSoilborneParams  (P, S, I)    + theta, lam, mu, Pi

Notes:
    - All rates are per day, n is the host population (carrying capacity).
    - alpha: removal rate of infected hosts
    - beta: secondary (host to host) transmission rate
    - Lambda / lam: decay rate of inoculum during the growing season
    - Theta / theta: primary infection rate from inoculum
    - mu: decay rate of inoculum during winter
    - Pi: inoculum produced per infected host at the end of the season
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import math
import numbers
from dataclasses import dataclass, fields, asdict
from enum import Enum
from typing import ClassVar, Dict, Tuple

from .errors import ContractViolation


class ModelVariant(Enum):
    """Closed set of model variants"""
    COMPACT_AIRBORNE = "compact_airborne"
    ELABORATE_AIRBORNE = "elaborate_airborne"
    COMPACT_SOILBORNE = "compact_soilborne"
    ELABORATE_SOILBORNE = "elaborate_soilborne"


class _RateParams:
    """Shared validation for the parameter dataclasses"""
    variant: ClassVar[ModelVariant]
    statelength: ClassVar[int]
    is_elaborate: ClassVar[bool]

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ContractViolation(f"{f.name} must be a real number, got {value!r}",
                                        variant=self.variant)
            if not math.isfinite(value) or value < 0:
                raise ContractViolation(f"{f.name} must be finite and non-negative, got {value}",
                                        variant=self.variant)

    def to_dict(self) -> Dict[str, float]:
        """Convert parameters to a dictionary for easy inspection"""
        return asdict(self)


@dataclass(frozen=True)
class CompactAirborneParams(_RateParams):
    alpha: float    # removal rate
    beta: float     # transmission rate
    n: float        # host population

    variant: ClassVar[ModelVariant] = ModelVariant.COMPACT_AIRBORNE
    statelength: ClassVar[int] = 2
    is_elaborate: ClassVar[bool] = False


@dataclass(frozen=True)
class ElaborateAirborneParams(_RateParams):
    alpha: float
    beta: float
    n: float
    Lambda: float   # inoculum decay, growing season
    Theta: float    # primary infection rate
    mu: float       # inoculum decay, winter
    Pi: float       # inoculum production per infected host

    variant: ClassVar[ModelVariant] = ModelVariant.ELABORATE_AIRBORNE
    statelength: ClassVar[int] = 3
    is_elaborate: ClassVar[bool] = True


@dataclass(frozen=True)
class CompactSoilborneParams(_RateParams):
    alpha: float
    beta: float
    n: float
    theta: float    # primary infection rate from soil inoculum
    Pi: float
    mu: float
    lam: float      # soil inoculum decay, growing season

    variant: ClassVar[ModelVariant] = ModelVariant.COMPACT_SOILBORNE
    statelength: ClassVar[int] = 2
    is_elaborate: ClassVar[bool] = False


@dataclass(frozen=True)
class ElaborateSoilborneParams(_RateParams):
    alpha: float
    beta: float
    n: float
    theta: float
    lam: float
    mu: float
    Pi: float

    variant: ClassVar[ModelVariant] = ModelVariant.ELABORATE_SOILBORNE
    statelength: ClassVar[int] = 3
    is_elaborate: ClassVar[bool] = True


PARAMS_BY_VARIANT = {
    ModelVariant.COMPACT_AIRBORNE: CompactAirborneParams,
    ModelVariant.ELABORATE_AIRBORNE: ElaborateAirborneParams,
    ModelVariant.COMPACT_SOILBORNE: CompactSoilborneParams,
    ModelVariant.ELABORATE_SOILBORNE: ElaborateSoilborneParams,
}


@dataclass(frozen=True)
class TimeParam:
    """
    Calendar of one simulated year.

    Parameters:
    T: float. Length of a full year (days)
    tau: float. Length of the growing season, 0 < tau < T
    dt: float. Output sampling step (days)
    """
    T: float = 365.0
    tau: float = 180.0
    dt: float = 1.0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ContractViolation(f"time parameter {f.name} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise ContractViolation(f"time parameter {f.name} must be finite, got {value}")
        if not 0 < self.tau < self.T:
            raise ContractViolation(f"growing season must satisfy 0 < tau < T, got tau={self.tau}, T={self.T}")
        if self.dt <= 0:
            raise ContractViolation(f"sampling step dt must be positive, got {self.dt}")

    @property
    def tspang(self) -> Tuple[float, float]:
        """growing season span"""
        return (0.0, float(self.tau))

    @property
    def tspanw(self) -> Tuple[float, float]:
        """winter season span"""
        return (float(self.tau), float(self.T))

    @property
    def winter_length(self) -> float:
        return float(self.T - self.tau)


# default calendar: one growing season of 180 days in a 365 day year,
# sampled daily. Only used by the outermost entry points.
DEFAULT_TIME_PARAM = TimeParam()
