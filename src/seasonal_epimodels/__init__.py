"""
===========================================================
seasonal_epimodels
===========================================================

Multi-year plant epidemic models with alternating growing and
winter seasons. Compact (S, I) and elaborate (P, S, I) variants,
for airborne and soilborne transmission.

Example Usage:
    from seasonal_epimodels import CompactAirborneParams, CompactState
    from seasonal_epimodels import SeasonalModel, TimeParam, simulate_years
    model = SeasonalModel(CompactAirborneParams(alpha=0.1, beta=0.01, n=1000))
    table = simulate_years(5, CompactState(S=999, I=1), model, TimeParam())
-----------------------------------------------------------
License: MIT
===========================================================
"""
from .errors import (
    ContractViolation,
    DomainError,
    IntegrationFailure,
    SeasonalModelError,
)
from .parameters import (
    DEFAULT_TIME_PARAM,
    CompactAirborneParams,
    CompactSoilborneParams,
    ElaborateAirborneParams,
    ElaborateSoilborneParams,
    ModelVariant,
    TimeParam,
)
from .states import CompactState, ElaborateState
from .trajectory import Trajectory
from .solver import SolverOptions, integrate, sampling_times
from .seasons import Season, is_winter, is_winter_table
from .variants import SeasonalModel, build_params, make_model
from .season import simulate_growing, simulate_season, simulate_winter
from .simulate import simulate_year, simulate_years
from .results import ResultsTable

__version__ = "0.1.0"
