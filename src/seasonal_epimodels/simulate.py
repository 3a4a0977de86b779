"""
===========================================================
simulate.py
Last Updated: 2026-10-19
===========================================================

Description:
    Year simulator and multi-year orchestration.

    One year:
        1. growing season over [0, tau]
        2. elaborate models only: winter handoff, winter over
           [tau, T], appended to the growing trajectory
        3. year transition of the variant -> next year's state

    Several years chain step 1-3, each year starting from the
    state returned by the previous one. Years are strictly
    sequential: any failure aborts the whole run.

Example Usage:
    from seasonal_epimodels import CompactAirborneParams, CompactState
    from seasonal_epimodels import SeasonalModel, TimeParam, simulate_years
    model = SeasonalModel(CompactAirborneParams(alpha=0.1, beta=0.01, n=1000))
    table = simulate_years(3, CompactState(S=999, I=1), model, TimeParam())
    table.print_summary()
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numbers
from typing import Tuple

from .errors import ContractViolation, SeasonalModelError
from .parameters import DEFAULT_TIME_PARAM
from .results import ResultsTable
from .season import simulate_growing, simulate_winter
from .states import _State
from .trajectory import Trajectory


def simulate_year(state0, model, tp) -> Tuple[Trajectory, _State]:
    """
    Simulate one year (growing season, plus winter for elaborate models).

    Parameters:
    state0: State or array-like. Initial state of the growing season
    model: SeasonalModel
    tp: TimeParam

    Returns:
    trajectory: Trajectory. The year's samples, local time in [0, T]
        (elaborate) or [0, tau] (compact)
    next_state: State. Initial state of the next growing season
    """
    state0 = model.coerce_state(state0)

    trajectory, season_end = simulate_growing(state0, model, tp)

    if model.is_elaborate:
        winter, season_end = simulate_winter(season_end, model, tp)
        trajectory = trajectory.concatenate(winter)

    try:
        next_state = model.strategy.year_transition(season_end.as_array(), model.params, tp)
    except SeasonalModelError as err:
        raise err.with_context(variant=model.variant)

    return trajectory, next_state


def simulate_years(nyears: int, state0, model, tp=DEFAULT_TIME_PARAM) -> ResultsTable:
    """
    Simulate nyears consecutive years.

    Parameters:
    nyears: int. Number of years, >= 1
    state0: State or array-like. Initial state of year 1
    model: SeasonalModel
    tp: TimeParam, default DEFAULT_TIME_PARAM

    Returns:
    ResultsTable with one row per year; the time column of year y
    is offset by (y - 1) * T.
    """
    if isinstance(nyears, bool) or not isinstance(nyears, numbers.Integral) or nyears < 1:
        raise ContractViolation(f"nyears must be an integer >= 1, got {nyears!r}", variant=model.variant)
    nyears = int(nyears)
    state = model.coerce_state(state0)

    trajectories = []
    initial_states = []
    for year in range(1, nyears + 1):
        initial_states.append(state)
        try:
            trajectory, state = simulate_year(state, model, tp)
        except SeasonalModelError as err:
            raise err.with_context(variant=model.variant, year=year)
        trajectories.append(trajectory)

    return ResultsTable.from_years(trajectories, tp, initial_states, state, model.variant)


if __name__ == "__main__":
    from .parameters import CompactAirborneParams, ElaborateAirborneParams
    from .states import CompactState, ElaborateState
    from .variants import SeasonalModel

    print("Compact airborne model, 5 years...")
    compact = SeasonalModel(CompactAirborneParams(alpha=0.1, beta=0.01, n=1000))
    simulate_years(5, CompactState(S=999, I=1), compact).print_summary()

    print("\nElaborate airborne model, 5 years...")
    elaborate = SeasonalModel(ElaborateAirborneParams(alpha=0.1, beta=0.0005, n=1000,
                                                      Lambda=0.02, Theta=0.0005, mu=0.01, Pi=1.0))
    simulate_years(5, ElaborateState(P=10, S=1000, I=0), elaborate).print_summary()
