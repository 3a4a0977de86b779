"""
===========================================================
season.py
Last Updated: 2026-10-19
===========================================================

Description:
    Season simulator: integrates the growing or winter system of
    a model over one season and returns the sampled trajectory
    together with the state at the end of the season.

API:
    simulate_season(state0, model, time_span, dt, season)
    simulate_growing(state0, model, tp)       over [0, tau]
    simulate_winter(growing_end, model, tp)   over [tau, T], elaborate only
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import warnings
from typing import Tuple

import numpy as np

from .errors import ContractViolation, SeasonalModelError
from .solver import integrate
from .seasons import Season
from .states import _State
from .trajectory import Trajectory
from .transitions import winter_handoff

# tolerance below zero before a compartment is reported as negative
NEGATIVE_TOLERANCE = 1e-6


def simulate_season(state0,
                    model,
                    time_span: Tuple[float, float],
                    dt: float,
                    season: Season = Season.GROWING) -> Tuple[Trajectory, _State]:
    """
    Simulate one season of a model.

    Parameters:
    state0: State or array-like. Initial state, must match model.statelength
    model: SeasonalModel
    time_span: tuple. (t0, t1) with t1 > t0
    dt: float. Sampling step, > 0
    season: Season. GROWING or WINTER (WINTER only for elaborate models)

    Returns:
    trajectory: Trajectory. Sampled time points and compartments
    final_state: State. State at the last sampled time
    """
    season = Season(season)
    state0 = model.coerce_state(state0)
    t0, t1 = float(time_span[0]), float(time_span[1])
    if not t1 > t0:
        raise ContractViolation(f"empty time span ({t0}, {t1})", variant=model.variant, season=season)
    if not dt > 0:
        raise ContractViolation(f"sampling step must be positive, got {dt}", variant=model.variant, season=season)

    if season is Season.WINTER:
        if not model.is_elaborate or model.strategy.winter_rhs is None:
            raise ContractViolation("winter simulation requested for a model without a winter phase",
                                    variant=model.variant, season=season)
        fun = model.strategy.winter_rhs
    else:
        fun = model.strategy.growing_rhs

    try:
        t, y = integrate(fun, state0.as_array(), (t0, t1), model.params, dt, model.solver)
    except SeasonalModelError as err:
        raise err.with_context(variant=model.variant, season=season)

    if np.any(y < -NEGATIVE_TOLERANCE):
        worst = model.compartments[int(np.argmin(y.min(axis=1)))]
        warnings.warn(
            f"{model.variant.name}: compartment {worst} became negative during the "
            f"{season.name.lower()} season (min {y.min():.3g})",
            RuntimeWarning,
        )

    trajectory = Trajectory(time=t, values=y, compartments=model.compartments)
    return trajectory, model.state_type.from_array(trajectory.final_state)


def simulate_growing(state0, model, tp) -> Tuple[Trajectory, _State]:
    return simulate_season(state0, model, tp.tspang, tp.dt, Season.GROWING)


def simulate_winter(growing_end, model, tp) -> Tuple[Trajectory, _State]:
    """Build the winter initial state from the end of the growing season, then simulate winter"""
    if not model.is_elaborate:
        raise ContractViolation("winter simulation requested for a model without a winter phase",
                                variant=model.variant, season=Season.WINTER)
    growing_end = model.coerce_state(growing_end)
    winter_start = winter_handoff(growing_end.as_array(), model.params)
    return simulate_season(winter_start, model, tp.tspanw, tp.dt, Season.WINTER)
