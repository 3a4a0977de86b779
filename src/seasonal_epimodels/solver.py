"""
===========================================================
solver.py
Last Updated: 2026-10-19
===========================================================

Description:
    Thin wrapper around scipy.integrate.solve_ivp used by the
    season simulator. Samples the solution on a regular grid
    (both ends of the time span included) and turns solver
    failures into IntegrationFailure.

Notes:
    - Default solver settings follow the rest of the project:
      RK45 with rtol=1e-6, atol=1e-8.
    - Use method="LSODA" or "Radau" for stiff parameter sets.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

import numpy as np
from scipy.integrate import solve_ivp

from .errors import ContractViolation, IntegrationFailure


# methods accepted by solve_ivp by name
METHODS = ("RK23", "RK45", "DOP853", "Radau", "BDF", "LSODA")


@dataclass(frozen=True)
class SolverOptions:
    method: str = "RK45"
    rtol: float = 1e-6
    atol: float = 1e-8
    max_step: float = np.inf

    def __post_init__(self):
        if self.method not in METHODS:
            raise ContractViolation(f"unknown solver method {self.method!r}; expected one of {list(METHODS)}")
        for name in ("rtol", "atol", "max_step"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not value > 0:
                raise ContractViolation(f"solver {name} must be a positive number, got {value!r}")


DEFAULT_SOLVER = SolverOptions()


def sampling_times(time_span: Tuple[float, float], dt: float) -> np.ndarray:
    """
    Regular sampling grid t0, t0+dt, ... that always ends exactly at t1.
    If the span is not a multiple of dt the last interval is shorter.
    """
    t0, t1 = float(time_span[0]), float(time_span[1])
    n = int(np.floor((t1 - t0) / dt + 1e-9))
    times = t0 + dt * np.arange(n + 1)
    if np.isclose(times[-1], t1, rtol=0.0, atol=1e-9 * max(1.0, abs(t1))):
        times[-1] = t1
    else:
        times = np.append(times, t1)
    return times


def integrate(rhs: Callable,
              state0: Sequence[float],
              time_span: Tuple[float, float],
              params,
              dt: float,
              solver: SolverOptions = DEFAULT_SOLVER) -> Tuple[np.ndarray, np.ndarray]:
    """
    Integrate rhs(t, y, params) over time_span, sampled every dt.

    Parameters:
    rhs: callable. Right-hand side rhs(t, y, params)
    state0: array-like. Initial state
    time_span: tuple. (t0, t1), t1 > t0
    params: parameter object passed through to rhs
    dt: float. Sampling step
    solver: SolverOptions. Method and tolerances for solve_ivp

    Returns:
    t: ndarray. Sampled time points
    y: ndarray. Solution with shape (len(state0), len(t))
    """
    t_eval = sampling_times(time_span, dt)
    y0 = np.asarray(state0, dtype=float)

    solution = solve_ivp(
        fun=rhs,
        t_span=(float(time_span[0]), float(time_span[1])),
        y0=y0,
        method=solver.method,
        t_eval=t_eval,
        args=(params,),
        rtol=solver.rtol,
        atol=solver.atol,
        max_step=solver.max_step,
    )

    if not solution.success:
        raise IntegrationFailure(f"ODE solver failed: {solution.message}")
    if solution.y.shape != (y0.shape[0], t_eval.shape[0]) or not np.all(np.isfinite(solution.y)):
        raise IntegrationFailure(
            f"ODE solver returned a non-finite or incomplete solution on {time_span}"
        )

    return solution.t, solution.y
