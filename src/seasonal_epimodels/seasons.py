"""
===========================================================
seasons.py
Last Updated: 2026-10-19
===========================================================

Description:
    Season labels and the season classifier.

        is_winter(t, tp) = 0 if t mod T < tau  (growing season)
                           1 otherwise          (winter)

    The classifier is an annotation only (shading winter periods,
    tidy exports); it has no effect on the simulation.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class Season(IntEnum):
    GROWING = 0
    WINTER = 1


def is_winter(t, tp):
    """
    Label time point(s) with 0 (growing) or 1 (winter).

    Parameters:
    t: float or array-like. Calendar time(s), same unit as tp.T
    tp: TimeParam

    Returns:
    int for a scalar input, int ndarray of the same length otherwise
    """
    if np.ndim(t) == 0:
        return int(float(t) % tp.T >= tp.tau)
    t = np.asarray(t, dtype=float)
    return (np.mod(t, tp.T) >= tp.tau).astype(int)


def is_winter_table(table, tp) -> List[np.ndarray]:
    """Season labels for the time column of every year of a results table"""
    frame = getattr(table, "frame", table)
    return [is_winter(t, tp) for t in frame["time"]]


def winter_intervals(t_start: float, t_end: float, tp) -> List[Tuple[float, float]]:
    """Calendar winter periods [k*T + tau, (k+1)*T) clipped to [t_start, t_end]"""
    intervals = []
    first = int(np.floor(t_start / tp.T))
    last = int(np.ceil(t_end / tp.T))
    for k in range(first, last + 1):
        lo = max(k * tp.T + tp.tau, t_start)
        hi = min((k + 1) * tp.T, t_end)
        if hi > lo:
            intervals.append((float(lo), float(hi)))
    return intervals
