"""
===========================================================
trajectory.py
Last Updated: 2026-10-19
===========================================================

Description:
    Sampled output of one (or several concatenated) season
    simulations: a time vector and one row of values per
    compartment, the same layout scipy returns (sol.t, sol.y).
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class Trajectory:
    time: np.ndarray            # shape (k,)
    values: np.ndarray          # shape (statelength, k)
    compartments: Tuple[str, ...]

    def __post_init__(self):
        time = np.asarray(self.time, dtype=float)
        values = np.atleast_2d(np.asarray(self.values, dtype=float))
        assert values.shape == (len(self.compartments), time.shape[0]), \
            "values must have one row per compartment and one column per time point"
        object.__setattr__(self, "time", time)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "compartments", tuple(self.compartments))

    def __len__(self) -> int:
        return self.time.shape[0]

    @property
    def final_state(self) -> np.ndarray:
        """state at the last sampled time"""
        return self.values[:, -1].copy()

    @property
    def initial_state(self) -> np.ndarray:
        return self.values[:, 0].copy()

    def column(self, name: str) -> np.ndarray:
        if name == "time":
            return self.time
        try:
            return self.values[self.compartments.index(name)]
        except ValueError:
            raise KeyError(f"Unknown column '{name}'. Available: {('time',) + self.compartments}") from None

    def as_columns(self) -> List[np.ndarray]:
        """[time, c1, c2, ...] as separate arrays"""
        return [self.time.copy()] + [row.copy() for row in self.values]

    def concatenate(self, other: "Trajectory") -> "Trajectory":
        """Append a later trajectory with the same compartments (time ordered)"""
        if other.compartments != self.compartments:
            raise ValueError(f"cannot concatenate {other.compartments} onto {self.compartments}")
        if len(other) and len(self) and other.time[0] < self.time[-1]:
            raise ValueError("appended trajectory starts before the end of this one")
        return Trajectory(
            time=np.concatenate([self.time, other.time]),
            values=np.concatenate([self.values, other.values], axis=1),
            compartments=self.compartments,
        )

    def shifted(self, offset: float) -> "Trajectory":
        return Trajectory(time=self.time + offset, values=self.values.copy(), compartments=self.compartments)
