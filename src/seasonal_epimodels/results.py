"""
===========================================================
results.py
Last Updated: 2026-10-19
===========================================================

Description:
    ResultsTable: output of a multi-year simulation. A pandas
    DataFrame with one row per year ("year1", "year2", ...) and
    one column per variable (time first, then compartments).
    Each cell holds that year's sampled series; time is already
    offset by (year - 1) * T, so it increases across rows.

Example Usage:
    table = simulate_years(3, state0, model, tp)
    table[2, "I"]              # infected in year 2
    table.to_long()            # tidy frame, one row per sample
    table.summary()            # peak day / peak infected per year
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
from typing import Dict, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .seasons import is_winter
from .trajectory import Trajectory


def _object_column(arrays: Sequence[np.ndarray], index) -> pd.Series:
    # one array per cell, kept as an object column
    cells = np.empty(len(arrays), dtype=object)
    for i, arr in enumerate(arrays):
        cells[i] = arr
    return pd.Series(cells, index=index)


class ResultsTable:
    """
    nyears x (statelength + 1) table of per-year time series.

    Attributes:
    frame : pd.DataFrame. Rows 'year1'..'yearN', columns ['time', *compartments]
    time_param : TimeParam used for the run
    initial_states : list of State. State at the start of every year
    next_state : State. Initial state of the year after the last one
    variant : ModelVariant
    """

    def __init__(self, frame: pd.DataFrame, time_param, initial_states, next_state, variant):
        self.frame = frame
        self.time_param = time_param
        self.initial_states = list(initial_states)
        self.next_state = next_state
        self.variant = variant

    @classmethod
    def from_years(cls, trajectories: Sequence[Trajectory], time_param, initial_states, next_state, variant):
        """Assemble one row per year, offsetting each year's time by (year - 1) * T"""
        if not trajectories:
            raise ValueError("at least one year of results is required")
        compartments = trajectories[0].compartments
        labels = [f"year{i}" for i in range(1, len(trajectories) + 1)]
        index = pd.Index(labels, name="year")

        rows = [traj.shifted(i * time_param.T).as_columns() for i, traj in enumerate(trajectories)]
        columns = ("time",) + compartments
        frame = pd.DataFrame(
            {name: _object_column([row[j] for row in rows], index) for j, name in enumerate(columns)},
            index=index,
        )
        frame.columns.name = "variable"
        return cls(frame, time_param, initial_states, next_state, variant)

    @property
    def nyears(self) -> int:
        return len(self.frame)

    @property
    def columns(self) -> List[str]:
        return list(self.frame.columns)

    @property
    def compartments(self) -> Tuple[str, ...]:
        return tuple(self.frame.columns[1:])

    def __len__(self) -> int:
        return self.nyears

    def _label(self, year: Union[int, str]) -> str:
        if isinstance(year, str):
            if year not in self.frame.index:
                raise KeyError(f"Unknown year '{year}'. Available: {list(self.frame.index)}")
            return year
        if not 1 <= int(year) <= self.nyears:
            raise KeyError(f"year must be between 1 and {self.nyears}, got {year}")
        return f"year{int(year)}"

    def __getitem__(self, key) -> np.ndarray:
        year, column = key
        if column not in self.frame.columns:
            raise KeyError(f"Unknown column '{column}'. Available: {self.columns}")
        return self.frame.at[self._label(year), column]

    def row(self, year: Union[int, str]) -> Dict[str, np.ndarray]:
        label = self._label(year)
        return {col: self.frame.at[label, col] for col in self.frame.columns}

    def concatenated(self, column: str) -> np.ndarray:
        """All years of one column as a single calendar-long array"""
        return np.concatenate(list(self.frame[column]))

    def to_long(self) -> pd.DataFrame:
        """Tidy DataFrame: one row per sample with year, time, season and compartments"""
        parts = []
        for i, label in enumerate(self.frame.index, start=1):
            t = self.frame.at[label, "time"]
            part = pd.DataFrame({"year": i, "time": t, "season": is_winter(t, self.time_param)})
            for col in self.compartments:
                part[col] = self.frame.at[label, col]
            parts.append(part)
        return pd.concat(parts, ignore_index=True)

    def summary(self) -> pd.DataFrame:
        """Per-year growing season statistics: peak of I and compartments at the end of the season"""
        records = []
        for i, label in enumerate(self.frame.index, start=1):
            t = self.frame.at[label, "time"]
            local = t - (i - 1) * self.time_param.T
            growing_end = self.time_param.tau - 1e-9 * self.time_param.T
            end = min(int(np.searchsorted(local, growing_end, side="left")), len(t) - 1)
            I = self.frame.at[label, "I"][:end + 1]
            peak_idx = int(np.argmax(I))
            rec = {
                "year": i,
                "peak_day": float(local[peak_idx]),   # day within the year
                "peak_infected": float(I[peak_idx]),
            }
            for col in self.compartments:
                rec[f"{col}_end"] = float(self.frame.at[label, col][end])
            records.append(rec)
        return pd.DataFrame.from_records(records).set_index("year")

    def print_summary(self):
        """Print per-year summary of the simulation"""
        stats = self.summary()
        print(f"SEASONAL SIMULATION RESULTS ({self.variant.name}):")
        print(f"Years simulated: {self.nyears}")
        print(f"Growing season: {self.time_param.tau:g} of {self.time_param.T:g} days")
        print("\n--- GROWING SEASON PEAKS ---")
        for year, rec in stats.iterrows():
            ends = ", ".join(f"{c}={rec[f'{c}_end']:,.1f}" for c in self.compartments)
            print(f"Year {year}: peak I={rec['peak_infected']:,.1f} on day {rec['peak_day']:.0f} | end of season: {ends}")
        print("\n--- NEXT YEAR INITIAL STATE ---")
        print(self.next_state)

    def __repr__(self) -> str:
        return f"ResultsTable(variant={self.variant.name}, nyears={self.nyears}, columns={self.columns})"
