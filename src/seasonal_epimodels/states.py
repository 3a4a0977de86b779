"""
===========================================================
states.py
Last Updated: 2026-10-19
===========================================================

Description:
    Initial / terminal state vectors of the seasonal models.

        CompactState(S, I)       susceptible, infected hosts
        ElaborateState(P, S, I)  inoculum, susceptible, infected

    States are immutable: every season boundary builds a new one.
    Negative compartments are not rejected here (the equations can
    produce them under pathological parameters).
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
from dataclasses import dataclass, astuple
from typing import ClassVar, Sequence, Tuple

import numpy as np

from .errors import ContractViolation


class _State:
    compartments: ClassVar[Tuple[str, ...]]

    def __len__(self) -> int:
        return len(self.compartments)

    def as_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=float)

    @classmethod
    def from_array(cls, values: Sequence[float]):
        """Build a state from an ordered sequence of compartment values"""
        values = np.asarray(values, dtype=float).ravel()
        if values.shape[0] != len(cls.compartments):
            raise ContractViolation(
                f"{cls.__name__} expects {len(cls.compartments)} compartments "
                f"{cls.compartments}, got {values.shape[0]}"
            )
        return cls(*(float(v) for v in values))


@dataclass(frozen=True)
class CompactState(_State):
    S: float
    I: float

    compartments: ClassVar[Tuple[str, ...]] = ("S", "I")


@dataclass(frozen=True)
class ElaborateState(_State):
    P: float
    S: float
    I: float

    compartments: ClassVar[Tuple[str, ...]] = ("P", "S", "I")
