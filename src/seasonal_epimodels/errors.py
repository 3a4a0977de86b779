"""
===========================================================
errors.py
Last Updated: 2026-10-19
===========================================================

Description:
    Exceptions raised by the seasonal simulation core.

    - ContractViolation: bad inputs (dimension mismatch, nyears < 1,
      winter requested for a compact model, negative rates).
    - DomainError: a year-transition formula evaluated where it is
      undefined (lambda = 0, overflow).
    - IntegrationFailure: the ODE solver could not produce a trajectory.

    Each error carries the variant, season and year it came from,
    when known, so a failed multi-year run can be diagnosed.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
from typing import Optional


class SeasonalModelError(Exception):
    """Base class for simulation errors, with optional run context"""

    def __init__(self, message: str, variant=None, season=None, year: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.variant = variant
        self.season = season
        self.year = year

    def with_context(self, variant=None, season=None, year: Optional[int] = None) -> "SeasonalModelError":
        """Fill in context fields that are still unknown; returns self so it can be re-raised"""
        if self.variant is None:
            self.variant = variant
        if self.season is None:
            self.season = season
        if self.year is None:
            self.year = year
        return self

    def __str__(self) -> str:
        context = []
        if self.year is not None:
            context.append(f"year={self.year}")
        if self.season is not None:
            context.append(f"season={getattr(self.season, 'name', self.season)}")
        if self.variant is not None:
            context.append(f"variant={getattr(self.variant, 'name', self.variant)}")
        if not context:
            return self.message
        return f"{self.message} [{', '.join(context)}]"


class ContractViolation(SeasonalModelError, ValueError):
    pass


class DomainError(SeasonalModelError, ArithmeticError):
    pass


class IntegrationFailure(SeasonalModelError, RuntimeError):
    pass
