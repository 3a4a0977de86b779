"""
===========================================================
transitions.py
Last Updated: 2026-10-19
===========================================================

Description:
    Season boundary rules. Each maps the state at the end of a
    season to the initial state of the next one, and is the only
    place where host compartments are reset.

    - winter_handoff                 end of growing -> start of winter
                                     (elaborate models)
    - elaborate_year_transition      end of winter -> next growing season
    - soilborne_compact_transition   end of growing -> next growing season,
                                     closed form of the soil inoculum decay
    - carry_over_transition          compact airborne, end state unchanged

Notes:
    - Soilborne compact:
        S_new = n * exp(-theta*Pi*exp(-mu*(T - tau))/lam * I_end)
        I_new = n - S_new
      undefined for lam = 0 (DomainError).
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import math
from typing import Sequence

import numpy as np

from .errors import ContractViolation, DomainError
from .seasons import Season
from .states import CompactState, ElaborateState


def _unpack(end_state: Sequence[float], params) -> np.ndarray:
    values = np.asarray(end_state, dtype=float).ravel()
    if values.shape[0] != params.statelength:
        raise ContractViolation(
            f"end state has {values.shape[0]} compartments, parameters expect {params.statelength}",
            variant=params.variant,
        )
    return values


def winter_handoff(end_state: Sequence[float], params) -> ElaborateState:
    """
    Initial winter state from the end of the growing season.

    Inoculum produced by the infected hosts (Pi per host) is added to the
    remaining inoculum; host compartments are emptied for the dormant phase.
    """
    if not params.is_elaborate:
        raise ContractViolation("winter handoff requested for a model without a winter phase",
                                variant=params.variant, season=Season.WINTER)
    Pend, Send, Iend = _unpack(end_state, params)
    return ElaborateState(P=Pend + params.Pi * Iend, S=0.0, I=0.0)


def elaborate_year_transition(end_state: Sequence[float], params, tp) -> ElaborateState:
    """Next growing season: inoculum carried over, hosts replanted at n, no infected"""
    Pend, Send, Iend = _unpack(end_state, params)
    return ElaborateState(P=Pend, S=params.n, I=0.0)


def soilborne_compact_transition(end_state: Sequence[float], params, tp) -> CompactState:
    Send, Iend = _unpack(end_state, params)

    if params.lam == 0:
        raise DomainError("soilborne transition is undefined for lam = 0", variant=params.variant)

    winter_survival = math.exp(-params.mu * (tp.T - tp.tau))
    exponent = -params.theta * params.Pi * winter_survival / params.lam * Iend
    try:
        Snew = params.n * math.exp(exponent)
    except OverflowError as e:
        raise DomainError(f"soilborne transition overflowed (exponent {exponent:.3g})",
                          variant=params.variant) from e
    if not math.isfinite(Snew):
        raise DomainError(f"soilborne transition produced S = {Snew}", variant=params.variant)

    Inew = params.n - Snew
    return CompactState(S=Snew, I=Inew)


def carry_over_transition(end_state: Sequence[float], params, tp) -> CompactState:
    """Compact airborne: the end of the growing season seeds the next one unchanged"""
    return CompactState.from_array(_unpack(end_state, params))
