"""
===========================================================
rhs.py
Last Updated: 2026-10-19
===========================================================

Description:
    Right-hand sides of the seasonal ODE systems, written for
    scipy.integrate.solve_ivp: rhs(t, y, p) -> dy/dt.

    Growing season, compact (S, I):
        dS = -beta*S*I
        dI =  beta*S*I - alpha*I

    Growing season, elaborate (P, S, I):
        dP = -Lambda*P
        dS = -Theta*P*S - beta*S*I
        dI =  Theta*P*S + beta*S*I - alpha*I

    Winter, elaborate only (hosts dormant):
        dP = -mu*P,  dS = 0,  dI = 0

Notes:
    - Functions are pure: no state is kept between calls.
    - Compact models have no winter system.
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import numpy as np


def growing_compact(t, y, p) -> np.ndarray:
    """Growing season for compact models (airborne or soilborne)"""
    S, I = y
    inf = p.beta * S * I
    dS = -inf
    dI = inf - p.alpha * I
    return np.array([dS, dI])


def growing_elaborate_airborne(t, y, p) -> np.ndarray:
    """Growing season for the elaborate airborne model"""
    P, S, I = y
    primary = p.Theta * P * S       # infections from inoculum
    secondary = p.beta * S * I      # host to host infections
    dP = -p.Lambda * P
    dS = -primary - secondary
    dI = primary + secondary - p.alpha * I
    return np.array([dP, dS, dI])


def growing_elaborate_soilborne(t, y, p) -> np.ndarray:
    """Growing season for the elaborate soilborne model (soil inoculum decays at lam)"""
    P, S, I = y
    primary = p.theta * P * S
    secondary = p.beta * S * I
    dP = -p.lam * P
    dS = -primary - secondary
    dI = primary + secondary - p.alpha * I
    return np.array([dP, dS, dI])


def winter_elaborate(t, y, p) -> np.ndarray:
    P, S, I = y
    return np.array([-p.mu * P, 0.0, 0.0])
