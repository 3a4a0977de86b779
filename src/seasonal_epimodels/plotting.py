"""
===========================================================
plotting.py
Last Updated: 2026-10-19
===========================================================
Plotting utilities for multi-year seasonal simulations.

Time series of every compartment against calendar years,
with winter periods shaded in grey.
"""
import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Sequence
from matplotlib.axes import Axes

from .seasons import winter_intervals

COLORS = {
    'P': '#8c564b',  # Brown
    'S': '#1f77b4',  # Blue
    'I': '#d62728',  # Red
}

LABELS = {
    'P': 'Inoculum',
    'S': 'Susceptible',
    'I': 'Infected',
}


def shade_winters(ax: Axes, t_start: float, t_end: float, tp, scale: float = 1.0, label: str = 'winter') -> Axes:
    """Shade the winter periods between t_start and t_end (times divided by scale on the x axis)"""
    for k, (lo, hi) in enumerate(winter_intervals(t_start, t_end, tp)):
        ax.axvspan(lo / scale, hi / scale, color='lightgray', alpha=0.65, lw=0,
                   label=label if k == 0 else None)
    return ax


def _year_series(table, name: str):
    """Calendar-long (t, y) with a NaN break wherever a year does not start where the previous one ended"""
    ts, ys = [], []
    for year in range(1, table.nyears + 1):
        t, y = table[year, 'time'], table[year, name]
        if ts and t[0] > ts[-1][-1]:
            # unsampled gap (compact winters): don't draw across it
            ts.append(np.array([np.nan]))
            ys.append(np.array([np.nan]))
        ts.append(t)
        ys.append(y)
    return np.concatenate(ts), np.concatenate(ys)


def plot_results(table,
                 compartments: Optional[Sequence[str]] = None,
                 axes: Optional[Sequence[Axes]] = None,
                 show: bool = False,
                 title: Optional[str] = None) -> np.ndarray:
    """
    Plot a multi-year results table, one panel per compartment.

    Parameters
    ----------
    table : ResultsTable
        Output of simulate_years
    compartments : sequence of str, optional
        Compartments to plot. Defaults to all of them
    axes : sequence of Axes, optional
        One axes per compartment. If None, creates a new figure
    show : bool
        Whether to display the plot immediately
    title : str, optional
        Title of the first panel

    Returns
    -------
    axes : np.ndarray of matplotlib.axes.Axes
    """
    tp = table.time_param
    compartments = list(compartments) if compartments is not None else list(table.compartments)
    if axes is None:
        fig, axes = plt.subplots(len(compartments), 1, figsize=(10, 3 * len(compartments)),
                                 sharex=True, squeeze=False)
        axes = axes[:, 0]
    axes = np.asarray(axes, dtype=object).ravel()
    if len(axes) != len(compartments):
        raise ValueError(f"need one axes per compartment ({len(compartments)}), got {len(axes)}")

    t_end = table.nyears * tp.T
    for ax, name in zip(axes, compartments):
        t, y = _year_series(table, name)
        ax.plot(t / tp.T, y, color=COLORS.get(name, 'black'),
                linewidth=1.5, label=LABELS.get(name, name))
        shade_winters(ax, 0.0, t_end, tp, scale=tp.T)
        ax.set_ylabel(f'${name}$', fontsize=12)
        ax.set_xlim(0, table.nyears)
        ax.grid(True, alpha=0.3)
    axes[-1].set_xlabel('Years', fontsize=12)
    axes[0].legend(loc='upper right', fontsize=10)
    axes[0].set_title(title if title else f'{table.variant.name.replace("_", " ").title()} model', fontsize=14)

    if show:
        plt.tight_layout()
        plt.show()
    return axes


def plot_year(trajectory, tp, ax: Optional[Axes] = None, show: bool = False) -> Axes:
    """Plot one simulated year (days on the x axis), all compartments on the same axes"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    for i, name in enumerate(trajectory.compartments):
        ax.plot(trajectory.time, trajectory.values[i], color=COLORS.get(name, 'black'),
                linewidth=2, label=LABELS.get(name, name))
    shade_winters(ax, float(trajectory.time[0]), float(trajectory.time[-1]), tp)

    ax.set_xlabel('Time (days)', fontsize=12)
    ax.set_ylabel('Number of hosts / inoculum', fontsize=12)
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3)

    if show:
        plt.tight_layout()
        plt.show()
    return ax
