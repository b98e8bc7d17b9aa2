"""
Postprocessing Module
=====================

Plots of the stress, energy and history evolution at a material point.
"""

from .point_plots import (
    plot_stress_strain,
    plot_history_evolution,
    plot_energy_split,
    save_point_summary,
)

__all__ = [
    "plot_stress_strain",
    "plot_history_evolution",
    "plot_energy_split",
    "save_point_summary",
]
