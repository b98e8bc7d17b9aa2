"""
Point Response Plots
====================

Plotting functions for the stress, energy and history evolution of a
material point.
"""

import numpy as np
from typing import List, Optional, Tuple, TYPE_CHECKING

try:
    import matplotlib.pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

if TYPE_CHECKING:
    from evaluation.driver import StepResult


def _require_matplotlib():
    if not HAS_MATPLOTLIB:
        raise ImportError("matplotlib is required for visualization")


def plot_stress_strain(results: List['StepResult'],
                       component: Tuple[int, int] = (0, 0),
                       ax: Optional['plt.Axes'] = None,
                       **kwargs) -> 'plt.Axes':
    """
    Plot a stress component against the matching strain component.

    Args:
        results: list of StepResult instances
        component: (i, j) tensor component
        ax: matplotlib axes (created if None)
        **kwargs: passed to plot

    Returns:
        ax: matplotlib axes
    """
    _require_matplotlib()

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    i, j = component
    strain = np.array([r.store.rank2("strain")[i, j] for r in results])
    stress = np.array([r.store.rank2("stress")[i, j] for r in results])

    ax.plot(strain, stress, 'b.-', **kwargs)

    label = f'{i + 1}{j + 1}'
    ax.set_xlabel(f'Strain ε_{label}')
    ax.set_ylabel(f'Stress σ_{label}')
    ax.grid(True, alpha=0.3)

    return ax


def plot_history_evolution(results: List['StepResult'],
                           ax: Optional['plt.Axes'] = None,
                           **kwargs) -> 'plt.Axes':
    """
    Plot the tensile energy ψ⁺ and the history H vs step.

    H is the running maximum of ψ⁺; unloading shows up as ψ⁺ dropping
    below the flat history curve.

    Args:
        results: list of StepResult instances
        ax: matplotlib axes
        **kwargs: passed to plot

    Returns:
        ax: matplotlib axes
    """
    _require_matplotlib()

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    steps = [r.step for r in results]
    psi_pos = [r.store.scalar("psi-pos") for r in results]
    H = [r.store.scalar("H") for r in results]

    ax.plot(steps, psi_pos, 'b-', label='Tensile energy ψ⁺', **kwargs)
    ax.plot(steps, H, 'r--', label='History H', **kwargs)

    ax.set_xlabel('Load step')
    ax.set_ylabel('Energy density')
    ax.legend()
    ax.grid(True, alpha=0.3)

    return ax


def plot_energy_split(results: List['StepResult'],
                      ax: Optional['plt.Axes'] = None,
                      **kwargs) -> 'plt.Axes':
    """
    Plot tensile, compressive and degraded total energy vs step.

    Args:
        results: list of StepResult instances
        ax: matplotlib axes
        **kwargs: passed to plot

    Returns:
        ax: matplotlib axes
    """
    _require_matplotlib()

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    steps = [r.step for r in results]
    ax.plot(steps, [r.store.scalar("psi-pos") for r in results], 'b-', label='ψ⁺', **kwargs)
    ax.plot(steps, [r.store.scalar("psi-neg") for r in results], 'g-', label='ψ⁻', **kwargs)
    ax.plot(steps, [r.store.scalar("psi") for r in results], 'k--', label='ψ = g(d)ψ⁺ + ψ⁻', **kwargs)

    ax.set_xlabel('Load step')
    ax.set_ylabel('Energy density')
    ax.legend()
    ax.grid(True, alpha=0.3)

    return ax


def save_point_summary(results: List['StepResult'], filename: str,
                       component: Tuple[int, int] = (0, 0)) -> None:
    """
    Save stress-strain and history plots side by side.

    Args:
        results: list of StepResult instances
        filename: output image path
        component: stress/strain component for the left panel
    """
    _require_matplotlib()

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))
    plot_stress_strain(results, component, ax=ax1)
    plot_history_evolution(results, ax=ax2)
    fig.tight_layout()
    fig.savefig(filename, dpi=100, bbox_inches='tight')
    plt.close(fig)
