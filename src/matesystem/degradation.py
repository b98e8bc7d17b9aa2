"""
Degradation and History
=======================

Quadratic degradation g(d) = (1-d)², local crack surface density and the
irreversible history update of the Miehe model.
"""

import numpy as np
from typing import Tuple


def degradation_function(d):
    """g(d) = (1-d)², scalar or array d."""
    return (1.0 - np.asarray(d, dtype=np.float64)) ** 2


def degradation_derivative(d):
    """g'(d) = -2(1-d)."""
    return -2.0 * (1.0 - np.asarray(d, dtype=np.float64))

def crack_free_energy(d: float, Gc: float, eps: float) -> Tuple[float, float, float]:
    """
    Local crack surface energy density and its derivatives in d.

    F(d) = ½ Gc/eps · d²

    Args:
        d: damage value
        Gc: critical energy release rate
        eps: regularization length

    Returns:
        (F, dF/dd, d²F/dd²)
    """
    return 0.5 * Gc / eps * d * d, Gc / eps * d, Gc / eps


def update_history(H_old: float, psi_pos: float) -> Tuple[float, bool]:
    """
    Irreversible history update H = max(H_old, ψ⁺).

    Args:
        H_old: history value of the previous step
        psi_pos: current tensile energy density

    Returns:
        (H, loading): new history value and whether ψ⁺ exceeded H_old
    """
    if psi_pos > H_old:
        return psi_pos, True
    return H_old, False
