"""
Spectral Projection
===================

Positive/negative projection tensors for the tension-compression split of
Miehe et al. (2010).

For a symmetric strain with spectral form ε = Σ λ_a n_a ⊗ n_a the tensile
part is ε⁺ = Σ <λ_a>₊ n_a ⊗ n_a. The projection tensor P⁺ = ∂ε⁺/∂ε satisfies
P⁺ : ε = ε⁺ and is assembled as

    P⁺ = Σ_a Σ_b θ_ab G_ab ⊗ G_ab,    G_ab = sym(n_a ⊗ n_b)

    θ_aa = H(λ_a)
    θ_ab = (<λ_a>₊ - <λ_b>₊) / (λ_a - λ_b)      (λ_a ≠ λ_b)

Since Σ_ab G_ab ⊗ G_ab is the symmetric identity, P⁻ = I^sym - P⁺ carries
the complementary weights and P⁺ + P⁻ = I^sym holds exactly.
"""

import numpy as np
from typing import Tuple

from .rank2 import Rank2Tensor
from .rank4 import Rank4Tensor


# Eigenvalues with λ >= -ZERO_TOL * scale count as non-negative
ZERO_TOL = 1e-12


def bracket_pos(x: float) -> float:
    """<x>₊ = max(x, 0)."""
    return x if x > 0.0 else 0.0


def bracket_neg(x: float) -> float:
    """<x>₋ = min(x, 0)."""
    return x if x < 0.0 else 0.0


def _spectral_weights(eigenvalues: np.ndarray, tol: float) -> np.ndarray:
    """
    Weights θ_ab of the positive projector.

    Args:
        eigenvalues: principal values, shape (3,)
        tol: relative zero tolerance

    Returns:
        theta: shape (3, 3)
    """
    scale = max(float(np.max(np.abs(eigenvalues))), 1.0)
    zero = tol * scale

    positive = eigenvalues >= -zero
    lam_pos = np.where(eigenvalues > 0.0, eigenvalues, 0.0)

    theta = np.zeros((3, 3))
    for a in range(3):
        for b in range(3):
            diff = eigenvalues[a] - eigenvalues[b]
            if a == b or abs(diff) <= zero:
                theta[a, b] = 1.0 if positive[a] else 0.0
            else:
                theta[a, b] = (lam_pos[a] - lam_pos[b]) / diff
    return theta


def positive_projection(strain: Rank2Tensor, tol: float = ZERO_TOL) -> Rank4Tensor:
    """
    Positive projection tensor P⁺ of a symmetric strain.

    Args:
        strain: symmetric second-order tensor
        tol: relative tolerance below which an eigenvalue counts as zero
            (and therefore as non-negative)

    Returns:
        P⁺ such that P⁺ : strain is the tensile part of strain
    """
    sym = 0.5 * (strain.components + strain.components.T)
    eigenvalues, eigenvectors = np.linalg.eigh(sym)
    theta = _spectral_weights(eigenvalues, tol)

    # G[a, b] = sym(n_a ⊗ n_b)
    N = eigenvectors.T
    outer_ab = np.einsum('ai,bj->abij', N, N)
    G = 0.5 * (outer_ab + outer_ab.transpose(0, 1, 3, 2))

    return Rank4Tensor(np.einsum('ab,abij,abkl->ijkl', theta, G, G))


def spectral_projection(strain: Rank2Tensor,
                        tol: float = ZERO_TOL) -> Tuple[Rank4Tensor, Rank4Tensor]:
    """
    Tension/compression projection pair.

    Args:
        strain: symmetric second-order tensor
        tol: relative zero tolerance for eigenvalues

    Returns:
        (P⁺, P⁻) with P⁻ = I^sym - P⁺
    """
    P_pos = positive_projection(strain, tol)
    P_neg = Rank4Tensor.identity_symmetric() - P_pos
    return P_pos, P_neg


def spectral_split(strain: Rank2Tensor,
                   tol: float = ZERO_TOL) -> Tuple[Rank2Tensor, Rank2Tensor]:
    """
    Split a strain into tensile and compressive parts.

    ε = ε⁺ + ε⁻,  ε⁺ = P⁺ : ε

    Args:
        strain: symmetric strain tensor
        tol: relative zero tolerance for eigenvalues

    Returns:
        (ε⁺, ε⁻)
    """
    eps_plus = positive_projection(strain, tol).doubledot(strain)
    return eps_plus, strain - eps_plus
