"""
Rank-4 Tensor
=============

Fourth-order tensor value type for stiffness and projection operators.
"""

import numpy as np
from typing import Optional

from .rank2 import Rank2Tensor


_DELTA = np.eye(3)


class Rank4Tensor:
    """
    Dense fourth-order tensor with 3×3×3×3 components.

    Attributes:
        components: shape (3, 3, 3, 3)
    """

    __slots__ = ("components",)

    def __init__(self, components: Optional[np.ndarray] = None):
        if components is None:
            self.components = np.zeros((3, 3, 3, 3))
        else:
            C = np.asarray(components, dtype=np.float64)
            if C.shape != (3, 3, 3, 3):
                raise ValueError(f"components must have shape (3, 3, 3, 3), got {C.shape}")
            self.components = C.copy()

    @classmethod
    def zeros(cls) -> 'Rank4Tensor':
        """Zero tensor."""
        return cls()

    @classmethod
    def identity(cls) -> 'Rank4Tensor':
        """
        Fourth-order identity I_ijkl = δ_ik δ_jl.

        Maps every second-order tensor onto itself.
        """
        return cls(np.einsum('ik,jl->ijkl', _DELTA, _DELTA))

    @classmethod
    def identity_symmetric(cls) -> 'Rank4Tensor':
        """
        Symmetric fourth-order identity.

        I^sym_ijkl = ½(δ_ik δ_jl + δ_il δ_jk)

        Maps a tensor onto its symmetric part.
        """
        return cls(0.5 * (np.einsum('ik,jl->ijkl', _DELTA, _DELTA)
                          + np.einsum('il,jk->ijkl', _DELTA, _DELTA)))

    def doubledot(self, T: Rank2Tensor) -> Rank2Tensor:
        """
        Contract with a second-order tensor.

        (C : T)_ij = C_ijkl T_kl
        """
        result = Rank2Tensor.zeros(T.dim)
        result.components = np.einsum('ijkl,kl->ij', self.components, T.components)
        return result

    def to_voigt(self, dim: int = 3) -> np.ndarray:
        """
        Voigt matrix of a tensor with minor symmetries.

        Ordering is [11, 22, 12] in 2D and [11, 22, 33, 23, 13, 12] in 3D,
        with tensor shear components (no factor 2).

        Args:
            dim: 2 or 3

        Returns:
            (3, 3) or (6, 6) matrix
        """
        if dim == 2:
            index = [(0, 0), (1, 1), (0, 1)]
        elif dim == 3:
            index = [(0, 0), (1, 1), (2, 2), (1, 2), (0, 2), (0, 1)]
        else:
            raise ValueError(f"dim must be 2 or 3, got {dim}")
        n = len(index)
        V = np.zeros((n, n))
        for a, (i, j) in enumerate(index):
            for b, (k, l) in enumerate(index):
                V[a, b] = self.components[i, j, k, l]
        return V

    def copy(self) -> 'Rank4Tensor':
        return Rank4Tensor(self.components)

    def __add__(self, other: 'Rank4Tensor') -> 'Rank4Tensor':
        return Rank4Tensor(self.components + other.components)

    def __sub__(self, other: 'Rank4Tensor') -> 'Rank4Tensor':
        return Rank4Tensor(self.components - other.components)

    def __mul__(self, scalar: float) -> 'Rank4Tensor':
        return Rank4Tensor(self.components * float(scalar))

    __rmul__ = __mul__

    def __getitem__(self, index):
        return self.components[index]

    def __repr__(self) -> str:
        return f"Rank4Tensor(norm={np.linalg.norm(self.components):.6g})"


def outer(A: Rank2Tensor, B: Rank2Tensor) -> Rank4Tensor:
    """(A ⊗ B)_ijkl = A_ij B_kl."""
    return A.otimes(B)
