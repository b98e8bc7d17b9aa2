"""
Rank-2 Tensor
=============

Second-order tensor value type used by the material point evaluation.

Components are always held as a 3×3 array. Two-dimensional problems fill the
upper-left 2×2 block and keep the out-of-plane components at zero (plane
strain), so volumetric and deviatoric quantities keep their 3D meaning.
"""

import numpy as np
from typing import Sequence, Optional


class Rank2Tensor:
    """
    Dense second-order tensor.

    Attributes:
        dim: spatial dimension of the problem (2 or 3)
        components: shape (3, 3), tensor components
    """

    __slots__ = ("dim", "components")

    def __init__(self, components: Optional[np.ndarray] = None, dim: int = 3):
        """
        Create a tensor from a component matrix.

        Args:
            components: (dim, dim) or (3, 3) array; zero tensor if None
            dim: spatial dimension (2 or 3)
        """
        self.dim = dim
        self.components = np.zeros((3, 3))
        if components is not None:
            A = np.asarray(components, dtype=np.float64)
            n = A.shape[0]
            if A.shape != (n, n) or n not in (1, 2, 3):
                raise ValueError(f"components must be square with size <= 3, got {A.shape}")
            self.components[:n, :n] = A

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, dim: int = 3) -> 'Rank2Tensor':
        """Zero tensor."""
        return cls(None, dim)

    @classmethod
    def identity(cls, dim: int = 3) -> 'Rank2Tensor':
        """Kronecker delta δ_ij."""
        return cls(np.eye(3), dim)

    @classmethod
    def from_gradients(cls, rows: Sequence[np.ndarray], dim: int) -> 'Rank2Tensor':
        """
        Build a gradient tensor from per-component gradient rows.

        For a displacement field u, row i is ∇u_i so that
        (∇u)_ij = ∂u_i/∂x_j.

        Args:
            rows: dim gradient vectors (each with at least dim entries)
            dim: spatial dimension (2 or 3)

        Returns:
            gradient tensor
        """
        T = cls.zeros(dim)
        for i in range(dim):
            row = np.asarray(rows[i], dtype=np.float64)
            T.components[i, :dim] = row[:dim]
        return T

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def _new(self, components: np.ndarray) -> 'Rank2Tensor':
        T = Rank2Tensor.__new__(Rank2Tensor)
        T.dim = self.dim
        T.components = components
        return T

    def transpose(self) -> 'Rank2Tensor':
        """Return Tᵀ."""
        return self._new(self.components.T.copy())

    def trace(self) -> float:
        """Return tr(T) = T_ii."""
        return float(np.trace(self.components))

    def dev(self) -> 'Rank2Tensor':
        """
        Deviatoric part.

        dev(T) = T - tr(T)/3 · I
        """
        return self._new(self.components - self.trace() / 3.0 * np.eye(3))

    def doubledot(self, other: 'Rank2Tensor') -> float:
        """Frobenius inner product A : B = Σ A_ij B_ij."""
        return float(np.sum(self.components * other.components))

    def otimes(self, other: 'Rank2Tensor') -> 'Rank4Tensor':
        """Outer product (A ⊗ B)_ijkl = A_ij B_kl."""
        from .rank4 import Rank4Tensor
        return Rank4Tensor(np.einsum('ij,kl->ijkl', self.components, other.components))

    def norm(self) -> float:
        """Frobenius norm √(T : T)."""
        return float(np.sqrt(self.doubledot(self)))

    def principal_values(self) -> np.ndarray:
        """Eigenvalues of the symmetric part, ascending."""
        sym = 0.5 * (self.components + self.components.T)
        return np.linalg.eigvalsh(sym)

    def is_symmetric(self, tol: float = 1e-12) -> bool:
        """Check T = Tᵀ within an absolute tolerance."""
        return bool(np.allclose(self.components, self.components.T, atol=tol, rtol=0.0))

    def to_array(self) -> np.ndarray:
        """Copy of the active dim×dim block."""
        return self.components[:self.dim, :self.dim].copy()

    def copy(self) -> 'Rank2Tensor':
        """Independent copy."""
        return self._new(self.components.copy())

    def __add__(self, other: 'Rank2Tensor') -> 'Rank2Tensor':
        return self._new(self.components + other.components)

    def __sub__(self, other: 'Rank2Tensor') -> 'Rank2Tensor':
        return self._new(self.components - other.components)

    def __neg__(self) -> 'Rank2Tensor':
        return self._new(-self.components)

    def __mul__(self, scalar: float) -> 'Rank2Tensor':
        return self._new(self.components * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Rank2Tensor':
        return self._new(self.components / float(scalar))

    def __matmul__(self, other: 'Rank2Tensor') -> 'Rank2Tensor':
        """Single contraction (A·B)_ij = A_ik B_kj."""
        return self._new(self.components @ other.components)

    def __getitem__(self, index):
        return self.components[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rank2Tensor):
            return NotImplemented
        return self.dim == other.dim and np.array_equal(self.components, other.components)

    def __repr__(self) -> str:
        return f"Rank2Tensor(dim={self.dim}, components={self.to_array().tolist()})"


def identity(dim: int = 3) -> Rank2Tensor:
    """Kronecker delta for the given dimension."""
    return Rank2Tensor.identity(dim)


def transpose(T: Rank2Tensor) -> Rank2Tensor:
    """Tᵀ."""
    return T.transpose()


def trace(T: Rank2Tensor) -> float:
    """tr(T)."""
    return T.trace()


def dev(T: Rank2Tensor) -> Rank2Tensor:
    """T - tr(T)/3 · I."""
    return T.dev()


def doubledot(A: Rank2Tensor, B: Rank2Tensor) -> float:
    """A : B."""
    return A.doubledot(B)


def von_mises(stress: Rank2Tensor) -> float:
    """
    Von Mises equivalent stress.

    σ_vm = √(3/2 · s : s),  s = dev(σ)
    """
    s = stress.dev()
    return float(np.sqrt(1.5 * s.doubledot(s)))
