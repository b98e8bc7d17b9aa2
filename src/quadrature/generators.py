"""
Quadrature Point Generators
===========================

Gauss-Legendre and Gauss-Lobatto integration rules on the reference
line [-1, 1], square [-1, 1]² and cube [-1, 1]³.

Multi-dimensional rules are tensor products of the 1D rule, ordered with
the first coordinate varying fastest.
"""

import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple
from scipy.special import roots_jacobi, eval_legendre

from matesystem.exceptions import ConfigurationError


GEOMETRY_DIMS = {"line": 1, "quad": 2, "hex": 3}


@dataclass(frozen=True)
class QuadraturePoint:
    """Integration point in reference coordinates with its weight."""
    coords: Tuple[float, ...]
    weight: float


class QPointGenerator(ABC):
    """
    Base class of quadrature rules.

    ``generate`` is a pure function of (order, geometry): repeated calls give
    identical points in identical order.
    """

    scheme: str = ""

    @abstractmethod
    def n_points_1d(self, order: int) -> int:
        """Number of points per direction for a given polynomial order."""

    @abstractmethod
    def rule_1d(self, n: int) -> Tuple[np.ndarray, np.ndarray]:
        """Ascending abscissae and weights of the n-point 1D rule."""

    def generate(self, order: int, geometry: str) -> Tuple[QuadraturePoint, ...]:
        """
        Generate quadrature points.

        Args:
            order: polynomial order integrated exactly (>= 0)
            geometry: 'line', 'quad' or 'hex'

        Returns:
            tuple of QuadraturePoint

        Raises:
            ConfigurationError: for negative order or unknown geometry
        """
        if isinstance(order, bool) or not isinstance(order, (int, np.integer)) or order < 0:
            raise ConfigurationError(f"Quadrature order must be a non-negative integer, got {order!r}")
        if geometry not in GEOMETRY_DIMS:
            raise ConfigurationError(
                f"Unsupported geometry '{geometry}' for {self.scheme} quadrature, "
                f"use one of {sorted(GEOMETRY_DIMS)}")

        xi, w = self.rule_1d(self.n_points_1d(int(order)))
        dim = GEOMETRY_DIMS[geometry]
        n = len(xi)

        points = []
        for index in np.ndindex(*([n] * dim)):
            # ndindex varies the last index fastest; reverse so x is fastest
            idx = index[::-1]
            coords = tuple(float(xi[i]) for i in idx)
            weight = float(np.prod([w[i] for i in idx]))
            points.append(QuadraturePoint(coords, weight))
        return tuple(points)

    def count(self, order: int, geometry: str) -> int:
        """Number of points generated for (order, geometry)."""
        return len(self.generate(order, geometry))


class GaussLegendreGenerator(QPointGenerator):
    """
    Gauss-Legendre rule.

    n points integrate polynomials of degree 2n-1 exactly. Endpoints are
    never quadrature points.
    """

    scheme = "legendre"

    def n_points_1d(self, order: int) -> int:
        return order // 2 + 1

    def rule_1d(self, n: int) -> Tuple[np.ndarray, np.ndarray]:
        return np.polynomial.legendre.leggauss(n)


class GaussLobattoGenerator(QPointGenerator):
    """
    Gauss-Lobatto rule.

    n points integrate polynomials of degree 2n-3 exactly. The element
    boundary ±1 is always included, with interior points at the roots of
    P'_{n-1} and weights 2 / (n(n-1) P_{n-1}(x)²).
    """

    scheme = "lobatto"

    def n_points_1d(self, order: int) -> int:
        return max(2, (order + 4) // 2)

    def rule_1d(self, n: int) -> Tuple[np.ndarray, np.ndarray]:
        if n < 2:
            raise ValueError(f"Gauss-Lobatto needs at least 2 points, got {n}")
        if n == 2:
            interior = np.zeros(0)
        else:
            # Roots of P'_{n-1} are the roots of the Jacobi polynomial P^(1,1)_{n-2}
            interior, _ = roots_jacobi(n - 2, 1.0, 1.0)
        xi = np.concatenate(([-1.0], np.sort(interior), [1.0]))
        w = 2.0 / (n * (n - 1) * eval_legendre(n - 1, xi) ** 2)
        return xi, w


QPOINT_GENERATORS = {
    "legendre": GaussLegendreGenerator,
    "lobatto": GaussLobattoGenerator,
}


def create_qpoint_generator(scheme: str = "legendre") -> QPointGenerator:
    """
    Create a quadrature generator.

    Args:
        scheme: 'legendre' or 'lobatto'

    Raises:
        ConfigurationError: for unknown schemes
    """
    try:
        return QPOINT_GENERATORS[scheme]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown quadrature scheme '{scheme}', use 'legendre' or 'lobatto'") from None
