"""
Quadrature Module
=================

Integration point generators.
"""

from .generators import (
    QuadraturePoint,
    QPointGenerator,
    GaussLegendreGenerator,
    GaussLobattoGenerator,
    create_qpoint_generator,
)

__all__ = [
    "QuadraturePoint",
    "QPointGenerator",
    "GaussLegendreGenerator",
    "GaussLobattoGenerator",
    "create_qpoint_generator",
]
