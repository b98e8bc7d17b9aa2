"""
Tensors Module
==============

Second- and fourth-order tensor algebra and the spectral tension-compression
projection.
"""

from .rank2 import (
    Rank2Tensor,
    identity,
    transpose,
    trace,
    dev,
    doubledot,
    von_mises,
)
from .rank4 import Rank4Tensor, outer
from .projection import (
    positive_projection,
    spectral_projection,
    spectral_split,
    bracket_pos,
    bracket_neg,
)

__all__ = [
    "Rank2Tensor",
    "Rank4Tensor",
    "identity",
    "transpose",
    "trace",
    "dev",
    "doubledot",
    "von_mises",
    "outer",
    "positive_projection",
    "spectral_projection",
    "spectral_split",
    "bracket_pos",
    "bracket_neg",
]
