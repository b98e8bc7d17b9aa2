"""
Phase-Field Material Point Framework
====================================

Constitutive evaluation at quadrature points for small-strain phase-field
fracture.

Modules:
    tensors: Rank-2/rank-4 tensor algebra and spectral projection
    matesystem: Property store, material interface and material laws
    quadrature: Gauss-Legendre and Gauss-Lobatto point generators
    evaluation: Material point driver and command line interface
    postprocess: Point response plots
"""

from . import tensors
from . import matesystem
from . import quadrature
from . import evaluation
from . import postprocess

__version__ = "0.1.0"
__all__ = ["tensors", "matesystem", "quadrature", "evaluation", "postprocess"]
