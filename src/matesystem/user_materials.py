"""
Scalar Field Materials
======================

Constant-coefficient materials for scalar field equations.

    ConstantPoissonMaterial:    div(σ ∇φ) = f
    ConstantDiffusionMaterial:  ∂c/∂t = div(D ∇c)

Both read the unknown from field 0.
"""

from typing import Mapping

from .base import ConstitutiveModel
from .parameters import get_value
from .point_data import ElementInfo, PointSolution
from .properties import PropertyStore


class ConstantPoissonMaterial(ConstitutiveModel):
    """
    Poisson equation coefficients (user extension slot 1).

    Parameters:
        sigma: conductivity
        f: source term
    """

    name = "constant-poisson"
    provides = {
        "scalar": ("sigma", "dsigmadu", "f", "dfdu"),
        "vector": ("gradu",),
    }

    def initialize(self, parameters: Mapping, element_info: ElementInfo,
                   solution: PointSolution, out_store: PropertyStore) -> None:
        pass

    def compute(self, parameters: Mapping, element_info: ElementInfo,
                solution: PointSolution, old_store: PropertyStore,
                new_store: PropertyStore) -> None:
        sigma = get_value(parameters, "sigma")
        f = get_value(parameters, "f")

        new_store.set_scalar("sigma", sigma)
        new_store.set_scalar("dsigmadu", 0.0)
        new_store.set_scalar("f", f)
        new_store.set_scalar("dfdu", 0.0)
        new_store.set_vector("gradu", solution.gradients[0])


class ConstantDiffusionMaterial(ConstitutiveModel):
    """
    Constant diffusivity.

    Parameters:
        D: diffusion coefficient
    """

    name = "constant-diffusion"
    provides = {
        "scalar": ("D", "dDdc"),
        "vector": ("gradc",),
    }

    def initialize(self, parameters: Mapping, element_info: ElementInfo,
                   solution: PointSolution, out_store: PropertyStore) -> None:
        pass

    def compute(self, parameters: Mapping, element_info: ElementInfo,
                solution: PointSolution, old_store: PropertyStore,
                new_store: PropertyStore) -> None:
        new_store.set_scalar("D", get_value(parameters, "D"))
        new_store.set_scalar("dDdc", 0.0)
        new_store.set_vector("gradc", solution.gradients[0])
