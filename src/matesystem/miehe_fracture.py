"""
Miehe Phase-Field Fracture Material
===================================

Small-strain linear elastic material with phase-field fracture degradation,
following Miehe, Hofacker & Welschinger (2010), "A phase field model for
rate-independent crack propagation: Robust algorithmic implementation based
on operator splits", CMAME 199.

Field layout at the quadrature point: field 0 is the damage d, fields 1..dim
are the displacement components.

Energy split (K bulk, G shear modulus):
    ψ⁺ = ½K<tr ε>₊² + G tr(ε⁺·ε⁺)
    ψ⁻ = ½K<tr ε>₋² + G tr(ε⁻·ε⁻)
    ψ  = g(d) ψ⁺ + ψ⁻,   g(d) = (1-d)²

Only the tensile part is degraded and only ψ⁺ drives the crack. The history
H = max over time of ψ⁺ enforces irreversibility.
"""

from dataclasses import dataclass
from typing import Mapping

from tensors.rank2 import Rank2Tensor, von_mises
from tensors.rank4 import Rank4Tensor
from tensors.projection import spectral_projection, bracket_pos, bracket_neg
from .base import ConstitutiveModel
from .degradation import (
    degradation_function,
    degradation_derivative,
    crack_free_energy,
    update_history,
)
from .exceptions import ConfigurationError
from .parameters import ElasticModuli, get_value, get_boolean
from .point_data import ElementInfo, PointSolution
from .properties import PropertyStore


DAMAGE_FIELD = 0
DISPLACEMENT_FIELD = 1


@dataclass
class SplitResponse:
    """Tension-compression split of the elastic response at a point."""
    strain_pos: Rank2Tensor
    strain_neg: Rank2Tensor
    psi_pos: float
    psi_neg: float
    stress_pos: Rank2Tensor
    stress_neg: Rank2Tensor
    proj_pos: Rank4Tensor
    proj_neg: Rank4Tensor
    sign_pos: float
    sign_neg: float


def compute_split_response(strain: Rank2Tensor, moduli: ElasticModuli) -> SplitResponse:
    """
    Spectral split of strain, energy and stress.

    Args:
        strain: symmetric small strain
        moduli: elastic moduli

    Returns:
        SplitResponse with tensile and compressive parts
    """
    K, G = moduli.K, moduli.G

    proj_pos, proj_neg = spectral_projection(strain)
    strain_pos = proj_pos.doubledot(strain)
    strain_neg = strain - strain_pos

    tr_eps = strain.trace()
    tr_pos = bracket_pos(tr_eps)
    tr_neg = bracket_neg(tr_eps)

    psi_pos = 0.5 * K * tr_pos ** 2 + G * (strain_pos @ strain_pos).trace()
    psi_neg = 0.5 * K * tr_neg ** 2 + G * (strain_neg @ strain_neg).trace()

    I = Rank2Tensor.identity(strain.dim)
    stress_pos = I * (K * tr_pos) + strain_pos * (2.0 * G)
    stress_neg = I * (K * tr_neg) + strain_neg * (2.0 * G)

    # Exact sign at the split point, no smoothing
    sign_pos = 1.0 if tr_pos > 0.0 else 0.0
    sign_neg = 1.0 if tr_neg < 0.0 else 0.0

    return SplitResponse(
        strain_pos=strain_pos,
        strain_neg=strain_neg,
        psi_pos=psi_pos,
        psi_neg=psi_neg,
        stress_pos=stress_pos,
        stress_neg=stress_neg,
        proj_pos=proj_pos,
        proj_neg=proj_neg,
        sign_pos=sign_pos,
        sign_neg=sign_neg,
    )


class MieheFractureMaterial(ConstitutiveModel):
    """
    Phase-field fracture material with Miehe tension-compression split.

    Parameters:
        E, nu | K, G | Lame, mu | Lame, G: elastic moduli (first pair wins)
        Gc: critical energy release rate
        eps: regularization length scale
        viscosity: viscous regularization of the damage evolution
        stabilizer: residual stiffness added to g(d) in stress and Jacobian
        finite-strain: optional, must be false
    """

    name = "miehe-fracture"
    provides = {
        "scalar": ("viscosity", "Gc", "eps", "F", "dFdD", "d2FdD2",
                   "vonMises-stress", "hydrostatic-stress",
                   "psi", "psi-pos", "psi-neg", "H"),
        "rank2": ("strain", "stress", "dstressdD", "dHdstrain"),
        "rank4": ("jacobian",),
        "boolean": ("finite-strain",),
    }

    def initialize(self, parameters: Mapping, element_info: ElementInfo,
                   solution: PointSolution, out_store: PropertyStore) -> None:
        out_store.set_scalar("H", 0.0)

    def compute(self, parameters: Mapping, element_info: ElementInfo,
                solution: PointSolution, old_store: PropertyStore,
                new_store: PropertyStore) -> None:
        # Validate the whole parameter set before anything is written
        if get_boolean(parameters, "finite-strain", False):
            raise ConfigurationError(
                "Miehe fracture material works only in the small strain case, "
                "set 'finite-strain' to false")
        dim = element_info.dim
        if dim not in (2, 3):
            raise ConfigurationError(
                f"Miehe fracture material works only for 2D and 3D, got dim={dim}")
        if solution.n_fields < DISPLACEMENT_FIELD + dim:
            raise ConfigurationError(
                f"Miehe fracture material needs {DISPLACEMENT_FIELD + dim} fields "
                f"(damage + displacements), got {solution.n_fields}")

        moduli = ElasticModuli.from_parameters(parameters)
        viscosity = get_value(parameters, "viscosity")
        Gc = get_value(parameters, "Gc")
        eps = get_value(parameters, "eps")
        stabilizer = get_value(parameters, "stabilizer")
        if eps <= 0:
            raise ConfigurationError(f"eps must be positive, got {eps}")

        H_old = old_store.scalar("H")

        grad_u = Rank2Tensor.from_gradients(
            solution.gradients[DISPLACEMENT_FIELD:DISPLACEMENT_FIELD + dim], dim)
        strain = (grad_u + grad_u.transpose()) * 0.5
        d = float(solution.values[DAMAGE_FIELD])

        F, dF, d2F = crack_free_energy(d, Gc, eps)

        split = compute_split_response(strain, moduli)
        g = float(degradation_function(d))
        dg = float(degradation_derivative(d))
        g_stab = g + stabilizer

        stress = split.stress_pos * g_stab + split.stress_neg
        dstress_dd = split.stress_pos * dg

        I = Rank2Tensor.identity(dim)
        IxI = I.otimes(I)
        K, G = moduli.K, moduli.G
        jacobian = ((IxI * (K * split.sign_pos) + split.proj_pos * (2.0 * G)) * g_stab
                    + IxI * (K * split.sign_neg) + split.proj_neg * (2.0 * G))

        new_store.set_boolean("finite-strain", False)
        new_store.set_scalar("viscosity", viscosity)
        new_store.set_scalar("Gc", Gc)
        new_store.set_scalar("eps", eps)

        new_store.set_scalar("F", F)
        new_store.set_scalar("dFdD", dF)
        new_store.set_scalar("d2FdD2", d2F)

        new_store.set_scalar("vonMises-stress", von_mises(stress))
        new_store.set_scalar("hydrostatic-stress", stress.trace() / 3.0)

        new_store.set_scalar("psi", g * split.psi_pos + split.psi_neg)
        new_store.set_scalar("psi-pos", split.psi_pos)
        new_store.set_scalar("psi-neg", split.psi_neg)

        new_store.set_rank2("strain", strain)
        new_store.set_rank2("stress", stress)
        new_store.set_rank2("dstressdD", dstress_dd)
        new_store.set_rank4("jacobian", jacobian)

        H, loading = update_history(H_old, split.psi_pos)
        new_store.set_scalar("H", H)
        if loading:
            new_store.set_rank2("dHdstrain", split.stress_pos)
        else:
            new_store.set_rank2("dHdstrain", Rank2Tensor.zeros(dim))
