"""
Point Data
==========

Read-only snapshots of the element and solution state at a quadrature point.
"""

import numpy as np
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ElementInfo:
    """
    Element-level information at a quadrature point.

    Attributes:
        dim: spatial dimension
        dt: time step size
        time: current time
        element_id: element index (1-based)
        n_elements: number of elements
        qpoint_id: quadrature point index within the element (1-based)
        n_qpoints: number of quadrature points in the element
    """
    dim: int
    dt: float = 0.0
    time: float = 0.0
    element_id: int = 1
    n_elements: int = 1
    qpoint_id: int = 1
    n_qpoints: int = 1


@dataclass(frozen=True)
class PointSolution:
    """
    Field values and gradients at a quadrature point.

    Attributes:
        values: shape (n_fields,), field values indexed by field id
        gradients: shape (n_fields, 3), field gradients indexed by field id
            then spatial component
    """
    values: np.ndarray
    gradients: np.ndarray = field(default=None)

    def __post_init__(self):
        values = np.array(self.values, dtype=np.float64).ravel()
        if self.gradients is None:
            gradients = np.zeros((len(values), 3))
        else:
            G = np.atleast_2d(np.array(self.gradients, dtype=np.float64))
            if G.shape[0] != len(values) or G.shape[1] > 3:
                raise ValueError(
                    f"gradients must have shape ({len(values)}, <=3), got {G.shape}")
            gradients = np.zeros((len(values), 3))
            gradients[:, :G.shape[1]] = G
        values.flags.writeable = False
        gradients.flags.writeable = False
        # frozen dataclass: bypass __setattr__ for normalized arrays
        object.__setattr__(self, 'values', values)
        object.__setattr__(self, 'gradients', gradients)

    @property
    def n_fields(self) -> int:
        return len(self.values)


def phasefield_solution(damage: float, grad_u) -> PointSolution:
    """
    Solution snapshot for the phase-field fracture field layout.

    Field 0 is the damage d, fields 1..dim are the displacement components.

    Args:
        damage: damage value d
        grad_u: (dim, dim) displacement gradient, (grad_u)_ij = ∂u_i/∂x_j

    Returns:
        PointSolution with dim + 1 fields
    """
    grad_u = np.atleast_2d(np.asarray(grad_u, dtype=np.float64))
    dim = grad_u.shape[0]
    values = np.zeros(dim + 1)
    values[0] = damage
    gradients = np.zeros((dim + 1, 3))
    gradients[1:, :grad_u.shape[1]] = grad_u
    return PointSolution(values, gradients)
