"""
Material System Module
======================

Constitutive model interface, property storage and material laws evaluated
at quadrature points.
"""

from .exceptions import ConfigurationError, MissingPropertyError
from .properties import PropertyStore
from .point_data import ElementInfo, PointSolution, phasefield_solution
from .parameters import ElasticModuli, get_value, get_boolean, has_value
from .base import ConstitutiveModel
from .degradation import (
    degradation_function,
    degradation_derivative,
    crack_free_energy,
    update_history,
)
from .miehe_fracture import MieheFractureMaterial, compute_split_response
from .user_materials import ConstantPoissonMaterial, ConstantDiffusionMaterial
from .factory import MaterialType, create_material, resolve_material_type

__all__ = [
    "ConfigurationError",
    "MissingPropertyError",
    "PropertyStore",
    "ElementInfo",
    "PointSolution",
    "phasefield_solution",
    "ElasticModuli",
    "get_value",
    "get_boolean",
    "has_value",
    "ConstitutiveModel",
    "degradation_function",
    "degradation_derivative",
    "crack_free_energy",
    "update_history",
    "MieheFractureMaterial",
    "compute_split_response",
    "ConstantPoissonMaterial",
    "ConstantDiffusionMaterial",
    "MaterialType",
    "create_material",
    "resolve_material_type",
]
