"""
Material Factory
================

Resolve a material type tag into a constitutive model instance. The tag is
resolved once at setup; evaluation then calls the returned model directly.
"""

from enum import Enum
from typing import Dict, Type, Union

from .base import ConstitutiveModel
from .exceptions import ConfigurationError
from .miehe_fracture import MieheFractureMaterial
from .user_materials import ConstantPoissonMaterial, ConstantDiffusionMaterial


class MaterialType(Enum):
    """Material identity tags."""
    MIEHE_FRACTURE = "miehe-fracture"
    CONSTANT_POISSON = "constant-poisson"
    CONSTANT_DIFFUSION = "constant-diffusion"


MATERIAL_REGISTRY: Dict[MaterialType, Type[ConstitutiveModel]] = {
    MaterialType.MIEHE_FRACTURE: MieheFractureMaterial,
    MaterialType.CONSTANT_POISSON: ConstantPoissonMaterial,
    MaterialType.CONSTANT_DIFFUSION: ConstantDiffusionMaterial,
}


def resolve_material_type(tag: Union[MaterialType, str]) -> MaterialType:
    """
    Convert a tag or its string value to a MaterialType.

    Raises:
        ConfigurationError: for unknown tags
    """
    if isinstance(tag, MaterialType):
        return tag
    try:
        return MaterialType(str(tag).strip().lower())
    except ValueError:
        known = ", ".join(t.value for t in MaterialType)
        raise ConfigurationError(
            f"Unknown material type '{tag}', available: {known}") from None


def create_material(tag: Union[MaterialType, str]) -> ConstitutiveModel:
    """
    Instantiate the material registered for a tag.

    Args:
        tag: MaterialType member or its string value (e.g. 'miehe-fracture')

    Returns:
        ConstitutiveModel instance
    """
    return MATERIAL_REGISTRY[resolve_material_type(tag)]()
