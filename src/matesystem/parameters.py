"""
Material Parameters
===================

Access to the key -> value parameter set of a material block and the
derivation of isotropic elastic moduli.
"""

from dataclasses import dataclass
from typing import Mapping

from .exceptions import ConfigurationError


def has_value(parameters: Mapping, name: str) -> bool:
    """Whether a parameter is given."""
    return name in parameters


def get_value(parameters: Mapping, name: str) -> float:
    """
    Read a required numeric parameter.

    Raises:
        ConfigurationError: if the parameter is missing or not numeric
    """
    if name not in parameters:
        raise ConfigurationError(f"Missing required material parameter '{name}'")
    value = parameters[name]
    if isinstance(value, bool):
        raise ConfigurationError(f"Parameter '{name}' must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Parameter '{name}' must be numeric, got {value!r}") from None


def get_boolean(parameters: Mapping, name: str, default: bool = False) -> bool:
    """
    Read an optional boolean flag.

    Raises:
        ConfigurationError: if the value is present but not a boolean
    """
    if name not in parameters:
        return default
    value = parameters[name]
    if not isinstance(value, bool):
        raise ConfigurationError(f"Parameter '{name}' must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class ElasticModuli:
    """
    Isotropic elastic moduli.

    Attributes:
        K: bulk modulus
        G: shear modulus μ
        lame: first Lamé parameter λ = K - 2G/3
    """
    K: float
    G: float
    lame: float

    def __post_init__(self):
        if self.K <= 0:
            raise ConfigurationError(f"Bulk modulus must be positive, got {self.K}")
        if self.G <= 0:
            raise ConfigurationError(f"Shear modulus must be positive, got {self.G}")

    @property
    def youngs_modulus(self) -> float:
        """E = 9KG / (3K + G)."""
        return 9 * self.K * self.G / (3 * self.K + self.G)

    @property
    def poisson_ratio(self) -> float:
        """ν = (3K - 2G) / (2(3K + G))."""
        return (3 * self.K - 2 * self.G) / (2 * (3 * self.K + self.G))

    @classmethod
    def from_parameters(cls, parameters: Mapping) -> 'ElasticModuli':
        """
        Derive moduli from the first complete pair found.

        Priority: (E, nu), (K, G), (Lame, mu), (Lame, G).

        Raises:
            ConfigurationError: if no pair is complete or moduli are invalid
        """
        if has_value(parameters, "E") and has_value(parameters, "nu"):
            E = get_value(parameters, "E")
            nu = get_value(parameters, "nu")
            if not -1 < nu < 0.5:
                raise ConfigurationError(f"Poisson's ratio must be in (-1, 0.5), got {nu}")
            K = E / (3.0 * (1.0 - 2.0 * nu))
            G = 0.5 * E / (1.0 + nu)
            lame = E * nu / ((1 + nu) * (1 - 2 * nu))
        elif has_value(parameters, "K") and has_value(parameters, "G"):
            K = get_value(parameters, "K")
            G = get_value(parameters, "G")
            lame = K - 2.0 * G / 3.0
        elif has_value(parameters, "Lame") and has_value(parameters, "mu"):
            lame = get_value(parameters, "Lame")
            G = get_value(parameters, "mu")
            K = lame + 2.0 * G / 3.0
        elif has_value(parameters, "Lame") and has_value(parameters, "G"):
            lame = get_value(parameters, "Lame")
            G = get_value(parameters, "G")
            K = lame + 2.0 * G / 3.0
        else:
            raise ConfigurationError(
                "Invalid elastic parameters: give either (E, nu), (K, G), "
                "(Lame, mu) or (Lame, G)")
        return cls(K=K, G=G, lame=lame)
