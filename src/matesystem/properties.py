"""
Property Store
==============

Named material properties at a single quadrature point.

Every point carries two stores per step: the "old" store holding the
converged values of the previous step and the "new" store written by the
material model. Stores never share values; the caller moves from one step to
the next with ``new_store.copy()``.
"""

import numpy as np
from typing import Dict, List

from tensors.rank2 import Rank2Tensor
from tensors.rank4 import Rank4Tensor
from .exceptions import MissingPropertyError


KINDS = ("scalar", "vector", "rank2", "rank4", "boolean")


class PropertyStore:
    """
    Container of named scalar, vector, rank-2, rank-4 and boolean properties.

    Names are unique within a kind. Written values are copied, so later
    changes to the caller's objects never leak into the store.
    """

    def __init__(self):
        self._maps: Dict[str, Dict[str, object]] = {kind: {} for kind in KINDS}

    def _map(self, kind: str) -> Dict[str, object]:
        try:
            return self._maps[kind]
        except KeyError:
            raise ValueError(f"Unknown property kind: {kind}") from None

    def _get(self, kind: str, name: str):
        values = self._map(kind)
        if name not in values:
            raise MissingPropertyError(kind, name)
        return values[name]

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def scalar(self, name: str) -> float:
        return self._get("scalar", name)

    def vector(self, name: str) -> np.ndarray:
        return self._get("vector", name).copy()

    def rank2(self, name: str) -> Rank2Tensor:
        return self._get("rank2", name).copy()

    def rank4(self, name: str) -> Rank4Tensor:
        return self._get("rank4", name).copy()

    def boolean(self, name: str) -> bool:
        return self._get("boolean", name)

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def set_scalar(self, name: str, value: float) -> None:
        self._maps["scalar"][name] = float(value)

    def set_vector(self, name: str, value) -> None:
        self._maps["vector"][name] = np.array(value, dtype=np.float64).ravel()

    def set_rank2(self, name: str, value: Rank2Tensor) -> None:
        self._maps["rank2"][name] = value.copy()

    def set_rank4(self, name: str, value: Rank4Tensor) -> None:
        self._maps["rank4"][name] = value.copy()

    def set_boolean(self, name: str, value: bool) -> None:
        self._maps["boolean"][name] = bool(value)

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def has(self, kind: str, name: str) -> bool:
        """Whether a property of the given kind has been written."""
        return name in self._map(kind)

    def names(self, kind: str) -> List[str]:
        """Property names of one kind, in insertion order."""
        return list(self._map(kind))

    def count(self, kind: str) -> int:
        """Number of properties of one kind."""
        return len(self._map(kind))

    def copy(self) -> 'PropertyStore':
        """
        Deep copy of the store.

        Used to turn the converged "new" store of step n into the "old"
        store of step n+1.
        """
        other = PropertyStore()
        other._maps["scalar"] = dict(self._maps["scalar"])
        other._maps["boolean"] = dict(self._maps["boolean"])
        other._maps["vector"] = {k: v.copy() for k, v in self._maps["vector"].items()}
        other._maps["rank2"] = {k: v.copy() for k, v in self._maps["rank2"].items()}
        other._maps["rank4"] = {k: v.copy() for k, v in self._maps["rank4"].items()}
        return other

    def as_dict(self) -> Dict[str, Dict[str, object]]:
        """
        Export the store as plain Python/numpy values.

        Rank-2 tensors are exported as their active dim×dim block,
        rank-4 tensors as the full (3, 3, 3, 3) array.

        Returns:
            dict kind -> {name: value}
        """
        return {
            "scalar": dict(self._maps["scalar"]),
            "boolean": dict(self._maps["boolean"]),
            "vector": {k: v.copy() for k, v in self._maps["vector"].items()},
            "rank2": {k: v.to_array() for k, v in self._maps["rank2"].items()},
            "rank4": {k: v.components.copy() for k, v in self._maps["rank4"].items()},
        }

    def __repr__(self) -> str:
        counts = ", ".join(f"{kind}={len(self._maps[kind])}" for kind in KINDS)
        return f"PropertyStore({counts})"
