"""
Constitutive Model Interface
============================

Two-phase protocol shared by every material law:

1. ``initialize`` seeds the history properties once before time stepping.
2. ``compute`` evaluates the point response from the current solution and
   the previous step's store, writing into the new store.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Tuple

from .point_data import ElementInfo, PointSolution
from .properties import PropertyStore


class ConstitutiveModel(ABC):
    """
    Abstract material law evaluated at quadrature points.

    Subclasses declare the properties they publish in ``provides``
    (kind -> names) and must write all of them on every call to
    ``compute``. ``compute`` must not keep state between calls.

    Attributes:
        name: material identifier used in diagnostics
        provides: declared output properties per kind
    """

    name: str = "material"
    provides: Dict[str, Tuple[str, ...]] = {}

    @abstractmethod
    def initialize(self, parameters: Mapping, element_info: ElementInfo,
                   solution: PointSolution, out_store: PropertyStore) -> None:
        """
        Write initial values of history properties.

        Args:
            parameters: material parameters
            element_info: element information at the point
            solution: initial solution at the point
            out_store: store receiving the initial values
        """

    @abstractmethod
    def compute(self, parameters: Mapping, element_info: ElementInfo,
                solution: PointSolution, old_store: PropertyStore,
                new_store: PropertyStore) -> None:
        """
        Evaluate the material response.

        Args:
            parameters: material parameters
            element_info: element information at the point
            solution: current solution at the point
            old_store: converged properties of the previous step (read only)
            new_store: properties of the current step (written)
        """

    def missing_properties(self, store: PropertyStore) -> List[Tuple[str, str]]:
        """
        Declared properties not present in a store.

        Returns:
            list of (kind, name)
        """
        return [(kind, name)
                for kind, names in self.provides.items()
                for name in names
                if not store.has(kind, name)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
