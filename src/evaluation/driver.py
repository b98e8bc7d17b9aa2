"""
Material Point Driver
=====================

Drives material models through load steps at quadrature points.

The driver owns the two property stores of a point. Within a step the model
may be evaluated any number of times (nonlinear iterations) against the same
"old" store; ``commit`` then copies the "new" store forward so that it becomes
the "old" store of the next step.
"""

import dataclasses
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Union

from matesystem.base import ConstitutiveModel
from matesystem.factory import MaterialType, create_material
from matesystem.point_data import ElementInfo, PointSolution
from matesystem.properties import PropertyStore


@dataclass
class DriverConfig:
    """Configuration for the material point driver."""
    verbose: bool = True           # Print per-step diagnostics
    check_properties: bool = True  # Verify every declared property is written
    max_workers: int = 1           # Threads for batch evaluation


@dataclass
class StepResult:
    """Converged state of a point after one step."""
    step: int
    time: float
    store: PropertyStore

    def scalar(self, name: str) -> float:
        return self.store.scalar(name)


def _as_material(material: Union[ConstitutiveModel, MaterialType, str]) -> ConstitutiveModel:
    if isinstance(material, ConstitutiveModel):
        return material
    return create_material(material)


def _check_complete(material: ConstitutiveModel, store: PropertyStore) -> None:
    missing = material.missing_properties(store)
    if missing:
        names = ", ".join(f"{kind} '{name}'" for kind, name in missing)
        raise RuntimeError(f"{material.name} did not write declared properties: {names}")


class MaterialPointDriver:
    """
    History-carrying evaluation of a single quadrature point.

    Attributes:
        material: ConstitutiveModel instance
        parameters: material parameters
        element_info: element information, time advanced on every commit
        config: DriverConfig instance
        old_store: converged properties of the previous step
        new_store: properties of the current step (None before evaluate)
        results: list of StepResult for committed steps
    """

    def __init__(self, material: Union[ConstitutiveModel, MaterialType, str],
                 parameters: Mapping,
                 element_info: ElementInfo,
                 config: Optional[DriverConfig] = None):
        """
        Initialize driver.

        Args:
            material: model instance or material type tag (resolved once here)
            parameters: material parameters
            element_info: element information at the point
            config: DriverConfig (optional)
        """
        self.material = _as_material(material)
        self.parameters = dict(parameters)
        self.element_info = element_info
        self.config = config or DriverConfig()

        self.old_store: Optional[PropertyStore] = None
        self.new_store: Optional[PropertyStore] = None
        self.results: List[StepResult] = []

    @property
    def initialized(self) -> bool:
        return self.old_store is not None

    def initialize(self, solution: PointSolution) -> PropertyStore:
        """
        Seed the history properties.

        Args:
            solution: initial solution at the point

        Returns:
            the initial "old" store
        """
        store = PropertyStore()
        self.material.initialize(self.parameters, self.element_info, solution, store)
        self.old_store = store
        self.new_store = None
        self.results = []
        return store

    def evaluate(self, solution: PointSolution) -> PropertyStore:
        """
        Evaluate the material for a trial solution of the current step.

        The "old" store is not modified; repeated calls with the same
        solution give the same result.

        Args:
            solution: current solution at the point

        Returns:
            freshly written "new" store
        """
        if not self.initialized:
            raise RuntimeError("MaterialPointDriver.initialize must be called before evaluate")

        store = PropertyStore()
        self.material.compute(self.parameters, self.element_info, solution,
                              self.old_store, store)
        if self.config.check_properties:
            _check_complete(self.material, store)
        self.new_store = store
        return store

    def commit(self) -> StepResult:
        """
        Accept the current step.

        The "new" store is copied into the "old" store of the next step and
        the time is advanced by dt.

        Returns:
            StepResult of the accepted step
        """
        if self.new_store is None:
            raise RuntimeError("Nothing to commit, call evaluate first")

        result = StepResult(step=len(self.results) + 1,
                            time=self.element_info.time,
                            store=self.new_store.copy())
        self.results.append(result)

        self.old_store = self.new_store.copy()
        self.new_store = None
        self.element_info = dataclasses.replace(
            self.element_info, time=self.element_info.time + self.element_info.dt)

        if self.config.verbose:
            self._print_step(result)
        return result

    def run(self, solutions: Sequence[PointSolution]) -> List[StepResult]:
        """
        Evaluate and commit a sequence of solution snapshots.

        The point is initialized from the first snapshot if needed.

        Args:
            solutions: one converged solution per step

        Returns:
            list of StepResult
        """
        if not self.initialized and len(solutions) > 0:
            self.initialize(solutions[0])

        for solution in solutions:
            self.evaluate(solution)
            self.commit()

        return self.results

    def _print_step(self, result: StepResult) -> None:
        store = result.store
        line = f"Step {result.step:4d}: t = {result.time:.6g}"
        for name in ("H", "vonMises-stress", "hydrostatic-stress"):
            if store.has("scalar", name):
                line += f", {name} = {store.scalar(name):.6e}"
        print(line)


def evaluate_points(material: Union[ConstitutiveModel, MaterialType, str],
                    parameters: Mapping,
                    element_infos: Sequence[ElementInfo],
                    solutions: Sequence[PointSolution],
                    old_stores: Sequence[PropertyStore],
                    max_workers: Optional[int] = None,
                    config: Optional[DriverConfig] = None) -> List[PropertyStore]:
    """
    Evaluate independent quadrature points.

    Every point reads only its own old store and writes a new one, so the
    points can be evaluated on a thread pool.

    Args:
        material: model instance or material type tag
        parameters: material parameters shared by all points
        element_infos: element information per point
        solutions: solution snapshot per point
        old_stores: converged store of the previous step per point
        max_workers: number of threads (1 evaluates sequentially),
            defaults to config.max_workers
        config: DriverConfig (optional)

    Returns:
        new stores, in the order of the inputs
    """
    if not len(element_infos) == len(solutions) == len(old_stores):
        raise ValueError(
            f"Inconsistent batch sizes: {len(element_infos)} infos, "
            f"{len(solutions)} solutions, {len(old_stores)} stores")

    model = _as_material(material)
    config = config or DriverConfig(verbose=False)
    if max_workers is None:
        max_workers = config.max_workers

    def _evaluate(i: int) -> PropertyStore:
        store = PropertyStore()
        model.compute(parameters, element_infos[i], solutions[i], old_stores[i], store)
        if config.check_properties:
            _check_complete(model, store)
        return store

    if max_workers <= 1:
        return [_evaluate(i) for i in range(len(solutions))]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(_evaluate, range(len(solutions))))
