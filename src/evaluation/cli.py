"""
Command Line Interface
======================

Run a single material point through a prescribed deformation path.

Input deck (JSON):

    {
        "material": "miehe-fracture",
        "parameters": {"E": 210, "nu": 0.3, "Gc": 1, "eps": 0.1,
                       "viscosity": 0, "stabilizer": 1e-8},
        "dim": 2,
        "dt": 1.0,
        "steps": [
            {"damage": 0.0, "grad_u": [[0.001, 0.0], [0.0, 0.0]]},
            ...
        ]
    }

Each step gives the damage d and either "grad_u" or a symmetric "strain".
Configuration errors abort the run with a diagnostic and exit status 1.
"""

import argparse
import json
import sys
from typing import List, Optional, Sequence

import numpy as np

from matesystem.exceptions import ConfigurationError
from matesystem.point_data import ElementInfo, PointSolution, phasefield_solution
from .driver import DriverConfig, MaterialPointDriver, StepResult


def load_deck(path: str) -> dict:
    """Read a JSON input deck."""
    with open(path, 'r') as f:
        return json.load(f)


def build_solutions(deck: dict) -> List[PointSolution]:
    """
    Build the per-step solution snapshots of a deck.

    Raises:
        ConfigurationError: for malformed steps
    """
    dim = deck.get("dim", 2)
    if dim not in (2, 3):
        raise ConfigurationError(f"Only 2D and 3D decks are supported, got dim={dim}")
    steps = deck.get("steps")
    if not steps:
        raise ConfigurationError("Input deck must contain a non-empty 'steps' list")

    solutions = []
    for k, step in enumerate(steps, start=1):
        if "grad_u" in step:
            grad_u = step["grad_u"]
        elif "strain" in step:
            grad_u = step["strain"]
        else:
            raise ConfigurationError(f"Step {k} needs 'grad_u' or 'strain'")
        grad_u = np.asarray(grad_u, dtype=np.float64)
        if grad_u.shape != (dim, dim):
            raise ConfigurationError(
                f"Step {k}: deformation must have shape ({dim}, {dim}), got {grad_u.shape}")
        solutions.append(phasefield_solution(step.get("damage", 0.0), grad_u))
    return solutions


def results_to_json(results: Sequence[StepResult]) -> list:
    """Convert step results to JSON-serializable records."""
    records = []
    for r in results:
        data = r.store.as_dict()
        records.append({
            "step": r.step,
            "time": r.time,
            "scalar": data["scalar"],
            "boolean": data["boolean"],
            "vector": {k: v.tolist() for k, v in data["vector"].items()},
            "rank2": {k: v.tolist() for k, v in data["rank2"].items()},
        })
    return records


def run_deck(deck: dict, config: Optional[DriverConfig] = None) -> List[StepResult]:
    """
    Run a deck through the material point driver.

    Args:
        deck: parsed input deck
        config: DriverConfig (optional)

    Returns:
        list of StepResult
    """
    if "material" not in deck:
        raise ConfigurationError("Input deck must name a 'material'")

    info = ElementInfo(dim=deck.get("dim", 2), dt=deck.get("dt", 1.0))
    solutions = build_solutions(deck)
    driver = MaterialPointDriver(deck["material"], deck.get("parameters", {}), info, config)
    return driver.run(solutions)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate a phase-field material point along a deformation path")
    parser.add_argument("deck", help="JSON input deck")
    parser.add_argument("-o", "--output", help="write step results to a JSON file")
    parser.add_argument("--plot", help="save stress-strain/history plot to an image file")
    parser.add_argument("-q", "--quiet", action="store_true", help="suppress per-step output")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point.

    Returns:
        exit status (0 on success, 1 on configuration error)
    """
    args = build_parser().parse_args(argv)
    config = DriverConfig(verbose=not args.quiet)

    try:
        deck = load_deck(args.deck)
        results = run_deck(deck, config)
    except ConfigurationError as exc:
        print(f"*** Error: {exc}", file=sys.stderr)
        print("*** Run aborted due to invalid input", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(results_to_json(results), f, indent=2)
        if config.verbose:
            print(f"Results written to {args.output}")

    if args.plot:
        from postprocess.point_plots import save_point_summary
        save_point_summary(results, args.plot)
        if config.verbose:
            print(f"Plot saved to {args.plot}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
