"""
Simple Tension Test Example
===========================

Drives a single phase-field material point through a cyclic uniaxial strain
path with a prescribed damage ramp and prints the stress and history
response.
"""

import numpy as np
import sys
import os
import argparse

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from matesystem import ElementInfo, ElasticModuli, phasefield_solution
from evaluation import MaterialPointDriver, DriverConfig
from quadrature import create_qpoint_generator


def run_tension_test(plot_file=None):
    """Run a cyclic uniaxial tension test at one quadrature point."""
    print("=" * 60)
    print("Phase-Field Material Point: Cyclic Uniaxial Tension")
    print("=" * 60)

    params = {
        "E": 210.0,        # Young's modulus
        "nu": 0.3,         # Poisson's ratio
        "Gc": 2.7e-3,      # Critical energy release rate
        "eps": 0.015,      # Regularization length
        "viscosity": 1e-6,
        "stabilizer": 1e-6,
    }
    moduli = ElasticModuli.from_parameters(params)
    print(f"Material: K = {moduli.K:.2f}, G = {moduli.G:.2f}, λ = {moduli.lame:.2f}")

    # Quadrature points of a bilinear quad; every point sees the same path here
    qpoints = create_qpoint_generator("legendre").generate(2, "quad")
    print(f"Quadrature: {len(qpoints)} Gauss-Legendre points")

    # Load, unload, compress, reload
    amplitudes = np.concatenate([
        np.linspace(0.0, 0.004, 9)[1:],
        np.linspace(0.004, -0.002, 7)[1:],
        np.linspace(-0.002, 0.006, 9)[1:],
    ])
    damage = np.clip(np.linspace(0.0, 1.2, len(amplitudes)), 0.0, 1.0)

    info = ElementInfo(dim=2, dt=1.0, n_qpoints=len(qpoints))
    driver = MaterialPointDriver("miehe-fracture", params, info, DriverConfig(verbose=True))
    solutions = [phasefield_solution(d, [[a, 0.0], [0.0, 0.0]])
                 for a, d in zip(amplitudes, damage)]
    results = driver.run(solutions)

    print("\n  step    strain_xx       d    stress_xx          H")
    for r, a, d in zip(results, amplitudes, damage):
        print(f"  {r.step:4d}  {a:11.4e}  {d:6.3f}  {r.store.rank2('stress')[0, 0]:11.4e}"
              f"  {r.scalar('H'):11.4e}")

    if plot_file:
        from postprocess import save_point_summary
        save_point_summary(results, plot_file)
        print(f"\nPlot saved to {plot_file}")

    return results


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Cyclic tension at a material point")
    parser.add_argument("--plot", help="save stress-strain/history plot")
    args = parser.parse_args()
    run_tension_test(args.plot)
