"""
Evaluation Module
=================

Material point driver with history copy-forward and the command line entry
point.
"""

from .driver import MaterialPointDriver, DriverConfig, StepResult, evaluate_points

__all__ = ["MaterialPointDriver", "DriverConfig", "StepResult", "evaluate_points"]
