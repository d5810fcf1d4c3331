"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and the analysis
constants.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_CROSS_SECTIONS_PATH (str): Absolute path to the reference cross-section tables.
    AnalysisConfig: Physical constants and solver settings for one analysis run.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a data file shipped inside the package.
    """
    package_dir: Path = Path(__file__).resolve().parent
    return os.path.join(str(package_dir), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_CROSS_SECTIONS_PATH: str = os.path.join(ASSETS_PATH, "cross_sections.json")

MACHINE_EPSILON: float = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Constants of a single analysis run.

    The observed line-intensity ratio is ``(a1 * n1) / (a2 * n2)``.
    ``eps`` is the convergence tolerance on the residual and ``step`` the
    finite-difference increment of the Newton slope. Both default to the same
    value; they are kept apart so that the coupling can be varied.
    """
    a1: float = 5.7718e7
    a2: float = 4.87e7
    n1: float = 1.08e16
    n2: float = 6.52e15
    eps: float = 10.0 * MACHINE_EPSILON
    step: float = 10.0 * MACHINE_EPSILON
    max_iterations: int = 10000
    evs: tuple[float, ...] = field(default=(30.0, 40.0, 50.0, 60.0, 70.0))
    output_failed: bool = False
    initial_temperature: float = 1.0

    def __post_init__(self) -> None:
        if self.a2 * self.n2 == 0.0:
            raise ValueError("'a2 * n2' must be non-zero.")
        if self.eps <= 0.0 or self.step <= 0.0:
            raise ValueError(f"'eps' and 'step' must be positive, got {self.eps} and {self.step}.")
        if self.max_iterations < 0:
            raise ValueError(f"'max_iterations' must be non-negative, got {self.max_iterations}.")
        if any(ev <= 0.0 for ev in self.evs):
            raise ValueError(f"Threshold energies must be positive, got {self.evs}.")
        # Lists are accepted for convenience, stored as a tuple
        object.__setattr__(self, "evs", tuple(float(ev) for ev in self.evs))

    @property
    def rhs(self) -> float:
        """Observed intensity ratio the solver matches."""
        return (self.a1 * self.n1) / (self.a2 * self.n2)
