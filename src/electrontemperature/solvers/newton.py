"""
Newton Solver
=============
Derivative-free Newton iteration for the electron temperature of one line pair.

The slope of the residual is estimated with a forward difference of size
``step``; the iteration stops once the residual of the last evaluated
temperature is within ``eps``, or after ``max_iterations`` steps.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from electrontemperature.exceptions import DegenerateInputError

if TYPE_CHECKING:
    from electrontemperature.analysis.ratio import RatioFunction
    from electrontemperature.config import AnalysisConfig
    from electrontemperature.model.cross_sections import CrossSectionTable

logger = logging.getLogger(__name__)


class SolveStatus(StrEnum):
    CONVERGED = "converged"
    FAILED = "failed"
    DEGENERATE = "degenerate"


@dataclass(frozen=True)
class NewtonState:
    """
    Iteration state.

    Attributes:
        temperature: Current temperature guess in eV.
        residual: Residual evaluated at the previous guess.
        iteration: Number of completed steps.
    """
    temperature: float
    residual: float = 1.0
    iteration: int = 0


@dataclass(frozen=True)
class SolveResult:
    temperature: float
    residual: float
    status: SolveStatus
    iterations: int

    @property
    def converged(self) -> bool:
        return self.status is SolveStatus.CONVERGED


class NewtonSolver:
    """
    Solves ``ratio.residual(Te, A, B) = 0`` for Te.
    """

    def __init__(
        self,
        ratio: RatioFunction,
        eps: float,
        step: float,
        max_iterations: int = 10000,
        initial_temperature: float = 1.0,
    ) -> None:
        """
        Args:
            ratio: Residual function of the line pair.
            eps: Convergence tolerance on the absolute residual.
            step: Finite-difference increment of the slope estimate.
            max_iterations: Maximum number of Newton steps.
            initial_temperature: Starting guess in eV.
        """
        self.ratio = ratio
        self.eps = eps
        self.step_size = step
        self.max_iterations = max_iterations
        self.initial_temperature = initial_temperature

    @classmethod
    def from_config(cls, ratio: RatioFunction, config: AnalysisConfig) -> NewtonSolver:
        return cls(
            ratio=ratio,
            eps=config.eps,
            step=config.step,
            max_iterations=config.max_iterations,
            initial_temperature=config.initial_temperature,
        )

    def step(self, state: NewtonState, table_a: CrossSectionTable, table_b: CrossSectionTable) -> NewtonState:
        """
        Perform one Newton step.

        The returned state carries the residual at ``state.temperature``, i.e.
        before the update, together with the updated temperature.

        Raises:
            DegenerateInputError: If the ratio is undefined for the pair.
        """
        te = np.float64(state.temperature)
        h = np.float64(self.step_size)

        d0 = np.float64(self.ratio.residual(float(te), table_a, table_b))
        if d0 == 0.0:
            # Exact root, the slope estimate would be 0/0
            return NewtonState(temperature=float(te), residual=0.0, iteration=state.iteration + 1)

        d1 = np.float64(self.ratio.residual(float(te + h), table_a, table_b))

        # A flat residual gives an infinite update; the iteration cap bounds it
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            te_next = te - h / (d1 / d0 - 1.0)

        return NewtonState(temperature=float(te_next), residual=float(d0), iteration=state.iteration + 1)

    def solve(self, table_a: CrossSectionTable, table_b: CrossSectionTable) -> SolveResult:
        """
        Iterate until the residual is within ``eps`` or the step budget is spent.

        Args:
            table_a: Numerator line.
            table_b: Denominator line.

        Returns:
            The final temperature and residual with the outcome. Non-convergence
            is reported through the status, never raised.
        """
        state = NewtonState(temperature=self.initial_temperature)

        # A NaN residual never satisfies the tolerance
        while not abs(state.residual) <= self.eps:
            if state.iteration >= self.max_iterations:
                return SolveResult(
                    temperature=state.temperature,
                    residual=state.residual,
                    status=SolveStatus.FAILED,
                    iterations=state.iteration,
                )
            try:
                state = self.step(state, table_a, table_b)
            except DegenerateInputError as e:
                logger.debug(f"Degenerate line pair after {state.iteration} steps: {e}")
                return SolveResult(
                    temperature=state.temperature,
                    residual=state.residual,
                    status=SolveStatus.DEGENERATE,
                    iterations=state.iteration,
                )

        return SolveResult(
            temperature=state.temperature,
            residual=state.residual,
            status=SolveStatus.CONVERGED,
            iterations=state.iteration,
        )
