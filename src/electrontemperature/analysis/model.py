from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

from electrontemperature.analysis.pairs import LinePair, build_pairs, truncate_tables
from electrontemperature.analysis.ratio import RatioFunction
from electrontemperature.solvers.newton import NewtonSolver, SolveResult, SolveStatus

if TYPE_CHECKING:
    from electrontemperature.config import AnalysisConfig
    from electrontemperature.model.cross_sections import CrossSectionProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairResult:
    pair: LinePair
    result: SolveResult

    @property
    def label(self) -> str:
        return self.pair.label


@dataclass
class ThresholdResult:
    threshold: float
    rows: List[PairResult] = field(default_factory=list)

    @property
    def converged(self) -> List[PairResult]:
        return [row for row in self.rows if row.result.converged]


class LineRatioAnalysis:
    """
    Electron temperature analysis over every threshold and line pair.

    Each (threshold, pair) solve is independent; a failed or degenerate pair
    is recorded and the sweep continues.
    """
    def __init__(self, provider: CrossSectionProvider, config: AnalysisConfig) -> None:
        self.provider = provider
        self.config = config
        self.ratio = RatioFunction(rhs=config.rhs)
        self.solver = NewtonSolver.from_config(self.ratio, config)

    def solve_threshold(self, threshold: float) -> ThresholdResult:
        """Solve every line pair visible below one threshold."""
        pairs = build_pairs(truncate_tables(self.provider, threshold))
        result = ThresholdResult(threshold=threshold)

        for pair in pairs:
            solved = self.solver.solve(pair.left, pair.right)
            result.rows.append(PairResult(pair=pair, result=solved))

            if solved.status is SolveStatus.DEGENERATE:
                logger.warning(
                    f"{threshold} eV, {pair.label}: degenerate input "
                    f"({len(pair.left)} / {len(pair.right)} samples below threshold)."
                )
            else:
                logger.debug(
                    f"{threshold} eV, {pair.label}: {solved.status} after {solved.iterations} iterations "
                    f"- Te: {solved.temperature!r} - Residual: {solved.residual!r}"
                )

        counts = Counter(row.result.status for row in result.rows)
        logger.info(
            f"{threshold} eV: {len(pairs)} pairs - "
            f"converged: {counts[SolveStatus.CONVERGED]}, "
            f"failed: {counts[SolveStatus.FAILED]}, "
            f"degenerate: {counts[SolveStatus.DEGENERATE]}"
        )
        return result

    def run(self) -> List[ThresholdResult]:
        logger.info(
            f"Starting analysis: {len(self.provider)} lines, thresholds {list(self.config.evs)} eV, "
            f"RHS = {self.config.rhs!r}"
        )
        return [self.solve_threshold(ev) for ev in self.config.evs]
