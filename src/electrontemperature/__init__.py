"""Electron temperature estimation from spectral line-intensity ratios."""
from electrontemperature.analysis import (
    DegenerateInputError,
    LinePair,
    LineRatioAnalysis,
    RatioFunction,
    build_pairs,
    integral,
    truncate_tables,
)
from electrontemperature.config import AnalysisConfig
from electrontemperature.model import CrossSectionProvider, CrossSectionTable, truncate
from electrontemperature.solvers import NewtonSolver, SolveResult, SolveStatus

__all__ = [
    "AnalysisConfig",
    "CrossSectionProvider",
    "CrossSectionTable",
    "DegenerateInputError",
    "LinePair",
    "LineRatioAnalysis",
    "NewtonSolver",
    "RatioFunction",
    "SolveResult",
    "SolveStatus",
    "build_pairs",
    "integral",
    "truncate",
    "truncate_tables",
]
