from electrontemperature.analysis.integration import integral
from electrontemperature.analysis.model import LineRatioAnalysis, PairResult, ThresholdResult
from electrontemperature.analysis.pairs import LinePair, build_pairs, truncate_tables
from electrontemperature.analysis.ratio import RatioFunction
from electrontemperature.exceptions import DegenerateInputError

__all__ = [
    "DegenerateInputError",
    "LinePair",
    "LineRatioAnalysis",
    "PairResult",
    "RatioFunction",
    "ThresholdResult",
    "build_pairs",
    "integral",
    "truncate_tables",
]
