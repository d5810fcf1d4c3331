"""
Application Entry
=================
Runs the reference analysis: loads the cross-section tables, solves every
threshold and line pair, and prints the report.
"""
import logging
from typing import List, Optional

from electrontemperature.analysis.model import LineRatioAnalysis, ThresholdResult
from electrontemperature.config import DEFAULT_CROSS_SECTIONS_PATH, AnalysisConfig
from electrontemperature.logging_config import setup_logging
from electrontemperature.model.cross_sections import CrossSectionProvider
from electrontemperature.report import print_report

logger = logging.getLogger(__name__)


def run(
    config: Optional[AnalysisConfig] = None,
    cross_sections_path: str = DEFAULT_CROSS_SECTIONS_PATH,
) -> List[ThresholdResult]:
    config = config or AnalysisConfig()

    provider = CrossSectionProvider.from_file(cross_sections_path)
    results = LineRatioAnalysis(provider, config).run()

    print_report(results, output_failed=config.output_failed)
    return results


def main() -> None:
    # Use logging.DEBUG to see every pair
    setup_logging(level=logging.INFO)
    run()


if __name__ == "__main__":
    main()
