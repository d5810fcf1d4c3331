"""
Text Report
===========
Renders the analysis results as a bordered text table: one header row per
threshold, one row per line pair with ``(pair, Te, residual)``, and a blank
separator row after each threshold.
"""
from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO, Tuple, TYPE_CHECKING

from prettytable import PrettyTable

from electrontemperature.solvers.newton import SolveStatus

if TYPE_CHECKING:
    from electrontemperature.analysis.model import PairResult, ThresholdResult

Row = Tuple[str, str, str]

FIELD_NAMES = ["Pair", "Te", "Residual"]

STATUS_SUFFIX = {
    SolveStatus.FAILED: " (Failed)",
    SolveStatus.DEGENERATE: " (Degenerate)",
}


def format_row(row: PairResult) -> Row:
    result = row.result
    suffix = STATUS_SUFFIX.get(result.status, "")
    return row.label, f"{result.temperature!r}{suffix}", f"{result.residual!r}"


def build_rows(results: Sequence[ThresholdResult], output_failed: bool = False) -> List[Row]:
    """
    Collect the table rows.

    Args:
        results: Per-threshold results in report order.
        output_failed: Include failed and degenerate pairs.
    """
    rows: List[Row] = []
    for threshold_result in results:
        rows.append((f"{threshold_result.threshold!r} eV", "", ""))
        for row in threshold_result.rows:
            if row.result.converged or output_failed:
                rows.append(format_row(row))
        rows.append(("", "", ""))
    return rows


def format_table(rows: Sequence[Row]) -> str:
    if not rows:
        return ""

    table = PrettyTable()
    table.field_names = FIELD_NAMES
    table.header = False
    table.align = "l"
    table.add_rows(rows)
    return table.get_string()


def format_report(results: Sequence[ThresholdResult], output_failed: bool = False) -> str:
    return format_table(build_rows(results, output_failed=output_failed))


def print_report(
    results: Sequence[ThresholdResult],
    output_failed: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    stream = stream if stream is not None else sys.stdout
    stream.write(format_report(results, output_failed=output_failed) + "\n")
