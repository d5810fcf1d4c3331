import io

import pytest

from electrontemperature.analysis.model import PairResult, ThresholdResult
from electrontemperature.analysis.pairs import LinePair
from electrontemperature.model.cross_sections import CrossSectionTable
from electrontemperature.report import build_rows, format_report, print_report
from electrontemperature.solvers.newton import SolveResult, SolveStatus


@pytest.fixture
def results():
    table = CrossSectionTable(energies=[1.0, 2.0], weights=[1.0, 1.0])

    def row(left, right, te, residual, status):
        pair = LinePair(left_index=left, left=table, right_index=right, right=table)
        return PairResult(pair=pair, result=SolveResult(te, residual, status, 3))

    return [
        ThresholdResult(threshold=30.0, rows=[
            row(1, 2, 4.25, 1e-16, SolveStatus.CONVERGED),
            row(2, 1, float("-inf"), -0.5, SolveStatus.FAILED),
        ]),
        ThresholdResult(threshold=40.0, rows=[
            row(1, 2, 1.0, 1.0, SolveStatus.DEGENERATE),
        ]),
    ]


def test_failed_rows_are_dropped_by_default(results):
    rows = build_rows(results)

    assert rows == [
        ("30.0 eV", "", ""),
        ("CS1-CS2", "4.25", "1e-16"),
        ("", "", ""),
        ("40.0 eV", "", ""),
        ("", "", ""),
    ]


def test_failed_rows_are_marked_when_included(results):
    rows = build_rows(results, output_failed=True)

    assert ("CS2-CS1", "-inf (Failed)", "-0.5") in rows
    assert ("CS1-CS2", "1.0 (Degenerate)", "1.0") in rows
    assert len(rows) == 7


def test_table_layout(results):
    text = format_report(results)
    lines = text.splitlines()

    assert lines[0] == lines[-1]
    assert lines[0].startswith("+-") and lines[0].endswith("-+")
    assert len({len(line) for line in lines}) == 1
    assert lines[1].startswith("| 30.0 eV ")
    assert "| CS1-CS2 | 4.25 | 1e-16 |" in lines


def test_empty_results_render_nothing():
    assert format_report([]) == ""


def test_print_report_writes_to_stream(results):
    stream = io.StringIO()

    print_report(results, output_failed=True, stream=stream)

    assert "(Failed)" in stream.getvalue()
    assert stream.getvalue().endswith("\n")


def test_table_has_no_header_row(results):
    text = format_report(results, output_failed=True)

    assert "Pair" not in text
    assert "Residual" not in text
    assert text.splitlines()[1].startswith("| 30.0 eV ")


def test_cells_are_left_aligned(results):
    lines = format_report(results, output_failed=True).splitlines()

    assert "| CS1-CS2 | 4.25             | 1e-16 |" in lines
    assert "| CS2-CS1 | -inf (Failed)    | -0.5  |" in lines
    assert "| CS1-CS2 | 1.0 (Degenerate) | 1.0   |" in lines
