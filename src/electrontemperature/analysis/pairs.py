from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from electrontemperature.model.cross_sections import CrossSectionProvider, CrossSectionTable


@dataclass(frozen=True)
class LinePair:
    """
    Ordered pair of lines; ``left`` is the numerator of the intensity ratio.
    """
    left_index: int
    left: CrossSectionTable
    right_index: int
    right: CrossSectionTable

    def __post_init__(self) -> None:
        if self.left_index == self.right_index:
            raise ValueError(f"A line cannot be paired with itself (line {self.left_index}).")

    @property
    def label(self) -> str:
        return f"CS{self.left_index}-CS{self.right_index}"


def truncate_tables(provider: CrossSectionProvider, threshold: float) -> List[Tuple[int, CrossSectionTable]]:
    """
    Truncate every table of the provider below the threshold.

    Args:
        provider: Source of the cross-section tables.
        threshold: Energy cutoff in eV.

    Returns:
        ``(line identifier, truncated table)`` in ascending identifier order.
    """
    return [(index, table.truncate(threshold)) for index, table in provider]


def build_pairs(tables: Sequence[Tuple[int, CrossSectionTable]]) -> List[LinePair]:
    """
    Enumerate all ordered pairs of distinct lines.

    Pairs are emitted row by row: for each left line in input order, every
    other line in input order. ``n`` tables yield ``n * (n - 1)`` pairs.
    """
    pairs: List[LinePair] = []
    for i, (left_index, left) in enumerate(tables):
        for j, (right_index, right) in enumerate(tables):
            if i == j:
                continue
            pairs.append(LinePair(left_index=left_index, left=left, right_index=right_index, right=right))
    return pairs
