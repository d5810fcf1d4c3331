"""
Cross-Section Tables
====================
Tabulated electron-impact cross sections, one table per spectral line.

Classes:
    CrossSectionTable: Immutable (energy, weight) samples of one line.
    CrossSectionProvider: Read-only collection of tables indexed by line identifier.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CrossSectionTable:
    """
    Parallel energy/weight samples of one spectral line.

    Attributes:
        energies: Electron energies in eV, strictly ascending.
        weights: Cross-section weight at each energy.
    """
    energies: npt.NDArray[np.float64]
    weights: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        energies = np.array(self.energies, dtype=np.float64).ravel()
        weights = np.array(self.weights, dtype=np.float64).ravel()

        if energies.shape != weights.shape:
            raise ValueError(
                f"Energies and weights must have the same length, "
                f"got {energies.size} and {weights.size}."
            )
        if np.any(energies < 0.0) or np.any(weights < 0.0):
            raise ValueError("Energies and weights must be non-negative.")
        if np.any(np.diff(energies) <= 0.0):
            raise ValueError("Energies must be strictly ascending.")

        energies.flags.writeable = False
        weights.flags.writeable = False
        object.__setattr__(self, "energies", energies)
        object.__setattr__(self, "weights", weights)

    def __len__(self) -> int:
        return int(self.energies.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossSectionTable):
            return NotImplemented
        return (
            np.array_equal(self.energies, other.energies)
            and np.array_equal(self.weights, other.weights)
        )

    __hash__ = None  # type: ignore[assignment]

    def truncate(self, threshold: float) -> CrossSectionTable:
        """
        Keep the entries whose energy lies strictly below the threshold.

        Args:
            threshold: Energy cutoff in eV.

        Returns:
            A new table with the first ``k`` entries, ``k`` may be zero.
        """
        k = int(np.count_nonzero(self.energies < threshold))
        return CrossSectionTable(energies=self.energies[:k], weights=self.weights[:k])

    def to_dict(self) -> Dict[str, List[float]]:
        return {
            "energies": self.energies.tolist(),
            "weights": self.weights.tolist(),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Sequence[float]]) -> CrossSectionTable:
        return CrossSectionTable(energies=data["energies"], weights=data["weights"])


def truncate(table: CrossSectionTable, threshold: float) -> CrossSectionTable:
    """Truncate ``table`` to the entries below ``threshold``."""
    return table.truncate(threshold)


class CrossSectionProvider:
    """
    Read-only set of cross-section tables keyed by line identifier.

    Iteration yields ``(identifier, table)`` in ascending identifier order.
    """

    def __init__(self, tables: Mapping[int, CrossSectionTable]) -> None:
        if not tables:
            raise ValueError("At least one cross-section table is required.")
        self._tables: Dict[int, CrossSectionTable] = {
            int(index): tables[index] for index in sorted(tables, key=int)
        }

    def __getitem__(self, index: int) -> CrossSectionTable:
        try:
            return self._tables[index]
        except KeyError:
            raise KeyError(f"Unknown line identifier: {index}. Available: {self.indices}") from None

    def __iter__(self) -> Iterator[Tuple[int, CrossSectionTable]]:
        return iter(self._tables.items())

    def __len__(self) -> int:
        return len(self._tables)

    @property
    def indices(self) -> List[int]:
        return list(self._tables)

    def to_dict(self) -> Dict[str, Any]:
        return {"lines": {str(index): table.to_dict() for index, table in self}}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> CrossSectionProvider:
        """
        Build the provider from ``{"lines": {"1": {"energies": [...], "weights": [...]}, ...}}``.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Cross-section data must be a mapping, got {type(data).__name__}.")
        try:
            lines = data["lines"]
        except KeyError:
            raise ValueError("Cross-section data has no 'lines' entry.") from None
        if not isinstance(lines, Mapping):
            raise ValueError(f"Cross-section 'lines' must be a mapping, got {type(lines).__name__}.")

        tables: Dict[int, CrossSectionTable] = {}
        for key, entry in lines.items():
            if not isinstance(entry, Mapping):
                raise ValueError(
                    f"Invalid cross-section table for line '{key}': expected a mapping, got {type(entry).__name__}."
                )
            try:
                tables[int(key)] = CrossSectionTable.from_dict(entry)
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Invalid cross-section table for line '{key}': {e}") from e
        return CrossSectionProvider(tables)

    @classmethod
    def from_file(cls, filepath: str) -> CrossSectionProvider:
        logger.info(f"Loading cross sections from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            provider = cls.from_dict(data)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load cross sections from '{filepath}': {e}")
            raise

        logger.debug(f"Loaded {len(provider)} cross-section tables: {provider.indices}")
        return provider
