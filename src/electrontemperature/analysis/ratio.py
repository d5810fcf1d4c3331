"""
Line-Intensity Ratio
====================
Maxwellian-weighted excitation rates of two lines and the residual between
their ratio and the observed ratio.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np
import matplotlib.pyplot as plt

from electrontemperature.analysis.integration import integral
from electrontemperature.exceptions import DegenerateInputError

if TYPE_CHECKING:
    import numpy.typing as npt

    from electrontemperature.model.cross_sections import CrossSectionTable

logger = logging.getLogger(__name__)


class RatioFunction:
    """
    Residual of the line-intensity ratio as a function of electron temperature.
    """

    def __init__(self, rhs: float) -> None:
        """
        Args:
            rhs: Observed intensity ratio of the two lines.
        """
        self.rhs = rhs

    @classmethod
    def from_constants(cls, a1: float, a2: float, n1: float, n2: float) -> RatioFunction:
        """
        Build the function from transition probabilities and populations.

        Args:
            a1: Transition probability of the first line.
            a2: Transition probability of the second line.
            n1: Population of the upper level of the first line.
            n2: Population of the upper level of the second line.
        """
        return cls(rhs=(a1 * n1) / (a2 * n2))

    @staticmethod
    def weighted_integral(te: float, table: CrossSectionTable) -> float:
        """
        Integrate ``E * sigma(E) * exp(-E / Te)`` over the table.

        Args:
            te: Electron temperature in eV.
            table: Cross-section samples.

        Returns:
            The Maxwellian-weighted rate (unnormalised).
        """
        energies = table.energies
        # Non-physical iterates (Te <= 0) may overflow, the solver bounds them
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            integrand = energies * table.weights * np.exp(-energies / te)
            return integral(energies, integrand)

    def intensity_ratio(self, te: float, table_a: CrossSectionTable, table_b: CrossSectionTable) -> float:
        """
        Ratio of the weighted integrals of line A and line B.

        Raises:
            DegenerateInputError: If the integral of line B is zero.
        """
        numerator = self.weighted_integral(te, table_a)
        denominator = self.weighted_integral(te, table_b)
        if denominator == 0.0:
            raise DegenerateInputError(
                f"Weighted integral of the denominator line is zero at Te={te!r} "
                f"({len(table_b)} samples)."
            )
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            return float(np.float64(numerator) / np.float64(denominator))

    def residual(self, te: float, table_a: CrossSectionTable, table_b: CrossSectionTable) -> float:
        """Model ratio minus the observed ratio."""
        return self.intensity_ratio(te, table_a, table_b) - self.rhs

    def plot_residual(
        self,
        table_a: CrossSectionTable,
        table_b: CrossSectionTable,
        temperatures: Optional[npt.NDArray[np.float64]] = None,
        show: bool = True,
    ) -> plt.Figure:
        """
        Plot the residual over a temperature range.

        Args:
            table_a: Numerator line.
            table_b: Denominator line.
            temperatures: Temperatures in eV, 0.5 to 100 eV by default.
            show: Display the figure.

        Returns:
            The created figure.
        """
        if temperatures is None:
            temperatures = np.linspace(0.5, 100.0, 500)

        residuals = np.array([self.residual(te, table_a, table_b) for te in temperatures])

        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))

        plt.plot(temperatures, residuals, 'r', lw=2)
        plt.axhline(0.0, color='k', lw=1)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(f"Intensity ratio residual (RHS = {self.rhs:.4g})")
        plt.xlabel("Electron temperature (eV)")
        plt.ylabel("Residual (-)")

        if show:
            plt.show()
        return fig
