import matplotlib

matplotlib.use("Agg")

import pytest

from electrontemperature.config import DEFAULT_CROSS_SECTIONS_PATH
from electrontemperature.model.cross_sections import CrossSectionProvider, CrossSectionTable


@pytest.fixture
def reference_provider() -> CrossSectionProvider:
    return CrossSectionProvider.from_file(DEFAULT_CROSS_SECTIONS_PATH)


@pytest.fixture
def flat_table() -> CrossSectionTable:
    return CrossSectionTable(energies=[1.0, 2.0, 3.0], weights=[1.0, 1.0, 1.0])


@pytest.fixture
def low_table() -> CrossSectionTable:
    return CrossSectionTable(energies=[0.5, 1.0, 1.5], weights=[1.0, 1.0, 1.0])


@pytest.fixture
def high_table() -> CrossSectionTable:
    return CrossSectionTable(energies=[2.5, 3.0, 3.5], weights=[1.0, 1.0, 1.0])
