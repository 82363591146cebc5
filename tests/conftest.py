"""Shared fixtures for the manual transmission tests."""
import matplotlib

matplotlib.use("Agg")

import pytest

from manual_transmission.transmission import GearTable, RegularManualTransmission

STANDARD_LIMITS = (0, 10, 5, 20, 15, 30, 25, 40, 35, 50)


@pytest.fixture
def transmission():
    return RegularManualTransmission(*STANDARD_LIMITS)


@pytest.fixture
def gear_table():
    return GearTable(STANDARD_LIMITS)
