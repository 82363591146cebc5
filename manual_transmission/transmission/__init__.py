"""
Transmission module for the manual transmission model.

This module provides the classes that make up a manual transmission:
1. Gear table components (speed range per gear, validated once at construction)
2. Status messages left behind by every operation
3. The manual transmission state machine itself

Together, these components model a driver stepping speed up and down and
shifting gear within the speed ranges of the gear table.
"""

# Import gear table components
from .gear_table import (
    GearRange,
    GearTable,
    InvalidConfiguration
)

# Import status components
from .status import (
    TransmissionStatus,
    status_after_speed_change
)

# Import transmission components
from .manual import (
    ManualTransmission,
    RegularManualTransmission,
    TransmissionState,
    create_regular_transmission
)

# Define public API
__all__ = [
    # Gear table components
    'GearRange',
    'GearTable',
    'InvalidConfiguration',

    # Status components
    'TransmissionStatus',
    'status_after_speed_change',

    # Transmission components
    'ManualTransmission',
    'RegularManualTransmission',
    'TransmissionState',
    'create_regular_transmission'
]
