"""
Manual transmission model.

A finite-state model of a manual vehicle transmission that tracks speed and
gear and constrains speed changes and gear shifts to per-gear speed ranges.
"""

from .transmission import (
    GearRange,
    GearTable,
    InvalidConfiguration,
    ManualTransmission,
    RegularManualTransmission,
    TransmissionState,
    TransmissionStatus,
    create_regular_transmission
)

__version__ = "0.1.0"

__all__ = [
    'GearRange',
    'GearTable',
    'InvalidConfiguration',
    'ManualTransmission',
    'RegularManualTransmission',
    'TransmissionState',
    'TransmissionStatus',
    'create_regular_transmission'
]
