"""
Utility modules for the manual transmission model.

This package provides utility modules for constants, validation and plotting
used throughout the manual transmission package. Plotting functions live in
``manual_transmission.utils.plotting`` and are imported from there so that
matplotlib is only loaded when a plot is requested.
"""

# Import key functions and objects for easier access
from .constants import (
    DEFAULT_NUM_GEARS, DEFAULT_GEAR_LIMITS, SPEED_STEP,
    FIRST_GEAR, MIN_SPEED, MAX_GEAR_LIMIT, Operation, OPERATION_NAMES
)

# Import validation functions
from .validation import (
    check_gear_limits, validate_gear_limits
)

# Define what is exported by default
__all__ = [
    # Constants
    'DEFAULT_NUM_GEARS', 'DEFAULT_GEAR_LIMITS', 'SPEED_STEP',
    'FIRST_GEAR', 'MIN_SPEED', 'MAX_GEAR_LIMIT',

    # Enumerations
    'Operation', 'OPERATION_NAMES',

    # Validation functions
    'check_gear_limits', 'validate_gear_limits'
]
