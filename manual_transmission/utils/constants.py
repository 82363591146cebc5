"""
Constants module for the manual transmission model.

This module provides the reference gear table and the operation names used
throughout the manual transmission package.
"""

import numpy as np
from enum import Enum


# Reference gear table (lower, upper) speed limits, one pair per gear
DEFAULT_NUM_GEARS = 5
DEFAULT_GEAR_LIMITS = (
    0, 10,   # Gear 1
    5, 20,   # Gear 2
    15, 30,  # Gear 3
    25, 40,  # Gear 4
    35, 50,  # Gear 5
)

# Speed change applied by a single increase/decrease operation
SPEED_STEP = 1

# First gear is always gear 1 and must start from standstill
FIRST_GEAR = 1
MIN_SPEED = 0

# Gear tables are stored as int64 arrays
MAX_GEAR_LIMIT = int(np.iinfo(np.int64).max)


class Operation(Enum):
    """Operations that can be applied to a manual transmission."""
    INCREASE_SPEED = "increase_speed"
    DECREASE_SPEED = "decrease_speed"
    INCREASE_GEAR = "increase_gear"
    DECREASE_GEAR = "decrease_gear"


OPERATION_NAMES = tuple(op.value for op in Operation)
