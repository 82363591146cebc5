"""
Drive log module for the manual transmission model.

This module records the effect of a sequence of operations on a manual
transmission. Each applied operation produces one row holding the resulting
speed, gear and status, which makes a drive easy to inspect or plot
as a pandas DataFrame.
"""

import logging
from collections import defaultdict
from typing import Iterable, List, Optional, Union

import pandas as pd

from ..transmission.manual import ManualTransmission
from ..utils.constants import OPERATION_NAMES, Operation

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger("Drive_Log")


LOG_COLUMNS = ['step', 'operation', 'speed', 'gear', 'status', 'changed']


class DriveLogger:
    """Data logging system for transmission operations."""

    def __init__(self):
        """Initialize an empty drive log."""
        self.data = defaultdict(list)
        self.step = 0

    def log_initial_state(self, transmission: ManualTransmission):
        """
        Record the state of a transmission before any operation is applied.

        Args:
            transmission: Transmission to record
        """
        self._append(None, transmission, False)

    def log_step(self, operation: str, transmission: ManualTransmission, changed: bool):
        """
        Record the state of a transmission after an operation.

        Args:
            operation: Name of the applied operation
            transmission: Transmission the operation was applied to
            changed: Whether the operation changed speed or gear
        """
        self.step += 1
        self._append(operation, transmission, changed)

    def _append(self, operation: Optional[str], transmission: ManualTransmission, changed: bool):
        self.data['step'].append(self.step)
        self.data['operation'].append(operation)
        self.data['speed'].append(transmission.get_speed())
        self.data['gear'].append(transmission.get_gear())
        self.data['status'].append(transmission.get_status())
        self.data['changed'].append(changed)

    def get_data_frame(self) -> pd.DataFrame:
        """
        Convert logged data to DataFrame.

        Returns:
            Pandas DataFrame with one row per logged state
        """
        if not self.data:
            return pd.DataFrame(columns=LOG_COLUMNS)
        return pd.DataFrame(self.data, columns=LOG_COLUMNS)

    def clear(self):
        """Clear all logged data."""
        self.data = defaultdict(list)
        self.step = 0


def _normalize_operations(operations: Iterable[Union[str, Operation]]) -> List[str]:
    names = []
    for operation in operations:
        name = operation.value if isinstance(operation, Operation) else operation
        if name not in OPERATION_NAMES:
            raise ValueError(f"Unknown transmission operation: {operation!r}")
        names.append(name)
    return names


def run_operation_sequence(transmission: ManualTransmission,
                           operations: Iterable[Union[str, Operation]],
                           drive_logger: Optional[DriveLogger] = None) -> pd.DataFrame:
    """
    Apply a sequence of operations to a transmission and log every step.

    All operation names are checked before the first one is applied, so an
    unknown name leaves the transmission untouched.

    Args:
        transmission: Transmission to drive
        operations: Operation names or Operation members, applied in order
        drive_logger: Optional logger to append to; a new one is used if omitted

    Returns:
        DataFrame with the initial state followed by one row per operation
    """
    names = _normalize_operations(operations)

    if drive_logger is None:
        drive_logger = DriveLogger()
        drive_logger.log_initial_state(transmission)

    for name in names:
        before = (transmission.get_speed(), transmission.get_gear())
        getattr(transmission, name)()
        after = (transmission.get_speed(), transmission.get_gear())
        drive_logger.log_step(name, transmission, before != after)

    logger.info(f"Applied {len(names)} operations; final speed {transmission.get_speed()} "
                f"in gear {transmission.get_gear()}")
    return drive_logger.get_data_frame()


def accelerate_through_gears(transmission: ManualTransmission,
                             drive_logger: Optional[DriveLogger] = None) -> pd.DataFrame:
    """
    Drive a transmission from its current state up to its maximum speed.

    Speed is increased until the current gear refuses to go any faster, at
    which point the gear is increased.
    The drive stops once speed can no longer be increased in any gear.

    Args:
        transmission: Transmission to drive
        drive_logger: Optional logger to append to; a new one is used if omitted

    Returns:
        DataFrame with every logged step of the drive
    """
    if drive_logger is None:
        drive_logger = DriveLogger()
        drive_logger.log_initial_state(transmission)

    while True:
        speed_before = transmission.get_speed()
        transmission.increase_speed()
        drive_logger.log_step(Operation.INCREASE_SPEED.value, transmission,
                              transmission.get_speed() != speed_before)
        if transmission.get_speed() != speed_before:
            continue

        gear_before = transmission.get_gear()
        transmission.increase_gear()
        drive_logger.log_step(Operation.INCREASE_GEAR.value, transmission,
                              transmission.get_gear() != gear_before)
        if transmission.get_gear() == gear_before:
            break

    logger.info(f"Reached speed {transmission.get_speed()} in gear {transmission.get_gear()}")
    return drive_logger.get_data_frame()
