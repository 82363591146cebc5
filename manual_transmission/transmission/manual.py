"""
Manual transmission module.

This module provides the manual transmission state machine. A transmission
tracks the current speed and gear of a vehicle and allows the driver to speed
up, slow down and change gear, each by one step at a time, within the speed
ranges of its gear table.

Operations never raise once a transmission has been constructed. An operation
that is not allowed in the current state leaves speed and gear unchanged and
records a status message explaining why; callers should treat these messages
as advice to the driver, not as errors.
"""

import logging
from abc import ABC, abstractmethod
from typing import NamedTuple, Optional, Sequence

from .gear_table import GearTable
from .status import TransmissionStatus, status_after_speed_change
from ..utils.constants import (
    DEFAULT_GEAR_LIMITS, DEFAULT_NUM_GEARS, FIRST_GEAR, MIN_SPEED, SPEED_STEP
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger("Manual_Transmission")


class TransmissionState(NamedTuple):
    """Snapshot of a transmission's speed, gear and status."""
    speed: int
    gear: int
    status: str


class ManualTransmission(ABC):
    """
    Interface of a manual transmission.

    Mutating operations update the transmission in place and return it, so
    calls can be chained::

        transmission.increase_speed().increase_speed().increase_gear()
    """

    @abstractmethod
    def get_status(self) -> str:
        """Status message left by the last operation."""

    @abstractmethod
    def get_speed(self) -> int:
        """Current speed."""

    @abstractmethod
    def get_gear(self) -> int:
        """Current gear (1-based)."""

    @abstractmethod
    def increase_speed(self) -> 'ManualTransmission':
        """Increase the speed by one step within the current gear's range."""

    @abstractmethod
    def decrease_speed(self) -> 'ManualTransmission':
        """Decrease the speed by one step within the current gear's range."""

    @abstractmethod
    def increase_gear(self) -> 'ManualTransmission':
        """Shift up one gear if the speed allows it."""

    @abstractmethod
    def decrease_gear(self) -> 'ManualTransmission':
        """Shift down one gear if the speed allows it."""

    def get_state(self) -> TransmissionState:
        """
        Get an immutable snapshot of the transmission.

        Returns:
            TransmissionState with current speed, gear and status
        """
        return TransmissionState(self.get_speed(), self.get_gear(), self.get_status())


class RegularManualTransmission(ManualTransmission):
    """
    Manual transmission constrained by a table of per-gear speed ranges.

    The transmission starts at standstill in first gear. Speed may only change
    within the range of the current gear, and a gear change is only possible
    when the current speed already lies inside the target gear's range.
    """

    def __init__(self, *gear_limits: int, num_gears: int = DEFAULT_NUM_GEARS):
        """
        Initialize the transmission with per-gear speed limits.

        Args:
            *gear_limits: Lower and upper speed limit of each gear, in gear order
            num_gears: Number of gears described by the limits

        Raises:
            InvalidConfiguration: If the limits do not form a valid gear table
        """
        self._init_state(GearTable(gear_limits, num_gears=num_gears))

    @classmethod
    def from_gear_table(cls, gear_table: GearTable) -> 'RegularManualTransmission':
        """
        Create a transmission from an existing gear table.

        Args:
            gear_table: Validated gear table

        Returns:
            RegularManualTransmission instance
        """
        transmission = cls.__new__(cls)
        transmission._init_state(gear_table)
        return transmission

    @classmethod
    def from_config(cls, config_path: str) -> 'RegularManualTransmission':
        """
        Create a transmission from a YAML gear table configuration file.

        Args:
            config_path: Path to the configuration file

        Returns:
            RegularManualTransmission instance
        """
        return cls.from_gear_table(GearTable.from_config(config_path))

    def _init_state(self, gear_table: GearTable):
        self.gear_table = gear_table
        self.num_gears = gear_table.num_gears
        self._speed = MIN_SPEED
        self._gear = FIRST_GEAR
        self._status = TransmissionStatus.OK

        logger.info(f"Manual transmission initialized with {self.num_gears} gears: "
                    f"{gear_table.as_limits()}")

    def get_status(self) -> str:
        return self._status.value

    def get_speed(self) -> int:
        return self._speed

    def get_gear(self) -> int:
        return self._gear

    def get_status_code(self) -> TransmissionStatus:
        """Status left by the last operation as an enumeration member."""
        return self._status

    def increase_speed(self) -> 'RegularManualTransmission':
        if self._speed == self.gear_table.max_speed:
            self._refuse("increase_speed", TransmissionStatus.MAX_SPEED)
        elif self._speed >= self.gear_table.upper(self._gear):
            self._refuse("increase_speed", TransmissionStatus.INCREASE_GEAR_FIRST)
        else:
            self._speed += SPEED_STEP
            self._status = status_after_speed_change(self.gear_table, self._gear, self._speed)
            logger.debug(f"Speed increased to {self._speed} in gear {self._gear}")
        return self

    def decrease_speed(self) -> 'RegularManualTransmission':
        if self._speed == MIN_SPEED:
            self._refuse("decrease_speed", TransmissionStatus.MIN_SPEED)
        elif self._speed <= self.gear_table.lower(self._gear):
            self._refuse("decrease_speed", TransmissionStatus.DECREASE_GEAR_FIRST)
        else:
            self._speed -= SPEED_STEP
            self._status = status_after_speed_change(self.gear_table, self._gear, self._speed)
            logger.debug(f"Speed decreased to {self._speed} in gear {self._gear}")
        return self

    def increase_gear(self) -> 'RegularManualTransmission':
        if self._gear == self.num_gears:
            self._refuse("increase_gear", TransmissionStatus.MAX_GEAR)
        elif self._speed < self.gear_table.lower(self._gear + 1):
            self._refuse("increase_gear", TransmissionStatus.INCREASE_SPEED_FIRST)
        else:
            self._gear += 1
            self._status = TransmissionStatus.OK
            logger.debug(f"Shifted up to gear {self._gear} at speed {self._speed}")
        return self

    def decrease_gear(self) -> 'RegularManualTransmission':
        if self._gear == FIRST_GEAR:
            self._refuse("decrease_gear", TransmissionStatus.MIN_GEAR)
        elif self._speed > self.gear_table.upper(self._gear - 1):
            self._refuse("decrease_gear", TransmissionStatus.DECREASE_SPEED_FIRST)
        else:
            self._gear -= 1
            self._status = TransmissionStatus.OK
            logger.debug(f"Shifted down to gear {self._gear} at speed {self._speed}")
        return self

    def _refuse(self, operation: str, status: TransmissionStatus):
        self._status = status
        logger.debug(f"{operation} refused at speed {self._speed} in gear {self._gear}: {status.value}")

    def __repr__(self) -> str:
        return (f"RegularManualTransmission(speed={self._speed}, gear={self._gear}, "
                f"status={self._status.value!r})")


def create_regular_transmission(gear_limits: Optional[Sequence[int]] = None) -> RegularManualTransmission:
    """
    Create a five-speed transmission, using the reference gear table by default.

    Args:
        gear_limits: Optional flat sequence of ten gear limits

    Returns:
        RegularManualTransmission instance
    """
    if gear_limits is None:
        gear_limits = DEFAULT_GEAR_LIMITS
    return RegularManualTransmission(*gear_limits)
