"""
Gear table module for the manual transmission model.

This module provides the speed ranges that constrain a manual transmission.
Each gear may operate within an inclusive [lower, upper] speed interval, and
the table of these intervals is validated once and then never changes.

A valid gear table satisfies:
- every range has its lower limit at or below its upper limit
- consecutive ranges overlap or touch, leaving no gap between gears
- first gear starts from standstill (lower limit of 0)
"""

import os
import logging
from typing import List, NamedTuple, Optional, Sequence

import numpy as np
import yaml

from ..utils.constants import DEFAULT_NUM_GEARS
from ..utils.validation import check_gear_limits

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger("Gear_Table")


class InvalidConfiguration(ValueError):
    """Raised when gear limits do not describe a valid gear table."""


class GearRange(NamedTuple):
    """Inclusive speed interval within which a gear may operate."""
    lower: int
    upper: int

    def contains(self, speed: int) -> bool:
        """Check whether a speed lies within this range."""
        return self.lower <= speed <= self.upper


class GearTable:
    """
    Immutable table of per-gear speed ranges.

    Gears are numbered from 1. The ranges are held in a read-only integer
    array of shape (num_gears, 2) whose columns are the lower and upper limits.
    """

    def __init__(self, gear_limits: Sequence[int], num_gears: int = DEFAULT_NUM_GEARS):
        """
        Validate and store gear limits.

        Args:
            gear_limits: Flat sequence of lower and upper limits, two per gear
            num_gears: Number of gears described by the limits

        Raises:
            InvalidConfiguration: If the limits do not form a valid gear table
        """
        gear_limits = list(gear_limits)
        issues = check_gear_limits(gear_limits, num_gears)
        if issues:
            logger.error(f"Invalid gear table: {issues[0]}")
            raise InvalidConfiguration(issues[0])

        self.num_gears = num_gears
        self.ranges = np.array(gear_limits, dtype=np.int64).reshape(num_gears, 2)
        self.ranges.setflags(write=False)
        self.max_speed = int(self.ranges[-1, 1])

        logger.debug(f"Gear table created with {num_gears} gears: {self.as_pairs()}")

    @classmethod
    def from_ranges(cls, ranges: Sequence[Sequence[int]]) -> 'GearTable':
        """
        Create a gear table from a sequence of (lower, upper) pairs.

        Args:
            ranges: Sequence of two-element (lower, upper) pairs

        Returns:
            GearTable instance
        """
        limits = []
        for index, pair in enumerate(ranges, start=1):
            if not isinstance(pair, (list, tuple, np.ndarray)) or len(pair) != 2:
                raise InvalidConfiguration(
                    f"Gear {index} range must be a (lower, upper) pair, got {pair!r}")
            limits.extend(pair)

        return cls(limits, num_gears=len(ranges))

    @classmethod
    def from_config(cls, config_path: str) -> 'GearTable':
        """
        Create a gear table from a YAML configuration file.

        The file must contain a ``gear_ranges`` list of [lower, upper] pairs.

        Args:
            config_path: Path to the configuration file

        Returns:
            GearTable instance
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Gear table configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or 'gear_ranges' not in config:
            raise InvalidConfiguration(
                f"Configuration file {config_path} has no 'gear_ranges' list")

        ranges = config['gear_ranges']
        if not isinstance(ranges, list) or not ranges:
            raise InvalidConfiguration(
                f"'gear_ranges' in {config_path} must be a non-empty list of pairs")

        logger.info(f"Loading gear table '{config.get('name', 'unnamed')}' from {config_path}")
        return cls.from_ranges(ranges)

    def save_to_file(self, config_path: str, name: Optional[str] = None):
        """
        Save the gear table to a YAML configuration file.

        Args:
            config_path: Path to save configuration
            name: Optional name stored alongside the ranges
        """
        config = {}
        if name:
            config['name'] = name
        config['gear_ranges'] = [list(pair) for pair in self.as_pairs()]

        directory = os.path.dirname(config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(config_path, 'w') as f:
            yaml.dump(config, f, default_flow_style=None, sort_keys=False)

        logger.info(f"Gear table saved to {config_path}")

    def get_range(self, gear: int) -> GearRange:
        """
        Get the speed range of a gear.

        Args:
            gear: Gear number (1-based)

        Returns:
            GearRange for the gear
        """
        if gear < 1 or gear > self.num_gears:
            raise IndexError(f"Gear {gear} out of range 1-{self.num_gears}")
        lower, upper = self.ranges[gear - 1]
        return GearRange(int(lower), int(upper))

    def lower(self, gear: int) -> int:
        """Lower speed limit of a gear."""
        return self.get_range(gear).lower

    def upper(self, gear: int) -> int:
        """Upper speed limit of a gear."""
        return self.get_range(gear).upper

    def as_pairs(self) -> List[GearRange]:
        """All gear ranges, ordered from first to top gear."""
        return [self.get_range(gear) for gear in range(1, self.num_gears + 1)]

    def as_limits(self) -> List[int]:
        """Flat list of limits in construction order."""
        return [int(value) for value in self.ranges.ravel()]

    def gears_for_speed(self, speed: int) -> List[int]:
        """
        Find every gear whose range contains a speed.

        Args:
            speed: Vehicle speed

        Returns:
            Gear numbers (1-based) able to operate at the speed
        """
        mask = (self.ranges[:, 0] <= speed) & (speed <= self.ranges[:, 1])
        return [int(index) + 1 for index in np.flatnonzero(mask)]

    def __len__(self) -> int:
        return self.num_gears

    def __eq__(self, other) -> bool:
        if not isinstance(other, GearTable):
            return NotImplemented
        return np.array_equal(self.ranges, other.ranges)

    def __hash__(self) -> int:
        return hash(tuple(self.as_limits()))

    def __repr__(self) -> str:
        pairs = ", ".join(f"[{r.lower}, {r.upper}]" for r in self.as_pairs())
        return f"GearTable({pairs})"
