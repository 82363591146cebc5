"""
Validation utilities for the manual transmission model.

This module provides functions for checking gear limit sequences before they
are turned into a gear table. The checks report every problem they find in a
result dictionary instead of raising, so callers such as configuration editors
can display all issues at once. The gear table itself raises on the first
reported issue.
"""

import numbers
import logging
from typing import Dict, List, Sequence

from ..utils.constants import DEFAULT_NUM_GEARS, MAX_GEAR_LIMIT, MIN_SPEED

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger("Validation")


def _is_integer(value) -> bool:
    # bool is an Integral subclass but never a meaningful speed
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_gear_limits(gear_limits: Sequence[int],
                      num_gears: int = DEFAULT_NUM_GEARS) -> List[str]:
    """
    Check a flat sequence of (lower, upper) gear limits.

    Args:
        gear_limits: Flat sequence of lower and upper speed limits, two per gear
        num_gears: Number of gears the sequence must describe

    Returns:
        List of human-readable issues, empty when the limits are valid
    """
    if not _is_integer(num_gears) or num_gears < 1:
        return [f"Number of gears must be a positive integer, got {num_gears!r}"]

    expected = 2 * num_gears
    if len(gear_limits) != expected:
        return [f"Invalid number of gear range arguments: expected {expected}, "
                f"got {len(gear_limits)}"]

    for index, value in enumerate(gear_limits):
        if not _is_integer(value):
            return [f"Gear limit at position {index} must be an integer, got {value!r}"]

    issues = []
    for value in gear_limits:
        if value < MIN_SPEED:
            issues.append(f"Gear limits cannot be negative, got {value}")
            break

    for value in gear_limits:
        if value > MAX_GEAR_LIMIT:
            issues.append(f"Gear limits cannot exceed {MAX_GEAR_LIMIT}, got {value}")
            break

    for gear in range(1, num_gears + 1):
        lower = gear_limits[2 * (gear - 1)]
        upper = gear_limits[2 * (gear - 1) + 1]

        if lower > upper:
            issues.append(f"Lower limit of gear {gear} ({lower}) cannot be higher "
                          f"than the upper limit ({upper})")

        if gear > 1:
            previous_upper = gear_limits[2 * (gear - 2) + 1]
            if lower > previous_upper:
                issues.append(f"Gaps between gear ranges are not allowed: gear {gear} "
                              f"starts at {lower} but gear {gear - 1} ends at {previous_upper}")

    if gear_limits[0] != MIN_SPEED:
        issues.append(f"Lower speed of the first gear must be {MIN_SPEED}, "
                      f"got {gear_limits[0]}")

    return issues


def validate_gear_limits(gear_limits: Sequence[int],
                         num_gears: int = DEFAULT_NUM_GEARS) -> Dict:
    """
    Validate a flat sequence of gear limits.

    Args:
        gear_limits: Flat sequence of lower and upper speed limits, two per gear
        num_gears: Number of gears the sequence must describe

    Returns:
        Dictionary with validation results
    """
    issues = check_gear_limits(gear_limits, num_gears)

    if issues:
        logger.warning(f"Gear limits failed validation with {len(issues)} issue(s)")
        return {
            'status': 'invalid',
            'num_gears': num_gears,
            'issues': issues,
            'message': issues[0]
        }

    return {
        'status': 'valid',
        'num_gears': num_gears,
        'issues': [],
        'message': f"Gear limits describe {num_gears} valid gear ranges"
    }
