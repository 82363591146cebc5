"""
Core module for the manual transmission model.

This module provides the drive log used to record and replay sequences of
operations applied to a transmission.
"""

from .drive_log import (
    DriveLogger,
    run_operation_sequence,
    accelerate_through_gears,
    LOG_COLUMNS
)

__all__ = [
    'DriveLogger',
    'run_operation_sequence',
    'accelerate_through_gears',
    'LOG_COLUMNS'
]
