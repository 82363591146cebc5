#!/usr/bin/env python3
"""
Custom Gear Table Demonstration Script

This script builds a six-speed gear table, saves it as a YAML configuration,
loads a transmission back from that file and accelerates it through every
gear, printing the advice the transmission gives along the way.
"""

import os
import sys

# Add project root to Python path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from manual_transmission.transmission import GearTable, RegularManualTransmission
from manual_transmission.core.drive_log import accelerate_through_gears
from manual_transmission.utils.validation import validate_gear_limits


SIX_SPEED_RANGES = [(0, 25), (15, 45), (35, 70), (60, 95), (85, 125), (110, 160)]


def check_candidate_tables():
    """Validate a few candidate tables and report every issue found."""
    candidates = {
        'six speed': [value for pair in SIX_SPEED_RANGES for value in pair],
        'six speed with gap': [0, 25, 30, 45, 35, 70, 60, 95, 85, 125, 110, 160],
        'broken': [5, 2, 30, 45, 35, 70, 60, 95, 85, 125, 110, 160],
    }
    for label, limits in candidates.items():
        result = validate_gear_limits(limits, num_gears=6)
        print(f"{label}: {result['status']}")
        for issue in result['issues']:
            print(f"  - {issue}")


def run_custom_gear_table_demo():
    """Save, reload and drive a six-speed transmission."""
    config_path = os.path.join('data', 'output', 'examples', 'six_speed.yaml')

    table = GearTable.from_ranges(SIX_SPEED_RANGES)
    table.save_to_file(config_path, name='six_speed')
    print(f"\nSaved {table} to {config_path}")

    transmission = RegularManualTransmission.from_config(config_path)
    df = accelerate_through_gears(transmission)

    advice = df[df['status'] == 'OK: you may increase the gear.']
    print("\nUpshift advised at:")
    for gear, group in advice.groupby('gear'):
        print(f"  gear {gear}: speed {group['speed'].min()}")

    print(f"\nFinal state: {transmission.get_state()}")


if __name__ == "__main__":
    check_candidate_tables()
    run_custom_gear_table_demo()
