#!/usr/bin/env python3
"""
Manual Transmission Simulation Example

This script demonstrates the manual transmission model: it loads a gear table
from its YAML configuration, walks through the standard shifting scenario,
drives the transmission from standstill up to its maximum speed and back
down, and exports the resulting drive logs and plots.
"""

import os
import sys
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pandas as pd

# Add project root to Python path for imports
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from manual_transmission.transmission import GearTable, RegularManualTransmission, InvalidConfiguration
from manual_transmission.core.drive_log import DriveLogger, run_operation_sequence, accelerate_through_gears
from manual_transmission.utils.constants import DEFAULT_GEAR_LIMITS, Operation
from manual_transmission.utils.plotting import plot_gear_ranges, plot_drive_trace, save_plot


def load_configurations():
    """
    Load the gear table and output settings.

    Returns:
        dict: Dictionary containing configuration settings
    """
    config = {
        'gear_table_config': os.path.join('configs', 'transmission', 'regular_5_speed.yaml'),
        'output_dir': os.path.join('data', 'output', 'manual_transmission'),
    }

    os.makedirs(config['output_dir'], exist_ok=True)
    return config


def create_transmission(config):
    """
    Create a transmission from the configured gear table, falling back to the
    reference gear table when the configuration file is missing.
    """
    config_path = config['gear_table_config']
    if os.path.exists(config_path):
        print(f"Loading gear table from {config_path}")
        return RegularManualTransmission.from_config(config_path)

    print(f"Gear table configuration not found at {config_path}; using reference gear table")
    return RegularManualTransmission(*DEFAULT_GEAR_LIMITS)


def run_shifting_scenario(transmission):
    """Walk through the standard shifting scenario and print every step."""
    print("\n=== Shifting Scenario ===")
    operations = [Operation.INCREASE_SPEED] * 10 + [
        Operation.INCREASE_GEAR,
        Operation.DECREASE_GEAR,
        Operation.DECREASE_GEAR,
    ]
    df = run_operation_sequence(transmission, operations)

    for _, row in df.iterrows():
        operation = 'start' if pd.isna(row['operation']) else row['operation']
        print(f"  {row['step']:>3}  {operation:<15} speed={row['speed']:>3} gear={row['gear']}  {row['status']}")

    return df


def run_full_drive(transmission):
    """Drive up to maximum speed, then back down to standstill."""
    print("\n=== Full Drive ===")
    drive_logger = DriveLogger()
    drive_logger.log_initial_state(transmission)
    accelerate_through_gears(transmission, drive_logger)
    print(f"  Top speed {transmission.get_speed()} reached in gear {transmission.get_gear()}")

    while transmission.get_speed() > 0:
        speed_before = transmission.get_speed()
        transmission.decrease_speed()
        drive_logger.log_step(Operation.DECREASE_SPEED.value, transmission,
                              transmission.get_speed() != speed_before)
        if transmission.get_speed() == speed_before:
            gear_before = transmission.get_gear()
            transmission.decrease_gear()
            drive_logger.log_step(Operation.DECREASE_GEAR.value, transmission,
                                  transmission.get_gear() != gear_before)

    print(f"  Back at standstill in gear {transmission.get_gear()}")
    return drive_logger.get_data_frame()


def demonstrate_invalid_configurations():
    """Show the reasons reported for malformed gear tables."""
    print("\n=== Invalid Gear Tables ===")
    examples = {
        'wrong count': (0, 10, 5, 20),
        'inverted range': (0, 4, 3, 20, 45, 20, 25, 40, 35, 50),
        'gap between gears': (0, 10, 15, 20, 25, 30, 35, 40, 45, 50),
        'first gear above zero': (1, 10, 5, 20, 15, 30, 25, 40, 35, 50),
    }
    for label, limits in examples.items():
        try:
            GearTable(limits)
        except InvalidConfiguration as e:
            print(f"  {label}: {e}")


def export_results(scenario_df, drive_df, gear_table, output_dir):
    """Export drive logs and plots to the output directory."""
    scenario_df.to_csv(os.path.join(output_dir, 'shifting_scenario.csv'), index=False)
    drive_df.to_csv(os.path.join(output_dir, 'full_drive.csv'), index=False)

    summary = pd.DataFrame([{
        'num_gears': gear_table.num_gears,
        'max_speed': gear_table.max_speed,
        'drive_steps': int(drive_df['step'].max()),
        'refused_operations': int((~drive_df['changed'].astype(bool) & drive_df['operation'].notna()).sum()),
    }])
    summary.to_csv(os.path.join(output_dir, 'summary.csv'), index=False)

    fig = plot_gear_ranges(gear_table)
    save_plot(fig, 'gear_ranges', output_dir)
    plt.close(fig)

    fig = plot_drive_trace(drive_df, gear_table, title='Full Drive')
    save_plot(fig, 'full_drive', output_dir)
    plt.close(fig)

    print(f"\nResults exported to {output_dir}")


def main():
    """Main function to run the transmission example."""
    print("Manual Transmission - Simulation Example")
    print("========================================")

    config = load_configurations()

    scenario_df = run_shifting_scenario(create_transmission(config))

    transmission = create_transmission(config)
    drive_df = run_full_drive(transmission)

    demonstrate_invalid_configurations()

    export_results(scenario_df, drive_df, transmission.gear_table, config['output_dir'])


if __name__ == "__main__":
    main()
