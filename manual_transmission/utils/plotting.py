"""
Plotting utilities for the manual transmission model.

This module provides plotting functions for visualizing gear tables and the
drive logs produced by the drive log module.
"""

import os
import logging
from typing import Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

from ..transmission.gear_table import GearTable

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger("Plotting")


# Default style settings for plots
DEFAULT_FIG_SIZE = (10, 6)
DEFAULT_DPI = 150
DEFAULT_LINE_WIDTH = 2
DEFAULT_GRID_ALPHA = 0.3
DEFAULT_SAVE_FORMAT = 'png'

GEAR_COLORS = ['#e41a1c', '#377eb8', '#4daf4a', '#984ea3', '#ff7f00', '#a65628', '#f781bf', '#999999']


#------------------------------------------------------------------------------
# Utility functions
#------------------------------------------------------------------------------

def save_plot(fig: plt.Figure, filename: str, directory: Optional[str] = None,
              dpi: int = DEFAULT_DPI, file_format: str = DEFAULT_SAVE_FORMAT) -> str:
    """
    Save a figure to disk.

    Args:
        fig: Figure to save
        filename: File name, with or without extension
        directory: Optional output directory, created if missing
        dpi: Resolution in dots per inch
        file_format: Image format used when the file name has no extension

    Returns:
        Path of the saved file
    """
    if not os.path.splitext(filename)[1]:
        filename = f"{filename}.{file_format}"

    if directory:
        os.makedirs(directory, exist_ok=True)
        filepath = os.path.join(directory, filename)
    else:
        filepath = filename

    fig.savefig(filepath, dpi=dpi, bbox_inches='tight')
    logger.info(f"Plot saved to {filepath}")
    return filepath


#------------------------------------------------------------------------------
# Transmission plots
#------------------------------------------------------------------------------

def plot_gear_ranges(gear_table: GearTable, title: Optional[str] = None) -> plt.Figure:
    """
    Plot the speed range of every gear as a horizontal band.

    Args:
        gear_table: Gear table to plot
        title: Optional plot title

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=DEFAULT_FIG_SIZE)

    gears = np.arange(1, gear_table.num_gears + 1)
    lowers = gear_table.ranges[:, 0]
    widths = gear_table.ranges[:, 1] - lowers
    colors = [GEAR_COLORS[(gear - 1) % len(GEAR_COLORS)] for gear in gears]

    ax.barh(gears, widths, left=lowers, color=colors, alpha=0.7, edgecolor='black')
    for gear, lower, upper in zip(gears, lowers, gear_table.ranges[:, 1]):
        ax.text(upper, gear, f" {lower}-{upper}", va='center')

    ax.set_xlabel('Speed')
    ax.set_ylabel('Gear')
    ax.set_yticks(gears)
    ax.set_xlim(0, gear_table.max_speed * 1.15 if gear_table.max_speed else 1)
    ax.grid(True, axis='x', alpha=DEFAULT_GRID_ALPHA)
    ax.set_title(title or 'Gear Speed Ranges')

    fig.tight_layout()
    return fig


def plot_drive_trace(drive_log: pd.DataFrame, gear_table: Optional[GearTable] = None,
                     title: Optional[str] = None) -> plt.Figure:
    """
    Plot speed and gear against step for a drive log.

    Args:
        drive_log: DataFrame produced by the drive log module
        gear_table: Optional gear table whose current-gear range is shaded
        title: Optional plot title

    Returns:
        Matplotlib figure
    """
    fig, (ax_speed, ax_gear) = plt.subplots(2, 1, figsize=DEFAULT_FIG_SIZE, sharex=True)

    if drive_log.empty:
        logger.warning("Drive log is empty; nothing to plot")
        ax_speed.set_title(title or 'Drive Trace')
        return fig

    steps = drive_log['step'].to_numpy()
    speeds = drive_log['speed'].to_numpy()
    gears = drive_log['gear'].to_numpy()

    if gear_table is not None:
        lowers = gear_table.ranges[gears - 1, 0]
        uppers = gear_table.ranges[gears - 1, 1]
        ax_speed.fill_between(steps, lowers, uppers, step='post', color='grey',
                              alpha=0.2, label='Current gear range')

    ax_speed.step(steps, speeds, where='post', linewidth=DEFAULT_LINE_WIDTH, label='Speed')
    refused = (~drive_log['changed'].to_numpy(dtype=bool)) & drive_log['operation'].notna().to_numpy()
    if refused.any():
        ax_speed.scatter(steps[refused], speeds[refused], color='red', marker='x',
                         zorder=3, label='Refused operation')
    ax_speed.set_ylabel('Speed')
    ax_speed.grid(True, alpha=DEFAULT_GRID_ALPHA)
    ax_speed.legend(loc='upper left')

    ax_gear.step(steps, gears, where='post', color='tab:orange', linewidth=DEFAULT_LINE_WIDTH)
    ax_gear.set_xlabel('Step')
    ax_gear.set_ylabel('Gear')
    ax_gear.yaxis.set_major_locator(MaxNLocator(integer=True))
    ax_gear.grid(True, alpha=DEFAULT_GRID_ALPHA)

    ax_speed.set_title(title or 'Drive Trace')
    fig.tight_layout()
    return fig
