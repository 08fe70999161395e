"""
Visualization utilities.

- Final inspection counts
- Counter histories
- Inventory histories
"""

from monkeysim.viz.activity import (
    plot_activity_bars,
    plot_activity_history,
    plot_inventory_history,
    plot_run_summary,
    save_figure,
)

__all__ = [
    "plot_activity_bars",
    "plot_activity_history",
    "plot_inventory_history",
    "plot_run_summary",
    "save_figure",
]
