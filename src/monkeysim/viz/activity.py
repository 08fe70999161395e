"""
Plots of agent activity and inventories.

Provides:
- Bar chart of final inspection counts (top agents highlighted)
- Counter histories, one line per agent
- Inventory histories as a stacked area

All plots use matplotlib and return (fig, ax) so they can be composed.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from monkeysim.analysis.ranking import activity_concentration, monkey_business

if TYPE_CHECKING:
    from monkeysim.observers.activity import ActivityRecorder
    from monkeysim.observers.inventory import InventoryProbe


COLOR_TOP = "#c0392b"     # The agents that make up the monkey business
COLOR_OTHER = "#7f8c8d"
CMAP_AGENTS = "tab10"


def _agent_colors(n_agents: int) -> list:
    cmap = matplotlib.colormaps[CMAP_AGENTS]
    return [cmap(i % cmap.N) for i in range(n_agents)]


def plot_activity_bars(
    counts: Sequence[int],
    title: str = "Inspections per Agent",
    top: int = 2,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Bar chart of inspection counts.

    Args:
        counts: Final inspection counter per agent
        title: Plot title
        top: Number of busiest agents to highlight
        ax: Existing axes (creates new figure if None)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    values = np.asarray(counts, dtype=np.int64)
    order = np.argsort(-values, kind="stable")
    highlighted = set(order[:top].tolist())
    colors = [COLOR_TOP if i in highlighted else COLOR_OTHER for i in range(values.size)]

    ax.bar(np.arange(values.size), values, color=colors)
    ax.set_xticks(np.arange(values.size))
    ax.set_xticklabels([f"M{i}" for i in range(values.size)])
    ax.set_xlabel("Agent")
    ax.set_ylabel("Items inspected")

    if values.size >= top:
        title = f"{title} (monkey business = {monkey_business(values.tolist(), top)})"
    ax.set_title(title)
    ax.grid(True, axis="y", alpha=0.3)

    return fig, ax


def plot_activity_history(
    history: np.ndarray,
    rounds: Sequence[int] | None = None,
    title: str = "Inspection Counters",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Counter of every agent against round number.

    Args:
        history: [n_readings, n_agents] array (see ActivityRecorder.as_array)
        rounds: Round number of each reading (default 0, 1, 2, ...)
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    history = np.asarray(history)
    if rounds is None:
        rounds = np.arange(history.shape[0])

    for i, color in enumerate(_agent_colors(history.shape[1])):
        ax.plot(rounds, history[:, i], color=color, linewidth=2, label=f"M{i}")

    ax.set_xlabel("Round")
    ax.set_ylabel("Items inspected (cumulative)")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()

    return fig, ax


def plot_inventory_history(
    history: np.ndarray,
    rounds: Sequence[int] | None = None,
    title: str = "Items Held",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Items held per agent after each round, as a stacked area.

    The top edge of the stack is the number of items in play, which is
    flat for a valid run.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    history = np.asarray(history)
    if rounds is None:
        rounds = np.arange(history.shape[0])

    n_agents = history.shape[1]
    ax.stackplot(
        rounds,
        history.T,
        labels=[f"M{i}" for i in range(n_agents)],
        colors=_agent_colors(n_agents),
        alpha=0.8,
    )
    ax.set_xlabel("Round")
    ax.set_ylabel("Items held")
    ax.set_title(title)
    ax.legend(loc="upper right")

    return fig, ax


def plot_run_summary(
    recorder: "ActivityRecorder",
    probe: "InventoryProbe",
    figsize: tuple[float, float] = (16, 4.5),
) -> Figure:
    """
    Plot final counts, counter histories and inventories side by side.

    Args:
        recorder: ActivityRecorder attached for the whole run
        probe: InventoryProbe attached for the whole run

    Returns:
        Figure with three subplots
    """
    fig, axes = plt.subplots(1, 3, figsize=figsize)

    activity = recorder.as_array()
    plot_activity_bars(activity[-1], ax=axes[0])
    plot_activity_history(activity, rounds=recorder.rounds, ax=axes[1])
    plot_inventory_history(probe.as_array(), rounds=probe.rounds, ax=axes[2])

    evenness = activity_concentration(activity[-1].tolist())
    axes[1].set_title(f"Inspection Counters (evenness {evenness:.2f})")

    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
