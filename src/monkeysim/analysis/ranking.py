"""
Ranking of agents by activity.

The headline metric is "monkey business": the product of the two largest
inspection counters. The rest of this module gives context for it:
- rank_agents: competition ranks, 1 = busiest
- top_activity: the n largest counters
- activity_concentration: how evenly the inspections are spread
"""

from __future__ import annotations
from typing import Sequence

import numpy as np
from scipy import stats

from monkeysim.core.engine import monkey_business

__all__ = [
    "monkey_business",
    "rank_agents",
    "top_activity",
    "activity_concentration",
]


def rank_agents(counts: Sequence[int]) -> np.ndarray:
    """
    Competition ranks of agents by inspection count.

    The busiest agent gets rank 1; tied agents share the lower rank
    ("1224" ranking).

    Returns:
        Integer array, one rank per agent, by index
    """
    values = np.asarray(counts, dtype=np.float64)
    if values.size == 0:
        return np.zeros(0, dtype=np.int64)
    return stats.rankdata(-values, method="min").astype(np.int64)


def top_activity(counts: Sequence[int], n: int = 2) -> list[int]:
    """The n largest counters, largest first."""
    return sorted((int(c) for c in counts), reverse=True)[:n]


def activity_concentration(counts: Sequence[int]) -> float:
    """
    Normalized Shannon entropy of the inspection shares.

    Returns:
        1.0 when every agent inspected the same number of items,
        0.0 when a single agent did all the inspecting.
        1.0 for fewer than two agents or no inspections at all.
    """
    values = np.asarray(counts, dtype=np.float64)
    if values.size < 2 or values.sum() == 0:
        return 1.0
    return float(stats.entropy(values) / np.log(values.size))
