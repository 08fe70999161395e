"""
ActivityRecorder: inspection counters, round by round.

The first reading is taken when the recorder is attached; after that one
reading per round. Row k of the history is the counter vector after k
rounds (counting from the attach point).

Key observations:
- Every column is non-decreasing
- Row k+1 minus row k is what each agent inspected in round k+1
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from monkeysim.observers.base import Observer, ObserverConfig

if TYPE_CHECKING:
    from monkeysim.core.engine import SimulationEngine


class ActivityRecorder(Observer):
    """Records every agent's inspection counter after each round."""

    def __init__(self, config: ObserverConfig | None = None):
        super().__init__(config or ObserverConfig(observer_id="activity"))
        self.rounds: list[int] = []
        self.readings: list[list[int]] = []

    def record(self, engine: "SimulationEngine") -> None:
        self.rounds.append(self.last_round)
        self.readings.append(engine.activity_counts())

    def as_array(self) -> np.ndarray:
        """History as an int64 array of shape [n_readings, n_agents]."""
        return np.array(self.readings, dtype=np.int64)

    def per_round(self) -> np.ndarray:
        """Inspections made in each round: shape [n_readings - 1, n_agents]."""
        return np.diff(self.as_array(), axis=0)

    def is_monotonic(self) -> bool:
        """True if no counter ever went down."""
        if len(self.readings) < 2:
            return True
        return bool(np.all(self.per_round() >= 0))

    def get_measurements(self) -> dict:
        final = self.readings[-1] if self.readings else []
        return {
            "observer_id": self.config.observer_id,
            "rounds": self.rounds.copy(),
            "final_counts": list(final),
            "monotonic": self.is_monotonic(),
        }


def create_activity_recorder(observer_id: str = "activity") -> ActivityRecorder:
    """Convenience factory for an activity recorder."""
    return ActivityRecorder(ObserverConfig(observer_id=observer_id))
