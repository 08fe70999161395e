"""
InventoryProbe: how many items each agent holds after each round.

Items are only ever thrown, never created or destroyed, so the row
totals must all be equal.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from monkeysim.observers.base import Observer, ObserverConfig

if TYPE_CHECKING:
    from monkeysim.core.engine import SimulationEngine


class InventoryProbe(Observer):
    """Records queue lengths per agent after each round."""

    def __init__(self, config: ObserverConfig | None = None):
        super().__init__(config or ObserverConfig(observer_id="inventory"))
        self.rounds: list[int] = []
        self.readings: list[list[int]] = []

    def record(self, engine: "SimulationEngine") -> None:
        self.rounds.append(self.last_round)
        self.readings.append(engine.inventory())

    def as_array(self) -> np.ndarray:
        """History as an int64 array of shape [n_readings, n_agents]."""
        return np.array(self.readings, dtype=np.int64)

    def totals(self) -> np.ndarray:
        """Total items in play at each reading."""
        if not self.readings:
            return np.zeros(0, dtype=np.int64)
        return self.as_array().sum(axis=1)

    def is_conserved(self) -> bool:
        totals = self.totals()
        return bool(np.all(totals == totals[0])) if totals.size else True

    def get_measurements(self) -> dict:
        return {
            "observer_id": self.config.observer_id,
            "rounds": self.rounds.copy(),
            "totals": self.totals().tolist(),
            "conserved": self.is_conserved(),
        }


def create_inventory_probe(observer_id: str = "inventory") -> InventoryProbe:
    """Convenience factory for an inventory probe."""
    return InventoryProbe(ObserverConfig(observer_id=observer_id))
