"""
Base classes for observers.

Observers are diagnostic tools attached to an engine. They can:
- Record inspection counters round by round
- Record how many items each agent holds
- Feed the invariant checks and plots in the analysis and viz layers

IMPORTANT: Observers read the engine state but never modify it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeysim.core.engine import SimulationEngine


@dataclass
class ObserverConfig:
    """Base configuration for observers."""

    observer_id: str  # Unique identifier


class Observer(ABC):
    """
    Base class for observers of a simulation engine.

    The engine calls `attach` once, when the observer is added, and
    `update` after every round.
    """

    def __init__(self, config: ObserverConfig):
        self.config = config
        self._last_round = 0

    def attach(self, engine: "SimulationEngine") -> None:
        """Take the first reading from the engine's current state."""
        self._last_round = engine.current_round
        self.record(engine)

    def update(self, round_index: int, engine: "SimulationEngine") -> None:
        """
        Called by the engine once the round is complete.

        Args:
            round_index: Number of the round that just finished (1-based)
            engine: The engine, after all throws of the round are delivered
        """
        self._last_round = round_index
        self.record(engine)

    @property
    def last_round(self) -> int:
        return self._last_round

    @abstractmethod
    def record(self, engine: "SimulationEngine") -> None:
        """Store one reading of the engine state."""
        ...

    @abstractmethod
    def get_measurements(self) -> dict:
        """
        Return recorded measurements from this observer.

        Returns:
            Dict with observer-specific measurements
        """
        ...
