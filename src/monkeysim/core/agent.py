"""
Agent: one monkey in the keep-away game.

The agent stores ONLY its own primitives:
- its index (the address other agents route to)
- its FIFO queue of worry levels
- its operation and routing rule (immutable)
- its inspection counter (activity)

It never touches another agent. Inspection returns Throws; the engine
delivers them.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from monkeysim.core.rules import Operation, RoutingRule, Throw, check_int

if TYPE_CHECKING:
    from monkeysim.core.worry import WorryPolicy


@dataclass
class AgentConfig:
    """External description of one agent, as produced by the notes parser."""

    items: list[int]         # Starting worry levels, front of queue first
    operation: Operation     # Applied to every inspected item
    routing: RoutingRule     # Decides the next holder

    def __post_init__(self):
        self.items = [check_int(value, "Worry level") for value in self.items]


class Agent:
    """
    A monkey holding items.

    The inspection counter only ever increases. It is the number of items
    this agent has inspected since it was created.
    """

    def __init__(
        self,
        index: int,
        operation: Operation,
        routing: RoutingRule,
        items: Iterable[int] = (),
    ):
        self.index = index
        self.operation = operation
        self.routing = routing
        self.items: deque[int] = deque(check_int(value, "Worry level") for value in items)
        self.inspections: int = 0

    @classmethod
    def from_config(cls, index: int, config: AgentConfig) -> Agent:
        """Build the agent at position `index` from its configuration."""
        return cls(index, config.operation, config.routing, config.items)

    def inspect_and_route(self, policy: "WorryPolicy") -> list[Throw]:
        """
        Inspect every item held at the start of the turn.

        For each item, front to back:
            1. apply the operation
            2. apply the worry policy
            3. run the divisibility test
            4. emit a Throw to the chosen target
            5. count the inspection

        The number of items is fixed when the turn starts, so an item thrown
        back to this agent is inspected next round, not now.

        Returns:
            Throws in inspection order. The queue is empty afterwards.
        """
        n_items = len(self.items)
        throws = []
        for _ in range(n_items):
            value = self.items.popleft()
            value = policy.relieve(self.operation.apply(value))
            throws.append(Throw(self.index, self.routing.target_for(value), value))
            self.inspections += 1
        return throws

    def receive(self, value: int):
        """Catch an item: append it to the back of the queue."""
        self.items.append(value)

    @property
    def n_items(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return (
            f"Agent(index={self.index}, items={list(self.items)}, "
            f"operation={self.operation}, inspections={self.inspections})"
        )
