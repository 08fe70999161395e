"""
Invariant checks for finished runs.

Two properties must hold for every run:
1. Items are conserved: every round ends with the same number of items
2. Counters never go down

And one for containment runs:
3. Reducing modulo the LCM of all divisors never changes a routing decision

(1) and (2) are checked from observer histories. (3) is checked by replaying
the same configuration with and without reduction, side by side.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np

from monkeysim.core.agent import Agent, AgentConfig
from monkeysim.core.engine import SimulationEngine
from monkeysim.core.rules import Throw
from monkeysim.core.worry import ModularPolicy, UnboundedPolicy, WorryPolicy, lcm_of

if TYPE_CHECKING:
    from monkeysim.observers.activity import ActivityRecorder
    from monkeysim.observers.inventory import InventoryProbe


@dataclass
class InvariantReport:
    """Result of checking a run's histories."""

    n_rounds: int
    items_conserved: bool
    counters_monotonic: bool
    item_totals: np.ndarray       # Items in play per reading
    inspections_per_round: np.ndarray  # [n_rounds, n_agents]

    @property
    def ok(self) -> bool:
        return self.items_conserved and self.counters_monotonic


def check_invariants(
    recorder: "ActivityRecorder",
    probe: "InventoryProbe",
) -> InvariantReport:
    """
    Check conservation and monotonicity from two observers of the same run.

    Both observers must have been attached at the same round.
    """
    if not recorder.readings or not probe.readings:
        raise ValueError("Observers have no readings; attach them to an engine first")

    activity = recorder.as_array()
    inventory = probe.as_array()
    if activity.shape != inventory.shape:
        raise ValueError(
            f"Observer histories differ in shape: {activity.shape} vs {inventory.shape}"
        )

    totals = probe.totals()
    return InvariantReport(
        n_rounds=len(recorder.readings) - 1,
        items_conserved=probe.is_conserved(),
        counters_monotonic=recorder.is_monotonic(),
        item_totals=totals,
        inspections_per_round=recorder.per_round(),
    )


@dataclass
class RoutingComparison:
    """
    Routing decisions with exact and with bounded worry levels.

    The replay stops at the first decision that differs: after it the two
    runs hold different items, so later throws no longer correspond.
    """

    policy_mode: str
    n_rounds: int                 # Rounds requested
    rounds_compared: int = 0      # Rounds actually replayed
    n_decisions: int = 0          # Decisions compared, up to the first mismatch
    mismatch: tuple[int, Throw, Throw] | None = None  # (round, exact, bounded)

    @property
    def agrees(self) -> bool:
        return self.mismatch is None


def _build(configs: Sequence[AgentConfig], policy: WorryPolicy) -> SimulationEngine:
    agents = [Agent.from_config(i, cfg) for i, cfg in enumerate(configs)]
    return SimulationEngine(agents=agents, policy=policy)


def compare_routing(
    configs: Sequence[AgentConfig],
    n_rounds: int,
    modulus: int | None = None,
    policy: WorryPolicy | None = None,
) -> RoutingComparison:
    """
    Replay a configuration with true and with bounded worry levels.

    The true run keeps every value exactly (no relief, no reduction), so
    values grow very fast when an agent squares. Keep n_rounds small.

    Args:
        configs: Agent configurations
        n_rounds: Rounds to replay
        modulus: Reduction modulus (default: LCM of all divisors)
        policy: Policy to compare instead of modular reduction; overrides modulus

    Returns:
        RoutingComparison holding the first throw whose target differs, if any
    """
    if policy is None:
        if modulus is None:
            modulus = lcm_of(cfg.routing.divisor for cfg in configs)
        policy = ModularPolicy(modulus)

    exact = _build(configs, UnboundedPolicy())
    bounded = _build(configs, policy)

    comparison = RoutingComparison(policy_mode=policy.mode, n_rounds=n_rounds)
    for round_index in range(1, n_rounds + 1):
        exact_throws = exact.step()
        bounded_throws = bounded.step()
        comparison.rounds_compared = round_index
        for exact_throw, bounded_throw in zip(exact_throws, bounded_throws, strict=True):
            comparison.n_decisions += 1
            if exact_throw.target != bounded_throw.target:
                comparison.mismatch = (round_index, exact_throw, bounded_throw)
                return comparison
    return comparison
