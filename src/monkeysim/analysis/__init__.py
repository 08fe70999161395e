"""
Analysis layer: derived quantities for reporting and validation.

IMPORTANT: This is NOT seen by the engine. One-way derivation only.

- monkey_business: product of the two largest inspection counters
- rank_agents, top_activity, activity_concentration: activity ranking
- check_invariants: conservation and monotonicity from observer histories
- compare_routing: verify that modular reduction never changes routing
"""

from monkeysim.analysis.ranking import (
    monkey_business,
    rank_agents,
    top_activity,
    activity_concentration,
)
from monkeysim.analysis.invariants import (
    InvariantReport,
    check_invariants,
    RoutingComparison,
    compare_routing,
)

__all__ = [
    "monkey_business",
    "rank_agents",
    "top_activity",
    "activity_concentration",
    "InvariantReport",
    "check_invariants",
    "RoutingComparison",
    "compare_routing",
]
