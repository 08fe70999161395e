"""
Core engine primitives.

This layer knows NOTHING about ranking plots or invariant checks.
It only knows:
- Operations and routing rules
- Agents with FIFO queues and inspection counters
- Worry policies that bound values after inspection
- The engine that plays rounds and delivers throws

Two worry policies drive real runs:
- ReliefPolicy: divide by 3 after each inspection (short runs)
- ModularPolicy: reduce modulo the LCM of all divisors (long runs)
"""

from monkeysim.core.errors import ConfigurationError, NotesFormatError, InsufficientAgentsError
from monkeysim.core.rules import AddConstant, MultiplyByConstant, Square, Operation, RoutingRule, Throw
from monkeysim.core.agent import Agent, AgentConfig
from monkeysim.core.worry import (
    WorryPolicy,
    ReliefPolicy,
    ModularPolicy,
    UnboundedPolicy,
    lcm,
    lcm_of,
    create_policy,
)
from monkeysim.core.engine import (
    SimulationEngine,
    SimulationConfig,
    RELIEF_CONFIG,
    CONTAINMENT_CONFIG,
    create_engine,
    monkey_business,
)

__all__ = [
    "ConfigurationError",
    "NotesFormatError",
    "InsufficientAgentsError",
    "AddConstant",
    "MultiplyByConstant",
    "Square",
    "Operation",
    "RoutingRule",
    "Throw",
    "Agent",
    "AgentConfig",
    "WorryPolicy",
    "ReliefPolicy",
    "ModularPolicy",
    "UnboundedPolicy",
    "lcm",
    "lcm_of",
    "create_policy",
    "SimulationEngine",
    "SimulationConfig",
    "RELIEF_CONFIG",
    "CONTAINMENT_CONFIG",
    "create_engine",
    "monkey_business",
]
