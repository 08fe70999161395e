"""
Simulation Engine: rounds of keep-away over an arena of agents.

Each round:
1. Visit agents in ascending index order
2. The visited agent inspects everything it holds and returns Throws
3. Throws are delivered at once, in order, to the target queues
4. After the last agent, observers are notified

Delivery happens right after each turn, so an agent with a higher index
sees items thrown to it earlier in the same round. Lower-index agents
(and the thrower itself) see them next round.

The engine is the ONLY code that moves items between agents. Agents are
addressed by their index in `agents`; they never hold references to
each other.

After the run, the two largest inspection counters are multiplied to give
the "monkey business" level.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence
import logging

from monkeysim.core.agent import Agent, AgentConfig
from monkeysim.core.errors import ConfigurationError, InsufficientAgentsError
from monkeysim.core.rules import Throw
from monkeysim.core.worry import ModularPolicy, WorryMode, WorryPolicy, create_policy

if TYPE_CHECKING:
    from monkeysim.observers.base import Observer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for one run."""

    n_rounds: int = 20
    worry_mode: WorryMode = "relief"
    relief_divisor: int = 3  # Only used in relief mode
    top_n: int = 2           # How many counters the metric multiplies


RELIEF_CONFIG = SimulationConfig(n_rounds=20, worry_mode="relief")
CONTAINMENT_CONFIG = SimulationConfig(n_rounds=10000, worry_mode="containment")


def check_rankable(n_agents: int, top: int):
    """Raise unless `top` counters can be picked from `n_agents` agents."""
    if isinstance(top, bool) or not isinstance(top, int) or top < 1:
        raise ValueError(f"top must be a positive integer, got {top!r}")
    if n_agents < top:
        raise InsufficientAgentsError(
            f"Need at least {top} agents to rank, got {n_agents}"
        )


def monkey_business(counts: Sequence[int], top: int = 2) -> int:
    """
    Product of the `top` largest inspection counts.

    Raises:
        ValueError: if `top` is not a positive integer
        InsufficientAgentsError: if there are fewer than `top` counts
    """
    check_rankable(len(counts), top)
    product = 1
    for count in sorted(counts, reverse=True)[:top]:
        product *= int(count)
    return product


@dataclass
class SimulationEngine:
    """
    Runs keep-away rounds over a fixed list of agents.

    All configuration errors are raised here, at construction, before any
    round runs.
    """

    agents: list[Agent]
    policy: WorryPolicy
    observers: list["Observer"] = field(default_factory=list)

    current_round: int = field(default=0, init=False)

    def __post_init__(self):
        self._validate()
        for observer in self.observers:
            observer.attach(self)
        logger.info(
            "Engine ready: %d agents, policy=%s", len(self.agents), self.policy.mode
        )

    def _validate(self):
        n_agents = len(self.agents)
        if n_agents == 0:
            raise ConfigurationError("Engine needs at least one agent")

        for position, agent in enumerate(self.agents):
            if agent.index != position:
                raise ConfigurationError(
                    f"Agent at position {position} has index {agent.index}"
                )
            for target in agent.routing.targets:
                if not 0 <= target < n_agents:
                    raise ConfigurationError(
                        f"Agent {position} routes to {target}, "
                        f"valid targets are 0..{n_agents - 1}"
                    )

        if isinstance(self.policy, ModularPolicy):
            for agent in self.agents:
                if self.policy.modulus % agent.routing.divisor != 0:
                    raise ConfigurationError(
                        f"Modulus {self.policy.modulus} is not a multiple of "
                        f"agent {agent.index}'s divisor {agent.routing.divisor}"
                    )

    def add_observer(self, observer: "Observer"):
        """Attach an observer; it sees the current state as its first reading."""
        observer.attach(self)
        self.observers.append(observer)

    def step(self) -> list[Throw]:
        """
        Play one round.

        Returns:
            Every throw of the round, in the order it was delivered
        """
        self.current_round += 1
        round_throws: list[Throw] = []

        for agent in self.agents:
            throws = agent.inspect_and_route(self.policy)
            for throw in throws:
                self.agents[throw.target].receive(throw.value)
            round_throws.extend(throws)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Round %d: %d throws, inspections=%s",
                self.current_round, len(round_throws), self.activity_counts(),
            )

        for observer in self.observers:
            observer.update(self.current_round, self)

        return round_throws

    def simulate(self, n_rounds: int):
        """Play `n_rounds` rounds back to back."""
        if n_rounds < 0:
            raise ValueError(f"n_rounds must be non-negative, got {n_rounds}")
        for _ in range(n_rounds):
            self.step()

    def run(self, n_rounds: int, top: int = 2) -> int:
        """
        Play `n_rounds` rounds and return the monkey business level.

        `top` and the agent count are checked first, so a run that cannot
        be ranked does not start.
        """
        check_rankable(len(self.agents), top)
        self.simulate(n_rounds)
        result = self.monkey_business(top)
        logger.info(
            "Run finished after round %d: inspections=%s, monkey business=%d",
            self.current_round, self.activity_counts(), result,
        )
        return result

    def activity_counts(self) -> list[int]:
        """Inspection counter of every agent, by index."""
        return [agent.inspections for agent in self.agents]

    def inventory(self) -> list[int]:
        """Number of items each agent currently holds, by index."""
        return [agent.n_items for agent in self.agents]

    def monkey_business(self, top: int = 2) -> int:
        return monkey_business(self.activity_counts(), top)

    def summary(self) -> dict:
        """Statistics of the run so far."""
        counts = self.activity_counts()
        stats = {
            "current_round": self.current_round,
            "policy": self.policy.mode,
            "n_agents": len(self.agents),
            "total_items": sum(self.inventory()),
            "total_inspections": sum(counts),
            "max_inspections": max(counts),
        }
        if len(counts) >= 2:
            stats["monkey_business"] = self.monkey_business()
        return stats


def create_engine(
    agent_configs: Sequence[AgentConfig],
    config: SimulationConfig | None = None,
    observers: list["Observer"] | None = None,
) -> SimulationEngine:
    """
    Build agents and the worry policy from configuration.

    Args:
        agent_configs: One entry per agent, in index order
        config: Run configuration (worry mode and relief divisor are used here)
        observers: Observers to attach before the first round

    Returns:
        A fresh engine at round 0
    """
    if config is None:
        config = SimulationConfig()

    agents = [Agent.from_config(i, cfg) for i, cfg in enumerate(agent_configs)]
    if not agents:
        raise ConfigurationError("Engine needs at least one agent")

    policy = create_policy(
        config.worry_mode,
        [agent.routing.divisor for agent in agents],
        relief_divisor=config.relief_divisor,
    )
    return SimulationEngine(agents=agents, policy=policy, observers=list(observers or []))
