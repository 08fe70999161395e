"""
Rules that drive a single inspection.

Every agent owns exactly two immutable rules:
- an Operation that turns the old worry level into a new one
- a RoutingRule that picks the next holder from a divisibility test

The operation set is closed: AddConstant, MultiplyByConstant and Square.
Each variant is a frozen dataclass with an `apply` method, and `Operation`
is the union of the three.

A Throw is what an inspection produces: the item's new value and the index
of the agent that should receive it. The engine, not the agent, delivers it.
"""

from dataclasses import dataclass
from typing import Union

from monkeysim.core.errors import ConfigurationError


def check_int(value, what: str, minimum: int = 0) -> int:
    """Reject anything that is not an int >= minimum (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{what} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(f"{what} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class AddConstant:
    """new = old + k"""

    k: int

    def __post_init__(self):
        check_int(self.k, "AddConstant k")

    def apply(self, value: int) -> int:
        return value + self.k

    def __str__(self) -> str:
        return f"old + {self.k}"


@dataclass(frozen=True)
class MultiplyByConstant:
    """new = old * k"""

    k: int

    def __post_init__(self):
        check_int(self.k, "MultiplyByConstant k")

    def apply(self, value: int) -> int:
        return value * self.k

    def __str__(self) -> str:
        return f"old * {self.k}"


@dataclass(frozen=True)
class Square:
    """new = old * old"""

    def apply(self, value: int) -> int:
        return value * value

    def __str__(self) -> str:
        return "old * old"


Operation = Union[AddConstant, MultiplyByConstant, Square]


@dataclass(frozen=True)
class RoutingRule:
    """
    Divisibility test plus one target per outcome.

    Targets are agent indices. Whether they exist is checked by the engine,
    which is the only place that knows how many agents there are.
    """

    divisor: int
    if_true: int
    if_false: int

    def __post_init__(self):
        check_int(self.divisor, "Divisor", minimum=1)
        check_int(self.if_true, "True target")
        check_int(self.if_false, "False target")

    def test(self, value: int) -> bool:
        """True if value is divisible by the divisor."""
        return value % self.divisor == 0

    def target_for(self, value: int) -> int:
        """Index of the agent that receives an item with this worry level."""
        return self.if_true if self.test(value) else self.if_false

    @property
    def targets(self) -> tuple[int, int]:
        return self.if_true, self.if_false


@dataclass(frozen=True)
class Throw:
    """
    A routing directive emitted by one inspection.

    The engine appends `value` to the queue of agent `target`.
    """

    source: int  # Index of the inspecting agent
    target: int  # Index of the receiving agent
    value: int   # Worry level after operation and policy
