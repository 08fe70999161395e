"""
Worry policies bound an item's value after each inspection.

Two policies are used by real runs, selected once per run:
- ReliefPolicy: floor division by 3 (short runs, values stay small)
- ModularPolicy: reduction modulo M, the LCM of every divisor (long runs)

Reducing modulo M never changes a routing decision: for every divisor d,
M is a multiple of d, so (v mod M) mod d == v mod d.

UnboundedPolicy leaves values untouched. It exists so analysis code can
compute the true worry levels and check the claim above; values grow
without bound under it, so only use it for a handful of rounds.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from math import gcd
from typing import Iterable, Literal, Protocol

from monkeysim.core.errors import ConfigurationError


WorryMode = Literal["relief", "containment"]


class WorryPolicy(Protocol):
    """Protocol for worry policies."""

    @property
    def mode(self) -> str:
        """Short name of the policy, used in logs and summaries."""
        ...

    def relieve(self, value: int) -> int:
        """
        Bound a freshly transformed worry level.

        Args:
            value: Worry level after the agent's operation

        Returns:
            The value that is tested and thrown
        """
        ...


@dataclass(frozen=True)
class ReliefPolicy:
    """Relief after inspection: worry level is divided by `divisor`, rounded down."""

    divisor: int = 3

    def __post_init__(self):
        if self.divisor < 1:
            raise ConfigurationError(f"Relief divisor must be positive, got {self.divisor}")

    @property
    def mode(self) -> str:
        return "relief"

    def relieve(self, value: int) -> int:
        return value // self.divisor


@dataclass(frozen=True)
class ModularPolicy:
    """
    No relief: worry level is kept modulo `modulus`.

    The modulus must be a common multiple of every routing divisor in the
    run, otherwise routing decisions change. The engine checks this.
    """

    modulus: int

    def __post_init__(self):
        if self.modulus < 1:
            raise ConfigurationError(f"Modulus must be positive, got {self.modulus}")

    @property
    def mode(self) -> str:
        return "containment"

    def relieve(self, value: int) -> int:
        return value % self.modulus


@dataclass(frozen=True)
class UnboundedPolicy:
    """No relief and no reduction."""

    @property
    def mode(self) -> str:
        return "unbounded"

    def relieve(self, value: int) -> int:
        return value


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    return a * b // gcd(a, b)


def lcm_of(divisors: Iterable[int]) -> int:
    """
    LCM of a set of divisors, reduced pairwise left to right.

    Raises:
        ConfigurationError: if the set is empty or holds a non-positive value
    """
    values = list(divisors)
    if not values:
        raise ConfigurationError("Cannot take the LCM of an empty divisor set")
    for d in values:
        if d < 1:
            raise ConfigurationError(f"Divisors must be positive, got {d}")
    return reduce(lcm, values)


def create_policy(
    mode: WorryMode,
    divisors: Iterable[int],
    relief_divisor: int = 3,
) -> ReliefPolicy | ModularPolicy:
    """
    Factory for the worry policy of a run.

    The mode is chosen first; the modulus is only computed for containment.

    Args:
        mode: "relief" or "containment"
        divisors: Routing divisors of every agent in the run
        relief_divisor: Divisor used by relief mode

    Returns:
        ReliefPolicy or ModularPolicy
    """
    if mode == "relief":
        return ReliefPolicy(divisor=relief_divisor)
    if mode == "containment":
        return ModularPolicy(modulus=lcm_of(divisors))
    raise ConfigurationError(f"Unknown worry mode: {mode!r}")
