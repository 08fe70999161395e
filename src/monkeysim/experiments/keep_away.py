"""
The two standard keep-away scenarios.

- Relief: 20 rounds, worry divided by 3 after each inspection
- Containment: 10000 rounds, worry kept modulo the LCM of all divisors

Every call builds a fresh engine, so runs never share state.
"""

from __future__ import annotations
from typing import Sequence

from monkeysim.core.agent import AgentConfig
from monkeysim.core.engine import SimulationConfig, create_engine
from monkeysim.notes import parse_notes


EXAMPLE_NOTES = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def run_relief(configs: Sequence[AgentConfig], n_rounds: int = 20) -> int:
    """Monkey business after `n_rounds` with relief."""
    config = SimulationConfig(n_rounds=n_rounds, worry_mode="relief")
    return create_engine(configs, config).run(config.n_rounds, top=config.top_n)


def run_containment(configs: Sequence[AgentConfig], n_rounds: int = 10000) -> int:
    """Monkey business after `n_rounds` with modular containment."""
    config = SimulationConfig(n_rounds=n_rounds, worry_mode="containment")
    return create_engine(configs, config).run(config.n_rounds, top=config.top_n)


def solve(text: str) -> tuple[int, int]:
    """Both scenarios for the notes in `text`."""
    configs = parse_notes(text)
    return run_relief(configs), run_containment(configs)
