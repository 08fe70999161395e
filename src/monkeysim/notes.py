"""
Notes: read the textual agent notes into AgentConfigs.

One blank-line separated block per agent:

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3

Only this format is understood. Anything else is a NotesFormatError that
names the offending line.
"""

from __future__ import annotations
from pathlib import Path
import re

from monkeysim.core.agent import AgentConfig
from monkeysim.core.errors import ConfigurationError, NotesFormatError
from monkeysim.core.rules import AddConstant, MultiplyByConstant, Operation, RoutingRule, Square


HEADER_RE = re.compile(r"^Monkey (\d+):$")
ITEMS_RE = re.compile(r"^Starting items:(.*)$")
OPERATION_RE = re.compile(r"^Operation: new = (.+)$")
TEST_RE = re.compile(r"^Test: divisible by (\d+)$")
TARGET_RE = re.compile(r"^If (true|false): throw to monkey (\d+)$")
EXPRESSION_RE = re.compile(r"^old\s*([+*])\s*(old|\d+)$")


def parse_operation(expression: str) -> Operation:
    """
    Parse the right-hand side of an operation line.

    "old + 6" -> AddConstant(6), "old * 19" -> MultiplyByConstant(19),
    "old * old" -> Square().
    """
    match = EXPRESSION_RE.match(expression.strip())
    if match is None:
        raise NotesFormatError(f"Unsupported operation: {expression.strip()!r}")

    operator, operand = match.groups()
    if operand == "old":
        if operator == "*":
            return Square()
        raise NotesFormatError(f"Unsupported operation: {expression.strip()!r}")
    if operator == "+":
        return AddConstant(int(operand))
    return MultiplyByConstant(int(operand))


def _parse_items(text: str, line_number: int) -> list[int]:
    text = text.strip()
    if not text:
        return []
    try:
        return [int(part) for part in text.split(",")]
    except ValueError:
        raise NotesFormatError(f"Bad starting items: {text!r}", line_number) from None


def _expect(pattern: re.Pattern, lines: list[tuple[int, str]], pos: int, what: str) -> re.Match:
    if pos >= len(lines):
        last_line = lines[-1][0] if lines else None
        raise NotesFormatError(f"Missing {what}", last_line)
    line_number, line = lines[pos]
    match = pattern.match(line)
    if match is None:
        raise NotesFormatError(f"Expected {what}, got {line!r}", line_number)
    return match


def _parse_block(lines: list[tuple[int, str]], position: int) -> AgentConfig:
    header = _expect(HEADER_RE, lines, 0, "'Monkey N:' header")
    if int(header.group(1)) != position:
        raise NotesFormatError(
            f"Monkey {header.group(1)} listed at position {position}", lines[0][0]
        )

    items = _parse_items(_expect(ITEMS_RE, lines, 1, "starting items").group(1), lines[1][0])
    expression = _expect(OPERATION_RE, lines, 2, "operation").group(1)
    divisor = int(_expect(TEST_RE, lines, 3, "divisibility test").group(1))

    targets = {}
    for pos in (4, 5):
        outcome, target = _expect(TARGET_RE, lines, pos, "throw target").groups()
        targets[outcome] = int(target)
    if set(targets) != {"true", "false"}:
        raise NotesFormatError("Need one 'If true' and one 'If false' line", lines[4][0])

    if len(lines) > 6:
        raise NotesFormatError(f"Unexpected line {lines[6][1]!r}", lines[6][0])

    try:
        operation = parse_operation(expression)
        routing = RoutingRule(divisor, targets["true"], targets["false"])
        return AgentConfig(items=items, operation=operation, routing=routing)
    except NotesFormatError as e:
        raise NotesFormatError(str(e), lines[2][0]) from None
    except ConfigurationError as e:
        raise NotesFormatError(str(e), lines[0][0]) from None


def parse_notes(text: str) -> list[AgentConfig]:
    """
    Parse agent notes.

    Args:
        text: Notes with one block per agent, blocks separated by blank lines

    Returns:
        AgentConfigs in index order
    """
    blocks: list[list[tuple[int, str]]] = []
    current: list[tuple[int, str]] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if line:
            current.append((line_number, line))
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)

    if not blocks:
        raise NotesFormatError("Notes contain no agents")

    return [_parse_block(block, position) for position, block in enumerate(blocks)]


def load_notes(path: str | Path) -> list[AgentConfig]:
    """Read and parse a notes file."""
    return parse_notes(Path(path).read_text(encoding="utf-8"))
