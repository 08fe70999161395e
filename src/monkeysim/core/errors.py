"""
Errors raised by the simulation engine.

Configuration problems are rejected when the engine is built, never
mid-round. The ranked metric refuses to invent a value when there are
too few agents to rank.
"""


class ConfigurationError(ValueError):
    """Invalid agent, rule, or policy configuration."""


class NotesFormatError(ConfigurationError):
    """Agent notes text could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class InsufficientAgentsError(ValueError):
    """Fewer agents than the ranked metric needs."""
