"""Typed domain errors for the junction network.

Every failure of a graph operation is reported through one of these
errors so callers can tell an unknown junction apart from a malformed
arc or an invalid weight.

All errors inherit from JunctionGraphError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class JunctionGraphError(Exception):
    """Base error for the junction network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NonPositiveWeightError(JunctionGraphError):
    """An edge weight of zero or less was supplied.

    Attributes:
        weight: The rejected weight
    """

    weight: int = 0


@dataclass
class InvalidLabelError(JunctionGraphError):
    """A node was requested without a label."""


@dataclass
class UnknownNodeError(JunctionGraphError):
    """No node exists for the given label.

    Attributes:
        label: The label that was not found
    """

    label: Any = None


@dataclass
class MalformedArcError(JunctionGraphError):
    """An arc token does not have the SourceTargetWeight shape.

    Attributes:
        token: The offending token, already trimmed
    """

    token: str = ""


@dataclass
class ConfigurationError(JunctionGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
