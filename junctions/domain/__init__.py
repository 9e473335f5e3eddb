"""Domain layer - Core value types and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    InvalidLabelError,
    JunctionGraphError,
    MalformedArcError,
    NonPositiveWeightError,
    UnknownNodeError,
)
from .models import Arc, ConstraintKind

__all__ = [
    # Models
    "Arc",
    "ConstraintKind",
    # Errors
    "JunctionGraphError",
    "NonPositiveWeightError",
    "InvalidLabelError",
    "UnknownNodeError",
    "MalformedArcError",
    "ConfigurationError",
]
