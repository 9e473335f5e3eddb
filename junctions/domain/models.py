"""Immutable domain models for the junction network.

These models have no external dependencies and are shared by the graph
core and the builders that feed it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class ConstraintKind(Enum):
    """Traversal-limiting policy used when counting walks.

    The two hop kinds count one unit per traversed edge, the distance
    kind accrues edge weights.
    """

    MAX_HOPS = auto()
    EXACT_HOPS = auto()
    MAX_DISTANCE_EXCLUSIVE = auto()


@dataclass(frozen=True, slots=True)
class Arc(Generic[T]):
    """A directed, weighted connection parsed from an arc specification.

    Attributes:
        source: Label of the junction the arc leaves from
        target: Label of the junction the arc arrives at
        weight: Length of the arc
    """

    source: T
    target: T
    weight: int

    def __str__(self) -> str:
        return f"{self.source}{self.target}{self.weight}"
