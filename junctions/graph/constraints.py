"""Traversal constraints for counting walks between junctions.

A constraint decides two things during a walk search: how much each
traversed edge costs, and whether an accumulated cost is acceptable.
Hop constraints charge one unit per edge; the distance constraint
charges the edge weight.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..domain.models import ConstraintKind

if TYPE_CHECKING:
    from .node import Node

UNIT_COST = 1


@dataclass(frozen=True, slots=True)
class PathConstraint:
    """An immutable traversal limit.

    Build instances through the named constructors rather than directly:

        PathConstraint.max_hops(3)
        PathConstraint.exact_hops(4)
        PathConstraint.max_distance_exclusive(30)

    Attributes:
        kind: Which policy applies
        limit: Non-negative bound the accumulated cost is compared to
    """

    kind: ConstraintKind
    limit: int

    def __post_init__(self) -> None:
        """Validate the limit."""
        if self.limit < 0:
            raise ValueError(f"Constraint limit must be non-negative, got {self.limit}")

    @classmethod
    def max_hops(cls, limit: int) -> PathConstraint:
        return cls(ConstraintKind.MAX_HOPS, limit)

    @classmethod
    def exact_hops(cls, limit: int) -> PathConstraint:
        return cls(ConstraintKind.EXACT_HOPS, limit)

    @classmethod
    def max_distance_exclusive(cls, limit: int) -> PathConstraint:
        return cls(ConstraintKind.MAX_DISTANCE_EXCLUSIVE, limit)

    def traversal_cost(self, source: Node[Any], target: Node[Any]) -> int:
        """Cost of moving from ``source`` to ``target`` along their edge."""
        if self.kind is ConstraintKind.MAX_DISTANCE_EXCLUSIVE:
            return source.edge_weight(target)
        return UNIT_COST

    def is_constraint_met(self, cost: int) -> bool:
        """Check whether a walk with accumulated ``cost`` is accepted."""
        if self.kind is ConstraintKind.MAX_HOPS:
            return cost <= self.limit
        if self.kind is ConstraintKind.EXACT_HOPS:
            return cost == self.limit
        if self.kind is ConstraintKind.MAX_DISTANCE_EXCLUSIVE:
            return cost < self.limit
        raise ValueError(f"No behaviour defined for constraint kind {self.kind.name}")

    def is_cost_below_constraint(self, cost: int) -> bool:
        """Check whether a walk at ``cost`` may still be extended.

        Costs never decrease along a walk, so once the limit is reached
        no extension can be accepted.
        """
        return cost < self.limit
