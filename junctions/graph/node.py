"""Junction nodes and the per-query distance table used by Dijkstra."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Iterable, Iterator, Mapping, TypeVar, Union

T = TypeVar("T", bound=Hashable)

# Distance of a node the search has not reached yet.
INFINITY = math.inf

Distance = Union[int, float]


class Node(Generic[T]):
    """A labeled junction and its outgoing, weighted edges.

    Two nodes are equal when their labels are equal, so a node can be
    used as a dictionary key interchangeably with any other node that
    carries the same label.
    """

    __slots__ = ("_label", "_edges")

    def __init__(self, label: T) -> None:
        self._label = label
        self._edges: Dict[Node[T], int] = {}

    @property
    def label(self) -> T:
        return self._label

    @property
    def edges(self) -> Mapping[Node[T], int]:
        return MappingProxyType(self._edges)

    def add_directed_edge(self, target: Node[T], weight: int) -> None:
        """Record an edge to ``target``, replacing any previous weight.

        The weight is not validated here; Graph rejects non-positive
        weights before calling this.
        """
        self._edges[target] = weight

    def is_connected_to(self, target: Node[T]) -> bool:
        return target in self._edges

    def edge_weight(self, target: Node[T]) -> int:
        """Return the weight of the edge to ``target``, or 0 if there is none."""
        return self._edges.get(target, 0)

    def adjacent_nodes(self) -> Iterator[Node[T]]:
        return iter(self._edges)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        return self._label == other._label

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return f"Node({self._label!r})"


class DistanceTable(Generic[T]):
    """Best known distance from the source for each node of one query.

    A table is created for a single shortest-route computation and thrown
    away afterwards, so no distance survives from one query to the next.
    """

    __slots__ = ("_distances",)

    def __init__(self, nodes: Iterable[Node[T]] = ()) -> None:
        self._distances: Dict[Node[T], Distance] = {}
        for node in nodes:
            self.reset(node)

    def reset(self, node: Node[T]) -> None:
        self._distances[node] = INFINITY

    def set(self, node: Node[T], distance: int) -> None:
        self._distances[node] = distance

    def get(self, node: Node[T]) -> Distance:
        return self._distances.get(node, INFINITY)

    def is_finite(self, node: Node[T]) -> bool:
        return self.get(node) < INFINITY
