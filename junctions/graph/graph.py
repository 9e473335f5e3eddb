"""Weighted directed graph of junctions and the queries it answers.

The graph is generic over its label type: any hashable value can name
a junction. Three queries are supported:

1. The length of a literal route (``route_distance``).
2. The length of the shortest route between two junctions, or of the
   shortest cycle when both are the same (``shortest_route_length``).
3. The number of walks between two junctions under a
   ``PathConstraint`` (``paths_between``).

Route and shortest-route lengths use 0 to mean "no such route". The
``find_*`` variants return ``None`` instead for callers that need to
tell the two apart.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Dict, Generic, Hashable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..domain.errors import InvalidLabelError, NonPositiveWeightError, UnknownNodeError
from .constraints import PathConstraint
from .node import DistanceTable, Node

T = TypeVar("T", bound=Hashable)

logger = logging.getLogger(__name__)


class Graph(Generic[T]):
    """A mutable collection of junctions joined by directed, positive edges.

    Mutation methods return the graph itself so construction can be
    chained:

        graph = Graph().add_node_if_absent("A").add_node_if_absent("B")
        graph.add_directed_edge("A", "B", 5)
    """

    def __init__(self) -> None:
        self._nodes: Dict[T, Node[T]] = {}

    def add_node_if_absent(self, label: Optional[T]) -> Graph[T]:
        """Add a junction for ``label`` unless one already exists.

        Raises:
            InvalidLabelError: If ``label`` is None.
        """
        if label is None:
            raise InvalidLabelError("Please provide a non-null node label")
        if label not in self._nodes:
            self._nodes[label] = Node(label)
        return self

    def add_directed_edge(self, source: T, target: T, weight: int) -> Graph[T]:
        """Add or overwrite the edge ``source -> target``.

        Raises:
            NonPositiveWeightError: If ``weight`` is zero or negative.
            UnknownNodeError: If either label has no junction.
        """
        if weight <= 0:
            raise NonPositiveWeightError(
                f"Only positive (>0) edge weights are supported, got {weight}",
                weight=weight,
            )
        self._node_for(source).add_directed_edge(self._node_for(target), weight)
        return self

    def labels(self) -> List[T]:
        return list(self._nodes)

    def edge_with_weight_exists(self, source: T, target: T, weight: int) -> bool:
        """Check that the edge ``source -> target`` exists with ``weight``."""
        source_node = self._node_for(source)
        target_node = self._node_for(target)
        return (
            source_node.is_connected_to(target_node)
            and source_node.edge_weight(target_node) == weight
        )

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return iter(self._nodes)

    def route_distance(self, route: Sequence[T]) -> int:
        """Sum the edge weights along ``route``.

        Returns 0 when two consecutive junctions are not connected, and
        for routes with fewer than two junctions.

        Raises:
            UnknownNodeError: If any label of the route has no junction.
        """
        distance = self.find_route_distance(route)
        return distance if distance is not None else 0

    def find_route_distance(self, route: Sequence[T]) -> Optional[int]:
        """Like ``route_distance`` but returns None for a broken route."""
        nodes = [self._node_for(label) for label in route]

        total = 0
        for current, following in zip(nodes, nodes[1:]):
            if not current.is_connected_to(following):
                logger.debug(
                    "Route broken",
                    extra={"source": current.label, "target": following.label},
                )
                return None
            total += current.edge_weight(following)
        return total

    def shortest_route_length(self, source: T, target: T) -> int:
        """Length of the shortest route from ``source`` to ``target``.

        When ``source`` equals ``target`` this is the length of the
        shortest cycle through it. Returns 0 if no route exists.

        Raises:
            UnknownNodeError: If either label has no junction.
        """
        length = self.find_shortest_route_length(source, target)
        return length if length is not None else 0

    def find_shortest_route_length(self, source: T, target: T) -> Optional[int]:
        """Like ``shortest_route_length`` but returns None when unreachable."""
        source_node = self._node_for(source)
        target_node = self._node_for(target)
        distances = self._dijkstra(source_node, cycle=source_node == target_node)

        if not distances.is_finite(target_node):
            return None
        length = distances.get(target_node)
        # A source that never got back to itself keeps its initial 0.
        if length == 0:
            return None
        return int(length)

    def paths_between(self, source: T, target: T, constraint: PathConstraint) -> int:
        """Count the walks from ``source`` to ``target`` allowed by ``constraint``.

        Walks may revisit junctions and edges. A walk is counted each
        time it stands on ``target`` with a positive accumulated cost
        that meets the constraint, and it is only extended while its
        cost is below the constraint limit.

        Raises:
            UnknownNodeError: If either label has no junction.
        """
        source_node = self._node_for(source)
        target_node = self._node_for(target)

        count = 0
        stack: List[Tuple[Node[T], int]] = [(source_node, 0)]
        while stack:
            node, cost = stack.pop()
            if node == target_node and cost > 0 and constraint.is_constraint_met(cost):
                count += 1
            if not constraint.is_cost_below_constraint(cost):
                continue
            for adjacent in node.adjacent_nodes():
                stack.append((adjacent, cost + constraint.traversal_cost(node, adjacent)))

        logger.debug(
            "Counted walks",
            extra={
                "source": source,
                "target": target,
                "constraint": constraint.kind.name,
                "limit": constraint.limit,
                "walks": count,
            },
        )
        return count

    def _node_for(self, label: T) -> Node[T]:
        node = self._nodes.get(label)
        if node is None:
            raise UnknownNodeError(
                f"Node {label} does not exist in the graph",
                label=label,
            )
        return node

    def _dijkstra(self, source: Node[T], cycle: bool) -> DistanceTable[T]:
        """Single-source shortest distances over positive weights.

        With ``cycle`` set, the source's own distance of 0 may be
        replaced by the first route found back to it, and then improved
        like any other distance, which yields the shortest cycle.
        """
        distances: DistanceTable[T] = DistanceTable(self._nodes.values())
        distances.set(source, 0)

        # The counter breaks ties so nodes themselves are never compared.
        counter = itertools.count()
        heap: List[Tuple[int, int, Node[T]]] = [(0, next(counter), source)]

        while heap:
            current_distance, _, node = heapq.heappop(heap)
            if current_distance != distances.get(node):
                continue

            for adjacent, weight in node.edges.items():
                new_distance = current_distance + weight
                known = distances.get(adjacent)
                if new_distance < known or (cycle and known == 0):
                    distances.set(adjacent, new_distance)
                    heapq.heappush(heap, (new_distance, next(counter), adjacent))

        return distances
