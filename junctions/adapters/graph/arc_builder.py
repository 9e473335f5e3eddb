"""Arc specification graph builder adapter.

Turns a textual arc specification such as ``"AB5, BC4, CD8"`` into a
``Graph``. Each token names the source junction, the target junction
and the edge length, in that order: ``AB5`` is a road from A to B (but
not from B to A) of length 5.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List

from ...config import GraphConfig, get_config
from ...domain.errors import MalformedArcError
from ...domain.models import Arc
from ...graph.graph import Graph


@dataclass
class ArcSpecGraphBuilder:
    """Graph builder for single-letter arc specifications.

    This adapter implements GraphBuilderPort.

    Attributes:
        config: Graph configuration (node alphabet, arc separator)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)
    _pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        letters = re.escape(self.config.node_alphabet)
        self._pattern = re.compile(rf"([{letters}])([{letters}])([0-9]+)")

    def parse_arcs(self, text: str) -> List[Arc[str]]:
        """Split an arc specification into arcs.

        Args:
            text: Separator-delimited list of arc tokens.

        Returns:
            The arcs in input order.

        Raises:
            MalformedArcError: If a token does not match the arc shape.
        """
        arcs: List[Arc[str]] = []
        for raw_token in text.split(self.config.arc_separator):
            token = raw_token.strip()
            match = self._pattern.fullmatch(token)
            if match is None:
                self._logger.warning("Rejected arc", extra={"token": token})
                raise MalformedArcError(
                    f"The arc {token!r} is malformed. Arcs must take the form "
                    f"Node1Node2Weight where nodes are labeled from "
                    f"{self.config.node_alphabet!r} (eg: AB4 is a road from A "
                    f"to B, but not from B to A, with a length of 4)",
                    token=token,
                )
            source, target, weight = match.groups()
            arcs.append(Arc(source=source, target=target, weight=int(weight)))
        return arcs

    def build_from_arcs(self, arcs: Iterable[Arc[str]]) -> Graph[str]:
        """Build a graph holding every endpoint and edge of ``arcs``.

        Raises:
            NonPositiveWeightError: If an arc has a zero weight.
        """
        graph: Graph[str] = Graph()
        edges = 0
        for arc in arcs:
            graph.add_node_if_absent(arc.source).add_node_if_absent(
                arc.target
            ).add_directed_edge(arc.source, arc.target, arc.weight)
            edges += 1

        self._logger.info("Graph built", extra={"nodes": len(graph), "edges": edges})
        return graph

    def build_directed_graph(self, text: str) -> Graph[str]:
        """Parse ``text`` and build the corresponding graph.

        Raises:
            MalformedArcError: If a token does not match the arc shape.
            NonPositiveWeightError: If an arc has a zero weight.
        """
        return self.build_from_arcs(self.parse_arcs(text))
