"""Graph ports - Abstractions for building junction graphs.

These protocols define the contract between the graph core and the
collaborators that turn external input into graph-construction calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Protocol

if TYPE_CHECKING:
    from ..domain.models import Arc
    from ..graph.graph import Graph


class GraphBuilderPort(Protocol):
    """Port for building a graph from a textual arc specification.

    Implementation: adapters/graph/arc_builder.py
    """

    def parse_arcs(self, text: str) -> List[Arc[str]]:
        """Split an arc specification into arcs.

        Args:
            text: Separator-delimited list of arc tokens.

        Returns:
            The arcs in input order.
        """
        ...

    def build_from_arcs(self, arcs: Iterable[Arc[str]]) -> Graph[str]:
        """Build a graph holding every endpoint and edge of ``arcs``."""
        ...

    def build_directed_graph(self, text: str) -> Graph[str]:
        """Parse ``text`` and build the corresponding graph."""
        ...
