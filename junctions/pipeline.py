"""High-level pipeline for answering route questions on a junction network.

The pipeline is organized in three stages:

1. Input acquisition (arc specification from the command line or a file).
2. Graph construction through the arc specification builder.
3. Query answering, producing one ``Output #N`` line per question.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from pydantic import ValidationError

from .adapters.graph import ArcSpecGraphBuilder
from .config import AppConfig, get_config
from .domain.errors import ConfigurationError, JunctionGraphError, UnknownNodeError
from .graph import Graph, PathConstraint
from .ports.graph import GraphBuilderPort

NO_SUCH_ROUTE = "NO SUCH ROUTE"

Query = Callable[[Graph[str]], Optional[int]]

STANDARD_QUERIES: List[Query] = [
    lambda g: g.find_route_distance(["A", "B", "C"]),
    lambda g: g.find_route_distance(["A", "D"]),
    lambda g: g.find_route_distance(["A", "D", "C"]),
    lambda g: g.find_route_distance(["A", "E", "B", "C", "D"]),
    lambda g: g.find_route_distance(["A", "E", "D"]),
    lambda g: g.paths_between("C", "C", PathConstraint.max_hops(3)),
    lambda g: g.paths_between("A", "C", PathConstraint.exact_hops(4)),
    lambda g: g.find_shortest_route_length("A", "C"),
    lambda g: g.find_shortest_route_length("B", "B"),
    lambda g: g.paths_between("C", "C", PathConstraint.max_distance_exclusive(30)),
]

logger = logging.getLogger(__name__)


def solve_standard_queries(graph: Graph[str]) -> List[str]:
    """Answer the ten standard questions about ``graph``.

    A question that refers to a junction missing from the graph, or whose
    route does not exist, is answered with ``NO SUCH ROUTE``.
    """
    lines: List[str] = []
    for number, query in enumerate(STANDARD_QUERIES, start=1):
        try:
            answer = query(graph)
        except UnknownNodeError as exc:
            logger.debug(
                "Unknown junction in query",
                extra={"query": number, "label": exc.label},
            )
            answer = None
        value = NO_SUCH_ROUTE if answer is None else str(answer)
        lines.append(f"Output #{number}: {value}")
    return lines


def load_config() -> AppConfig:
    """Load the configuration, reporting invalid settings as a domain error."""
    try:
        return get_config()
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid configuration",
            setting_name=", ".join(
                ".".join(str(part) for part in err["loc"]) for err in exc.errors()
            ),
            cause=exc,
        ) from exc


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="junctions",
        description="Answer route questions on a directed junction network.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "arcs",
        nargs="?",
        help='Arc specification, e.g. "AB5, BC4, CD8"',
    )
    source.add_argument(
        "--file",
        type=Path,
        help="Path to a text file holding the arc specification",
    )
    return parser


def run_pipeline(argv: Optional[Sequence[str]] = None) -> int:
    """Build the graph described on the command line and print the answers.

    Returns the process exit code.
    """
    args = _build_arg_parser().parse_args(argv)

    try:
        config = load_config()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.observability.level,
        format=config.observability.format,
    )

    try:
        text = args.file.read_text(encoding="utf-8") if args.file else args.arcs
    except OSError as exc:
        print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    builder: GraphBuilderPort = ArcSpecGraphBuilder(config.graph)
    try:
        graph = builder.build_directed_graph(text)
    except JunctionGraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in solve_standard_queries(graph):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(run_pipeline())
