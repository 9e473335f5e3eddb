"""Top-level package for the junction network route planner.

This package exposes a generic weighted directed graph of junctions
together with the queries it answers: route lengths, shortest routes
and constrained walk counts.
"""

from .graph import Graph, PathConstraint

__all__ = ["Graph", "PathConstraint"]
