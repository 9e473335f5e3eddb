"""Graph core for the junction network.

This subpackage contains the generic graph data structure together
with the shortest-route and walk-counting algorithms built on it.
"""

from .constraints import PathConstraint
from .graph import Graph
from .node import INFINITY, DistanceTable, Node

__all__ = ["Graph", "Node", "DistanceTable", "INFINITY", "PathConstraint"]
