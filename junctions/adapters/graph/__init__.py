"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- ArcSpecGraphBuilder: Builds a graph from a textual arc specification
"""

from .arc_builder import ArcSpecGraphBuilder

__all__ = ["ArcSpecGraphBuilder"]
