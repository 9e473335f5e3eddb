"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and external
collaborators such as arc specification parsers.
"""

from .graph import GraphBuilderPort

__all__ = ["GraphBuilderPort"]
