"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to its input formats.
"""
