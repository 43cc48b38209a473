"""
Core graph data structures and management.

This module contains the graph container, its capability interface, the
error hierarchy and the algorithm entry points.
"""

__all__ = []
