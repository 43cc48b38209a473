"""
Graph analysis modules.

This module contains classes for shortest paths, connectivity, strongly
connected components and cycle detection.
"""

__all__ = []
