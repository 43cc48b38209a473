"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the mathgraph library.
"""

from .vertex import pyvertex
from .edge import pyedge
from .path import pypath

__all__ = [
    'pyvertex',
    'pyedge',
    'pypath',
]
