"""
Capability surface consumed by the graph algorithms.

Any container exposing these members can be handed to the functions in
``mathgraph.core.algorithms``; the concrete ``Graph`` is one implementation.
"""

from typing import List, Protocol, runtime_checkable

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge


@runtime_checkable
class IGraph(Protocol):
    """Read access to vertices and edges keyed by ID."""

    @property
    def aVertex(self) -> List[pyvertex]:
        """All vertices, ordered by ascending ID."""
        ...

    @property
    def aEdge(self) -> List[pyedge]:
        """All edges, ordered by ascending ID."""
        ...

    def has_vertex(self, vertex_id: int) -> bool:
        ...

    def has_edge(self, edge_id: int) -> bool:
        ...

    def get_vertex_by_id(self, vertex_id: int) -> pyvertex:
        ...

    def get_edge_by_id(self, edge_id: int) -> pyedge:
        ...
