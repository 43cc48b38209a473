"""
Edge representation connecting two vertices.
"""

import copy
from typing import Any


class pyedge:
    """
    Edge between a start and an end vertex.

    Directed edges are traversed only from the start vertex to the end vertex,
    undirected edges both ways.

    Attributes:
        lEdgeID: Unique edge ID assigned by the owning graph
        lVertexID_start: ID of the first endpoint
        lVertexID_end: ID of the second endpoint
        dWeight: Signed edge weight
        iFlag_directed: Whether the edge is directed
        pObject: Opaque caller payload
    """

    def __init__(self, lEdgeID: int, lVertexID_start: int, lVertexID_end: int,
                 dWeight: float = 1.0, iFlag_directed: bool = False, pObject: Any = None):
        if lEdgeID < 0:
            raise ValueError(f"Edge ID must be non-negative, got {lEdgeID}")
        self.lEdgeID = lEdgeID
        self.lVertexID_start = lVertexID_start
        self.lVertexID_end = lVertexID_end
        self.dWeight = dWeight
        self.iFlag_directed = bool(iFlag_directed)
        self.pObject = pObject

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id == self.lVertexID_start or vertex_id == self.lVertexID_end

    def get_other_vertex_id(self, vertex_id: int) -> int:
        """
        Get the endpoint opposite to the given one.

        Args:
            vertex_id: ID of one endpoint

        Returns:
            ID of the other endpoint (the same ID for a self-loop)
        """
        if vertex_id == self.lVertexID_start:
            return self.lVertexID_end
        if vertex_id == self.lVertexID_end:
            return self.lVertexID_start
        raise ValueError(f"Vertex {vertex_id} is not an endpoint of edge {self.lEdgeID}")

    def is_traversable_from(self, vertex_id: int) -> bool:
        """Check whether the edge can be walked starting at the given vertex."""
        if vertex_id == self.lVertexID_start:
            return True
        return not self.iFlag_directed and vertex_id == self.lVertexID_end

    def is_self_loop(self) -> bool:
        return self.lVertexID_start == self.lVertexID_end

    def copy(self) -> 'pyedge':
        """Create a value-independent copy, payload included."""
        return pyedge(self.lEdgeID, self.lVertexID_start, self.lVertexID_end,
                      dWeight=self.dWeight,
                      iFlag_directed=self.iFlag_directed,
                      pObject=copy.deepcopy(self.pObject))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, pyedge):
            return NotImplemented
        return self.lEdgeID == other.lEdgeID

    def __hash__(self):
        return hash(self.lEdgeID)

    def __repr__(self):
        sArrow = '->' if self.iFlag_directed else '--'
        return f"E{self.lEdgeID}: V{self.lVertexID_start} {sArrow} V{self.lVertexID_end} ({self.dWeight})"
