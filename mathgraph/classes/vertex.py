"""
Vertex representation for the graph container.

A vertex only carries its identity, a scalar weight, the ids of its incident
edges and an optional caller payload. Algorithm bookkeeping is never stored
on the vertex itself.
"""

import copy
import logging
from typing import Any, List, Optional, Union

logger = logging.getLogger(__name__)


class pyvertex:
    """
    Identity-bearing vertex with an optional payload.

    Attributes:
        lVertexID: Unique vertex ID assigned by the owning graph
        dWeight: Vertex cost (not used by shortest paths)
        aEdgeID: Ordered list of incident edge IDs
        pObject: Opaque caller payload owned by the vertex
    """

    def __init__(self, lVertexID: int, dWeight: float = 1.0, pObject: Any = None,
                 aEdgeID: Optional[List[int]] = None):
        """
        Initialize a vertex.

        Args:
            lVertexID: Unique vertex ID
            dWeight: Vertex cost, defaults to 1.0
            pObject: Optional payload represented by this vertex
            aEdgeID: Optional initial list of incident edge IDs
        """
        if lVertexID < 0:
            raise ValueError(f"Vertex ID must be non-negative, got {lVertexID}")
        self.lVertexID = lVertexID
        self.dWeight = dWeight
        self.pObject = pObject
        self.aEdgeID: List[int] = list(aEdgeID) if aEdgeID is not None else []

    def add_edge(self, edge_id: int):
        """Register an incident edge."""
        self.aEdgeID.append(edge_id)

    def remove_edge(self, edge_id: int) -> bool:
        """
        Unregister an incident edge.

        Returns:
            True if the edge was registered on this vertex
        """
        try:
            self.aEdgeID.remove(edge_id)
            return True
        except ValueError:
            return False

    def get_edge_count(self) -> int:
        return len(self.aEdgeID)

    def copy(self) -> 'pyvertex':
        """
        Create a value-independent copy.

        The copy owns its own edge list and a deep copy of the payload.
        """
        return pyvertex(self.lVertexID, self.dWeight,
                        pObject=copy.deepcopy(self.pObject),
                        aEdgeID=self.aEdgeID)

    def close(self):
        """Release the payload if it holds resources."""
        pClose = getattr(self.pObject, 'close', None)
        if callable(pClose):
            logger.debug(f"Closing payload of vertex {self.lVertexID}")
            pClose()

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self.lVertexID == other.lVertexID

    def __hash__(self):
        return hash(self.lVertexID)

    def __repr__(self):
        return f"V{self.lVertexID}, #Edges: {len(self.aEdgeID)}"


def to_vertex_id(vertex: Union[pyvertex, int]) -> int:
    """Accept either a vertex object or a bare vertex ID."""
    if isinstance(vertex, pyvertex):
        return vertex.lVertexID
    return vertex
