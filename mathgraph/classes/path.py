"""
Path representation produced by shortest path reconstruction.
"""

from typing import Iterator, List, Optional

from .edge import pyedge


class pypath:
    """
    Ordered sequence of edges walked from a source vertex.

    A path whose target is its own source holds no edges.
    """

    def __init__(self, lVertexID_source: int, aEdge: Optional[List[pyedge]] = None):
        """
        Initialize a path.

        Args:
            lVertexID_source: ID of the vertex the path starts at
            aEdge: Edges in walking order, source to target
        """
        self.lVertexID_source = lVertexID_source
        self.aEdge: List[pyedge] = list(aEdge) if aEdge is not None else []

    def get_vertex_ids(self) -> List[int]:
        """
        Get the vertex IDs visited by the path.

        Returns:
            List of vertex IDs from source to target, source included
        """
        aVertexID = [self.lVertexID_source]
        for pEdge in self.aEdge:
            aVertexID.append(pEdge.get_other_vertex_id(aVertexID[-1]))
        return aVertexID

    def get_target_id(self) -> int:
        return self.get_vertex_ids()[-1]

    def get_length(self) -> float:
        """Sum of the edge weights along the path."""
        return float(sum(pEdge.dWeight for pEdge in self.aEdge))

    def get_edge_count(self) -> int:
        return len(self.aEdge)

    def is_empty(self) -> bool:
        return not self.aEdge

    def __len__(self) -> int:
        return len(self.aEdge)

    def __iter__(self) -> Iterator[pyedge]:
        return iter(self.aEdge)

    def __repr__(self):
        return f"pypath({' -> '.join(f'V{lID}' for lID in self.get_vertex_ids())})"
