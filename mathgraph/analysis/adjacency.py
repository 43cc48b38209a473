"""
Adjacency matrix construction.
"""

import logging
from typing import Dict, List

import numpy as np

from ..core.interface import IGraph

logger = logging.getLogger(__name__)


class AdjacencyBuilder:
    """
    Builds edge multiplicity matrices.

    Rows and columns follow the ascending vertex IDs. Each edge adds one to
    both of its symmetric cells regardless of direction, so parallel edges
    give entries above 1 and a self-loop adds 2 to its diagonal cell.
    """

    def __init__(self, graph: IGraph):
        """
        Initialize the builder.

        Args:
            graph: Graph to describe
        """
        self.graph = graph

    def get_vertex_order(self) -> List[int]:
        """Vertex IDs in matrix row order."""
        return sorted(pVertex.lVertexID for pVertex in self.graph.aVertex)

    def compute_adjacency_matrix(self) -> np.ndarray:
        """
        Compute the symmetric edge multiplicity matrix.

        Returns:
            Square float64 array of shape (|V|, |V|)
        """
        aVertexID = self.get_vertex_order()
        id_to_index: Dict[int, int] = {lID: iIndex for iIndex, lID in enumerate(aVertexID)}
        nVertex = len(aVertexID)
        aAdjacency = np.zeros((nVertex, nVertex), dtype=np.float64)

        for pEdge in self.graph.aEdge:
            iIndex_start = id_to_index[pEdge.lVertexID_start]
            iIndex_end = id_to_index[pEdge.lVertexID_end]
            aAdjacency[iIndex_start, iIndex_end] += 1
            aAdjacency[iIndex_end, iIndex_start] += 1

        logger.debug(f"Computed {nVertex}x{nVertex} adjacency matrix")
        return aAdjacency
