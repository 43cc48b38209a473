"""
Query object over one completed shortest path computation.
"""

import logging
import math
from typing import Dict, List, Mapping, Union

from ..classes.vertex import pyvertex, to_vertex_id
from ..classes.edge import pyedge
from ..classes.path import pypath
from ..core.interface import IGraph
from ..core.exceptions import UnreachableTargetError, VertexNotFoundError

logger = logging.getLogger(__name__)


class ShortestPathLookup:
    """
    Shortest paths from one source vertex, reconstructed on demand.

    The lookup keeps a reference to the graph it was computed on, because path
    reconstruction re-reads edge weights from it. Mutating the graph before
    querying paths gives undefined results.
    """

    def __init__(self, graph: IGraph, source: pyvertex,
                 backtrace_map: Mapping[int, int],
                 path_lengths: Mapping[int, float]):
        """
        Initialize the lookup.

        Args:
            graph: Graph the shortest paths were computed on
            source: Source vertex
            backtrace_map: Mapping target vertex ID -> predecessor vertex ID
            path_lengths: Mapping vertex ID -> shortest distance from source
        """
        self._graph = graph
        self._source = source
        self._backtrace_map: Dict[int, int] = dict(backtrace_map)
        self._path_lengths: Dict[int, float] = dict(path_lengths)

    @property
    def source(self) -> pyvertex:
        return self._source

    def get_source_id(self) -> int:
        return self._source.lVertexID

    def is_reachable(self, target: Union[pyvertex, int]) -> bool:
        return to_vertex_id(target) in self._path_lengths

    def get_reachable_vertex_ids(self) -> List[int]:
        """IDs of all vertices with a finite distance, source included."""
        return sorted(self._path_lengths)

    def path_length_to(self, target: Union[pyvertex, int]) -> float:
        """
        Get the shortest distance from the source.

        Args:
            target: Target vertex or vertex ID

        Returns:
            Shortest distance, or positive infinity if the target was not reached
        """
        return self._path_lengths.get(to_vertex_id(target), math.inf)

    def path_to(self, target: Union[pyvertex, int]) -> pypath:
        """
        Reconstruct the shortest path from the source to a target.

        For each step the lightest edge that can be walked from the predecessor
        to the next vertex is chosen, ties going to the lowest edge ID. On a
        multigraph this need not be the edge used during relaxation, but its
        weight is never larger.

        Args:
            target: Target vertex or vertex ID

        Returns:
            Path from source to target, empty if target is the source

        Raises:
            VertexNotFoundError: If the target is not in the graph
            UnreachableTargetError: If the source cannot reach the target
        """
        lVertexID_source = self._source.lVertexID
        lVertexID_target = to_vertex_id(target)
        if lVertexID_target == lVertexID_source:
            return pypath(lVertexID_source)
        if not self._graph.has_vertex(lVertexID_target):
            raise VertexNotFoundError(f"Target vertex {lVertexID_target} not found in graph")
        if lVertexID_target not in self._backtrace_map:
            raise UnreachableTargetError(
                f"Vertex {lVertexID_target} is not reachable from vertex {lVertexID_source}")

        aEdge: List[pyedge] = []
        lVertexID_current = lVertexID_target
        while lVertexID_current != lVertexID_source:
            lVertexID_previous = self._backtrace_map[lVertexID_current]
            aEdge.append(self._find_lightest_edge(lVertexID_previous, lVertexID_current))
            lVertexID_current = lVertexID_previous
        aEdge.reverse()

        logger.debug(f"Reconstructed path {lVertexID_source} -> {lVertexID_target} with {len(aEdge)} edges")
        return pypath(lVertexID_source, aEdge)

    def _find_lightest_edge(self, vertex_from_id: int, vertex_to_id: int) -> pyedge:
        pVertex_to = self._graph.get_vertex_by_id(vertex_to_id)
        aEdge_candidate = []
        for lEdgeID in pVertex_to.aEdgeID:
            pEdge = self._graph.get_edge_by_id(lEdgeID)
            if pEdge.get_other_vertex_id(vertex_to_id) == vertex_from_id \
                    and pEdge.is_traversable_from(vertex_from_id):
                aEdge_candidate.append(pEdge)
        if not aEdge_candidate:
            raise UnreachableTargetError(
                f"No edge from vertex {vertex_from_id} to vertex {vertex_to_id}; graph changed after the search?")
        return min(aEdge_candidate, key=lambda pEdge: (pEdge.dWeight, pEdge.lEdgeID))

    def __repr__(self):
        return f"ShortestPathLookup(source=V{self._source.lVertexID}, #Reached: {len(self._path_lengths)})"
