"""
Core graph data structure.

This module provides the mutable graph container without any algorithms.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from .exceptions import (
    DuplicateIdError,
    EdgeNotFoundError,
    InvalidGraphInputError,
    VertexNotFoundError,
)

logger = logging.getLogger(__name__)

MAX_VERTEX_ID = 2 ** 32 - 1
MAX_EDGE_ID = 2 ** 64 - 1


class Graph:
    """
    Mutable graph of vertices and edges keyed by stable numeric IDs.

    This class manages the fundamental graph representation without algorithms.
    It provides:
    - Vertex and edge ID management
    - Structural mutation (add/remove vertex or edge)
    - Lookup and membership queries

    Every mutation keeps two invariants before it returns: each edge's
    endpoints are vertices of this graph, and each vertex's ``aEdgeID`` lists
    exactly the edges that reference it.

    IDs are allocated from per-graph monotonic counters starting at 0. An
    explicit ID may be supplied instead; it must be unused, and the counter
    moves past it. Removed IDs are never handed out again by the counters.
    """

    def __init__(self, aVertex: Optional[Iterable[pyvertex]] = None,
                 aEdge: Optional[Iterable[pyedge]] = None):
        """
        Initialize the graph from existing entities.

        The graph adopts the given objects. Vertices must not list any edges
        yet; their edge lists are filled from the given edges.

        Args:
            aVertex: Optional vertices to adopt
            aEdge: Optional edges to adopt, endpoints must be among aVertex
        """
        # Vertex mappings
        self.id_to_vertex: Dict[int, pyvertex] = {}
        self.lVertexID_next = 0

        # Edge mappings
        self.id_to_edge: Dict[int, pyedge] = {}
        self.lEdgeID_next = 0

        for pVertex in aVertex or []:
            self.insert_vertex(pVertex)
        for pEdge in aEdge or []:
            self.insert_edge(pEdge)

        logger.debug(f"Built graph with {len(self.id_to_vertex)} vertices and {len(self.id_to_edge)} edges")

    # ========================================================================
    # CAPABILITY SURFACE
    # ========================================================================

    @property
    def aVertex(self) -> List[pyvertex]:
        """All vertices ordered by ascending ID."""
        return [self.id_to_vertex[lID] for lID in sorted(self.id_to_vertex)]

    @property
    def aEdge(self) -> List[pyedge]:
        """All edges ordered by ascending ID."""
        return [self.id_to_edge[lID] for lID in sorted(self.id_to_edge)]

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self.id_to_vertex

    def has_edge(self, edge_id: int) -> bool:
        return edge_id in self.id_to_edge

    def get_vertex_by_id(self, vertex_id: int) -> pyvertex:
        """
        Get a vertex by its ID.

        Args:
            vertex_id: Vertex ID

        Returns:
            The vertex object

        Raises:
            VertexNotFoundError: If no vertex has this ID
        """
        try:
            return self.id_to_vertex[vertex_id]
        except KeyError:
            raise VertexNotFoundError(f"Vertex {vertex_id} not found in graph") from None

    def get_edge_by_id(self, edge_id: int) -> pyedge:
        """
        Get an edge by its ID.

        Args:
            edge_id: Edge ID

        Returns:
            The edge object

        Raises:
            EdgeNotFoundError: If no edge has this ID
        """
        try:
            return self.id_to_edge[edge_id]
        except KeyError:
            raise EdgeNotFoundError(f"Edge {edge_id} not found in graph") from None

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_vertex_count(self) -> int:
        return len(self.id_to_vertex)

    def get_edge_count(self) -> int:
        return len(self.id_to_edge)

    def get_vertex_ids(self) -> List[int]:
        """Get all vertex IDs in ascending order."""
        return sorted(self.id_to_vertex)

    def get_edge_ids(self) -> List[int]:
        """Get all edge IDs in ascending order."""
        return sorted(self.id_to_edge)

    def get_incident_edges(self, vertex_id: int) -> List[pyedge]:
        """
        Get the edges touching a vertex, in the vertex's edge order.

        Args:
            vertex_id: Vertex ID

        Returns:
            List of incident edges
        """
        pVertex = self.get_vertex_by_id(vertex_id)
        return [self.id_to_edge[lEdgeID] for lEdgeID in pVertex.aEdgeID]

    def __contains__(self, vertex_id) -> bool:
        return vertex_id in self.id_to_vertex

    def __len__(self) -> int:
        return len(self.id_to_vertex)

    def __repr__(self):
        return f"Graph(#Vertices: {len(self.id_to_vertex)}, #Edges: {len(self.id_to_edge)})"

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, vertex_id: Optional[int] = None, dWeight: float = 1.0,
                   pObject: Any = None) -> pyvertex:
        """
        Create a vertex and add it to the graph.

        Args:
            vertex_id: Optional explicit ID, allocated from the counter otherwise
            dWeight: Vertex cost
            pObject: Optional payload

        Returns:
            The new vertex

        Raises:
            InvalidGraphInputError: If the ID is negative or out of range
            DuplicateIdError: If the explicit ID is already used
        """
        if vertex_id is None:
            vertex_id = self._next_vertex_id()
        self._validate_id(vertex_id, MAX_VERTEX_ID, 'Vertex')
        return self.insert_vertex(pyvertex(vertex_id, dWeight=dWeight, pObject=pObject))

    def insert_vertex(self, vertex: pyvertex) -> pyvertex:
        """
        Adopt an existing vertex object.

        Only vertices without incident edges can be adopted; a vertex still
        wired into another graph must be copied and cleared first.

        Args:
            vertex: Vertex to adopt

        Returns:
            The adopted vertex

        Raises:
            InvalidGraphInputError: If the ID is out of range or the vertex
                still lists incident edges
            DuplicateIdError: If the ID is already used
        """
        lVertexID = vertex.lVertexID
        self._validate_id(lVertexID, MAX_VERTEX_ID, 'Vertex')
        if lVertexID in self.id_to_vertex:
            raise DuplicateIdError(f"Vertex {lVertexID} already exists in graph")
        if vertex.aEdgeID:
            raise InvalidGraphInputError(
                f"Vertex {lVertexID} still lists edges {vertex.aEdgeID}; adopt a cleared copy instead")

        self.id_to_vertex[lVertexID] = vertex
        self.lVertexID_next = max(self.lVertexID_next, lVertexID + 1)
        logger.debug(f"Added vertex {lVertexID}")
        return vertex

    def add_edge(self, vertex_start_id: int, vertex_end_id: int, dWeight: float = 1.0,
                 iFlag_directed: bool = False, pObject: Any = None,
                 edge_id: Optional[int] = None) -> pyedge:
        """
        Create an edge between two existing vertices.

        Args:
            vertex_start_id: ID of the first endpoint
            vertex_end_id: ID of the second endpoint
            dWeight: Edge weight, may be negative
            iFlag_directed: Whether the edge only runs from start to end
            pObject: Optional payload
            edge_id: Optional explicit ID, allocated from the counter otherwise

        Returns:
            The new edge

        Raises:
            VertexNotFoundError: If an endpoint is not in the graph
            DuplicateIdError: If the explicit ID is already used
        """
        # Validate endpoints before consuming an ID
        self.get_vertex_by_id(vertex_start_id)
        self.get_vertex_by_id(vertex_end_id)
        if edge_id is None:
            edge_id = self._next_edge_id()
        self._validate_id(edge_id, MAX_EDGE_ID, 'Edge')
        pEdge = pyedge(edge_id, vertex_start_id, vertex_end_id,
                       dWeight=dWeight, iFlag_directed=iFlag_directed, pObject=pObject)
        return self.insert_edge(pEdge)

    def insert_edge(self, edge: pyedge) -> pyedge:
        """
        Adopt an existing edge object and register it on both endpoints.

        Args:
            edge: Edge to adopt

        Returns:
            The adopted edge
        """
        lEdgeID = edge.lEdgeID
        self._validate_id(lEdgeID, MAX_EDGE_ID, 'Edge')
        if lEdgeID in self.id_to_edge:
            raise DuplicateIdError(f"Edge {lEdgeID} already exists in graph")
        pVertex_start = self.get_vertex_by_id(edge.lVertexID_start)
        pVertex_end = self.get_vertex_by_id(edge.lVertexID_end)

        self.id_to_edge[lEdgeID] = edge
        pVertex_start.add_edge(lEdgeID)
        if pVertex_end is not pVertex_start:
            pVertex_end.add_edge(lEdgeID)
        self.lEdgeID_next = max(self.lEdgeID_next, lEdgeID + 1)
        logger.debug(f"Added edge {lEdgeID} between vertices {edge.lVertexID_start} and {edge.lVertexID_end}")
        return edge

    def remove_edge(self, edge_id: int) -> pyedge:
        """
        Remove an edge and unregister it from both endpoints.

        Args:
            edge_id: ID of the edge to remove

        Returns:
            The removed edge

        Raises:
            EdgeNotFoundError: If the edge is not in the graph
        """
        pEdge = self.get_edge_by_id(edge_id)
        del self.id_to_edge[edge_id]
        self.id_to_vertex[pEdge.lVertexID_start].remove_edge(edge_id)
        if not pEdge.is_self_loop():
            self.id_to_vertex[pEdge.lVertexID_end].remove_edge(edge_id)
        logger.debug(f"Removed edge {edge_id}")
        return pEdge

    def remove_vertex(self, vertex_id: int) -> pyvertex:
        """
        Remove a vertex together with all of its incident edges.

        Args:
            vertex_id: ID of the vertex to remove

        Returns:
            The removed vertex

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        pVertex = self.get_vertex_by_id(vertex_id)
        aEdgeID_incident = list(pVertex.aEdgeID)
        for lEdgeID in aEdgeID_incident:
            self.remove_edge(lEdgeID)
        del self.id_to_vertex[vertex_id]
        logger.debug(f"Removed vertex {vertex_id} and {len(aEdgeID_incident)} incident edges")
        return pVertex

    @staticmethod
    def _validate_id(lID: int, lID_max: int, sKind: str):
        if lID < 0 or lID > lID_max:
            raise InvalidGraphInputError(f"{sKind} ID {lID} outside of range 0..{lID_max}")

    def _next_vertex_id(self) -> int:
        lVertexID = self.lVertexID_next
        if lVertexID > MAX_VERTEX_ID:
            raise InvalidGraphInputError("Vertex ID space exhausted")
        self.lVertexID_next += 1
        return lVertexID

    def _next_edge_id(self) -> int:
        lEdgeID = self.lEdgeID_next
        if lEdgeID > MAX_EDGE_ID:
            raise InvalidGraphInputError("Edge ID space exhausted")
        self.lEdgeID_next += 1
        return lEdgeID
