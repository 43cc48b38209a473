"""
Custom exceptions for mathgraph
"""


class GraphError(Exception):
    """Base exception for graph containers and algorithms"""
    pass


class GraphNotFoundError(GraphError, KeyError):
    """Requested vertex or edge is absent from the graph"""

    def __str__(self):
        # KeyError quotes its argument otherwise
        return str(self.args[0]) if self.args else ''


class VertexNotFoundError(GraphNotFoundError):
    """Vertex ID is not in the graph"""
    pass


class EdgeNotFoundError(GraphNotFoundError):
    """Edge ID is not in the graph"""
    pass


class InvalidGraphInputError(GraphError, ValueError):
    """Graph content cannot be handled by the requested operation"""
    pass


class DuplicateIdError(InvalidGraphInputError):
    """Explicit vertex or edge ID is already taken"""
    pass


class NegativeEdgeWeightError(InvalidGraphInputError):
    """Shortest paths requested on a graph with negative edge weights"""
    pass


class MixedEdgeKindError(InvalidGraphInputError):
    """Cycle detection requested on a graph mixing directed and undirected edges"""
    pass


class UnreachableTargetError(GraphError):
    """Path requested to a vertex the source cannot reach"""
    pass
