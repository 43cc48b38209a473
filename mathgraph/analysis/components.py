"""
Strongly connected components.

This module provides Tarjan's algorithm written with an explicit work stack.
"""

import logging
from typing import Dict, Iterator, List, Set, Tuple

from ..core.interface import IGraph
from .pathfinding import PathFinder

logger = logging.getLogger(__name__)


class ComponentFinder:
    """
    Decomposes a graph into strongly connected components.

    Directed edges are followed from start to end only, undirected edges both
    ways, so in a fully undirected graph the components are the connected
    components.
    """

    def __init__(self, graph: IGraph):
        """
        Initialize the component finder.

        Args:
            graph: Graph to decompose
        """
        self.graph = graph
        self.pathfinder = PathFinder(graph)

    def find_strongly_connected_components(self) -> List[List[int]]:
        """
        Find strongly connected components using Tarjan's algorithm.

        Roots are tried in ascending vertex ID order. Each component is listed
        in the order its vertices leave the Tarjan stack, root last.

        Returns:
            List of strongly connected components, each as a list of vertex IDs
        """
        index_counter = 0
        index: Dict[int, int] = {}
        lowlinks: Dict[int, int] = {}
        on_stack: Set[int] = set()
        stack: List[int] = []
        components: List[List[int]] = []

        for pVertex in self.graph.aVertex:
            lVertexID_root = pVertex.lVertexID
            if lVertexID_root in index:
                continue

            index[lVertexID_root] = lowlinks[lVertexID_root] = index_counter
            index_counter += 1
            stack.append(lVertexID_root)
            on_stack.add(lVertexID_root)
            work: List[Tuple[int, Iterator[int]]] = [
                (lVertexID_root, iter(self.pathfinder.get_adjacent_vertex_ids(lVertexID_root)))]

            while work:
                node, neighbors = work[-1]
                descended = False
                for neighbor in neighbors:
                    if neighbor not in index:
                        # Successor not yet visited; descend into it
                        index[neighbor] = lowlinks[neighbor] = index_counter
                        index_counter += 1
                        stack.append(neighbor)
                        on_stack.add(neighbor)
                        work.append((neighbor, iter(self.pathfinder.get_adjacent_vertex_ids(neighbor))))
                        descended = True
                        break
                    elif neighbor in on_stack:
                        # Successor is in stack and hence in the current SCC
                        lowlinks[node] = min(lowlinks[node], index[neighbor])
                if descended:
                    continue

                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlinks[parent] = min(lowlinks[parent], lowlinks[node])

                # If node is a root node, pop the stack and create an SCC
                if lowlinks[node] == index[node]:
                    component = []
                    while True:
                        w = stack.pop()
                        on_stack.discard(w)
                        component.append(w)
                        if w == node:
                            break
                    components.append(component)

        logger.info(f"Found {len(components)} strongly connected components in {len(index)} vertices")
        return components
