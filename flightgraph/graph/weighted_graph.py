"""Generic directed weighted graph with shortest-path and MST queries.

The graph stores an adjacency mapping ``vertex -> {neighbor: weight}``
and answers two kinds of questions over its current snapshot:

- cheapest directed path between two vertices (Dijkstra)
- minimum spanning tree grown from a root over outgoing edges (Prim)

Both traversals keep a binary heap frontier whose entries carry a
monotonically increasing sequence number, so equal keys pop in the order
they were pushed and vertices never need to be orderable themselves.

Weights must be non-negative for Dijkstra to be correct. This is a
precondition of the queries, not something ``insert_edge`` checks.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from ..domain.errors import (
    GraphError,
    InvalidEndpointError,
    NoPathError,
    UnknownVertexError,
)
from ..domain.models import TreeEdge

V = TypeVar("V", bound=Hashable)
W = TypeVar("W", int, float)

logger = logging.getLogger(__name__)


class WeightedGraph(Generic[V, W]):
    """Directed graph keyed by vertex value with numeric edge weights.

    At most one edge exists per ordered pair of vertices; inserting the
    same pair again overwrites its weight. Vertices and edges are only
    ever added, never removed.

    Example:
        graph = WeightedGraph[str, int]()
        graph.insert_vertex("A")
        graph.insert_vertex("B")
        graph.insert_edge("A", "B", 4)
        graph.get_path_cost("A", "B")  # 4
    """

    def __init__(self) -> None:
        self._vertices: Set[V] = set()
        self._adjacency: Dict[V, Dict[V, W]] = {}
        self._edge_count = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_vertex(self, vertex: V) -> bool:
        """Add a vertex to the graph.

        Args:
            vertex: The vertex to add. Must be hashable and not None.

        Returns:
            True if the vertex was newly added, False if already present.
        """
        if vertex is None:
            raise ValueError("Cannot add None as a vertex")
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        self._adjacency[vertex] = {}
        return True

    def insert_edge(self, source: V, target: V, weight: W) -> bool:
        """Add or overwrite the directed edge ``source -> target``.

        Args:
            source: Start vertex, must already be in the graph.
            target: End vertex, must already be in the graph.
            weight: Numeric weight of the edge.

        Returns:
            True if the edge is new, False if an existing weight was replaced.

        Raises:
            InvalidEndpointError: If either endpoint is not a known vertex.
        """
        if weight is None:
            raise ValueError("Edge weight cannot be None")
        for endpoint in (source, target):
            if endpoint not in self._vertices:
                raise InvalidEndpointError(
                    f"Cannot insert edge {source} -> {target}: unknown vertex {endpoint}",
                    vertex=endpoint,
                )

        neighbors = self._adjacency[source]
        is_new = target not in neighbors
        neighbors[target] = weight
        if is_new:
            self._edge_count += 1
        return is_new

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def contains_vertex(self, vertex: V) -> bool:
        return vertex in self._vertices

    def contains_edge(self, source: V, target: V) -> bool:
        return target in self._adjacency.get(source, {})

    def get_vertex_count(self) -> int:
        return len(self._vertices)

    def get_edge_count(self) -> int:
        return self._edge_count

    def is_empty(self) -> bool:
        return not self._vertices

    def get_weight(self, source: V, target: V) -> W:
        """Return the weight of the edge ``source -> target``.

        Raises:
            UnknownVertexError: If either vertex is not in the graph.
            GraphError: If both vertices exist but are not connected.
        """
        self._require_vertex(source)
        self._require_vertex(target)
        try:
            return self._adjacency[source][target]
        except KeyError as e:
            raise GraphError(f"No edge from {source} to {target}", cause=e)

    def vertices(self) -> List[V]:
        return list(self._vertices)

    def neighbors(self, vertex: V) -> Dict[V, W]:
        """Return a copy of the outgoing edges of ``vertex``."""
        self._require_vertex(vertex)
        return dict(self._adjacency[vertex])

    def edges(self) -> Iterator[Tuple[V, V, W]]:
        for source, neighbors in self._adjacency.items():
            for target, weight in neighbors.items():
                yield source, target, weight

    def total_weight(self) -> W:
        """Sum of all edge weights (0 for a graph without edges)."""
        return sum(weight for _, _, weight in self.edges())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.get_vertex_count()}, "
            f"edges={self.get_edge_count()})"
        )

    # ------------------------------------------------------------------
    # Shortest path (Dijkstra)
    # ------------------------------------------------------------------

    def get_path_cost(self, source: V, target: V) -> W:
        """Total weight of the cheapest directed path from source to target.

        Raises:
            UnknownVertexError: If source or target is not in the graph.
            NoPathError: If target cannot be reached from source.
        """
        distances, _ = self._dijkstra(source, target)
        return distances[target]

    def shortest_path(self, source: V, target: V) -> List[V]:
        """Vertices of the cheapest directed path, source and target included.

        Raises:
            UnknownVertexError: If source or target is not in the graph.
            NoPathError: If target cannot be reached from source.
        """
        _, previous = self._dijkstra(source, target)

        path: List[V] = [target]
        current = target
        while current != source:
            current = previous[current]
            path.append(current)

        path.reverse()
        return path

    def _dijkstra(self, start: V, end: V) -> Tuple[Dict[V, W], Dict[V, V]]:
        """Run Dijkstra from ``start`` until ``end`` is settled.

        Returns the best-known distances and predecessor links. Distances
        for vertices missing from the mapping are infinite.
        """
        self._require_vertex(start)
        self._require_vertex(end)

        distances: Dict[V, W] = {start: 0}
        previous: Dict[V, V] = {}
        visited: Set[V] = set()

        sequence = itertools.count()
        heap: List[Tuple[W, int, V]] = [(0, next(sequence), start)]

        while heap:
            current_distance, _, u = heapq.heappop(heap)

            if u in visited:
                continue
            visited.add(u)

            if u == end:
                return distances, previous

            for v, weight in self._adjacency[u].items():
                if v in visited:
                    continue
                new_distance = current_distance + weight
                best = distances.get(v)
                if best is None or new_distance < best:
                    distances[v] = new_distance
                    previous[v] = u
                    heapq.heappush(heap, (new_distance, next(sequence), v))

        logger.debug(
            "No path found",
            extra={"source": str(start), "target": str(end), "visited": len(visited)},
        )
        raise NoPathError(
            f"No path from {start} to {end}",
            source=start,
            target=end,
        )

    # ------------------------------------------------------------------
    # Minimum spanning tree (Prim)
    # ------------------------------------------------------------------

    def get_min_spanning_tree(self, root: V) -> WeightedGraph[V, W]:
        """Minimum spanning tree of the vertices reachable from ``root``.

        The tree is grown along outgoing edges only, so vertices that
        ``root`` cannot reach are left out rather than reported as errors.

        Returns:
            A new graph holding the reached vertices and the tree edges.

        Raises:
            UnknownVertexError: If root is not in the graph.
        """
        tree_edges = self._prim(root)

        tree: WeightedGraph[V, W] = WeightedGraph()
        tree.insert_vertex(root)
        for edge in tree_edges:
            tree.insert_vertex(edge.target)
            tree.insert_edge(edge.source, edge.target, edge.weight)
        return tree

    def get_min_spanning_tree_edges(self, root: V) -> List[TreeEdge[V]]:
        """Tree edges in the order Prim's algorithm selected them."""
        return self._prim(root)

    def get_min_spanning_tree_cost(self, root: V) -> W:
        """Sum of the edge weights of ``get_min_spanning_tree(root)``."""
        return sum(edge.weight for edge in self._prim(root))

    def _prim(self, root: V) -> List[TreeEdge[V]]:
        self._require_vertex(root)

        in_tree: Set[V] = {root}
        tree_edges: List[TreeEdge[V]] = []

        sequence = itertools.count()
        heap: List[Tuple[W, int, V, V]] = []

        def push_frontier(vertex: V) -> None:
            for target, weight in self._adjacency[vertex].items():
                if target not in in_tree:
                    heapq.heappush(heap, (weight, next(sequence), vertex, target))

        push_frontier(root)
        while heap:
            weight, _, source, target = heapq.heappop(heap)
            if target in in_tree:
                continue
            in_tree.add(target)
            tree_edges.append(TreeEdge(source=source, target=target, weight=weight))
            push_frontier(target)

        if len(in_tree) < len(self._vertices):
            logger.debug(
                "Spanning tree covers only the reachable component",
                extra={"root": str(root), "reached": len(in_tree), "total": len(self._vertices)},
            )
        return tree_edges

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_vertex(self, vertex: V) -> None:
        if vertex not in self._vertices:
            raise UnknownVertexError(f"Vertex not in graph: {vertex}", vertex=vertex)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[V, V, W]],
        vertices: Optional[List[V]] = None,
    ) -> WeightedGraph[V, W]:
        """Build a graph from ``(source, target, weight)`` triples.

        Endpoints are inserted as vertices before each edge. Extra
        isolated vertices may be supplied through ``vertices``.
        """
        graph: WeightedGraph[V, W] = cls()
        for vertex in vertices or []:
            graph.insert_vertex(vertex)
        for source, target, weight in edges:
            graph.insert_vertex(source)
            graph.insert_vertex(target)
            graph.insert_edge(source, target, weight)
        return graph
