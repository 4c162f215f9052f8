"""Shortest path search over the route graph."""

import logging
from dataclasses import dataclass

import networkx as nx

from transit_router.network.builder import RouteGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteInfo:
    """Fastest path found by the router."""

    weight: float
    edge_ids: tuple[int, ...]

    @property
    def edge_count(self) -> int:
        return len(self.edge_ids)


class Router:
    """Dijkstra router backed by a networkx DiGraph.

    Parallel route graph edges collapse to the cheapest one, the lowest
    edge id winning ties, so results only depend on input order.
    """

    def __init__(self, graph: RouteGraph) -> None:
        """Index the route graph for path queries."""
        self.graph = graph
        self._nx_graph = nx.DiGraph()
        self._nx_graph.add_nodes_from(range(graph.vertex_count))

        for edge_id, edge in enumerate(graph.edges):
            current = self._nx_graph.get_edge_data(edge.source, edge.target)
            if current is not None and current["weight"] <= edge.weight:
                continue
            self._nx_graph.add_edge(edge.source, edge.target, weight=edge.weight, edge_id=edge_id)

        logger.debug(
            f"Router indexed {self._nx_graph.number_of_edges()} of {graph.edge_count} edges"
        )

    def build_route(self, source: int, target: int) -> RouteInfo | None:
        """Find the minimum weight path between two vertices, None if unreachable."""
        try:
            weight, path = nx.single_source_dijkstra(
                self._nx_graph, source, target, weight="weight"
            )
        except nx.NetworkXNoPath:
            return None

        edge_ids = tuple(
            self._nx_graph[prev_vertex][next_vertex]["edge_id"]
            for prev_vertex, next_vertex in zip(path, path[1:])
        )
        return RouteInfo(weight=float(weight), edge_ids=edge_ids)
