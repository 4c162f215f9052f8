"""Network store population and route graph construction."""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from transit_router.document.models import BusSpec, RoutingSettings, StopSpec
from transit_router.network.models import (
    Bus,
    BusType,
    Edge,
    EdgeInfo,
    EdgeKind,
    TransitNetwork,
)
from transit_router.network.store import NetworkStore

logger = logging.getLogger(__name__)


class RouteGraph:
    """Immutable directed weighted graph with a wait and a board vertex per stop.

    Stop ``i`` owns wait vertex ``2 * i`` and board vertex ``2 * i + 1``.
    Edge ids are positions in ``edges``.
    """

    def __init__(
        self,
        vertex_count: int,
        edges: Sequence[Edge],
        edge_info: Mapping[int, EdgeInfo],
    ) -> None:
        """Initialize graph from fully built edge lists."""
        self._vertex_count = vertex_count
        self._edges = tuple(edges)
        self._edge_info = MappingProxyType(dict(edge_info))

        incidence: list[list[int]] = [[] for _ in range(vertex_count)]
        for edge_id, edge in enumerate(self._edges):
            incidence[edge.source].append(edge_id)
        self._incidence = tuple(tuple(edge_ids) for edge_ids in incidence)

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def edge_info(self) -> Mapping[int, EdgeInfo]:
        return self._edge_info

    def get_edge(self, edge_id: int) -> Edge:
        return self._edges[edge_id]

    def get_edge_info(self, edge_id: int) -> EdgeInfo:
        """Ride metadata of a BUS edge."""
        return self._edge_info[edge_id]

    def edges_from(self, vertex: int) -> tuple[int, ...]:
        """Ids of edges leaving a vertex, in insertion order."""
        return self._incidence[vertex]

    @staticmethod
    def wait_vertex(stop_index: int) -> int:
        return 2 * stop_index

    @staticmethod
    def board_vertex(stop_index: int) -> int:
        return 2 * stop_index + 1

    @staticmethod
    def stop_index_for_vertex(vertex: int) -> int:
        return vertex // 2


class RouteGraphBuilder:
    """Build the route graph from a populated network store."""

    def __init__(self, store: NetworkStore, settings: RoutingSettings) -> None:
        """Initialize builder with store and routing settings."""
        self.store = store
        self.settings = settings
        self._edges: list[Edge] = []
        self._edge_info: dict[int, EdgeInfo] = {}

    def build(self) -> RouteGraph:
        """Allocate vertices, then generate edges bus by bus."""
        self._edges = []
        self._edge_info = {}

        vertex_count = self._add_wait_edges()
        for bus in self.store.buses:
            self._add_bus_edges(bus)

        graph = RouteGraph(vertex_count, self._edges, self._edge_info)
        logger.info(
            f"Built route graph with {graph.vertex_count} vertices and {graph.edge_count} edges"
        )
        return graph

    def _add_wait_edges(self) -> int:
        for stop in self.store.stops:
            self._add_edge(
                RouteGraph.wait_vertex(stop.index),
                RouteGraph.board_vertex(stop.index),
                float(self.settings.bus_wait_time),
                EdgeKind.WAIT,
            )
        return 2 * len(self.store.stops)

    def _add_bus_edges(self, bus: Bus) -> None:
        self._add_direction_edges(bus, bus.stop_indices)
        if bus.bus_type is BusType.REGULAR:
            self._add_direction_edges(bus, bus.stop_indices[::-1])

    def _add_direction_edges(self, bus: Bus, stop_indices: Sequence[int]) -> None:
        """Add one edge from each stop to every stop further along the direction."""
        velocity = self.settings.velocity_m_per_min

        for origin_pos, origin in enumerate(stop_indices):
            source = RouteGraph.board_vertex(origin)
            weight = 0.0
            last = origin

            for span_count, target in enumerate(stop_indices[origin_pos + 1 :], start=1):
                weight += self.store.distance_between(last, target) / velocity
                edge_id = self._add_edge(
                    source, RouteGraph.wait_vertex(target), weight, EdgeKind.BUS
                )
                self._edge_info[edge_id] = EdgeInfo(span_count=span_count, bus_index=bus.index)
                last = target

    def _add_edge(self, source: int, target: int, weight: float, kind: EdgeKind) -> int:
        self._edges.append(Edge(source=source, target=target, weight=weight, kind=kind))
        return len(self._edges) - 1


def build_store(stops: Sequence[StopSpec], buses: Sequence[BusSpec]) -> NetworkStore:
    """Populate a store: stops first, then road distances, then buses."""
    logger.info("Building network store")
    store = NetworkStore()

    for stop in stops:
        store.add_stop(stop.name, stop.latitude, stop.longitude)
    logger.info(f"Built {len(stops)} stops")

    distance_count = 0
    for stop in stops:
        for to_name, meters in stop.road_distances.items():
            store.set_road_distance(stop.name, to_name, meters)
            distance_count += 1
    logger.info(f"Registered {distance_count} road distances")

    for bus in buses:
        store.add_bus(bus.name, bus.stops, bus.is_roundtrip)
    logger.info(f"Built {len(buses)} buses")

    return store


def build_network(
    stops: Sequence[StopSpec],
    buses: Sequence[BusSpec],
    settings: RoutingSettings,
) -> TransitNetwork:
    """Build the store and route graph, then freeze the store."""
    store = build_store(stops, buses)
    graph = RouteGraphBuilder(store, settings).build()
    store.freeze()
    return TransitNetwork(store=store, graph=graph, settings=settings)
