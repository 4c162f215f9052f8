"""Tests for the shortest path router."""

import pytest

from transit_router.network.builder import RouteGraph
from transit_router.network.models import Edge, EdgeKind, TransitNetwork
from transit_router.network.router import Router


def test_route_single_ride(city_network: TransitNetwork) -> None:
    """Test waiting then riding through an intermediate stop."""
    store = city_network.store
    router = Router(city_network.graph)

    route = router.build_route(
        RouteGraph.wait_vertex(store.get_stop("Alpha").index),
        RouteGraph.wait_vertex(store.get_stop("Gamma").index),
    )

    assert route is not None
    assert route.weight == pytest.approx(6 + 5)
    assert route.edge_ids == (0, 7)
    assert route.edge_count == 2


def test_route_unreachable(city_network: TransitNetwork) -> None:
    """Test isolated stops cannot be reached."""
    store = city_network.store
    router = Router(city_network.graph)

    route = router.build_route(
        RouteGraph.wait_vertex(store.get_stop("Alpha").index),
        RouteGraph.wait_vertex(store.get_stop("Omega").index),
    )

    assert route is None


def test_parallel_edges_keep_cheapest() -> None:
    """Test parallel edges collapse to the cheapest one."""
    graph = RouteGraph(
        vertex_count=2,
        edges=[
            Edge(source=0, target=1, weight=5.0, kind=EdgeKind.BUS),
            Edge(source=0, target=1, weight=3.0, kind=EdgeKind.BUS),
            Edge(source=0, target=1, weight=3.0, kind=EdgeKind.BUS),
        ],
        edge_info={},
    )

    route = Router(graph).build_route(0, 1)

    assert route is not None
    assert route.edge_ids == (1,)
    assert route.weight == pytest.approx(3.0)


def test_router_does_not_modify_graph(city_network: TransitNetwork) -> None:
    """Test routing leaves the route graph untouched."""
    edges_before = city_network.graph.edges
    router = Router(city_network.graph)

    for source in range(0, city_network.graph.vertex_count, 2):
        for target in range(0, city_network.graph.vertex_count, 2):
            router.build_route(source, target)

    assert city_network.graph.edges == edges_before
