"""Answer bus, stop and route queries against a built network."""

import logging
from collections.abc import Iterable
from typing import Any

from transit_router.document.models import BusQuery, Query, RouteQuery, StopQuery
from transit_router.network.builder import RouteGraph
from transit_router.network.models import EdgeKind, TransitNetwork
from transit_router.network.router import Router

logger = logging.getLogger(__name__)

NOT_FOUND = "not found"


class QueryProcessor:
    """Turn queries into response dictionaries. Holds no per-query state."""

    def __init__(self, network: TransitNetwork, router: Router | None = None) -> None:
        """Initialize processor, building a router when none is given."""
        self.network = network
        self.router = router if router is not None else Router(network.graph)

    def process_all(self, queries: Iterable[Query]) -> list[dict[str, Any]]:
        """Answer queries in input order."""
        responses = [self.process(query) for query in queries]
        logger.info(f"Answered {len(responses)} queries")
        return responses

    def process(self, query: Query) -> dict[str, Any]:
        """Dispatch a single query."""
        match query:
            case BusQuery():
                return self._process_bus(query)
            case StopQuery():
                return self._process_stop(query)
            case RouteQuery():
                return self._process_route(query)
            case _:
                raise TypeError(f"Unsupported query: {query!r}")

    def _process_bus(self, query: BusQuery) -> dict[str, Any]:
        store = self.network.store
        bus = store.get_bus(query.name)
        if bus is None:
            logger.debug(f"Bus {query.name} not found (request {query.request_id})")
            return _not_found(query.request_id)

        distance = store.compute_route_distance(bus.name)
        return {
            "request_id": query.request_id,
            "stop_count": bus.stop_count,
            "unique_stop_count": bus.unique_stop_count,
            "route_length": distance.by_default,
            "curvature": distance.curvature,
        }

    def _process_stop(self, query: StopQuery) -> dict[str, Any]:
        stop = self.network.store.get_stop(query.name)
        if stop is None:
            logger.debug(f"Stop {query.name} not found (request {query.request_id})")
            return _not_found(query.request_id)

        return {"request_id": query.request_id, "buses": sorted(stop.buses)}

    def _process_route(self, query: RouteQuery) -> dict[str, Any]:
        store = self.network.store
        graph = self.network.graph
        wait_time = self.network.settings.bus_wait_time

        origin = store.get_stop(query.origin)
        destination = store.get_stop(query.destination)
        if origin is None or destination is None:
            logger.debug(
                f"Route {query.origin} -> {query.destination} references unknown stop "
                f"(request {query.request_id})"
            )
            return _not_found(query.request_id)

        if origin.index == destination.index:
            # Staying put still costs one boarding wait
            return {
                "request_id": query.request_id,
                "total_time": float(wait_time),
                "items": [_wait_item(origin.name, wait_time)],
            }

        route = self.router.build_route(
            RouteGraph.wait_vertex(origin.index),
            RouteGraph.wait_vertex(destination.index),
        )
        if route is None:
            logger.debug(
                f"No route {query.origin} -> {query.destination} (request {query.request_id})"
            )
            return _not_found(query.request_id)

        items = []
        for edge_id in route.edge_ids:
            edge = graph.get_edge(edge_id)
            if edge.kind is EdgeKind.WAIT:
                stop = store.stop_at(RouteGraph.stop_index_for_vertex(edge.target))
                items.append(_wait_item(stop.name, wait_time))
            else:
                info = graph.get_edge_info(edge_id)
                items.append(
                    {
                        "type": EdgeKind.BUS.value,
                        "bus": store.bus_at(info.bus_index).name,
                        "span_count": info.span_count,
                        "time": edge.weight,
                    }
                )

        return {"request_id": query.request_id, "total_time": route.weight, "items": items}


def _wait_item(stop_name: str, wait_time: int) -> dict[str, Any]:
    return {"type": EdgeKind.WAIT.value, "stop_name": stop_name, "time": wait_time}


def _not_found(request_id: int) -> dict[str, Any]:
    return {"request_id": request_id, "error_message": NOT_FOUND}
