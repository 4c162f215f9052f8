"""Request document reader and schema-aware decoder."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

from transit_router.document.models import (
    BusQuery,
    BusSpec,
    Query,
    RouteQuery,
    RoutingSettings,
    StopQuery,
    StopSpec,
)

logger = logging.getLogger(__name__)

STDIN_PATH = "-"
STAT_REQUEST_TYPES = ("Bus", "Stop", "Route")


class DocumentReader:
    """Read a request document and decode it into typed requests."""

    def __init__(self, input_path: str | None = None) -> None:
        """Initialize reader with a document path; None or "-" reads stdin."""
        self.input_path = None if input_path in (None, STDIN_PATH) else Path(input_path)
        if self.input_path is not None and not self.input_path.is_file():
            raise ValueError(f"Document not found or not a file: {input_path}")

        # Data storage
        self.stops: list[StopSpec] = []
        self.buses: list[BusSpec] = []
        self.settings: RoutingSettings | None = None
        self.queries: list[Query] = []
        self.query_ids: list[int] = []

    def read_all(self) -> None:
        """Read and decode the whole document."""
        if self.input_path is None:
            logger.info("Reading request document from stdin")
            data = json.load(sys.stdin)
        else:
            logger.info(f"Reading request document from {self.input_path}")
            with open(self.input_path, encoding="utf-8-sig") as f:
                data = json.load(f)
        self.load(data)

    def load(self, data: dict[str, Any]) -> None:
        """Decode an already parsed document."""
        if not isinstance(data, dict):
            raise ValueError("Request document must be a JSON object")

        self.read_base_requests(_require(data, "base_requests", "document"))
        self.read_routing_settings(_require(data, "routing_settings", "document"))
        self.read_stat_requests(data.get("stat_requests", []))

        logger.info(
            f"Loaded {len(self.stops)} stops, {len(self.buses)} buses, "
            f"{len(self.queries)} stat requests"
        )

    def read_base_requests(self, requests: list[dict[str, Any]]) -> None:
        """Decode Stop and Bus base requests."""
        for request in requests:
            request_type = _require(request, "type", "base request")
            if request_type == "Stop":
                self.stops.append(self._parse_stop(request))
            elif request_type == "Bus":
                self.buses.append(self._parse_bus(request))
            else:
                logger.warning(f"Skipping base request of unknown type: {request_type}")

    def read_routing_settings(self, settings: dict[str, Any]) -> None:
        """Decode routing_settings."""
        context = "routing_settings"
        self.settings = RoutingSettings(
            bus_wait_time=_as_int(
                _require(settings, "bus_wait_time", context), f"bus_wait_time in {context}"
            ),
            bus_velocity=float(
                _as_number(
                    _require(settings, "bus_velocity", context), f"bus_velocity in {context}"
                )
            ),
        )

    def read_stat_requests(self, requests: list[dict[str, Any]]) -> None:
        """Decode stat requests, dropping unknown types before reading their id."""
        for request in requests:
            request_type = request.get("type")
            if request_type not in STAT_REQUEST_TYPES:
                logger.debug(f"Dropping stat request of type {request_type}")
                continue

            request_id = _as_int(_require(request, "id", "stat request"), "stat request id")
            self.query_ids.append(request_id)
            self.queries.append(self._parse_query(request_id, request))

    @staticmethod
    def _parse_stop(request: dict[str, Any]) -> StopSpec:
        name = _require(request, "name", "Stop request")
        context = f"Stop {name}"
        road_distances = {
            str(to_name): _as_number(meters, f"{context} road distance to {to_name}")
            for to_name, meters in request.get("road_distances", {}).items()
        }
        return StopSpec(
            name=name,
            latitude=float(_require(request, "latitude", context)),
            longitude=float(_require(request, "longitude", context)),
            road_distances=road_distances,
        )

    @staticmethod
    def _parse_bus(request: dict[str, Any]) -> BusSpec:
        name = _require(request, "name", "Bus request")
        context = f"Bus {name}"
        return BusSpec(
            name=name,
            stops=[str(stop) for stop in _require(request, "stops", context)],
            is_roundtrip=_as_bool(_require(request, "is_roundtrip", context), context),
        )

    @staticmethod
    def _parse_query(request_id: int, request: dict[str, Any]) -> Query:
        request_type = request["type"]
        context = f"stat request {request_id}"
        if request_type == "Bus":
            return BusQuery(request_id=request_id, name=_require(request, "name", context))
        if request_type == "Stop":
            return StopQuery(request_id=request_id, name=_require(request, "name", context))
        return RouteQuery(
            request_id=request_id,
            origin=_require(request, "from", context),
            destination=_require(request, "to", context),
        )


def _require(mapping: dict[str, Any], key: str, context: str) -> Any:
    """Fetch a required field, raising ValueError naming it when absent."""
    try:
        return mapping[key]
    except KeyError:
        raise ValueError(f"Missing field '{key}' in {context}") from None


def _as_number(value: Any, context: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"Expected a number for {context}, got {value!r}")
    return value


def _as_int(value: Any, context: str) -> int:
    """Accept integers and integral floats such as 6.0."""
    number = _as_number(value, context)
    if isinstance(number, float) and not number.is_integer():
        raise ValueError(f"Expected an integer for {context}, got {value!r}")
    return int(number)


def _as_bool(value: Any, context: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Expected true or false for is_roundtrip in {context}, got {value!r}")
    return value
