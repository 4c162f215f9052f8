"""Stop and bus arenas with the road distance table."""

import logging
from collections.abc import Iterable

from transit_router.network.geo import GeoPoint, great_circle_distance
from transit_router.network.models import Bus, BusType, RouteDistance, Stop

logger = logging.getLogger(__name__)


class NetworkStore:
    """Own stops, buses and directed road distances.

    Stops and buses live in append-only lists and are addressed by their
    index; name lookups go through the two index dictionaries. Once
    ``freeze()`` has been called every mutating method raises RuntimeError.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._stops: list[Stop] = []
        self._buses: list[Bus] = []
        self._stop_ids: dict[str, int] = {}
        self._bus_ids: dict[str, int] = {}
        self._road_distances: dict[tuple[int, int], float] = {}
        self._frozen = False

    @property
    def stops(self) -> tuple[Stop, ...]:
        return tuple(self._stops)

    @property
    def buses(self) -> tuple[Bus, ...]:
        return tuple(self._buses)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Forbid further mutation."""
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Network store is frozen and cannot be modified")

    def add_stop(self, name: str, latitude: float, longitude: float) -> Stop:
        """Register a stop. Coordinates are given in degrees."""
        self._check_mutable()
        if name in self._stop_ids:
            raise ValueError(f"Duplicate stop: {name}")

        stop = Stop(
            index=len(self._stops),
            name=name,
            point=GeoPoint.from_degrees(latitude, longitude),
        )
        self._stops.append(stop)
        self._stop_ids[name] = stop.index
        return stop

    def add_bus(self, name: str, stop_names: Iterable[str], is_roundtrip: bool) -> Bus:
        """Register a bus and mark it on each of its stops."""
        self._check_mutable()
        if name in self._bus_ids:
            raise ValueError(f"Duplicate bus: {name}")

        stop_indices = []
        for stop_name in stop_names:
            stop_index = self._stop_ids.get(stop_name)
            if stop_index is None:
                raise ValueError(f"Bus {name} references unknown stop: {stop_name}")
            stop_indices.append(stop_index)

        if not stop_indices:
            raise ValueError(f"Bus {name} has no stops")

        bus = Bus(
            index=len(self._buses),
            name=name,
            bus_type=BusType.CIRCULAR if is_roundtrip else BusType.REGULAR,
            stop_indices=stop_indices,
        )
        self._buses.append(bus)
        self._bus_ids[name] = bus.index

        for stop_index in stop_indices:
            self._stops[stop_index].buses.add(name)

        return bus

    def set_road_distance(self, from_name: str, to_name: str, meters: float) -> None:
        """Record a road distance; the reverse direction inherits it unless set."""
        self._check_mutable()
        from_index = self._require_stop_index(from_name, to_name)
        to_index = self._require_stop_index(to_name, from_name)

        self._road_distances[(from_index, to_index)] = float(meters)
        self._road_distances.setdefault((to_index, from_index), float(meters))

    def get_stop(self, name: str) -> Stop | None:
        """Get stop by name, None if unknown."""
        stop_index = self._stop_ids.get(name)
        if stop_index is None:
            return None
        return self._stops[stop_index]

    def get_bus(self, name: str) -> Bus | None:
        """Get bus by name, None if unknown."""
        bus_index = self._bus_ids.get(name)
        if bus_index is None:
            return None
        return self._buses[bus_index]

    def stop_at(self, index: int) -> Stop:
        return self._stops[index]

    def bus_at(self, index: int) -> Bus:
        return self._buses[index]

    def distance(self, from_name: str, to_name: str) -> float:
        """Road distance between two stops in meters, geodesic when not given."""
        from_index = self._require_stop_index(from_name, to_name)
        to_index = self._require_stop_index(to_name, from_name)
        return self.distance_between(from_index, to_index)

    def distance_between(self, from_index: int, to_index: int) -> float:
        """Index based variant of distance()."""
        road_distance = self._road_distances.get((from_index, to_index))
        if road_distance is not None:
            return road_distance
        return great_circle_distance(self._stops[from_index].point, self._stops[to_index].point)

    def geodesic_between(self, from_index: int, to_index: int) -> float:
        return great_circle_distance(self._stops[from_index].point, self._stops[to_index].point)

    def compute_route_distance(self, bus_name: str) -> RouteDistance | None:
        """Compute geodesic and road length of a bus route, None if the bus is unknown."""
        bus = self.get_bus(bus_name)
        if bus is None:
            return None

        raw = 0.0
        by_default = 0.0
        for prev_index, next_index in zip(bus.stop_indices, bus.stop_indices[1:]):
            raw_distance = self.geodesic_between(prev_index, next_index)
            raw += raw_distance
            by_default += self.distance_between(prev_index, next_index)

            if bus.bus_type is BusType.REGULAR:
                raw += raw_distance
                by_default += self.distance_between(next_index, prev_index)

        return RouteDistance(raw=raw, by_default=by_default)

    def _require_stop_index(self, name: str, other: str) -> int:
        stop_index = self._stop_ids.get(name)
        if stop_index is None:
            raise ValueError(f"Valid stops expected: {name} && {other}")
        return stop_index
