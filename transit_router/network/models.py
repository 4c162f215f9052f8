"""Data models for the in-memory transit network and its route graph."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from transit_router.network.geo import GeoPoint

if TYPE_CHECKING:
    from transit_router.document.models import RoutingSettings
    from transit_router.network.builder import RouteGraph
    from transit_router.network.store import NetworkStore


class BusType(Enum):
    """Bus route topology."""

    CIRCULAR = "circular"  # last stop equals the first, one direction
    REGULAR = "regular"  # there and back over the same stops


class EdgeKind(Enum):
    """Role of a route graph edge."""

    WAIT = "Wait"
    BUS = "Bus"


@dataclass
class Stop:
    """Stop registered in the network store."""

    index: int
    name: str
    point: GeoPoint
    buses: set[str] = field(default_factory=set)


@dataclass
class Bus:
    """Bus route with stops referenced by arena index."""

    index: int
    name: str
    bus_type: BusType
    stop_indices: list[int] = field(default_factory=list)

    @property
    def stop_count(self) -> int:
        """Number of stops travelled, counting the way back for regular buses."""
        if self.bus_type is BusType.REGULAR:
            return len(self.stop_indices) * 2 - 1
        return len(self.stop_indices)

    @property
    def unique_stop_count(self) -> int:
        return len(set(self.stop_indices))


@dataclass(frozen=True)
class RouteDistance:
    """Geodesic and road length of a bus route."""

    raw: float = 0.0
    by_default: float = 0.0

    @property
    def curvature(self) -> float:
        """Detour factor of road length over straight-line length."""
        if self.raw == 0:
            return 1.0
        return self.by_default / self.raw


@dataclass(frozen=True)
class Edge:
    """Directed weighted route graph edge. Weight is in minutes."""

    source: int
    target: int
    weight: float
    kind: EdgeKind


@dataclass(frozen=True)
class EdgeInfo:
    """Ride metadata for a BUS edge."""

    span_count: int
    bus_index: int


@dataclass(frozen=True)
class TransitNetwork:
    """Built network: frozen store, route graph and the settings used to build it."""

    store: "NetworkStore"
    graph: "RouteGraph"
    settings: "RoutingSettings"
