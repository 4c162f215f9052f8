"""Data models for request documents, queries and run reports."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StopSpec:
    """Stop base request."""

    name: str
    latitude: float
    longitude: float
    road_distances: dict[str, float] = field(default_factory=dict)  # stop name -> meters


@dataclass(frozen=True)
class BusSpec:
    """Bus base request."""

    name: str
    stops: list[str]
    is_roundtrip: bool


@dataclass(frozen=True)
class RoutingSettings:
    """Routing parameters shared by every bus."""

    bus_wait_time: int  # minutes
    bus_velocity: float  # km/h

    @property
    def velocity_m_per_min(self) -> float:
        return self.bus_velocity * 1000.0 / 60.0


@dataclass(frozen=True)
class BusQuery:
    """Bus statistics request."""

    request_id: int
    name: str


@dataclass(frozen=True)
class StopQuery:
    """Buses-through-stop request."""

    request_id: int
    name: str


@dataclass(frozen=True)
class RouteQuery:
    """Fastest itinerary request."""

    request_id: int
    origin: str
    destination: str


Query = BusQuery | StopQuery | RouteQuery


@dataclass
class ValidationReport:
    """Report from validation process."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


@dataclass
class Manifest:
    """Run manifest with metadata and statistics."""

    tool_version: str
    created_at_iso: str
    inputs: dict[str, Any]
    outputs: dict[str, str]  # artifact name -> path
    stats: dict[str, int]


@dataclass
class ProcessConfig:
    """Configuration for a processing run."""

    input_path: str | None = None  # None or "-" reads stdin
    output_path: str | None = None  # None writes to stdout
    debug_json_dir: str | None = None
    validate_input: bool = True
