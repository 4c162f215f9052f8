"""Request document validator."""

import logging
from collections import Counter

from transit_router.document.models import ValidationReport
from transit_router.document.reader import DocumentReader

logger = logging.getLogger(__name__)


class DocumentValidator:
    """Validate a decoded request document for consistency."""

    def __init__(self, reader: DocumentReader) -> None:
        """Initialize validator with document reader."""
        self.reader = reader
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def validate(self) -> ValidationReport:
        """Run all validation checks."""
        logger.info("Validating request document")

        self._validate_stops()
        self._validate_road_distances()
        self._validate_buses()
        self._validate_settings()
        self._validate_stat_requests()

        valid = len(self.errors) == 0

        stats = {
            "stops": len(self.reader.stops),
            "buses": len(self.reader.buses),
            "road_distances": sum(len(stop.road_distances) for stop in self.reader.stops),
            "stat_requests": len(self.reader.query_ids),
        }

        report = ValidationReport(
            valid=valid,
            errors=self.errors.copy(),
            warnings=self.warnings.copy(),
            stats=stats,
        )

        if not valid:
            logger.error(f"Validation failed with {len(self.errors)} errors")
        elif self.warnings:
            logger.warning(f"Validation passed with {len(self.warnings)} warnings")
        else:
            logger.info("Validation passed")

        return report

    def _validate_stops(self) -> None:
        """Validate stops have valid coordinates and unique names."""
        for stop in self.reader.stops:
            if not (-90 <= stop.latitude <= 90):
                self.errors.append(f"Stop {stop.name} has invalid latitude: {stop.latitude}")
            if not (-180 <= stop.longitude <= 180):
                self.errors.append(f"Stop {stop.name} has invalid longitude: {stop.longitude}")
            if not stop.name:
                self.warnings.append("Stop with empty name")

        counts = Counter(stop.name for stop in self.reader.stops)
        for name, count in sorted(counts.items()):
            if count > 1:
                self.errors.append(f"Stop {name} is defined {count} times")

    def _validate_road_distances(self) -> None:
        """Validate road distances reference known stops and are not negative."""
        stop_names = {stop.name for stop in self.reader.stops}

        for stop in self.reader.stops:
            for to_name, meters in stop.road_distances.items():
                if to_name not in stop_names:
                    self.errors.append(
                        f"Road distance {stop.name} -> {to_name} references non-existent stop"
                    )
                if meters < 0:
                    self.errors.append(
                        f"Road distance {stop.name} -> {to_name} is negative: {meters}"
                    )

    def _validate_buses(self) -> None:
        """Validate buses reference known stops."""
        stop_names = {stop.name for stop in self.reader.stops}
        served: set[str] = set()

        for bus in self.reader.buses:
            if not bus.stops:
                self.errors.append(f"Bus {bus.name} has no stops")
                continue

            for stop_name in bus.stops:
                if stop_name not in stop_names:
                    self.errors.append(
                        f"Bus {bus.name} references non-existent stop {stop_name}"
                    )
            served.update(bus.stops)

            if bus.is_roundtrip and bus.stops[0] != bus.stops[-1]:
                self.warnings.append(
                    f"Roundtrip bus {bus.name} ends at {bus.stops[-1]}, not at {bus.stops[0]}"
                )

        counts = Counter(bus.name for bus in self.reader.buses)
        for name, count in sorted(counts.items()):
            if count > 1:
                self.errors.append(f"Bus {name} is defined {count} times")

        for stop in self.reader.stops:
            if stop.name not in served:
                self.warnings.append(f"Stop {stop.name} is not served by any bus")

    def _validate_settings(self) -> None:
        """Validate routing settings."""
        settings = self.reader.settings
        if settings is None:
            self.errors.append("Routing settings are missing")
            return

        if settings.bus_velocity <= 0:
            self.errors.append(f"Bus velocity must be positive: {settings.bus_velocity}")
        if settings.bus_wait_time < 0:
            self.errors.append(f"Bus wait time is negative: {settings.bus_wait_time}")

    def _validate_stat_requests(self) -> None:
        """Warn about stat request ids that cannot be told apart."""
        counts = Counter(self.reader.query_ids)
        for request_id, count in sorted(counts.items()):
            if count > 1:
                self.warnings.append(f"Stat request id {request_id} is used {count} times")
