"""Geographic coordinates and great-circle distance."""

import math
from dataclasses import dataclass

EARTH_RADIUS = 6371000  # meters


@dataclass(frozen=True)
class GeoPoint:
    """Point on the sphere, stored in radians."""

    latitude: float
    longitude: float

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> "GeoPoint":
        """Build a point from degree coordinates."""
        return cls(latitude=math.radians(latitude), longitude=math.radians(longitude))

    @property
    def latitude_degrees(self) -> float:
        return math.degrees(self.latitude)

    @property
    def longitude_degrees(self) -> float:
        return math.degrees(self.longitude)


def great_circle_distance(lhs: GeoPoint, rhs: GeoPoint) -> float:
    """Calculate spherical law of cosines distance between two points in meters."""
    arc = math.sin(lhs.latitude) * math.sin(rhs.latitude) + math.cos(lhs.latitude) * math.cos(
        rhs.latitude
    ) * math.cos(lhs.longitude - rhs.longitude)

    # Rounding can push the cosine just outside [-1, 1] for coincident points
    arc = max(-1.0, min(1.0, arc))

    return math.acos(arc) * EARTH_RADIUS
