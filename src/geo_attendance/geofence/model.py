from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    """A point on Earth in float degrees.

    Components are Optional because request coordinates may be absent; the
    validator treats a missing component as a precondition failure.
    """

    latitude: Optional[float]
    longitude: Optional[float]

    @property
    def is_complete(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class Geofence:
    center: Coordinate
    radius_meters: float


@dataclass(frozen=True)
class GeofenceResult:
    distance_meters: float
    within_radius: bool
