"""Geofence checks for attendance marking.

Distances are great-circle distances computed with the haversine formula.
"""

from __future__ import annotations

import math
from typing import Optional

from ..core.constants import EARTH_RADIUS_M
from ..core.enums import FailureReason
from ..core.exceptions import ValidationError
from .model import Coordinate, Geofence, GeofenceResult


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance between two points on Earth, in meters."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


class GeofenceValidator:
    """Pure inside/outside decision for a user coordinate against a geofence."""

    def validate(
        self,
        user: Optional[Coordinate],
        office: Optional[Coordinate],
        radius_meters: float,
    ) -> GeofenceResult:
        if user is None or office is None or not user.is_complete or not office.is_complete:
            raise ValidationError("GPS data required.", reason=FailureReason.MISSING_LOCATION)

        distance = haversine_distance(user.latitude, user.longitude, office.latitude, office.longitude)
        return GeofenceResult(distance_meters=distance, within_radius=distance <= radius_meters)

    def check(self, user: Optional[Coordinate], geofence: Geofence) -> GeofenceResult:
        return self.validate(user, geofence.center, geofence.radius_meters)
