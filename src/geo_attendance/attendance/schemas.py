"""Request schema for the mark-attendance endpoint.

Rules:
- body must be a JSON object with no fields beyond the known ones;
- `userId` (int or digit string) and `type` (string) are required;
- `userLat`/`userLng` are optional finite numbers (or numeric strings) within
  [-90, 90] and [-180, 180]; null means missing;
- `qrCodeData` and `photo` are optional strings.

Presence of the token and coordinates is checked later by AttendanceService so
that the outward error (403 vs 400) follows the marking order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import optional_float, optional_str, require_int, require_non_empty
from ..core.enums import FailureReason
from ..core.exceptions import ValidationError
from ..geofence.model import Coordinate

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

REQUIRED_FIELDS = ("userId", "type")
OPTIONAL_FIELDS = ("userLat", "userLng", "qrCodeData", "photo")


@dataclass(frozen=True)
class MarkAttendanceRequest:
    subject_id: int
    action: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    verification_token: Optional[str] = None
    photo: Optional[str] = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_payload(cls, payload: Any) -> "MarkAttendanceRequest":
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object", reason=FailureReason.INVALID_REQUEST)

        unknown = sorted(set(payload) - set(REQUIRED_FIELDS) - set(OPTIONAL_FIELDS))
        if unknown:
            raise ValidationError(
                f"Unknown field(s): {', '.join(unknown)}", reason=FailureReason.INVALID_REQUEST
            )

        missing = [f for f in REQUIRED_FIELDS if payload.get(f) is None]
        if missing:
            raise ValidationError(
                f"Missing required field(s): {', '.join(missing)}", reason=FailureReason.INVALID_REQUEST
            )

        return cls(
            subject_id=require_int(payload["userId"], "userId"),
            action=require_non_empty(payload["type"], "type"),
            latitude=optional_float(payload.get("userLat"), "userLat", limit=MAX_LATITUDE),
            longitude=optional_float(payload.get("userLng"), "userLng", limit=MAX_LONGITUDE),
            verification_token=optional_str(payload.get("qrCodeData"), "qrCodeData"),
            photo=optional_str(payload.get("photo"), "photo"),
        )
