from __future__ import annotations

from typing import Optional

from .enums import FailureReason


class DomainError(Exception):
    """Base exception for business rule violations.

    Each subclass carries the outward status class it maps to, so controllers
    can translate any domain error without knowing the concrete type.
    """

    status_code = 500
    kind = "Internal"

    def __init__(self, message: str, *, reason: Optional[FailureReason] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason

    def to_dict(self) -> dict:
        body = {"kind": self.kind, "message": self.message}
        if self.reason is not None:
            body["reason"] = self.reason.value
        return body


class NotFoundError(DomainError):
    """Raised when the referenced subject does not exist."""

    status_code = 404
    kind = "NotFound"


class ForbiddenError(DomainError):
    """Raised when proof of presence is missing or the location is outside the geofence."""

    status_code = 403
    kind = "Forbidden"

    def __init__(
        self,
        message: str,
        *,
        reason: Optional[FailureReason] = None,
        distance_meters: Optional[float] = None,
    ):
        super().__init__(message, reason=reason)
        self.distance_meters = distance_meters

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.distance_meters is not None:
            body["distanceMeters"] = round(self.distance_meters)
        return body


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400
    kind = "BadRequest"


class InternalError(DomainError):
    """Raised for persistence or unexpected faults."""
