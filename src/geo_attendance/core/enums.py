from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Subject roles known to the attendance core."""

    ADMIN = "admin"
    STUDENT = "student"


class AttendanceAction(str, Enum):
    """Action requested by a mark-attendance call."""

    CHECK_IN = "checkin"
    CHECK_OUT = "checkout"


class AttendanceState(str, Enum):
    """State of a daily record: NONE -> CHECKED_IN -> CHECKED_OUT."""

    NONE = "NONE"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"


class EvidenceKind(str, Enum):
    UPLOADED = "UPLOADED"
    FALLBACK_RAW = "FALLBACK_RAW"
    SKIPPED = "SKIPPED"


class FailureReason(str, Enum):
    """Machine-readable reason attached to domain errors."""

    SUBJECT_NOT_FOUND = "SubjectNotFound"
    NO_VERIFICATION = "NoVerification"
    LOCATION_MISMATCH = "LocationMismatch"
    MISSING_LOCATION = "MissingLocation"
    ALREADY_CHECKED_IN = "AlreadyCheckedIn"
    MUST_CHECK_IN_FIRST = "MustCheckInFirst"
    ALREADY_CHECKED_OUT = "AlreadyCheckedOut"
    UNKNOWN_TYPE = "UnknownType"
    INVALID_REQUEST = "InvalidRequest"
