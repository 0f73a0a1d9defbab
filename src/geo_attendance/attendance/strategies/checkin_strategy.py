from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceAction, FailureReason
from ...core.exceptions import ValidationError
from ..model import AttendanceRecord
from ..repository import AttendanceRepository
from .base import MarkStrategy

ALREADY_CHECKED_IN = "Already checked in for today."


class CheckInStrategy(MarkStrategy):
    """NONE -> CHECKED_IN."""

    action = AttendanceAction.CHECK_IN

    def apply(
        self,
        existing: Optional[AttendanceRecord],
        *,
        subject_id: int,
        work_date: str,
        now: datetime,
        evidence_ref: Optional[str],
    ) -> AttendanceRecord:
        if existing and existing.check_in_time is not None:
            raise ValidationError(ALREADY_CHECKED_IN, reason=FailureReason.ALREADY_CHECKED_IN)

        # A record without a check-in should not exist, but is reused if it does.
        base = existing or AttendanceRecord(subject_id=subject_id, work_date=work_date)
        return replace(base, check_in_time=now, location_verified=True, check_in_photo=evidence_ref)

    def persist(
        self,
        repo: AttendanceRepository,
        existing: Optional[AttendanceRecord],
        updated: AttendanceRecord,
        *,
        atomic: bool,
    ) -> AttendanceRecord:
        if atomic:
            stored = repo.check_in_if_absent(updated)
            if stored is None:
                raise ValidationError(ALREADY_CHECKED_IN, reason=FailureReason.ALREADY_CHECKED_IN)
            return stored

        if existing is None:
            return repo.create(updated)
        return repo.update(updated)
