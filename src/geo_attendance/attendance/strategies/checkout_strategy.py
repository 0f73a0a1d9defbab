from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceAction, FailureReason
from ...core.exceptions import ValidationError
from ..model import AttendanceRecord
from ..repository import AttendanceRepository
from .base import MarkStrategy

ALREADY_CHECKED_OUT = "Already checked out for today."


class CheckOutStrategy(MarkStrategy):
    """CHECKED_IN -> CHECKED_OUT."""

    action = AttendanceAction.CHECK_OUT

    def apply(
        self,
        existing: Optional[AttendanceRecord],
        *,
        subject_id: int,
        work_date: str,
        now: datetime,
        evidence_ref: Optional[str],
    ) -> AttendanceRecord:
        if existing is None or existing.check_in_time is None:
            raise ValidationError("Must check in before checking out.", reason=FailureReason.MUST_CHECK_IN_FIRST)
        if existing.check_out_time is not None:
            raise ValidationError(ALREADY_CHECKED_OUT, reason=FailureReason.ALREADY_CHECKED_OUT)

        return replace(existing, check_out_time=now, check_out_photo=evidence_ref)

    def persist(
        self,
        repo: AttendanceRepository,
        existing: Optional[AttendanceRecord],
        updated: AttendanceRecord,
        *,
        atomic: bool,
    ) -> AttendanceRecord:
        if atomic:
            if not repo.check_out_if_open(updated):
                raise ValidationError(ALREADY_CHECKED_OUT, reason=FailureReason.ALREADY_CHECKED_OUT)
            return updated
        return repo.update(updated)
