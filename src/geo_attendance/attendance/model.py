from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceAction, AttendanceState
from ..evidence.model import EvidenceOutcome


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: the daily attendance record of one subject.

    Keyed by (subject_id, work_date). A check-out is only ever set on a record
    that already has a check-in.
    """

    subject_id: int
    work_date: str
    check_in_time: Optional[datetime] = None
    check_in_photo: Optional[str] = None
    check_out_time: Optional[datetime] = None
    check_out_photo: Optional[str] = None
    location_verified: bool = False
    attendance_id: Optional[int] = None

    @property
    def state(self) -> AttendanceState:
        if self.check_out_time is not None:
            return AttendanceState.CHECKED_OUT
        if self.check_in_time is not None:
            return AttendanceState.CHECKED_IN
        return AttendanceState.NONE


_ACTION_LABELS = {
    AttendanceAction.CHECK_IN: "Checked In",
    AttendanceAction.CHECK_OUT: "Checked Out",
}


@dataclass(frozen=True)
class MarkResult:
    """Confirmation returned by a successful mark-attendance call."""

    action: AttendanceAction
    record: AttendanceRecord
    evidence: EvidenceOutcome

    @property
    def label(self) -> str:
        return _ACTION_LABELS[self.action]

    @property
    def message(self) -> str:
        return f"{self.label} successfully!"
