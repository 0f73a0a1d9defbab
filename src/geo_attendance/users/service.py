from __future__ import annotations

import logging

from ..attendance.repository import AttendanceRepository
from ..core.enums import FailureReason
from ..core.exceptions import NotFoundError
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class SubjectService:
    """Use case: look up and remove subjects."""

    def __init__(self, subjects: SubjectRepository, attendance: AttendanceRepository):
        self._subjects = subjects
        self._attendance = attendance

    def get_subject(self, subject_id: int) -> Subject:
        subject = self._subjects.get_by_id(subject_id)
        if not subject:
            raise NotFoundError("Student not found", reason=FailureReason.SUBJECT_NOT_FOUND)
        return subject

    def delete_subject(self, subject_id: int) -> int:
        """Delete a subject and its attendance records; returns records removed."""
        self.get_subject(subject_id)

        removed = self._attendance.delete_for_subject(subject_id)
        if not self._subjects.delete_by_id(subject_id):
            raise NotFoundError("Student not found", reason=FailureReason.SUBJECT_NOT_FOUND)

        logger.info("Deleted subject %s and %s attendance record(s)", subject_id, removed)
        return removed
