from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceAction
from ..model import AttendanceRecord
from ..repository import AttendanceRepository


class MarkStrategy(ABC):
    """Strategy Pattern: one transition of the daily record state machine.

    `apply` only computes the next record (and rejects invalid transitions);
    `persist` writes it, either read-then-write or through the store's atomic
    conditional writes.
    """

    action: AttendanceAction

    @abstractmethod
    def apply(
        self,
        existing: Optional[AttendanceRecord],
        *,
        subject_id: int,
        work_date: str,
        now: datetime,
        evidence_ref: Optional[str],
    ) -> AttendanceRecord:
        raise NotImplementedError

    @abstractmethod
    def persist(
        self,
        repo: AttendanceRepository,
        existing: Optional[AttendanceRecord],
        updated: AttendanceRecord,
        *,
        atomic: bool,
    ) -> AttendanceRecord:
        """Store `updated`; the return value is the record as stored.

        With `atomic` the store's conditional write decides the outcome and
        `existing` is ignored; a lost race raises the same error as `apply`.
        """
        raise NotImplementedError
