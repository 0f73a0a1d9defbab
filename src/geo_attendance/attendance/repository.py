from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Keyed store of daily records.

    `find`/`create`/`update` are plain read-then-write primitives; concurrent
    marks for the same (subject_id, work_date) are not serialized by them.
    `check_in_if_absent`/`check_out_if_open` are the atomic conditional writes
    used when ATOMIC_WRITES is enabled.
    """

    def find(self, subject_id: int, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def check_in_if_absent(self, record: AttendanceRecord) -> Optional[AttendanceRecord]:
        """Store the check-in unless the day already has one.

        Returns the stored record, or None when a check-in already existed.
        """

        raise NotImplementedError

    def check_out_if_open(self, record: AttendanceRecord) -> bool:
        """Set the check-out only if the stored record is checked in and not yet out."""

        raise NotImplementedError

    def delete_for_subject(self, subject_id: int) -> int:
        raise NotImplementedError
