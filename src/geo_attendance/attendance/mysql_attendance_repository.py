from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, subject_id, work_date,
    check_in_time, check_in_photo, check_out_time, check_out_photo, location_verified
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        subject_id=int(r["subject_id"]),
        work_date=str(r["work_date"]),
        check_in_time=r.get("check_in_time"),
        check_in_photo=r.get("check_in_photo"),
        check_out_time=r.get("check_out_time"),
        check_out_photo=r.get("check_out_photo"),
        location_verified=bool(r.get("location_verified")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(self, subject_id: int, work_date: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE subject_id=%s AND work_date=%s
                """,
                (subject_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    subject_id, work_date, check_in_time, check_in_photo,
                    check_out_time, check_out_photo, location_verified
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.subject_id,
                    record.work_date,
                    record.check_in_time,
                    record.check_in_photo,
                    record.check_out_time,
                    record.check_out_photo,
                    int(record.location_verified),
                ),
            )
            return replace(record, attendance_id=int(cur.lastrowid))

    def update(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_in_time=%s, check_in_photo=%s,
                    check_out_time=%s, check_out_photo=%s, location_verified=%s
                WHERE subject_id=%s AND work_date=%s
                """,
                (
                    record.check_in_time,
                    record.check_in_photo,
                    record.check_out_time,
                    record.check_out_photo,
                    int(record.location_verified),
                    record.subject_id,
                    record.work_date,
                ),
            )
        return record

    def check_in_if_absent(self, record: AttendanceRecord) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records(
                    subject_id, work_date, check_in_time, check_in_photo, location_verified
                )
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    record.subject_id,
                    record.work_date,
                    record.check_in_time,
                    record.check_in_photo,
                    int(record.location_verified),
                ),
            )
            stored = cur.rowcount > 0
            if not stored:
                # Row exists: fill the check-in only if it is still empty.
                cur.execute(
                    """
                    UPDATE attendance_records
                    SET check_in_time=%s, check_in_photo=%s, location_verified=%s
                    WHERE subject_id=%s AND work_date=%s AND check_in_time IS NULL
                    """,
                    (
                        record.check_in_time,
                        record.check_in_photo,
                        int(record.location_verified),
                        record.subject_id,
                        record.work_date,
                    ),
                )
                stored = cur.rowcount > 0
        if not stored:
            return None
        return self.find(record.subject_id, record.work_date)

    def check_out_if_open(self, record: AttendanceRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, check_out_photo=%s
                WHERE subject_id=%s AND work_date=%s
                  AND check_in_time IS NOT NULL AND check_out_time IS NULL
                """,
                (record.check_out_time, record.check_out_photo, record.subject_id, record.work_date),
            )
            return cur.rowcount > 0

    def delete_for_subject(self, subject_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE subject_id=%s", (subject_id,))
            return int(cur.rowcount)
