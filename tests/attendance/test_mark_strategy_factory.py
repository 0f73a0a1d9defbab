from datetime import datetime, timezone

import pytest

from geo_attendance.attendance.factory import MarkStrategyFactory
from geo_attendance.attendance.model import AttendanceRecord
from geo_attendance.attendance.strategies.checkin_strategy import CheckInStrategy
from geo_attendance.attendance.strategies.checkout_strategy import CheckOutStrategy
from geo_attendance.core.enums import AttendanceState, FailureReason
from geo_attendance.core.exceptions import ValidationError

NOW = datetime(2026, 2, 1, 9, 0, tzinfo=timezone.utc)


def test_factory_maps_actions_to_strategies():
    factory = MarkStrategyFactory()

    assert isinstance(factory.for_action("checkin"), CheckInStrategy)
    assert isinstance(factory.for_action("checkout"), CheckOutStrategy)


@pytest.mark.parametrize("action", ["CHECKIN", "check-in", "leave", ""])
def test_factory_rejects_unknown_type(action):
    with pytest.raises(ValidationError) as exc:
        MarkStrategyFactory().for_action(action)

    assert exc.value.reason == FailureReason.UNKNOWN_TYPE


def test_checkin_creates_checked_in_record():
    record = CheckInStrategy().apply(None, subject_id=1, work_date="2026-02-01", now=NOW, evidence_ref="url")

    assert record.state == AttendanceState.CHECKED_IN
    assert record.location_verified is True
    assert record.check_in_photo == "url"


def test_checkin_reuses_partial_record():
    partial = AttendanceRecord(subject_id=1, work_date="2026-02-01", attendance_id=7)

    record = CheckInStrategy().apply(partial, subject_id=1, work_date="2026-02-01", now=NOW, evidence_ref=None)

    assert record.attendance_id == 7
    assert record.check_in_time == NOW


def test_checkout_requires_check_in():
    partial = AttendanceRecord(subject_id=1, work_date="2026-02-01")

    with pytest.raises(ValidationError) as exc:
        CheckOutStrategy().apply(partial, subject_id=1, work_date="2026-02-01", now=NOW, evidence_ref=None)

    assert exc.value.reason == FailureReason.MUST_CHECK_IN_FIRST


def test_checkout_moves_record_to_checked_out():
    checked_in = AttendanceRecord(subject_id=1, work_date="2026-02-01", check_in_time=NOW, location_verified=True)
    later = NOW.replace(hour=17)

    record = CheckOutStrategy().apply(checked_in, subject_id=1, work_date="2026-02-01", now=later, evidence_ref="p")

    assert record.state == AttendanceState.CHECKED_OUT
    assert record.check_in_time == NOW
    assert record.check_out_time == later
    assert record.check_out_photo == "p"
