from __future__ import annotations

from datetime import datetime, timezone

from ..core.constants import WORK_DATE_FORMAT


def now_utc() -> datetime:
    """Current server time (UTC).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def work_date_for(now: datetime) -> str:
    """Calendar key of the daily record, e.g. '2026-02-01'."""
    return now.strftime(WORK_DATE_FORMAT)
