from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.factory import MarkStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_IMGBB_UPLOAD_URL, DEFAULT_UPLOAD_TIMEOUT_SECONDS
from .database.connection import DatabaseConnection, DBConfig, connect
from .evidence.store import EvidenceStore
from .evidence.uploader import ImgBBUploader
from .geofence.model import Coordinate, Geofence
from .geofence.validator import GeofenceValidator
from .users.mysql_subject_repository import MySQLSubjectRepository
from .users.repository import SubjectRepository
from .users.service import SubjectService
from .verification.factory import VerificationStrategyFactory


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    subjects_repo: SubjectRepository
    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    subject_service: SubjectService

    qr_token: str = ""


def geofence_from_settings(settings: Any) -> Geofence:
    return Geofence(
        center=Coordinate(
            latitude=float(getattr(settings, "OFFICE_LATITUDE")),
            longitude=float(getattr(settings, "OFFICE_LONGITUDE")),
        ),
        radius_meters=float(getattr(settings, "RADIUS_METERS")),
    )


def evidence_store_from_settings(settings: Any) -> EvidenceStore:
    api_key = getattr(settings, "IMGBB_API_KEY", "")
    if not api_key:
        return EvidenceStore(None)
    uploader = ImgBBUploader(
        api_key,
        upload_url=getattr(settings, "IMGBB_UPLOAD_URL", DEFAULT_IMGBB_UPLOAD_URL),
        timeout=float(getattr(settings, "UPLOAD_TIMEOUT_SECONDS", DEFAULT_UPLOAD_TIMEOUT_SECONDS)),
    )
    return EvidenceStore(uploader)


def build_container(
    settings: Any,
    *,
    subjects_repo: SubjectRepository | None = None,
    attendance_repo: AttendanceRepository | None = None,
) -> Container:
    """Wire repositories and services from a settings module.

    Repositories may be injected (tests); otherwise MySQL ones are built on the
    shared database handle.
    """

    conn = None
    if subjects_repo is None or attendance_repo is None:
        conn = connect(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        subjects_repo = subjects_repo or MySQLSubjectRepository(conn)
        attendance_repo = attendance_repo or MySQLAttendanceRepository(conn)

    qr_token = str(getattr(settings, "QR_TOKEN", "") or "")
    verification = VerificationStrategyFactory().for_mode(
        getattr(settings, "VERIFICATION_MODE", None),
        qr_token=qr_token,
    )

    attendance_service = AttendanceService(
        attendance_repo,
        subjects_repo,
        geofence=geofence_from_settings(settings),
        evidence=evidence_store_from_settings(settings),
        verification=verification,
        geofence_validator=GeofenceValidator(),
        strategy_factory=MarkStrategyFactory(),
        atomic_writes=bool(getattr(settings, "ATOMIC_WRITES", False)),
    )
    subject_service = SubjectService(subjects_repo, attendance_repo)

    return Container(
        conn=conn,
        subjects_repo=subjects_repo,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        subject_service=subject_service,
        qr_token=qr_token,
    )
