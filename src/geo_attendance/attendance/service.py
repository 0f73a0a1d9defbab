from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import now_utc, work_date_for
from ..core.enums import FailureReason
from ..core.exceptions import ForbiddenError, NotFoundError
from ..evidence.store import EvidenceStore
from ..geofence.model import Geofence
from ..geofence.validator import GeofenceValidator
from ..users.repository import SubjectRepository
from ..verification.strategies.base import VerificationStrategy
from ..verification.strategies.non_empty_strategy import NonEmptyTokenStrategy
from .factory import MarkStrategyFactory
from .model import MarkResult
from .repository import AttendanceRepository
from .schemas import MarkAttendanceRequest

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark a check-in or check-out for today's record.

    All validation runs before any write, in this order: subject, verification
    token, GPS presence, geofence, action type. Evidence upload happens only
    after the request is known to be valid and never fails the call.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        subjects: SubjectRepository,
        *,
        geofence: Geofence,
        evidence: EvidenceStore,
        verification: VerificationStrategy | None = None,
        geofence_validator: GeofenceValidator | None = None,
        strategy_factory: MarkStrategyFactory | None = None,
        atomic_writes: bool = False,
    ):
        self._attendance = attendance
        self._subjects = subjects
        self._geofence = geofence
        self._evidence = evidence
        self._verification = verification or NonEmptyTokenStrategy()
        self._validator = geofence_validator or GeofenceValidator()
        self._factory = strategy_factory or MarkStrategyFactory()
        self._atomic = bool(atomic_writes)

    def mark(self, request: MarkAttendanceRequest, *, now: datetime | None = None) -> MarkResult:
        now = now or now_utc()
        today = work_date_for(now)

        subject = self._subjects.get_by_id(request.subject_id)
        if not subject:
            raise NotFoundError("User not found", reason=FailureReason.SUBJECT_NOT_FOUND)

        if not self._verification.verify(request.verification_token):
            raise ForbiddenError("No QR Code detected.", reason=FailureReason.NO_VERIFICATION)

        result = self._validator.check(request.coordinate, self._geofence)
        if not result.within_radius:
            distance = round(result.distance_meters)
            raise ForbiddenError(
                f"Location mismatch ({distance}m). Please stay at the office.",
                reason=FailureReason.LOCATION_MISMATCH,
                distance_meters=result.distance_meters,
            )

        strategy = self._factory.for_action(request.action)

        evidence = self._evidence.attach(request.photo)

        existing = self._attendance.find(subject.subject_id, today)
        updated = strategy.apply(
            existing,
            subject_id=subject.subject_id,
            work_date=today,
            now=now,
            evidence_ref=evidence.reference,
        )
        stored = strategy.persist(self._attendance, existing, updated, atomic=self._atomic)

        logger.info(
            "Attendance %s for subject %s on %s (distance=%.1fm, evidence=%s)",
            strategy.action.value, subject.subject_id, today, result.distance_meters, evidence.kind.value,
        )
        return MarkResult(action=strategy.action, record=stored, evidence=evidence)

