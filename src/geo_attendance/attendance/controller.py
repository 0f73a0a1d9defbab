from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import error_response, internal_error_response
from ..container import Container
from ..core.exceptions import DomainError
from .schemas import MarkAttendanceRequest

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            req = MarkAttendanceRequest.from_payload(request.get_json(silent=True))
            result = container.attendance_service.mark(req)
            return jsonify({
                "success": True,
                "action": result.label,
                "message": result.message,
                "evidence": result.evidence.kind.value,
            }), 200
        except DomainError as e:
            logger.info("Mark attendance rejected: %s/%s %s", e.kind, e.reason and e.reason.value, e.message)
            return error_response(e)
        except Exception:
            logger.exception("Error marking attendance")
            return internal_error_response("Error marking attendance")
