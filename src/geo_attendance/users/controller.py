from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.responses import error_response, internal_error_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/<int:subject_id>", methods=["GET"], endpoint="get_student")
    def get_student(subject_id: int):
        try:
            subject = container.subject_service.get_subject(subject_id)
            return jsonify(subject.to_dict()), 200
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Error fetching student %s", subject_id)
            return internal_error_response("Error fetching details")

    @app.route("/api/students/<int:subject_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(subject_id: int):
        try:
            removed = container.subject_service.delete_subject(subject_id)
            return jsonify({
                "success": True,
                "message": "Student and attendance records deleted successfully",
                "deletedRecords": removed,
            }), 200
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Error deleting student %s", subject_id)
            return internal_error_response("Error deleting student")
