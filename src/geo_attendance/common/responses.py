from __future__ import annotations

from flask import jsonify

from ..core.exceptions import DomainError, InternalError


def error_response(e: DomainError):
    body = {"success": False}
    body.update(e.to_dict())
    return jsonify(body), e.status_code


def internal_error_response(message: str):
    """Generic 500 body; internal details stay in the logs."""
    return error_response(InternalError(message))
