from __future__ import annotations

import logging

from flask import Flask, send_file

from ..common.responses import internal_error_response
from ..container import Container
from .qr import render_token_png

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/qr/image", methods=["GET"], endpoint="office_qr_image")
    def office_qr_image():
        """Printable QR code carrying the office verification token."""
        if not container.qr_token:
            return internal_error_response("QR token is not configured")
        try:
            return send_file(render_token_png(container.qr_token), mimetype="image/png")
        except Exception:
            logger.exception("Error rendering office QR code")
            return internal_error_response("Error rendering QR code")
