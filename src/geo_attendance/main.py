from __future__ import annotations

import importlib
import logging
import os

from dotenv import load_dotenv
from flask import Flask, request

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_demo_subjects, list_tables
from .database.connection import DBConfig
from .users.controller import register as register_users
from .verification.controller import register as register_verification

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(*, container: Container | None = None, settings=None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = importlib.import_module(get_settings_module())
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY", "dev-secret-key")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = DBConfig.from_dict(getattr(settings, "DB_CONFIG"))
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            ensure_demo_subjects(db_config)
            logger.info("Demo subjects ready")
        container = build_container(settings)

    @app.before_request
    def _log_request():
        logger.info("%s %s", request.method, request.path)

    register_attendance(app, container)
    register_users(app, container)
    register_verification(app, container)

    return app


if __name__ == "__main__":
    create_app().run(port=int(os.getenv("PORT", "3000")))
