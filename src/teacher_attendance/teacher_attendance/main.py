from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container, build_storage
from .core.exceptions import DomainError, NotFoundError
from .attendance.controller import register as register_attendance
from .reports.controller import register as register_reports
from .school_calendar.controller import register as register_calendar
from .teachers.controller import register as register_teachers


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(*, container=None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        data_dir = getattr(settings, "DATA_DIR", "")
        container = build_container(
            storage=build_storage(data_dir),
            state_key=getattr(settings, "STATE_KEY"),
            print_settings_key=getattr(settings, "PRINT_SETTINGS_KEY"),
        )
        app.logger.info("settings=%s data_dir=%s", settings_module, data_dir or "<memory>")

    app.extensions["teacher_attendance"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = 404 if isinstance(e, NotFoundError) else 400
        return jsonify({"error": str(e)}), status

    register_teachers(app, container)
    register_calendar(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
