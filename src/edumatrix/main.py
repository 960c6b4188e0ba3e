from __future__ import annotations

import importlib
from datetime import date, timedelta
from typing import Any, Callable, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

from .attendance.controller import register as register_attendance
from .common.web import fail
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from .dashboard.controller import register as register_dashboard
from .students.controller import register as register_students
from .users.controller import register as register_users

_SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "SESSION_DAYS",
    "SEED_DEMO_DATA",
    "SEED_HISTORY_DAYS",
    "SEED_RANDOM_SEED",
)

_HTTP_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (PersistenceError, 503),
)


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in _SETTING_NAMES if hasattr(module, name)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for kind, code in _HTTP_STATUS if isinstance(e, kind)), 400)
        if isinstance(e, PersistenceError):
            return fail(str(e), status, retryable=True)
        return fail(str(e), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error")
        return fail("Internal server error", 500)


def create_app(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    clock: Optional[Callable[[], date]] = None,
    container: Optional[Container] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings(overrides)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(settings.get("SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    container = container or build_container(settings=settings, clock=clock)

    if app.config["DEBUG"]:
        app.logger.info(
            "[edumatrix] settings=%s seeded_records=%d",
            settings["SETTINGS_MODULE"],
            len(container.attendance_repo.list_all()),
        )

    _register_error_handlers(app)

    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)

    return app
