"""Problem+JSON (RFC 7807) responses for every failure the API can report.

Account endpoints answer with one of three shapes:

- ``422`` carrying ``details.errors``, a list of ``{field, code, message}``
  rejections the front-end binds next to its form inputs.
- ``404`` / ``409`` / ``503`` for missing records, store conflicts and an
  unreachable database.
- ``500`` with a generic message; the traceback only goes to the log.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from projectmanager.core.logger import ensure_request_id
from projectmanager.services._shared.validation import FieldError

log = logging.getLogger(__name__)

PROBLEM_MIMETYPE = "application/problem+json"

_STATUS_CODES: dict[int, str] = {
    HTTPStatus.BAD_REQUEST: "bad_request",
    HTTPStatus.NOT_FOUND: "not_found",
    HTTPStatus.METHOD_NOT_ALLOWED: "method_not_allowed",
    HTTPStatus.CONFLICT: "conflict",
    HTTPStatus.UNSUPPORTED_MEDIA_TYPE: "unsupported_media_type",
    HTTPStatus.UNPROCESSABLE_ENTITY: "unprocessable_entity",
    HTTPStatus.INTERNAL_SERVER_ERROR: "internal_server_error",
    HTTPStatus.SERVICE_UNAVAILABLE: "service_unavailable",
}

# Markers of the users.email unique index across SQLite and PostgreSQL messages
_EMAIL_CONSTRAINT_MARKERS = ("uq_users_email", "users.email")


def problem(
    status: int,
    code: str,
    detail: str,
    details: dict[str, Any] | None = None,
) -> Response:
    """
    Render a problem document for the current request.

    :param status: HTTP status code.
    :param code: Stable, machine-readable error code.
    :param detail: Client-safe summary.
    :param details: Optional structured payload (e.g. field rejections).
    :returns: A response with ``application/problem+json`` and ``status`` set.
    """
    body: dict[str, Any] = {
        "type": "about:blank",
        "title": HTTPStatus(status).phrase,
        "status": int(status),
        "detail": detail,
        "instance": request.path,
        "code": code,
        "request_id": ensure_request_id(),
    }
    if details:
        body["details"] = details
    response = jsonify(body)
    response.status_code = int(status)
    response.mimetype = PROBLEM_MIMETYPE
    return response


class APIError(Exception):
    """
    Failure raised by a handler and rendered as a problem document.

    Parameters
    ----------
    message : str
        Client-safe summary, rendered as ``detail``.
    status_code : int, optional
        HTTP status. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier. Defaults to ``"bad_request"``.
    details : dict[str, Any] | None, optional
        Extra structured payload.
    """

    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.BAD_REQUEST,
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.details = details or {}

    def to_response(self) -> Response:
        return problem(self.status_code, self.code, self.message, self.details)


class NotFound(APIError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, HTTPStatus.NOT_FOUND, "not_found")


class Conflict(APIError):
    def __init__(self, message: str = "Conflict", errors: Iterable[FieldError] = ()) -> None:
        rejected = [err.as_dict() for err in errors]
        super().__init__(
            message,
            HTTPStatus.CONFLICT,
            "conflict",
            {"errors": rejected} if rejected else None,
        )


class ValidationFailed(APIError):
    """422 listing field rejections in the order they were recorded."""

    def __init__(self, errors: Iterable[FieldError], message: str = "Validation failed") -> None:
        super().__init__(
            message,
            HTTPStatus.UNPROCESSABLE_ENTITY,
            "validation_error",
            {"errors": [err.as_dict() for err in errors]},
        )


def conflict_from_integrity_error(err: IntegrityError) -> Conflict:
    """Translate a store-level uniqueness failure into a :class:`Conflict`.

    A clash on the users email index becomes the same ``EMAIL-PRESENT``
    rejection the registration check produces.
    """
    # Imported here: the service package imports models, which import core
    from projectmanager.services.users import EMAIL_PRESENT

    text = str(getattr(err, "orig", err))
    if any(marker in text for marker in _EMAIL_CONSTRAINT_MARKERS):
        return Conflict("Email already registered", errors=[EMAIL_PRESENT])
    return Conflict("Resource conflict")


def init_app(app: Flask) -> None:
    """Register the problem+json handlers on ``app``."""

    @app.errorhandler(APIError)
    def on_api_error(err: APIError):
        log_at = log.error if err.status_code >= 500 else log.info
        log_at("api.error %s (%s)", err.code, err.status_code, extra={"error_code": err.code})
        return err.to_response()

    @app.errorhandler(HTTPException)
    def on_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        code = _STATUS_CODES.get(status, "error")
        if status == HTTPStatus.NOT_FOUND:
            detail = f"Route '{request.path}' not found"
        else:
            detail = (err.description or code.replace("_", " ").capitalize()).strip()
        log.warning("http.error %s (%s)", code, status, extra={"error_code": code})
        return problem(status, code, detail)

    @app.errorhandler(MarshmallowValidationError)
    def on_schema_error(err: MarshmallowValidationError):
        log.info("schema.rejected", extra={"error_code": "validation_error"})
        return problem(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            "validation_error",
            "Validation failed",
            {"errors": err.messages},
        )

    @app.errorhandler(IntegrityError)
    def on_integrity_error(err: IntegrityError):
        conflict = conflict_from_integrity_error(err)
        log.warning("db.integrity_error", exc_info=True, extra={"error_code": conflict.code})
        return conflict.to_response()

    @app.errorhandler(OperationalError)
    def on_operational_error(err: OperationalError):
        log.error("db.unavailable", exc_info=True, extra={"error_code": "service_unavailable"})
        return problem(
            HTTPStatus.SERVICE_UNAVAILABLE,
            "service_unavailable",
            "Service temporarily unavailable",
        )

    @app.errorhandler(Exception)
    def on_unexpected(err: Exception):
        log.error("unhandled.exception", exc_info=True)
        return problem(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "internal_server_error",
            "Unexpected error",
        )


__all__ = [
    "APIError",
    "Conflict",
    "NotFound",
    "ValidationFailed",
    "conflict_from_integrity_error",
    "init_app",
    "problem",
]
