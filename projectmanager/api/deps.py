"""Shared API helpers: responses, timing, and service wiring."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from projectmanager.infra.security import WerkzeugPasswordHasher
from projectmanager.services.users import UserService
from projectmanager.uow import UnitOfWork

F = TypeVar("F", bound=Callable[..., Any])


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response with ``status``."""
    response = jsonify(payload)
    response.status_code = status
    return response


def get_password_hasher() -> WerkzeugPasswordHasher:
    """Return the app-wide hasher, built once from config."""
    hasher = current_app.extensions.get("password_hasher")
    if hasher is None:
        hasher = WerkzeugPasswordHasher.from_app(current_app)
        current_app.extensions["password_hasher"] = hasher
    return hasher


def user_service(uow: UnitOfWork) -> UserService:
    """Build a :class:`UserService` over the repositories of ``uow``."""
    return UserService(users=uow.users, hasher=get_password_hasher())


def timing(func: F) -> F:
    """Decorator logging handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
