"""Account service: login, registration and user record management."""

from __future__ import annotations

from .dto import LoginIn, RegistrationIn
from .service import (
    EMAIL_NOT_PRESENT,
    EMAIL_PRESENT,
    INVALID_LOGIN_PW,
    PW_MISMATCH,
    UserService,
)

__all__ = [
    "UserService",
    "LoginIn",
    "RegistrationIn",
    "EMAIL_NOT_PRESENT",
    "INVALID_LOGIN_PW",
    "PW_MISMATCH",
    "EMAIL_PRESENT",
]
