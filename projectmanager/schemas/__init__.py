"""Marshmallow schemas for request binding and response serialization."""

from __future__ import annotations

from .auth import LoginSchema, RegistrationSchema
from .binding import bind_form
from .user import UserSchema, UserUpdateSchema

__all__ = [
    "LoginSchema",
    "RegistrationSchema",
    "UserSchema",
    "UserUpdateSchema",
    "bind_form",
]
