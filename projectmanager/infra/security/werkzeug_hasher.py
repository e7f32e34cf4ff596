"""Werkzeug-backed implementation of the password hashing port."""

from __future__ import annotations

from flask import Flask
from werkzeug.security import check_password_hash, generate_password_hash

DEFAULT_METHOD = "scrypt"
DEFAULT_SALT_LENGTH = 16


class WerkzeugPasswordHasher:
    """
    Salted adaptive hashing via :mod:`werkzeug.security`.

    Hashes look like ``method$salt$hash``; verification reads the method,
    cost and salt back out of the stored value and compares digests with
    :func:`hmac.compare_digest`.

    :param method: Werkzeug method spec, e.g. ``"scrypt"`` or
        ``"pbkdf2:sha256:600000"``.
    :type method: str
    :param salt_length: Number of random salt characters per hash.
    :type salt_length: int
    """

    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = DEFAULT_SALT_LENGTH) -> None:
        if salt_length < 1:
            raise ValueError("salt_length must be positive.")
        self.method = method
        self.salt_length = salt_length

    @classmethod
    def from_app(cls, app: Flask) -> WerkzeugPasswordHasher:
        """Build a hasher from ``PASSWORD_HASH_METHOD`` / ``PASSWORD_SALT_LENGTH``."""
        return cls(
            method=app.config.get("PASSWORD_HASH_METHOD", DEFAULT_METHOD),
            salt_length=int(app.config.get("PASSWORD_SALT_LENGTH", DEFAULT_SALT_LENGTH)),
        )

    def hash(self, plaintext: str) -> str:
        return generate_password_hash(plaintext, method=self.method, salt_length=self.salt_length)

    def verify(self, plaintext: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            # ``check_password_hash`` is untyped; coerce for mypy.
            return bool(check_password_hash(hashed, plaintext))
        except ValueError:
            # stored value is not a werkzeug hash (e.g. plaintext saved through update_user)
            return False
