"""SQLAlchemy models; importing this package registers them on the metadata."""

from __future__ import annotations

from .base import ReprMixin, TimestampMixin, UUIDPKMixin
from .user import User

__all__ = ["User", "ReprMixin", "TimestampMixin", "UUIDPKMixin"]
