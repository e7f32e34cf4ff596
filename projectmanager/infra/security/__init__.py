"""Password hashing adapters."""

from __future__ import annotations

from .werkzeug_hasher import WerkzeugPasswordHasher

__all__ = ["WerkzeugPasswordHasher"]
