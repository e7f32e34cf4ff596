"""Repository package exposing persistence-layer access for domain models."""

from __future__ import annotations

from projectmanager.repositories.base import BaseRepository
from projectmanager.repositories.user import UserRepository

__all__ = ["BaseRepository", "UserRepository"]
