"""
projectmanager.services._shared.ports
=====================================

*Ports* (hexagonal interfaces) consumed by the account services.

Modules
-------
- :mod:`user_repository`:
    Defines :class:`~.UserRepositoryPort` (lookup by email / id, save,
    list all) and :class:`~.InMemoryUserRepository`, a dict-backed adapter
    for service-level tests.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasherPort` (salted hash + verification).

Concrete SQL and werkzeug adapters live in :mod:`projectmanager.repositories`
and :mod:`projectmanager.infra.security`.
"""

from __future__ import annotations

from .password_hasher import PasswordHasherPort
from .user_repository import InMemoryUserRepository, UserRepositoryPort

__all__ = [
    "PasswordHasherPort",
    "UserRepositoryPort",
    "InMemoryUserRepository",
]
