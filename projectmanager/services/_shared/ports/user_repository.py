from __future__ import annotations

import copy
from typing import Protocol
from uuid import UUID, uuid4

from projectmanager.models.user import User


class UserRepositoryPort(Protocol):
    """Persistence capabilities the account services rely on."""

    def find_by_email(self, email: str) -> User | None: ...

    def find_by_id(self, user_id: UUID) -> User | None: ...

    def save(self, user: User) -> User: ...

    def find_all(self) -> list[User]: ...


class InMemoryUserRepository(UserRepositoryPort):
    """
    Dict-backed repository used by unit tests.

    Stored entities are copies, so later mutation of an object handed to
    :meth:`save` is not visible until it is saved again. ``writes`` counts
    calls to :meth:`save`.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._rows: dict[UUID, User] = {}
        self.writes = 0
        for user in users or []:
            self._store(user)

    def _store(self, user: User) -> User:
        if user.id is None:
            user.id = uuid4()
        self._rows[user.id] = _detached_copy(user)
        return _detached_copy(self._rows[user.id])

    def find_by_email(self, email: str) -> User | None:
        for row in self._rows.values():
            if row.email == email:
                return _detached_copy(row)
        return None

    def find_by_id(self, user_id: UUID) -> User | None:
        row = self._rows.get(user_id)
        return _detached_copy(row) if row is not None else None

    def save(self, user: User) -> User:
        self.writes += 1
        # like the SQL adapter, the caller's object receives the generated id
        return self._store(user)

    def find_all(self) -> list[User]:
        return [_detached_copy(row) for row in self._rows.values()]


def _detached_copy(user: User) -> User:
    """Copy the column values of ``user`` into a fresh transient instance."""
    clone = User()
    for column in User.__table__.columns:
        value = getattr(user, column.key, None)
        if value is not None:
            setattr(clone, column.key, copy.copy(value))
    return clone
