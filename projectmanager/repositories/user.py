"""User repository backing the account services."""

from __future__ import annotations

from uuid import UUID

from projectmanager.models.user import User
from projectmanager.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    Implements :class:`~projectmanager.services._shared.ports.UserRepositoryPort`.
    Email lookups are exact: no case folding or trimming happens here.
    """

    model = User

    def _default_ordering(self):
        return (User.created_at.asc(), User.id.asc())

    def find_by_email(self, email: str) -> User | None:
        """Fetch a user by exact email.

        :param email: Email address as submitted.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        return self.find_one(email=email)

    def find_by_id(self, user_id: UUID) -> User | None:
        """Fetch a user by primary key, ``None`` when absent."""
        return self.get(user_id)

    def find_all(self) -> list[User]:
        """Return every user, oldest first."""
        return self.list_all()
