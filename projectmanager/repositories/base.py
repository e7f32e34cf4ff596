"""Persistence-only repository base for SQLAlchemy 2.x models.

Repositories look rows up and stage writes; they flush so generated keys and
server defaults are visible, but never commit or roll back. Transactions
belong to the Unit of Work that handed them their session.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from projectmanager.core.extensions import db

M = TypeVar("M")  # mapped model


class BaseRepository(Generic[M]):
    """Lookups and upserts for one mapped model.

    Subclasses set ``model`` and may override :meth:`_default_ordering`.
    """

    model: type[M]

    def __init__(self, session: Session | None = None) -> None:
        """
        :param session: Session of the enclosing Unit of Work. Falls back to
            the Flask-scoped ``db.session``.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session = session

    @property
    def session(self) -> Session:
        return self._session if self._session is not None else cast(Session, db.session)

    def _default_ordering(self) -> Sequence[Any]:
        """ORDER BY clauses for :meth:`list_all`."""
        return ()

    # Reads

    def get(self, entity_id: Any) -> M | None:
        """Primary-key lookup; ``None`` when no row matches."""
        return self.session.get(self.model, entity_id)

    def find_one(self, **filters: Any) -> M | None:
        """First row whose attributes equal every ``filters`` value."""
        stmt = select(self.model).filter_by(**filters).limit(1)
        return self.session.scalars(stmt).first()

    def list_all(self) -> list[M]:
        stmt = select(self.model).order_by(*self._default_ordering())
        return list(self.session.scalars(stmt))

    # Writes

    def add(self, instance: M) -> M:
        """Stage a new row and flush so its key and defaults are populated."""
        self.session.add(instance)
        self.session.flush()
        return instance

    def save(self, instance: M) -> M:
        """Insert or update ``instance``, then flush.

        A transient object without a key is inserted. An object the session
        already tracks is flushed in place. Anything else (detached, or
        transient carrying an existing key) is merged by primary key, and
        the session-bound copy is returned.
        """
        state = inspect(instance)
        if state.transient and getattr(instance, "id", None) is None:
            return self.add(instance)
        if not (state.persistent or state.pending):
            instance = self.session.merge(instance)
        self.session.flush()
        return instance
