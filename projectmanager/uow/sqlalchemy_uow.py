"""
Units of Work over the Flask-SQLAlchemy session.

Handlers open exactly one per request::

    with SQLAlchemyUnitOfWork() as uow:
        result = user_service(uow).register(dto, binding)

Leaving the block commits (read-write) or rolls back (read-only, or on error).
"""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.orm import Session, scoped_session

from projectmanager.core.extensions import db
from projectmanager.repositories import UserRepository
from projectmanager.uow.base import UnitOfWork


class _SessionUnitOfWork(UnitOfWork):
    """Bind the account repositories to one session."""

    def __init__(self, session: Session | None = None) -> None:
        self.session: Session = session if session is not None else db.session
        self.users = UserRepository(session=self.session)

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyUnitOfWork(_SessionUnitOfWork):
    """Read-write: commit on a clean exit, roll back when the block raises."""

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.commit()
        except Exception:
            self.rollback()
            raise

    def commit(self) -> None:
        self.session.commit()


class SQLAlchemyReadOnlyUnitOfWork(_SessionUnitOfWork):
    """
    Read-only: flushing new, dirty or deleted objects raises, the
    transaction is rolled back on exit and :meth:`commit` is refused.
    """

    def __init__(self, session: Session | None = None) -> None:
        super().__init__(session)
        self._guarded: Session | None = None

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        # Listen on the concrete Session; a scoped_session target reaches its whole factory
        self._guarded = _concrete(self.session)
        event.listen(self._guarded, "before_flush", _refuse_writes)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            guarded, self._guarded = self._guarded, None
            if guarded is not None and event.contains(guarded, "before_flush", _refuse_writes):
                event.remove(guarded, "before_flush", _refuse_writes)

    def commit(self) -> None:
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")


def _concrete(session: Session) -> Session:
    return session() if isinstance(session, scoped_session) else session


def _refuse_writes(session: Session, flush_context, instances) -> None:
    if session.new or session.dirty or session.deleted:
        raise RuntimeError("Read-only UnitOfWork: ORM flush blocked, pending writes present.")
