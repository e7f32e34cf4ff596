"""factory_boy base wired to the session of the running test."""

from __future__ import annotations

import factory
from sqlalchemy.orm import Session


class SQLAlchemySession:
    """Holder the ``_factories_session`` fixture fills for each test."""

    _current: Session | None = None

    @classmethod
    def set(cls, session: Session | None) -> None:
        cls._current = session

    @classmethod
    def get(cls) -> Session:
        # ``.build()`` never asks for a session; ``.create()`` does
        if cls._current is None:
            raise RuntimeError("No factory session; is the '_factories_session' fixture active?")
        return cls._current


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Commits every created row so API handlers and the CLI can see it."""

    class Meta:
        abstract = True
        sqlalchemy_session_factory = SQLAlchemySession.get
        sqlalchemy_session_persistence = "commit"
