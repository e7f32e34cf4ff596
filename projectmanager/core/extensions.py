"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

# Constraint naming convention; the registration race surfaces as a
# violation of ``uq_users_email`` so the name must stay stable.
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
migrate = Migrate(render_as_batch=True)


def init_app(app: Flask) -> None:
    """Bind SQLAlchemy and Flask-Migrate to ``app``.

    Imports :mod:`projectmanager.models` so the metadata is complete before
    Alembic inspects it.
    """
    db.init_app(app)

    from projectmanager import models as _models  # noqa: F401

    migrate.init_app(app, db)
