"""WSGI entry point: ``gunicorn projectmanager.wsgi:app``."""

from __future__ import annotations

from projectmanager import create_app

app = create_app()
