"""Application factory for the accounts API."""

from __future__ import annotations

from flask import Flask

from projectmanager.core.config import BaseConfig, get_config
from projectmanager.core.logger import configure_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build the Flask application.

    :param config: Config class, object or import path. ``None`` selects the
        class named by ``APP_ENV``.
    :param instance_relative_config: Look for overrides in the instance folder.
    :param instance_config_filename: Optional instance file applied on top.
    :returns: A fully wired :class:`~flask.Flask` app.
    """
    app = Flask(__name__, instance_relative_config=instance_relative_config)
    app.config.from_object(config if config is not None else get_config())
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from projectmanager import api, cli
    from projectmanager.core import cors, errors, extensions, logger

    # Order matters: the database first, error handlers after the routes
    for component in (extensions, logger, cors, api, errors, cli):
        component.init_app(app)

    return app
