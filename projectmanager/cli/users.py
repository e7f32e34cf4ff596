"""Flask CLI commands for managing accounts from a shell."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

from projectmanager.api.deps import user_service
from projectmanager.schemas import RegistrationSchema, bind_form
from projectmanager.uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork

LOGGER = logging.getLogger(__name__)


@click.group("users")
def users_cli() -> None:
    """Account management commands."""


@users_cli.command("create")
@click.option("--email", required=True)
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.password_option("--password", confirmation_prompt=True)
@with_appcontext
def create_command(email: str, first_name: str, last_name: str, password: str) -> None:
    """Register an account through the same rules as the web form."""
    payload = {
        "email": email,
        "firstName": first_name,
        "lastName": last_name,
        "password": password,
        "confirmPassword": password,
    }
    dto, binding = bind_form(RegistrationSchema(), payload)
    with SQLAlchemyUnitOfWork() as uow:
        result = user_service(uow).register(dto, binding)
        if not result.ok:
            for err in result.errors:
                click.echo(f"{err.field}: {err.message} [{err.code}]", err=True)
            raise click.ClickException("Account was not created.")
        user = result.unwrap()
        user_id = str(user.id)
    LOGGER.info("cli.users.create", extra={"user_id": user_id})
    click.echo(f"Created user {user_id} <{email}>")


@users_cli.command("list")
@with_appcontext
def list_command() -> None:
    """Print id, email and name of every account."""
    with SQLAlchemyReadOnlyUnitOfWork() as uow:
        users = user_service(uow).find_all()
        if not users:
            click.echo("(no users)")
            return
        width = max(len(u.email) for u in users)
        for user in users:
            click.echo(f"{user.id}  {user.email.ljust(width)}  {user.full_name}")
