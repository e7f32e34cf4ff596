"""Login and registration endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from projectmanager.api.deps import json_response, timing, user_service
from projectmanager.core.errors import ValidationFailed
from projectmanager.schemas import LoginSchema, RegistrationSchema, UserSchema, bind_form
from projectmanager.uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
registration_schema = RegistrationSchema()
user_schema = UserSchema()


def _form_payload():
    return request.get_json(silent=True) or request.form.to_dict()


@bp.post("/login")
@timing
def login():
    """Check credentials; 200 with the user, 422 with field errors otherwise."""
    dto, binding = bind_form(login_schema, _form_payload())
    with SQLAlchemyReadOnlyUnitOfWork() as uow:
        result = user_service(uow).login(dto, binding)
        if not result.ok:
            raise ValidationFailed(result.errors, message="Login failed")
        body = {"data": user_schema.dump(result.unwrap())}
    return json_response(body)


@bp.post("/register")
@timing
def register():
    """Create an account; 201 with the user, 422 with field errors otherwise."""
    dto, binding = bind_form(registration_schema, _form_payload())
    with SQLAlchemyUnitOfWork() as uow:
        result = user_service(uow).register(dto, binding)
        if not result.ok:
            raise ValidationFailed(result.errors, message="Registration failed")
        user = result.unwrap()
    return json_response({"data": user_schema.dump(user)}, status=201)
