"""User record endpoints."""

from __future__ import annotations

from uuid import UUID

from flask import Blueprint, request

from projectmanager.api.deps import json_response, timing, user_service
from projectmanager.core.errors import NotFound, ValidationFailed
from projectmanager.schemas import UserSchema, UserUpdateSchema, bind_form
from projectmanager.uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork

bp = Blueprint("users", __name__)

user_schema = UserSchema()
user_list_schema = UserSchema(many=True)
user_update_schema = UserUpdateSchema()


@bp.get("")
@timing
def list_users():
    """Return every user."""
    with SQLAlchemyReadOnlyUnitOfWork() as uow:
        data = user_list_schema.dump(user_service(uow).find_all())
    return json_response({"data": data})


@bp.get("/<uuid:user_id>")
@timing
def get_user(user_id: UUID):
    """Return one user or 404."""
    with SQLAlchemyReadOnlyUnitOfWork() as uow:
        user = user_service(uow).get_user_by_id(user_id)
        if user is None:
            raise NotFound(f"User not found: {user_id}")
        data = user_schema.dump(user)
    return json_response({"data": data})


@bp.put("/<uuid:user_id>")
@timing
def update_user(user_id: UUID):
    """Replace the profile fields of a user; 404 for unknown ids."""
    data, binding = bind_form(user_update_schema, request.get_json(silent=True))
    with SQLAlchemyUnitOfWork() as uow:
        service = user_service(uow)
        if service.is_not_valid_id(user_id):
            raise NotFound(f"User not found: {user_id}")
        if binding.has_errors():
            raise ValidationFailed(binding.errors)
        user = service.get_user_by_id(user_id)
        for key, value in data.items():
            setattr(user, key, value)
        saved = service.update_user(user)
        if saved is None:
            raise NotFound(f"User not found: {user_id}")
    return json_response({"data": user_schema.dump(saved)})
