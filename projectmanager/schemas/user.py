"""User resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class UserSchema(Schema):
    """Public representation of a user. Never carries the password hash."""

    id = fields.UUID(required=True)
    email = fields.Email(required=True)
    first_name = fields.String(required=True, data_key="firstName")
    last_name = fields.String(required=True, data_key="lastName")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class UserUpdateSchema(Schema):
    """Profile edit form. Passwords cannot be changed through this surface."""

    class Meta:
        unknown = EXCLUDE

    first_name = fields.String(
        required=True, data_key="firstName", validate=validate.Length(min=2, max=100)
    )
    last_name = fields.String(
        required=True, data_key="lastName", validate=validate.Length(min=2, max=100)
    )
    email = fields.Email(required=True, validate=validate.Length(max=254))
