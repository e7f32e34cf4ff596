"""Marshmallow schemas for the login and registration forms.

Wire names (``logEmail``, ``confirmPassword``...) are the field names the
UI binds error messages to, so they must match the service's rejections.
"""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from projectmanager.services.users.dto import LoginIn, RegistrationIn


class LoginSchema(Schema):
    """Login form: ``logEmail`` + ``logPassword``."""

    dto_class = LoginIn

    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True, data_key="logEmail", validate=validate.Length(max=254))
    password = fields.String(
        required=True, data_key="logPassword", validate=validate.Length(min=8, max=128)
    )


class RegistrationSchema(Schema):
    """Registration form, including the ``confirmPassword`` echo field."""

    dto_class = RegistrationIn

    class Meta:
        unknown = EXCLUDE

    first_name = fields.String(
        required=True, data_key="firstName", validate=validate.Length(min=2, max=100)
    )
    last_name = fields.String(
        required=True, data_key="lastName", validate=validate.Length(min=2, max=100)
    )
    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=8, max=128))
    # equality with ``password`` is a service rule (PW-MISMATCH), not a schema one
    confirm_password = fields.String(required=True, data_key="confirmPassword")
