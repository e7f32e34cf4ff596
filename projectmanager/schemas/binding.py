"""Bind raw form payloads through Marshmallow into a :class:`BindingResult`."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from marshmallow import Schema, ValidationError, fields

from projectmanager.services._shared.validation import BindingResult

REQUIRED = "REQUIRED"
INVALID = "INVALID"

_REQUIRED_MESSAGE = fields.Field.default_error_messages["required"]


def errors_from_messages(messages: Mapping[str, Any], binding: BindingResult) -> None:
    """Flatten Marshmallow's ``{field: [messages]}`` mapping into ``binding``.

    Nested mappings are joined with dots (``address.city``).
    """
    for field_name, value in messages.items():
        if isinstance(value, Mapping):
            nested = BindingResult()
            errors_from_messages(value, nested)
            for err in nested:
                binding.reject_value(f"{field_name}.{err.field}", err.code, err.message)
            continue
        for message in value if isinstance(value, list) else [value]:
            text = str(message)
            code = REQUIRED if text == _REQUIRED_MESSAGE else INVALID
            binding.reject_value(str(field_name), code, text)


def bind_form(schema: Schema, payload: Mapping[str, Any] | None) -> tuple[Any, BindingResult]:
    """
    Load ``payload`` with ``schema`` and collect field errors.

    Like a web form object, the bound value always exists: when validation
    fails it is built from whatever did validate, with missing fields left
    as empty strings, and the failures are recorded on the returned
    :class:`BindingResult`.

    :param schema: Schema instance; when it declares ``dto_class`` the loaded
        data is turned into that dataclass, otherwise the dict is returned.
    :param payload: Raw request data (JSON body or form).
    :returns: ``(bound_value, binding)``.
    """
    binding = BindingResult()
    try:
        data = schema.load(payload or {})
    except ValidationError as err:
        messages = err.messages if isinstance(err.messages, Mapping) else {"_schema": err.messages}
        errors_from_messages(messages, binding)
        data = err.valid_data if isinstance(err.valid_data, dict) else {}

    dto_class = getattr(schema, "dto_class", None)
    if dto_class is None:
        return data, binding
    values = {f.name: data.get(f.name, "") for f in dataclasses.fields(dto_class)}
    return dto_class(**values), binding
