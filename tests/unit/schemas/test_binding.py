"""Form binding through Marshmallow into BindingResult."""

import pytest

from projectmanager.schemas import LoginSchema, RegistrationSchema, UserUpdateSchema, bind_form
from projectmanager.schemas.binding import INVALID, REQUIRED
from projectmanager.services.users import LoginIn, RegistrationIn


class TestBindForm:
    def test_valid_login_payload_binds_dto(self):
        dto, binding = bind_form(
            LoginSchema(), {"logEmail": "a@x.com", "logPassword": "long-enough"}
        )

        assert not binding.has_errors()
        assert dto == LoginIn(email="a@x.com", password="long-enough")

    def test_invalid_login_payload_keeps_wire_field_names(self):
        dto, binding = bind_form(LoginSchema(), {"logEmail": "not-an-email"})

        fields = {err.field: err.code for err in binding}
        assert fields == {"logEmail": INVALID, "logPassword": REQUIRED}
        # the bound object still exists, with blanks for what failed
        assert dto == LoginIn(email="", password="")

    def test_partially_valid_payload_keeps_valid_values(self):
        dto, binding = bind_form(
            RegistrationSchema(),
            {
                "firstName": "Ada",
                "lastName": "L",
                "email": "ada@example.com",
                "password": "p1-secret",
                "confirmPassword": "other",
            },
        )

        assert [err.field for err in binding] == ["lastName"]
        assert isinstance(dto, RegistrationIn)
        assert dto.first_name == "Ada"
        assert dto.last_name == ""
        assert dto.confirm_password == "other"

    def test_mismatched_passwords_are_left_to_the_service(self):
        _, binding = bind_form(
            RegistrationSchema(),
            {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "password": "p1-secret",
                "confirmPassword": "p2-secret",
            },
        )

        assert not binding.has_errors()

    def test_unknown_fields_are_ignored(self):
        _, binding = bind_form(
            LoginSchema(),
            {"logEmail": "a@x.com", "logPassword": "long-enough", "remember": True},
        )

        assert not binding.has_errors()

    @pytest.mark.parametrize("payload", [None, {}])
    def test_schema_without_dto_returns_dict(self, payload):
        data, binding = bind_form(UserUpdateSchema(), payload)

        assert data == {}
        assert {err.field for err in binding} == {"firstName", "lastName", "email"}
        assert all(err.code == REQUIRED for err in binding)

    def test_update_schema_loads_attribute_names(self):
        data, binding = bind_form(
            UserUpdateSchema(),
            {"firstName": "Grace", "lastName": "Hopper", "email": "grace@example.com"},
        )

        assert not binding.has_errors()
        assert data == {"first_name": "Grace", "last_name": "Hopper", "email": "grace@example.com"}
