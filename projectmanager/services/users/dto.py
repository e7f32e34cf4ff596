"""
DTOs for UserService.

Transient inputs for the login and registration flows. Neither is ever
persisted; the plaintext passwords they carry live only for one call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Credentials submitted on the login form.

    :param email: Login email, matched exactly.
    :type email: str
    :param password: Raw password to verify.
    :type password: str
    """

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Submission of the registration form.

    :param first_name: Given name.
    :type first_name: str
    :param last_name: Family name.
    :type last_name: str
    :param email: Login email; must not belong to an existing account.
    :type email: str
    :param password: Raw password, hashed before the account is saved.
    :type password: str
    :param confirm_password: Must equal ``password`` exactly.
    :type confirm_password: str
    """

    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)
    confirm_password: str = field(repr=False)
