"""
UserService
===========

Account service for the project manager:

- Login: credential verification against the stored salted hash.
- Registration: password confirmation, email uniqueness, hashing, insert.
- Record access: list, lookup by id, id validity, whole-entity update.

Domain failures are returned as :class:`ServiceResult` violations keyed by
form field; nothing is raised for them. Persistence errors propagate.
The service never commits: callers run it inside a Unit of Work.
"""

from __future__ import annotations

import logging
from uuid import UUID

from projectmanager.models.user import User
from projectmanager.services._shared.ports import PasswordHasherPort, UserRepositoryPort
from projectmanager.services._shared.validation import BindingResult, FieldError, ServiceResult
from projectmanager.services.users.dto import LoginIn, RegistrationIn

log = logging.getLogger(__name__)

# Stable (field, code, message) contract consumed by the UI
EMAIL_NOT_PRESENT = FieldError(
    field="logEmail",
    code="EMAIL-NOT-PRESENT",
    message="User not found. Check the e-mail and try again or register a new user",
)
INVALID_LOGIN_PW = FieldError(
    field="logPassword",
    code="INVALID-LOGIN-PW",
    message="Incorrect password. Please try again",
)
PW_MISMATCH = FieldError(
    field="confirmPassword",
    code="PW-MISMATCH",
    message="Passwords must match",
)
EMAIL_PRESENT = FieldError(
    field="email",
    code="EMAIL-PRESENT",
    message="There is already an account with this e-mail",
)


class UserService:
    """
    Authentication and user-record service.

    :param users: Repository providing lookup by email / id, save and list.
    :type users: UserRepositoryPort
    :param hasher: Salted adaptive password hasher.
    :type hasher: PasswordHasherPort
    """

    def __init__(self, *, users: UserRepositoryPort, hasher: PasswordHasherPort) -> None:
        self.users = users
        self.hasher = hasher

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn, binding: BindingResult | None = None) -> ServiceResult[User]:
        """
        Verify credentials and return the matching user.

        :param dto: Submitted credentials.
        :type dto: LoginIn
        :param binding: Errors already recorded while binding the form. When it
            has any, they are returned as-is and no lookup happens.
        :type binding: BindingResult | None
        :returns: The user (password hash included; redact before exposing),
            or a single ``EMAIL-NOT-PRESENT`` / ``INVALID-LOGIN-PW`` violation.
        :rtype: ServiceResult[User]
        """
        if binding is not None and binding.has_errors():
            return ServiceResult.failure(*binding.errors)

        user = self.users.find_by_email(dto.email)
        if user is None:
            log.info("login.rejected", extra={"error_code": EMAIL_NOT_PRESENT.code})
            return ServiceResult.failure(EMAIL_NOT_PRESENT)

        if not self.hasher.verify(dto.password, user.password_hash):
            log.info(
                "login.rejected",
                extra={"error_code": INVALID_LOGIN_PW.code, "user_id": str(user.id)},
            )
            return ServiceResult.failure(INVALID_LOGIN_PW)

        log.info("login.accepted", extra={"user_id": str(user.id)})
        return ServiceResult.success(user)

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def register(
        self, dto: RegistrationIn, binding: BindingResult | None = None
    ) -> ServiceResult[User]:
        """
        Create an account from a registration submission.

        The confirmation check runs before the email lookup, so a mismatch is
        reported whatever the state of the email. The uniqueness check is not
        atomic with the insert; the ``uq_users_email`` constraint catches the
        race and surfaces as an ``IntegrityError`` from the repository.

        :param dto: Registration submission.
        :type dto: RegistrationIn
        :param binding: Errors already recorded while binding the form.
        :type binding: BindingResult | None
        :returns: The persisted user, or one ``PW-MISMATCH`` / ``EMAIL-PRESENT``
            violation.
        :rtype: ServiceResult[User]
        """
        if binding is not None and binding.has_errors():
            return ServiceResult.failure(*binding.errors)

        if dto.password != dto.confirm_password:
            return ServiceResult.failure(PW_MISMATCH)

        if self.users.find_by_email(dto.email) is not None:
            log.info("register.rejected", extra={"error_code": EMAIL_PRESENT.code})
            return ServiceResult.failure(EMAIL_PRESENT)

        user = User(
            email=dto.email,
            first_name=dto.first_name,
            last_name=dto.last_name,
            password_hash=self.hasher.hash(dto.password),
        )
        saved = self.users.save(user)
        log.info("register.created", extra={"user_id": str(saved.id)})
        return ServiceResult.success(saved)

    # ------------------------------------------------------------------ #
    # Records
    # ------------------------------------------------------------------ #

    def find_all(self) -> list[User]:
        """Return every user, unfiltered. Hashes are included."""
        return self.users.find_all()

    def get_user_by_id(self, user_id: UUID) -> User | None:
        return self.users.find_by_id(user_id)

    def is_not_valid_id(self, user_id: UUID) -> bool:
        return self.get_user_by_id(user_id) is None

    def update_user(self, user: User) -> User | None:
        """
        Persist ``user`` as given when its id belongs to an existing account.

        No validation or hashing happens here: whatever ``password_hash``
        holds is stored. Callers must not route plaintext passwords through
        this method.

        :returns: The saved user, or ``None`` (and no write) for an unknown id.
        """
        if user.id is None or self.is_not_valid_id(user.id):
            return None
        return self.users.save(user)
