"""UserService behaviour against the in-memory repository."""

from uuid import uuid4

import pytest

from projectmanager.services._shared.ports import InMemoryUserRepository
from projectmanager.services._shared.validation import BindingResult, FieldError
from projectmanager.services.users import (
    EMAIL_NOT_PRESENT,
    EMAIL_PRESENT,
    INVALID_LOGIN_PW,
    PW_MISMATCH,
    LoginIn,
    RegistrationIn,
    UserService,
)
from tests.factories.user import UserFactory


class SpyRepository(InMemoryUserRepository):
    """Count email lookups on top of the in-memory store."""

    def __init__(self, users=None) -> None:
        super().__init__(users)
        self.email_lookups = 0

    def find_by_email(self, email):
        self.email_lookups += 1
        return super().find_by_email(email)


def _registration(**overrides) -> RegistrationIn:
    values = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "password": "p1-secret",
        "confirm_password": "p1-secret",
    }
    values.update(overrides)
    return RegistrationIn(**values)


class TestUserServiceLogin:
    """Login: lookup by email, then hash verification."""

    @pytest.fixture()
    def stored(self):
        return UserFactory.build(email="a@x.com", password="secret")

    @pytest.fixture()
    def repo(self, stored) -> SpyRepository:
        return SpyRepository([stored])

    @pytest.fixture()
    def service(self, repo, hasher) -> UserService:
        return UserService(users=repo, hasher=hasher)

    def test_login_with_correct_password_returns_user(self, service, stored):
        result = service.login(LoginIn(email="a@x.com", password="secret"))

        assert result.ok
        assert result.errors == ()
        assert result.unwrap().id == stored.id
        assert result.unwrap().email == "a@x.com"

    def test_login_unknown_email(self, service):
        result = service.login(LoginIn(email="nobody@x.com", password="secret"))

        assert not result.ok
        assert result.value is None
        assert result.errors == (EMAIL_NOT_PRESENT,)
        assert EMAIL_NOT_PRESENT.field == "logEmail"

    def test_login_wrong_password(self, service):
        result = service.login(LoginIn(email="a@x.com", password="not-secret"))

        assert result.value is None
        assert result.codes() == ["INVALID-LOGIN-PW"]
        assert result.errors[0] == INVALID_LOGIN_PW
        assert result.errors[0].field == "logPassword"

    def test_login_email_match_is_exact(self, service):
        result = service.login(LoginIn(email="A@X.COM", password="secret"))

        assert result.codes() == ["EMAIL-NOT-PRESENT"]

    def test_login_short_circuits_on_binding_errors(self, service, repo):
        binding = BindingResult()
        binding.reject_value("logEmail", "INVALID", "Not a valid email address.")

        result = service.login(LoginIn(email="", password="secret"), binding)

        assert result.value is None
        assert result.errors == (FieldError("logEmail", "INVALID", "Not a valid email address."),)
        assert repo.email_lookups == 0

    def test_login_does_not_mutate_binding(self, service):
        binding = BindingResult()

        service.login(LoginIn(email="nobody@x.com", password="secret"), binding)

        assert not binding.has_errors()

    def test_login_against_plaintext_stored_password_fails(self, hasher):
        # a record whose password went through update_user unhashed
        user = UserFactory.build(email="plain@x.com", password_hash="secret")
        service = UserService(users=InMemoryUserRepository([user]), hasher=hasher)

        result = service.login(LoginIn(email="plain@x.com", password="secret"))

        assert result.codes() == ["INVALID-LOGIN-PW"]


class TestUserServiceRegister:
    """Registration: confirmation, uniqueness, hashing, single write."""

    @pytest.fixture()
    def repo(self) -> SpyRepository:
        return SpyRepository([UserFactory.build(email="taken@example.com")])

    @pytest.fixture()
    def service(self, repo, hasher) -> UserService:
        return UserService(users=repo, hasher=hasher)

    def test_register_creates_user_with_hashed_password(self, service, repo, hasher):
        result = service.register(_registration())

        assert result.ok
        user = result.unwrap()
        assert user.id is not None
        assert user.email == "ada@example.com"
        assert user.first_name == "Ada"
        assert user.password_hash != "p1-secret"
        assert hasher.verify("p1-secret", user.password_hash)
        assert repo.writes == 1
        assert repo.find_by_email("ada@example.com") is not None

    def test_register_password_mismatch(self, service, repo):
        result = service.register(
            _registration(email="a@x.com", password="p1", confirm_password="p2")
        )

        assert result.value is None
        assert result.errors == (
            FieldError("confirmPassword", "PW-MISMATCH", "Passwords must match"),
        )
        assert repo.writes == 0

    def test_register_mismatch_wins_over_duplicate_email(self, service, repo):
        result = service.register(
            _registration(email="taken@example.com", password="p1", confirm_password="p2")
        )

        assert result.errors == (PW_MISMATCH,)
        assert repo.email_lookups == 0

    def test_register_duplicate_email(self, service, repo):
        result = service.register(_registration(email="taken@example.com"))

        assert result.value is None
        assert result.errors == (EMAIL_PRESENT,)
        assert result.errors[0].field == "email"
        assert repo.writes == 0

    def test_register_short_circuits_on_binding_errors(self, service, repo):
        binding = BindingResult()
        binding.reject_value("firstName", "REQUIRED", "Missing data for required field.")
        binding.reject_value("email", "INVALID", "Not a valid email address.")

        result = service.register(_registration(first_name=""), binding)

        assert result.codes() == ["REQUIRED", "INVALID"]
        assert repo.email_lookups == 0
        assert repo.writes == 0

    def test_register_uses_fresh_salt_per_account(self, service):
        first = service.register(_registration(email="one@example.com")).unwrap()
        second = service.register(_registration(email="two@example.com")).unwrap()

        assert first.password_hash != second.password_hash


class TestUserServiceRecords:
    """find_all / get_user_by_id / is_not_valid_id / update_user."""

    @pytest.fixture()
    def users(self):
        return [UserFactory.build(id=uuid4()), UserFactory.build(id=uuid4())]

    @pytest.fixture()
    def repo(self, users) -> InMemoryUserRepository:
        return InMemoryUserRepository(users)

    @pytest.fixture()
    def service(self, repo, hasher) -> UserService:
        return UserService(users=repo, hasher=hasher)

    def test_find_all_returns_every_user(self, service, users):
        found = service.find_all()

        assert {u.id for u in found} == {u.id for u in users}
        assert all(u.password_hash for u in found)

    def test_get_user_by_id_is_repeatable(self, service, users):
        first = service.get_user_by_id(users[0].id)
        second = service.get_user_by_id(users[0].id)

        assert first is not None
        assert (first.id, first.email, first.password_hash) == (
            second.id,
            second.email,
            second.password_hash,
        )

    def test_get_user_by_id_unknown_is_none(self, service):
        assert service.get_user_by_id(uuid4()) is None

    @pytest.mark.parametrize("known", [True, False])
    def test_is_not_valid_id_mirrors_lookup(self, service, users, known):
        user_id = users[0].id if known else uuid4()

        assert service.is_not_valid_id(user_id) is (service.get_user_by_id(user_id) is None)
        assert service.is_not_valid_id(user_id) is (not known)

    def test_update_user_saves_whole_entity(self, service, repo, users):
        user = service.get_user_by_id(users[0].id)
        user.first_name = "Grace"

        saved = service.update_user(user)

        assert saved is not None
        assert saved.first_name == "Grace"
        assert repo.find_by_id(users[0].id).first_name == "Grace"
        assert repo.writes == 1

    def test_update_user_unknown_id_does_not_write(self, service, repo):
        ghost = UserFactory.build(id=uuid4())

        assert service.update_user(ghost) is None
        assert repo.writes == 0

    def test_update_user_without_id_does_not_write(self, service, repo):
        assert service.update_user(UserFactory.build()) is None
        assert repo.writes == 0

    def test_update_user_stores_password_value_verbatim(self, service, repo, users):
        user = service.get_user_by_id(users[0].id)
        user.password_hash = "plaintext"

        service.update_user(user)

        assert repo.find_by_id(users[0].id).password_hash == "plaintext"
