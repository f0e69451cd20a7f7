from __future__ import annotations

import pytest

from catalog_api.application.services.token_signing import verify_token
from catalog_api.application.use_cases.users.login_user import LoginUserUseCase
from catalog_api.application.use_cases.users.register_user import RegisterUserUseCase
from catalog_api.domain import NameRequiredError
from catalog_api.domain.users import (
    InvalidCredentialsError,
    PasswordHasher,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def find_by_id(self, user_id: str) -> User | None:
        return next((u for u in self._users.values() if str(u.id) == user_id), None)

    def create(self, user: User) -> User:
        self._users[user.email] = user
        return user


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def _register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


def _login(users: InMemoryUserRepository, signing_key: str) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users,
        password_hasher=DeterministicHasher(),
        signing_key=signing_key,
        ttl_seconds=300,
    )


def test_register_user_success(users: InMemoryUserRepository) -> None:
    user = _register(users).execute("Alice", "alice@example.com", "secret123")

    assert user.email == "alice@example.com"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_email("alice@example.com") == user
    assert users.find_by_id(str(user.id)) == user


def test_register_user_duplicate_raises(users: InMemoryUserRepository) -> None:
    use_case = _register(users)
    use_case.execute("Alice", "alice@example.com", "secret123")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        use_case.execute("Another Alice", "alice@example.com", "other")
    assert exc_info.value.status == 409


def test_register_user_validates_before_lookup(users: InMemoryUserRepository) -> None:
    with pytest.raises(NameRequiredError):
        _register(users).execute("", "alice@example.com", "secret123")
    assert users.find_by_email("alice@example.com") is None


def test_login_user_success(users: InMemoryUserRepository, signing_key: str) -> None:
    user = _register(users).execute("Alice", "alice@example.com", "secret123")

    token = _login(users, signing_key).execute("alice@example.com", "secret123")

    claims = verify_token(token, signing_key)
    assert claims.subject == str(user.id)


def test_login_user_unknown_email(users: InMemoryUserRepository, signing_key: str) -> None:
    with pytest.raises(UserNotFoundError):
        _login(users, signing_key).execute("ghost@example.com", "secret123")


def test_login_user_invalid_credentials(users: InMemoryUserRepository, signing_key: str) -> None:
    _register(users).execute("Alice", "alice@example.com", "secret123")

    with pytest.raises(InvalidCredentialsError) as exc_info:
        _login(users, signing_key).execute("alice@example.com", "wrong")
    assert exc_info.value.to_dict() == {"error": "unauthorized"}


class CountingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.calls = 0

    def hash(self, password: str) -> str:
        self.calls += 1
        return super().hash(password)


def test_register_duplicate_skips_hashing(users: InMemoryUserRepository) -> None:
    hasher = CountingHasher()
    use_case = RegisterUserUseCase(users=users, password_hasher=hasher)
    use_case.execute("Alice", "alice@example.com", "secret123")

    with pytest.raises(UserAlreadyExistsError):
        use_case.execute("Alice", "alice@example.com", "secret123")
    assert hasher.calls == 1
