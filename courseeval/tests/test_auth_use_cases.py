from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from courseeval.application.services.password_hashing import Pbkdf2PasswordHasher, StoredPassword
from courseeval.application.services.token_service import TokenService
from courseeval.application.use_cases.users.login_user import LoginUserUseCase
from courseeval.application.use_cases.users.register_user import RegisterUserUseCase
from courseeval.domain.users.entities import Role
from courseeval.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from courseeval.infrastructure.admin_setup import AdminSetupError, setup_admin_user


def test_register_creates_plain_user(user_repo, hasher) -> None:
    use_case = RegisterUserUseCase(users=user_repo, password_hasher=hasher)

    user = use_case.execute("alice", "secret123")

    assert user.id == 1
    assert user.role is Role.USER
    assert user.password_hash == "hashed:secret123"
    assert user_repo.find_by_username("alice") == user


def test_register_duplicate_username_fails(user_repo, hasher) -> None:
    use_case = RegisterUserUseCase(users=user_repo, password_hasher=hasher)
    use_case.execute("alice", "secret123")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        use_case.execute("alice", "another")

    assert exc_info.value.status == 409


def test_login_returns_token_for_registered_user(user_repo, auth_config, clock) -> None:
    hasher = Pbkdf2PasswordHasher()
    tokens = TokenService(auth_config, clock=clock)
    RegisterUserUseCase(users=user_repo, password_hasher=hasher).execute("alice", "abc123")

    result = LoginUserUseCase(users=user_repo, password_hasher=hasher, tokens=tokens).execute(
        "alice", "abc123"
    )

    credential = tokens.verify(result.token)
    assert credential is not None
    assert credential.identity == result.user.id
    assert credential.username == "alice"
    assert credential.role is Role.USER


@pytest.mark.parametrize(("username", "password"), [("alice", "wrong"), ("bob", "abc123")])
def test_login_with_bad_credentials_fails(
    user_repo, hasher, auth_config, username: str, password: str
) -> None:
    RegisterUserUseCase(users=user_repo, password_hasher=hasher).execute("alice", "abc123")
    use_case = LoginUserUseCase(
        users=user_repo, password_hasher=hasher, tokens=TokenService(auth_config)
    )

    with pytest.raises(InvalidCredentialsError) as exc_info:
        use_case.execute(username, password)

    assert exc_info.value.code == "invalid_credentials"


def test_admin_setup_promotes_existing_user(user_repo, hasher) -> None:
    user = RegisterUserUseCase(users=user_repo, password_hasher=hasher).execute("root", "pw1234")

    assert user.role is Role.USER
    setup_admin_user(user_repo, "root")

    assert user_repo.find_by_username("root").role is Role.ADMIN


def test_admin_setup_without_username_is_a_noop(user_repo) -> None:
    setup_admin_user(user_repo, None)


def test_admin_setup_fails_for_unknown_user(user_repo) -> None:
    with pytest.raises(AdminSetupError):
        setup_admin_user(user_repo, "ghost")


def test_login_unknown_user_still_runs_password_check(user_repo, auth_config) -> None:
    hasher = MagicMock(wraps=Pbkdf2PasswordHasher())
    use_case = LoginUserUseCase(
        users=user_repo, password_hasher=hasher, tokens=TokenService(auth_config)
    )

    with pytest.raises(InvalidCredentialsError):
        use_case.execute("ghost", "abc123")

    hasher.verify.assert_called_once()
    stored, password = hasher.verify.call_args.args
    assert password == "abc123"
    # a well-formed value, so the full PBKDF2 derivation runs
    assert StoredPassword.parse(stored) is not None
