# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from courseeval.application.services.token_service import TokenService
from courseeval.domain.users.entities import Credential, User
from courseeval.domain.users.exceptions import InvalidCredentialsError
from courseeval.domain.users.repositories import PasswordHasher, UserRepository

_UNKNOWN_USER_HASH = "00" * 16 + ":" + "00" * 32


@dataclass(slots=True, frozen=True)
class LoginResult:
    token: str
    user: User


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, username: str, password: str) -> LoginResult:
        user = self._users.find_by_username(username)
        if user is None:
            # keep unknown usernames as slow as wrong passwords
            self._password_hasher.verify(_UNKNOWN_USER_HASH, password)
            raise InvalidCredentialsError()
        if not self._password_hasher.verify(user.password_hash, password):
            raise InvalidCredentialsError()

        token = self._tokens.issue(Credential.for_user(user))
        return LoginResult(token=token, user=user)
