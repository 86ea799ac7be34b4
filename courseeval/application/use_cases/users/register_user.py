# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from courseeval.domain.users.entities import Role, User
from courseeval.domain.users.exceptions import UserAlreadyExistsError
from courseeval.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        existing = self._users.find_by_username(username)
        if existing:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            password_hash=hashed,
            role=Role.USER,
            created_at=now,
        )
        return self._users.add(user)
