# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from courseeval.domain.users.entities import Role
from courseeval.domain.users.entities import User as DomainUser
from courseeval.domain.users.exceptions import UserAlreadyExistsError
from courseeval.domain.users.repositories import UserRepository
from courseeval.infrastructure.db.models import User
from courseeval.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        role=Role(row.role),
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    password_hash=user.password_hash,
                    role=user.role.value,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # lost a race against a concurrent registration of the same name
            raise UserAlreadyExistsError(context={"username": user.username}) from exc

    def set_role(self, user_id: int, role: Role) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if row is not None:
                row.role = role.value
