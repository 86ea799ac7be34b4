# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    role: Role
    created_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(slots=True, frozen=True)
class Credential:
    """Authenticated identity asserted by a verified token."""

    identity: int
    username: str
    role: Role

    @classmethod
    def for_user(cls, user: User) -> Credential:
        return cls(identity=user.id, username=user.username, role=user.role)

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def can_modify(self, owner_id: int) -> bool:
        return self.is_admin or self.identity == owner_id
