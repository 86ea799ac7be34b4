from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from courseeval.domain.users.entities import Credential, User
from courseeval.shared.errors.validation_types import ValidationErrorType

USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"
PASSWORD_MIN_LENGTH = 6


def _check_username(value: str) -> str:
    if not value:
        raise PydanticCustomError(
            ValidationErrorType.MISSING,
            "Username cannot be empty",
            {}
        )

    if not re.match(USERNAME_PATTERN, value):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS,
            "Username must contain only ASCII letters, digits and underscores",
            {"pattern": USERNAME_PATTERN}
        )

    return value


class RegisterRequestDTO(BaseModel):
    # any "role" field in the body is ignored; self-registration is always a plain user
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least {min_length} characters long",
                {"min_length": PASSWORD_MIN_LENGTH}
            )
        return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)  # No length policy on login


class UserDTO(BaseModel):
    id: int
    username: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        return cls(id=user.id, username=user.username, role=user.role.value)

    @classmethod
    def from_credential(cls, credential: Credential) -> UserDTO:
        return cls(
            id=credential.identity,
            username=credential.username,
            role=credential.role.value,
        )


class RegisterSuccessDTO(BaseModel):
    message: str = "User registered successfully"
    id: int


class LoginSuccessDTO(BaseModel):
    token: str
    user: UserDTO
