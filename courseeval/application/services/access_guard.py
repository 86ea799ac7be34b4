# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request-level credential extraction and role checks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from courseeval.domain.users.entities import Credential, Role

from .token_service import TokenService

BEARER_PREFIX = "Bearer "


def _authorization_header(request: Any) -> str | None:
    headers = getattr(request, "headers", request)
    if not isinstance(headers, Mapping) and not hasattr(headers, "get"):
        return None
    value = headers.get("Authorization")
    if value is None:
        value = headers.get("authorization")
    return value if isinstance(value, str) else None


def extract_bearer_token(request: Any) -> str | None:
    header = _authorization_header(request)
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    parts = header.split(" ")
    return parts[1] or None


class AccessGuard:
    """Turns an inbound request into a verified credential, or None."""

    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def current_user(self, request: Any) -> Credential | None:
        token = extract_bearer_token(request)
        if token is None:
            return None
        return self._tokens.verify(token)

    def require_auth(
        self, request: Any, required_role: Role | str | None = None
    ) -> Credential | None:
        credential = self.current_user(request)
        if credential is None or not self.permits(credential, required_role):
            return None
        return credential

    @staticmethod
    def permits(credential: Credential, required_role: Role | str | None = None) -> bool:
        if required_role is None:
            return True
        expected = required_role.value if isinstance(required_role, Role) else required_role
        return credential.role.value == expected


__all__ = ["AccessGuard", "BEARER_PREFIX", "extract_bearer_token"]
