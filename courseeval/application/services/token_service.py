# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited bearer tokens (compact JWS, HS256)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import jwt

from courseeval.domain.users.entities import Credential, Role
from courseeval.shared.config import AuthConfig
from courseeval.shared.logging import logger

REQUIRED_CLAIMS = ["sub", "username", "role", "iat", "exp"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenService:
    def __init__(
        self, config: AuthConfig, *, clock: Callable[[], datetime] | None = None
    ) -> None:
        self._config = config
        self._clock = clock or _utcnow
        if config.is_insecure:
            logger.warning("token_service: using an insecure default signing secret")

    def issue(self, credential: Credential) -> str:
        now = self._clock()
        expires_at = now + self._config.token_ttl
        payload = {
            "sub": str(credential.identity),
            "username": credential.username,
            "role": credential.role.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def decode(self, token: str) -> dict[str, Any] | None:
        """Return the claims of a token with a valid signature that has not expired."""

        try:
            claims = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={
                    "require": REQUIRED_CLAIMS,
                    # expiry is checked below against the service clock
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"token.verify: rejected ({type(exc).__name__})")
            return None

        exp = claims.get("exp")
        if isinstance(exp, bool) or not isinstance(exp, int | float):
            logger.debug("token.verify: rejected (bad exp claim)")
            return None
        if self._clock().timestamp() >= exp:
            logger.debug("token.verify: rejected (expired)")
            return None
        return claims

    def verify(self, token: str) -> Credential | None:
        claims = self.decode(token)
        if claims is None:
            return None

        sub, username, role = claims.get("sub"), claims.get("username"), claims.get("role")
        valid_sub = isinstance(sub, str) and sub.isascii() and sub.isdigit()
        if not valid_sub or not isinstance(username, str):
            logger.debug("token.verify: rejected (bad identity claims)")
            return None
        try:
            resolved_role = Role(role)
        except ValueError:
            logger.debug("token.verify: rejected (unknown role)")
            return None
        return Credential(identity=int(sub), username=username, role=resolved_role)


__all__ = ["TokenService"]
