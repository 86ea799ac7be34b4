# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, cast

from flask import Request, g, request

from courseeval.application.services.access_guard import AccessGuard
from courseeval.domain.users.entities import Credential, Role
from courseeval.shared.config import load_config
from courseeval.shared.errors.base import ForbiddenError, UnauthorizedError
from courseeval.shared.logging import logger


class AuthedRequest(Request):
    credential: Credential


def authed_request() -> AuthedRequest:
    """Return the current request cast to include the verified credential."""
    return cast(AuthedRequest, request)


def authorize(guard: AccessGuard, role: Role | None = None) -> Credential:
    debug_mode = load_config().debug_logging

    credential = guard.current_user(request)
    if credential is None:
        logger.warning(f"auth: no valid bearer token on {request.method} {request.path}")
        raise UnauthorizedError()

    if not guard.permits(credential, role):
        if debug_mode:
            logger.warning(
                f"auth: user {credential.identity} ({credential.username}) lacks role "
                f"{role.value} on {request.method} {request.path}"
            )
        else:
            logger.warning(f"auth: user {credential.identity} lacks role {role.value}")
        raise ForbiddenError()

    if debug_mode:
        logger.debug(
            f"auth: granted user {credential.identity} on {request.method} {request.path}"
        )
    return credential


def require_role(role: Role | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Guard a controller method; the controller must hold an ``AccessGuard`` as ``_guard``."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(controller: Any, *args: Any, **kwargs: Any) -> Any:
            credential = authorize(controller._guard, role)
            request.credential = credential
            g.user_id = credential.identity
            return func(controller, *args, **kwargs)

        return wrapper

    return decorator


auth_required = require_role()
admin_required = require_role(Role.ADMIN)


__all__ = [
    "AuthedRequest",
    "admin_required",
    "auth_required",
    "authed_request",
    "authorize",
    "require_role",
]
