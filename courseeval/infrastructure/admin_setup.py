# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from courseeval.domain.users.entities import Role
from courseeval.domain.users.repositories import UserRepository
from courseeval.shared.logging import logger


class AdminSetupError(Exception):
    pass


def setup_admin_user(users: UserRepository, admin_username: str | None) -> None:
    """Promote the configured user to admin; the user must already exist."""

    if not admin_username:
        logger.info("admin_setup: no ADMIN_USERNAME configured, skipping admin setup")
        return

    user = users.find_by_username(admin_username)
    if user is None:
        error_msg = (
            f"ADMIN_USERNAME '{admin_username}' not found in database. "
            f"Please register this user first or update ADMIN_USERNAME."
        )
        logger.error(f"admin_setup: {error_msg}")
        raise AdminSetupError(error_msg)

    if user.is_admin:
        logger.info(f"admin_setup: user '{admin_username}' already has admin privileges")
        return

    users.set_role(user.id, Role.ADMIN)
    logger.info(f"admin_setup: granted admin privileges to user '{admin_username}'")


__all__ = ["AdminSetupError", "setup_admin_user"]
