# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.access_guard import AccessGuard
from .services.password_hashing import Pbkdf2PasswordHasher
from .services.token_service import TokenService

__all__ = [
    "AccessGuard",
    "Pbkdf2PasswordHasher",
    "TokenService",
]
