# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies.

Stored passwords are serialized as ``<hex-salt>:<hex-key>`` where the key is
PBKDF2-HMAC-SHA256 over the UTF-8 password. The cost parameters are fixed so a
stored value can always be re-derived with exactly the parameters that
produced it.
"""

from __future__ import annotations

import hashlib
import hmac
import re
import secrets
from dataclasses import dataclass
from enum import Enum

from courseeval.domain.users.repositories import PasswordHasher
from courseeval.shared.logging import logger

HASH_NAME = "sha256"
ITERATIONS = 100_000
SALT_BYTES = 16
KEY_BYTES = 32
DELIMITER = ":"

_HEX = re.compile(r"(?:[0-9a-fA-F]{2})+")


class VerifyOutcome(str, Enum):
    MATCH = "match"
    MISMATCH = "mismatch"
    MALFORMED = "malformed"


@dataclass(slots=True, frozen=True)
class StoredPassword:
    salt: bytes
    derived_key: bytes

    def serialize(self) -> str:
        return f"{self.salt.hex()}{DELIMITER}{self.derived_key.hex()}"

    @classmethod
    def parse(cls, value: object) -> StoredPassword | None:
        """Decode a serialized value, or return None when it is not one."""

        if not isinstance(value, str):
            return None
        parts = value.split(DELIMITER)
        if len(parts) != 2 or not all(parts):
            return None
        salt_hex, key_hex = parts
        if not _HEX.fullmatch(salt_hex) or not _HEX.fullmatch(key_hex):
            return None
        return cls(salt=bytes.fromhex(salt_hex), derived_key=bytes.fromhex(key_hex))


def derive_key(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac(
        HASH_NAME, password.encode("utf-8"), salt, ITERATIONS, dklen=KEY_BYTES
    )


class Pbkdf2PasswordHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(SALT_BYTES)
        return StoredPassword(salt=salt, derived_key=derive_key(password, salt)).serialize()

    def check(self, stored: str, password: str) -> VerifyOutcome:
        parsed = StoredPassword.parse(stored)
        if parsed is None:
            return VerifyOutcome.MALFORMED
        if not isinstance(password, str):
            return VerifyOutcome.MISMATCH
        try:
            candidate = derive_key(password, parsed.salt)
        except UnicodeEncodeError:
            # lone surrogates cannot be encoded, so they can never match
            return VerifyOutcome.MISMATCH
        if hmac.compare_digest(candidate, parsed.derived_key):
            return VerifyOutcome.MATCH
        return VerifyOutcome.MISMATCH

    def verify(self, stored: str, password: str) -> bool:
        outcome = self.check(stored, password)
        if outcome is VerifyOutcome.MALFORMED:
            logger.warning("password.verify: stored hash is malformed")
        return outcome is VerifyOutcome.MATCH


__all__ = [
    "DELIMITER",
    "ITERATIONS",
    "KEY_BYTES",
    "SALT_BYTES",
    "Pbkdf2PasswordHasher",
    "StoredPassword",
    "VerifyOutcome",
    "derive_key",
]
