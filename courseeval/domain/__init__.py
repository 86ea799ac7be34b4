# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import DomainInvariantError, InvariantViolation

__all__ = [
    "DomainInvariantError",
    "InvariantViolation",
]
