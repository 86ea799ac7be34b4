# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from courseeval.domain.exceptions import InvariantViolationError
from courseeval.shared.errors.base import ValidationError


@contextmanager
def invariants_as_validation_errors() -> Iterator[None]:
    """Surface entity invariant violations as 422 validation errors."""

    try:
        yield
    except InvariantViolationError as exc:
        context = {"fields": [exc.field] if exc.field else [], "detail": str(exc)}
        raise ValidationError(context=context, message=str(exc)) from exc


__all__ = ["invariants_as_validation_errors"]
