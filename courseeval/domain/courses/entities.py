# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from courseeval.domain.exceptions import InvariantViolation

COURSE_FIELDS: tuple[str, ...] = ("course_code", "course_name", "professor", "major")


@dataclass(slots=True, frozen=True)
class Course:
    """Course offered for evaluation."""

    id: int
    course_code: str
    course_name: str
    professor: str | None = None
    major: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.course_code or not self.course_code.strip():
            raise InvariantViolation("course code must not be blank", field="course_code")
        if not self.course_name or not self.course_name.strip():
            raise InvariantViolation("course name must not be blank", field="course_name")
