# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from courseeval.domain.courses.entities import Course
from courseeval.domain.courses.repositories import CourseRepository


class ListCoursesUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, major: str | None = None) -> Sequence[Course]:
        return self._courses.list(major=major or None)


__all__ = ["ListCoursesUseCase"]
