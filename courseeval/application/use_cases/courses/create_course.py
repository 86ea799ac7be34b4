# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from courseeval.application.errors import invariants_as_validation_errors
from courseeval.domain.courses.entities import Course
from courseeval.domain.courses.repositories import CourseRepository


class CreateCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(
        self,
        course_code: str,
        course_name: str,
        professor: str | None = None,
        major: str | None = None,
    ) -> Course:
        with invariants_as_validation_errors():
            course = Course(
                id=0,
                course_code=course_code,
                course_name=course_name,
                professor=professor or None,
                major=major or None,
                created_at=datetime.now(UTC),
            )
        return self._courses.add(course)


__all__ = ["CreateCourseUseCase"]
