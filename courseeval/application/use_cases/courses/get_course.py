# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from courseeval.domain.courses.entities import Course
from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.domain.courses.repositories import CourseRepository


class GetCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, course_id: int) -> Course:
        course = self._courses.get(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course


__all__ = ["GetCourseUseCase"]
