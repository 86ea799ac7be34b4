# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.domain.courses.repositories import CourseRepository


class DeleteCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, course_id: int) -> None:
        if not self._courses.delete(course_id):
            raise CourseNotFoundError(course_id)


__all__ = ["DeleteCourseUseCase"]
