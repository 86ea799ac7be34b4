# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from courseeval.application.errors import invariants_as_validation_errors
from courseeval.domain.courses.entities import COURSE_FIELDS, Course
from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.domain.courses.repositories import CourseRepository
from courseeval.shared.errors.base import NothingToUpdateError


class UpdateCourseUseCase:
    def __init__(self, *, courses: CourseRepository) -> None:
        self._courses = courses

    def execute(self, course_id: int, changes: Mapping[str, Any]) -> Course:
        allowed = {key: value for key, value in changes.items() if key in COURSE_FIELDS}
        if not allowed:
            raise NothingToUpdateError()

        existing = self._courses.get(course_id)
        if existing is None:
            raise CourseNotFoundError(course_id)

        with invariants_as_validation_errors():
            replace(existing, **allowed)

        updated = self._courses.update(course_id, allowed)
        if updated is None:
            raise CourseNotFoundError(course_id)
        return updated


__all__ = ["UpdateCourseUseCase"]
