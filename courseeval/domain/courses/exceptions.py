# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from courseeval.shared.errors.base import AppError


class CourseNotFoundError(AppError):
    def __init__(self, course_id: int) -> None:
        super().__init__(
            code="course_not_found",
            status=HTTPStatus.NOT_FOUND,
            context={"course_id": course_id},
            message="Course not found",
        )
