# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from courseeval.shared.errors.base import AppError


class EvaluationNotFoundError(AppError):
    def __init__(self, evaluation_id: int) -> None:
        super().__init__(
            code="evaluation_not_found",
            status=HTTPStatus.NOT_FOUND,
            context={"evaluation_id": evaluation_id},
            message="Evaluation not found",
        )


class EvaluationAlreadyExistsError(AppError):
    def __init__(self, course_id: int) -> None:
        super().__init__(
            code="evaluation_already_exists",
            status=HTTPStatus.CONFLICT,
            context={"course_id": course_id},
            message="You have already evaluated this course",
        )
