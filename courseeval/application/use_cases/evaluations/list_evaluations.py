# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from courseeval.domain.evaluations.entities import CourseEvaluation, UserEvaluation
from courseeval.domain.evaluations.repositories import EvaluationRepository
from courseeval.domain.users.entities import Credential


class ListCourseEvaluationsUseCase:
    def __init__(self, *, evaluations: EvaluationRepository) -> None:
        self._evaluations = evaluations

    def execute(self, course_id: int) -> Sequence[CourseEvaluation]:
        return self._evaluations.list_for_course(course_id)


class ListUserEvaluationsUseCase:
    def __init__(self, *, evaluations: EvaluationRepository) -> None:
        self._evaluations = evaluations

    def execute(self, user: Credential) -> Sequence[UserEvaluation]:
        return self._evaluations.list_for_user(user.identity)


__all__ = ["ListCourseEvaluationsUseCase", "ListUserEvaluationsUseCase"]
