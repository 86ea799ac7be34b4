# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from courseeval.application.errors import invariants_as_validation_errors
from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.domain.courses.repositories import CourseRepository
from courseeval.domain.evaluations.entities import Evaluation
from courseeval.domain.evaluations.exceptions import EvaluationAlreadyExistsError
from courseeval.domain.evaluations.repositories import EvaluationRepository
from courseeval.domain.users.entities import Credential


@dataclass(slots=True, frozen=True)
class EvaluationInput:
    course_id: int
    overall_rating: int
    teaching_difficulty: int
    assignment_difficulty: int
    exam_difficulty: int
    has_tests: bool = False
    has_final_exam: bool = False
    attendance_checked: bool = False
    comment: str | None = None


class CreateEvaluationUseCase:
    def __init__(
        self,
        *,
        evaluations: EvaluationRepository,
        courses: CourseRepository,
    ) -> None:
        self._evaluations = evaluations
        self._courses = courses

    def execute(self, author: Credential, data: EvaluationInput) -> Evaluation:
        if self._courses.get(data.course_id) is None:
            raise CourseNotFoundError(data.course_id)

        existing = self._evaluations.find_for_user_and_course(author.identity, data.course_id)
        if existing is not None:
            raise EvaluationAlreadyExistsError(data.course_id)

        with invariants_as_validation_errors():
            evaluation = Evaluation(
                id=0,
                user_id=author.identity,
                course_id=data.course_id,
                overall_rating=data.overall_rating,
                teaching_difficulty=data.teaching_difficulty,
                assignment_difficulty=data.assignment_difficulty,
                exam_difficulty=data.exam_difficulty,
                has_tests=data.has_tests,
                has_final_exam=data.has_final_exam,
                attendance_checked=data.attendance_checked,
                comment=data.comment or None,
                created_at=datetime.now(UTC),
            )
        return self._evaluations.add(evaluation)


__all__ = ["CreateEvaluationUseCase", "EvaluationInput"]
