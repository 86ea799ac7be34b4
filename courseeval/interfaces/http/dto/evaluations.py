from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from courseeval.domain.evaluations.entities import (RATING_MAX, RATING_MIN, CourseEvaluation,
                                                     Evaluation, UserEvaluation)

Rating = Annotated[StrictInt, Field(ge=RATING_MIN, le=RATING_MAX)]
Comment = Annotated[str, Field(max_length=2000)]


class CreateEvaluationRequestDTO(BaseModel):
    course_id: StrictInt = Field(ge=1)
    overall_rating: Rating
    teaching_difficulty: Rating
    assignment_difficulty: Rating
    exam_difficulty: Rating
    has_tests: StrictBool = False
    has_final_exam: StrictBool = False
    attendance_checked: StrictBool = False
    comment: Comment | None = None


class UpdateEvaluationRequestDTO(BaseModel):
    overall_rating: Rating | None = None
    teaching_difficulty: Rating | None = None
    assignment_difficulty: Rating | None = None
    exam_difficulty: Rating | None = None
    has_tests: StrictBool | None = None
    has_final_exam: StrictBool | None = None
    attendance_checked: StrictBool | None = None
    comment: Comment | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class EvaluationDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    course_id: int
    overall_rating: int
    teaching_difficulty: int
    assignment_difficulty: int
    exam_difficulty: int
    has_tests: bool
    has_final_exam: bool
    attendance_checked: bool
    comment: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_evaluation(cls, evaluation: Evaluation) -> EvaluationDTO:
        return cls.model_validate(evaluation)


class CourseEvaluationDTO(EvaluationDTO):
    username: str

    @classmethod
    def from_entry(cls, entry: CourseEvaluation) -> CourseEvaluationDTO:
        base = EvaluationDTO.from_evaluation(entry.evaluation).model_dump()
        return cls(**base, username=entry.username)


class UserEvaluationDTO(EvaluationDTO):
    course_code: str
    course_name: str
    professor: str | None = None

    @classmethod
    def from_entry(cls, entry: UserEvaluation) -> UserEvaluationDTO:
        base = EvaluationDTO.from_evaluation(entry.evaluation).model_dump()
        return cls(
            **base,
            course_code=entry.course_code,
            course_name=entry.course_name,
            professor=entry.professor,
        )
