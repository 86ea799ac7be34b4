# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Evaluation entities and the read models served alongside them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from courseeval.domain.exceptions import InvariantViolation

RATING_MIN = 1
RATING_MAX = 5

RATING_FIELDS: tuple[str, ...] = (
    "overall_rating",
    "teaching_difficulty",
    "assignment_difficulty",
    "exam_difficulty",
)
FLAG_FIELDS: tuple[str, ...] = ("has_tests", "has_final_exam", "attendance_checked")
MUTABLE_FIELDS: tuple[str, ...] = (*RATING_FIELDS, *FLAG_FIELDS, "comment")


def check_rating(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvariantViolation("rating must be an integer", field=name)
    if not RATING_MIN <= value <= RATING_MAX:
        raise InvariantViolation(
            f"rating must be between {RATING_MIN} and {RATING_MAX}", field=name
        )


@dataclass(slots=True, frozen=True)
class Evaluation:
    """A single user's evaluation of a course."""

    id: int
    user_id: int
    course_id: int
    overall_rating: int
    teaching_difficulty: int
    assignment_difficulty: int
    exam_difficulty: int
    has_tests: bool = False
    has_final_exam: bool = False
    attendance_checked: bool = False
    comment: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        for name in RATING_FIELDS:
            check_rating(name, getattr(self, name))
        for name in FLAG_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise InvariantViolation("flag must be a boolean", field=name)


@dataclass(slots=True, frozen=True)
class CourseEvaluation:
    """Evaluation listed under a course, with the author's username."""

    evaluation: Evaluation
    username: str


@dataclass(slots=True, frozen=True)
class UserEvaluation:
    """Evaluation listed on a user's profile, with course details."""

    evaluation: Evaluation
    course_code: str
    course_name: str
    professor: str | None
