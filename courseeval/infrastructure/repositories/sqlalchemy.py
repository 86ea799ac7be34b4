# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from courseeval.domain.courses.entities import COURSE_FIELDS
from courseeval.domain.courses.entities import Course as DomainCourse
from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.domain.courses.repositories import CourseRepository
from courseeval.domain.evaluations.entities import (MUTABLE_FIELDS, CourseEvaluation,
                                                     UserEvaluation)
from courseeval.domain.evaluations.entities import Evaluation as DomainEvaluation
from courseeval.domain.evaluations.exceptions import EvaluationAlreadyExistsError
from courseeval.domain.evaluations.repositories import EvaluationRepository
from courseeval.infrastructure.db.models import Course, Evaluation, User
from courseeval.infrastructure.unit_of_work import unit_of_work_scope


def _course_to_domain(row: Course) -> DomainCourse:
    return DomainCourse(
        id=row.id,
        course_code=row.course_code,
        course_name=row.course_name,
        professor=row.professor,
        major=row.major,
        created_at=row.created_at,
    )


def _evaluation_to_domain(row: Evaluation) -> DomainEvaluation:
    return DomainEvaluation(
        id=row.id,
        user_id=row.user_id,
        course_id=row.course_id,
        overall_rating=int(row.overall_rating),
        teaching_difficulty=int(row.teaching_difficulty),
        assignment_difficulty=int(row.assignment_difficulty),
        exam_difficulty=int(row.exam_difficulty),
        has_tests=bool(row.has_tests),
        has_final_exam=bool(row.has_final_exam),
        attendance_checked=bool(row.attendance_checked),
        comment=row.comment,
        created_at=row.created_at,
    )


class SqlAlchemyCourseRepository(CourseRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list(self, major: str | None = None) -> Sequence[DomainCourse]:
        with unit_of_work_scope(self._session_factory) as session:
            query = session.query(Course)
            if major:
                query = query.filter(Course.major == major)
            rows = query.order_by(Course.id.asc()).all()
            return [_course_to_domain(row) for row in rows]

    def get(self, course_id: int) -> DomainCourse | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Course, course_id)
            return _course_to_domain(row) if row else None

    def add(self, course: DomainCourse) -> DomainCourse:
        with unit_of_work_scope(self._session_factory) as session:
            row = Course(
                course_code=course.course_code,
                course_name=course.course_name,
                professor=course.professor,
                major=course.major,
                created_at=course.created_at,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _course_to_domain(row)

    def update(self, course_id: int, changes: Mapping[str, Any]) -> DomainCourse | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Course, course_id)
            if row is None:
                return None
            for name, value in changes.items():
                if name in COURSE_FIELDS:
                    setattr(row, name, value)
            session.flush()
            return _course_to_domain(row)

    def delete(self, course_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Course, course_id)
            if row is None:
                return False
            session.delete(row)
            return True


class SqlAlchemyEvaluationRepository(EvaluationRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, evaluation: DomainEvaluation) -> DomainEvaluation:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Evaluation(
                    user_id=evaluation.user_id,
                    course_id=evaluation.course_id,
                    overall_rating=evaluation.overall_rating,
                    teaching_difficulty=evaluation.teaching_difficulty,
                    assignment_difficulty=evaluation.assignment_difficulty,
                    exam_difficulty=evaluation.exam_difficulty,
                    has_tests=evaluation.has_tests,
                    has_final_exam=evaluation.has_final_exam,
                    attendance_checked=evaluation.attendance_checked,
                    comment=evaluation.comment,
                    created_at=evaluation.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _evaluation_to_domain(row)
        except IntegrityError as exc:
            # the course may have been deleted after the use case looked it up
            if not self._course_exists(evaluation.course_id):
                raise CourseNotFoundError(evaluation.course_id) from exc
            if self.find_for_user_and_course(evaluation.user_id, evaluation.course_id):
                raise EvaluationAlreadyExistsError(evaluation.course_id) from exc
            raise

    def _course_exists(self, course_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            return session.get(Course, course_id) is not None

    def get(self, evaluation_id: int) -> DomainEvaluation | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Evaluation, evaluation_id)
            return _evaluation_to_domain(row) if row else None

    def find_for_user_and_course(self, user_id: int, course_id: int) -> DomainEvaluation | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(Evaluation)
                .filter(Evaluation.user_id == user_id, Evaluation.course_id == course_id)
                .first()
            )
            return _evaluation_to_domain(row) if row else None

    def list_for_course(self, course_id: int) -> Sequence[CourseEvaluation]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Evaluation, User.username)
                .join(User, Evaluation.user_id == User.id)
                .filter(Evaluation.course_id == course_id)
                .order_by(desc(Evaluation.created_at), desc(Evaluation.id))
                .all()
            )
            return [
                CourseEvaluation(evaluation=_evaluation_to_domain(row), username=username)
                for row, username in rows
            ]

    def list_for_user(self, user_id: int) -> Sequence[UserEvaluation]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(
                    Evaluation, Course.course_code, Course.course_name, Course.professor
                )
                .join(Course, Evaluation.course_id == Course.id)
                .filter(Evaluation.user_id == user_id)
                .order_by(desc(Evaluation.created_at), desc(Evaluation.id))
                .all()
            )
            return [
                UserEvaluation(
                    evaluation=_evaluation_to_domain(row),
                    course_code=course_code,
                    course_name=course_name,
                    professor=professor,
                )
                for row, course_code, course_name, professor in rows
            ]

    def update(
        self, evaluation_id: int, changes: Mapping[str, Any]
    ) -> DomainEvaluation | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Evaluation, evaluation_id)
            if row is None:
                return None
            for name, value in changes.items():
                if name in MUTABLE_FIELDS:
                    setattr(row, name, value)
            session.flush()
            return _evaluation_to_domain(row)

    def delete(self, evaluation_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Evaluation, evaluation_id)
            if row is None:
                return False
            session.delete(row)
            return True
