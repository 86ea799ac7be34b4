# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from courseeval.domain.statistics.entities import CourseRating, Statistics, Totals
from courseeval.domain.statistics.repositories import StatisticsRepository
from courseeval.infrastructure.db.models import Course, Evaluation, User
from courseeval.infrastructure.unit_of_work import unit_of_work_scope


class SqlAlchemyStatisticsRepository(StatisticsRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def collect(self, *, comment_limit: int) -> Statistics:
        with unit_of_work_scope(self._session_factory) as session:
            avg_rating = func.avg(Evaluation.overall_rating).label("avg_rating")
            course_rows = (
                session.query(
                    Course.course_name,
                    Course.course_code,
                    avg_rating,
                    func.count(Evaluation.id).label("evaluation_count"),
                )
                .join(Evaluation, Evaluation.course_id == Course.id)
                .group_by(Course.id, Course.course_name, Course.course_code)
                .order_by(desc(avg_rating))
                .all()
            )

            comment_rows = (
                session.query(Evaluation.comment)
                .filter(Evaluation.comment.is_not(None), Evaluation.comment != "")
                .order_by(desc(Evaluation.created_at), desc(Evaluation.id))
                .limit(comment_limit)
                .all()
            )

            totals = Totals(
                users=session.query(func.count(User.id)).scalar() or 0,
                courses=session.query(func.count(Course.id)).scalar() or 0,
                evaluations=session.query(func.count(Evaluation.id)).scalar() or 0,
            )

        return Statistics(
            course_stats=[
                CourseRating(
                    course_name=course_name,
                    course_code=course_code,
                    avg_rating=float(average),
                    count=int(count),
                )
                for course_name, course_code, average, count in course_rows
            ],
            totals=totals,
            comments=[comment for (comment,) in comment_rows],
        )
