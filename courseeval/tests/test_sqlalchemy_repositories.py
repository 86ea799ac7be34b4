from __future__ import annotations

from datetime import UTC, datetime

import pytest

from courseeval.domain.courses.entities import Course
from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.domain.evaluations.entities import Evaluation
from courseeval.domain.evaluations.exceptions import EvaluationAlreadyExistsError
from courseeval.domain.users.entities import Role, User
from courseeval.domain.users.exceptions import UserAlreadyExistsError
from courseeval.infrastructure.db import ENGINE, Base, SessionLocal
from courseeval.infrastructure.repositories.sqlalchemy import (SqlAlchemyCourseRepository,
                                                               SqlAlchemyEvaluationRepository)
from courseeval.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def users() -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(SessionLocal)


@pytest.fixture()
def courses() -> SqlAlchemyCourseRepository:
    return SqlAlchemyCourseRepository(SessionLocal)


@pytest.fixture()
def evaluations() -> SqlAlchemyEvaluationRepository:
    return SqlAlchemyEvaluationRepository(SessionLocal)


def _now() -> datetime:
    return datetime.now(UTC)


def _user(users: SqlAlchemyUserRepository, username: str = "alice") -> User:
    return users.add(
        User(id=0, username=username, password_hash="aa:bb", role=Role.USER, created_at=_now())
    )


def _evaluation(user_id: int, course_id: int) -> Evaluation:
    return Evaluation(
        id=0,
        user_id=user_id,
        course_id=course_id,
        overall_rating=4,
        teaching_difficulty=3,
        assignment_difficulty=2,
        exam_difficulty=3,
        created_at=_now(),
    )


def test_duplicate_username_maps_to_conflict(users) -> None:
    _user(users)

    with pytest.raises(UserAlreadyExistsError):
        _user(users)


def test_second_evaluation_of_same_course_maps_to_conflict(users, courses, evaluations) -> None:
    user = _user(users)
    course = courses.add(
        Course(id=0, course_code="COMP1117", course_name="Programming", created_at=_now())
    )
    evaluations.add(_evaluation(user.id, course.id))

    with pytest.raises(EvaluationAlreadyExistsError):
        evaluations.add(_evaluation(user.id, course.id))


def test_evaluation_of_vanished_course_is_not_a_conflict(users, courses, evaluations) -> None:
    user = _user(users)
    course = courses.add(
        Course(id=0, course_code="COMP1117", course_name="Programming", created_at=_now())
    )
    # course removed between the use case's existence check and the insert
    assert courses.delete(course.id)

    with pytest.raises(CourseNotFoundError) as exc_info:
        evaluations.add(_evaluation(user.id, course.id))

    assert exc_info.value.status == 404
    assert evaluations.list_for_user(user.id) == []
