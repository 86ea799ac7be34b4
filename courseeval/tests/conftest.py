from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from typing import Any

_TMP_DIR = tempfile.mkdtemp(prefix="courseeval-tests-")

# settings and the engine are read at import time, so configure them first
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'courseeval.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["ENABLE_RATE_LIMIT"] = "false"
os.environ["JWT_SECRET"] = "integration-test-signing-secret-6b1f0c2e"
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("APP_ENV", None)

import pytest  # noqa: E402

from courseeval.domain.courses.entities import Course  # noqa: E402
from courseeval.domain.evaluations.entities import (CourseEvaluation, Evaluation,  # noqa: E402
                                                     UserEvaluation)
from courseeval.domain.users.entities import Credential, Role, User  # noqa: E402
from courseeval.shared.config import AuthConfig  # noqa: E402


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def add(self, user: User) -> User:
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def set_role(self, user_id: int, role: Role) -> None:
        self._users[user_id] = replace(self._users[user_id], role=role)


class InMemoryCourseRepository:
    def __init__(self) -> None:
        self.courses: dict[int, Course] = {}
        self._seq = 1

    def list(self, major: str | None = None) -> Sequence[Course]:
        return [c for c in self.courses.values() if major is None or c.major == major]

    def get(self, course_id: int) -> Course | None:
        return self.courses.get(course_id)

    def add(self, course: Course) -> Course:
        stored = replace(course, id=self._seq)
        self._seq += 1
        self.courses[stored.id] = stored
        return stored

    def update(self, course_id: int, changes: Mapping[str, Any]) -> Course | None:
        if course_id not in self.courses:
            return None
        self.courses[course_id] = replace(self.courses[course_id], **changes)
        return self.courses[course_id]

    def delete(self, course_id: int) -> bool:
        return self.courses.pop(course_id, None) is not None


class InMemoryEvaluationRepository:
    def __init__(self, courses: InMemoryCourseRepository) -> None:
        self.evaluations: dict[int, Evaluation] = {}
        self._courses = courses
        self._seq = 1

    def add(self, evaluation: Evaluation) -> Evaluation:
        stored = replace(evaluation, id=self._seq)
        self._seq += 1
        self.evaluations[stored.id] = stored
        return stored

    def get(self, evaluation_id: int) -> Evaluation | None:
        return self.evaluations.get(evaluation_id)

    def find_for_user_and_course(self, user_id: int, course_id: int) -> Evaluation | None:
        return next(
            (
                e
                for e in self.evaluations.values()
                if e.user_id == user_id and e.course_id == course_id
            ),
            None,
        )

    def _newest_first(self) -> list[Evaluation]:
        return sorted(self.evaluations.values(), key=lambda e: e.id, reverse=True)

    def list_for_course(self, course_id: int) -> Sequence[CourseEvaluation]:
        return [
            CourseEvaluation(evaluation=e, username=f"user{e.user_id}")
            for e in self._newest_first()
            if e.course_id == course_id
        ]

    def list_for_user(self, user_id: int) -> Sequence[UserEvaluation]:
        result = []
        for e in self._newest_first():
            if e.user_id != user_id:
                continue
            course = self._courses.courses[e.course_id]
            result.append(
                UserEvaluation(
                    evaluation=e,
                    course_code=course.course_code,
                    course_name=course.course_name,
                    professor=course.professor,
                )
            )
        return result

    def update(self, evaluation_id: int, changes: Mapping[str, Any]) -> Evaluation | None:
        if evaluation_id not in self.evaluations:
            return None
        self.evaluations[evaluation_id] = replace(self.evaluations[evaluation_id], **changes)
        return self.evaluations[evaluation_id]

    def delete(self, evaluation_id: int) -> bool:
        return self.evaluations.pop(evaluation_id, None) is not None


class DeterministicHasher:
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, stored: str, password: str) -> bool:
        return stored == f"hashed:{password}"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def auth_config() -> AuthConfig:
    return AuthConfig(secret="unit-test-signing-secret-5f2a9d41c07e")


@pytest.fixture()
def alice() -> Credential:
    return Credential(identity=42, username="alice", role=Role.USER)


@pytest.fixture()
def admin() -> Credential:
    return Credential(identity=1, username="root", role=Role.ADMIN)


@pytest.fixture()
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def course_repo() -> InMemoryCourseRepository:
    return InMemoryCourseRepository()


@pytest.fixture()
def evaluation_repo(course_repo: InMemoryCourseRepository) -> InMemoryEvaluationRepository:
    return InMemoryEvaluationRepository(course_repo)


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()
