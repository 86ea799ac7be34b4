from __future__ import annotations

import pytest

from courseeval.application.use_cases.courses.create_course import CreateCourseUseCase
from courseeval.application.use_cases.evaluations.create_evaluation import (
    CreateEvaluationUseCase, EvaluationInput)
from courseeval.application.use_cases.evaluations.delete_evaluation import \
    DeleteEvaluationUseCase
from courseeval.application.use_cases.evaluations.get_evaluation import GetEvaluationUseCase
from courseeval.application.use_cases.evaluations.list_evaluations import (
    ListCourseEvaluationsUseCase, ListUserEvaluationsUseCase)
from courseeval.application.use_cases.evaluations.update_evaluation import \
    UpdateEvaluationUseCase
from courseeval.application.use_cases.statistics.get_statistics import (COMMENT_LIMIT,
                                                                        GetStatisticsUseCase)
from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.domain.evaluations.exceptions import (EvaluationAlreadyExistsError,
                                                      EvaluationNotFoundError)
from courseeval.domain.statistics.entities import Statistics, Totals
from courseeval.domain.users.entities import Credential, Role
from courseeval.shared.errors import ForbiddenError, NothingToUpdateError, ValidationError


def _input(course_id: int = 1, **overrides) -> EvaluationInput:
    values = {
        "course_id": course_id,
        "overall_rating": 4,
        "teaching_difficulty": 3,
        "assignment_difficulty": 2,
        "exam_difficulty": 5,
    }
    values.update(overrides)
    return EvaluationInput(**values)


@pytest.fixture()
def course_id(course_repo) -> int:
    course = CreateCourseUseCase(courses=course_repo).execute(
        "COMP3297", "Software Engineering", professor="Dr. Wong"
    )
    return course.id


@pytest.fixture()
def create(evaluation_repo, course_repo) -> CreateEvaluationUseCase:
    return CreateEvaluationUseCase(evaluations=evaluation_repo, courses=course_repo)


def test_create_records_author_and_defaults(create, alice: Credential, course_id: int) -> None:
    evaluation = create.execute(alice, _input(course_id, comment="Great course"))

    assert evaluation.id == 1
    assert evaluation.user_id == alice.identity
    assert evaluation.has_tests is False
    assert evaluation.comment == "Great course"
    assert evaluation.created_at is not None


def test_empty_comment_is_stored_as_none(create, alice: Credential, course_id: int) -> None:
    assert create.execute(alice, _input(course_id, comment="")).comment is None


def test_create_for_unknown_course_fails(create, alice: Credential) -> None:
    with pytest.raises(CourseNotFoundError):
        create.execute(alice, _input(course_id=404))


def test_second_evaluation_of_same_course_fails(
    create, alice: Credential, admin: Credential, course_id: int
) -> None:
    create.execute(alice, _input(course_id))

    with pytest.raises(EvaluationAlreadyExistsError) as exc_info:
        create.execute(alice, _input(course_id, overall_rating=1))

    assert exc_info.value.status == 409
    # another user may still evaluate it
    assert create.execute(admin, _input(course_id)).user_id == admin.identity


@pytest.mark.parametrize("rating", [0, 6, -1, True])
def test_out_of_range_rating_is_rejected(
    create, alice: Credential, course_id: int, rating
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        create.execute(alice, _input(course_id, overall_rating=rating))

    assert exc_info.value.context["fields"] == ["overall_rating"]


def test_listing_is_newest_first(
    create, evaluation_repo, course_repo, alice: Credential, admin: Credential, course_id: int
) -> None:
    first = create.execute(alice, _input(course_id))
    second = create.execute(admin, _input(course_id))

    listed = ListCourseEvaluationsUseCase(evaluations=evaluation_repo).execute(course_id)

    assert [entry.evaluation.id for entry in listed] == [second.id, first.id]


def test_user_listing_includes_course_details(
    create, evaluation_repo, alice: Credential, course_id: int
) -> None:
    create.execute(alice, _input(course_id))

    (entry,) = ListUserEvaluationsUseCase(evaluations=evaluation_repo).execute(alice)

    assert entry.course_code == "COMP3297"
    assert entry.professor == "Dr. Wong"


def test_get_missing_evaluation_raises(evaluation_repo) -> None:
    with pytest.raises(EvaluationNotFoundError):
        GetEvaluationUseCase(evaluations=evaluation_repo).execute(1)


def test_owner_can_update(create, evaluation_repo, alice: Credential, course_id: int) -> None:
    evaluation = create.execute(alice, _input(course_id))

    updated = UpdateEvaluationUseCase(evaluations=evaluation_repo).execute(
        alice, evaluation.id, {"overall_rating": 2, "has_tests": True, "user_id": 999}
    )

    assert updated.overall_rating == 2
    assert updated.has_tests is True
    assert updated.user_id == alice.identity


def test_admin_can_update_any_evaluation(
    create, evaluation_repo, alice: Credential, admin: Credential, course_id: int
) -> None:
    evaluation = create.execute(alice, _input(course_id))

    updated = UpdateEvaluationUseCase(evaluations=evaluation_repo).execute(
        admin, evaluation.id, {"comment": "moderated"}
    )

    assert updated.comment == "moderated"


def test_other_user_cannot_update_or_delete(
    create, evaluation_repo, alice: Credential, course_id: int
) -> None:
    evaluation = create.execute(alice, _input(course_id))
    mallory = Credential(identity=7, username="mallory", role=Role.USER)

    with pytest.raises(ForbiddenError):
        UpdateEvaluationUseCase(evaluations=evaluation_repo).execute(
            mallory, evaluation.id, {"overall_rating": 1}
        )
    with pytest.raises(ForbiddenError):
        DeleteEvaluationUseCase(evaluations=evaluation_repo).execute(mallory, evaluation.id)

    assert evaluation_repo.get(evaluation.id).overall_rating == 4


def test_update_validation(create, evaluation_repo, alice: Credential, course_id: int) -> None:
    evaluation = create.execute(alice, _input(course_id))
    use_case = UpdateEvaluationUseCase(evaluations=evaluation_repo)

    with pytest.raises(NothingToUpdateError):
        use_case.execute(alice, evaluation.id, {})
    with pytest.raises(ValidationError):
        use_case.execute(alice, evaluation.id, {"exam_difficulty": 9})
    with pytest.raises(EvaluationNotFoundError):
        use_case.execute(alice, 999, {"exam_difficulty": 1})


def test_owner_can_delete(create, evaluation_repo, alice: Credential, course_id: int) -> None:
    evaluation = create.execute(alice, _input(course_id))

    DeleteEvaluationUseCase(evaluations=evaluation_repo).execute(alice, evaluation.id)

    assert evaluation_repo.get(evaluation.id) is None


def test_statistics_use_case_passes_comment_limit() -> None:
    seen: dict[str, int] = {}

    class StubStatistics:
        def collect(self, *, comment_limit: int) -> Statistics:
            seen["limit"] = comment_limit
            return Statistics(course_stats=[], totals=Totals(users=0, courses=0, evaluations=0))

    result = GetStatisticsUseCase(statistics=StubStatistics()).execute()

    assert seen["limit"] == COMMENT_LIMIT == 500
    assert result.comments == []
