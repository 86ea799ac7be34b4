from __future__ import annotations

import pytest

from courseeval.application.use_cases.courses.create_course import CreateCourseUseCase
from courseeval.application.use_cases.courses.delete_course import DeleteCourseUseCase
from courseeval.application.use_cases.courses.get_course import GetCourseUseCase
from courseeval.application.use_cases.courses.list_courses import ListCoursesUseCase
from courseeval.application.use_cases.courses.update_course import UpdateCourseUseCase
from courseeval.domain.courses.exceptions import CourseNotFoundError
from courseeval.shared.errors import NothingToUpdateError, ValidationError


@pytest.fixture()
def seeded(course_repo):
    create = CreateCourseUseCase(courses=course_repo)
    create.execute("COMP1117", "Computer Programming", professor="Dr. Lee", major="CS")
    create.execute("STAT1603", "Introductory Statistics", major="Statistics")
    return course_repo


def test_create_and_get(course_repo) -> None:
    course = CreateCourseUseCase(courses=course_repo).execute("COMP2119", "Data Structures")

    fetched = GetCourseUseCase(courses=course_repo).execute(course.id)

    assert fetched.course_code == "COMP2119"
    assert fetched.professor is None
    assert fetched.created_at is not None


def test_create_rejects_blank_code(course_repo) -> None:
    with pytest.raises(ValidationError) as exc_info:
        CreateCourseUseCase(courses=course_repo).execute("   ", "Data Structures")

    assert exc_info.value.context["fields"] == ["course_code"]


def test_list_filters_by_major(seeded) -> None:
    use_case = ListCoursesUseCase(courses=seeded)

    assert len(use_case.execute()) == 2
    assert [c.course_code for c in use_case.execute(major="CS")] == ["COMP1117"]
    assert use_case.execute(major="Physics") == []


def test_get_missing_course_raises(course_repo) -> None:
    with pytest.raises(CourseNotFoundError) as exc_info:
        GetCourseUseCase(courses=course_repo).execute(99)

    assert exc_info.value.status == 404


def test_update_applies_known_fields_only(seeded) -> None:
    updated = UpdateCourseUseCase(courses=seeded).execute(
        1, {"professor": "Dr. Chan", "id": 7, "unknown": "x"}
    )

    assert updated.id == 1
    assert updated.professor == "Dr. Chan"
    assert updated.course_name == "Computer Programming"


def test_update_without_fields_is_rejected(seeded) -> None:
    with pytest.raises(NothingToUpdateError) as exc_info:
        UpdateCourseUseCase(courses=seeded).execute(1, {"unknown": "x"})

    assert exc_info.value.code == "no_fields_to_update"


def test_update_missing_course_raises(seeded) -> None:
    with pytest.raises(CourseNotFoundError):
        UpdateCourseUseCase(courses=seeded).execute(99, {"major": "CS"})


def test_update_cannot_blank_the_name(seeded) -> None:
    with pytest.raises(ValidationError):
        UpdateCourseUseCase(courses=seeded).execute(1, {"course_name": ""})

    assert seeded.get(1).course_name == "Computer Programming"


def test_delete(seeded) -> None:
    DeleteCourseUseCase(courses=seeded).execute(1)

    assert seeded.get(1) is None
    with pytest.raises(CourseNotFoundError):
        DeleteCourseUseCase(courses=seeded).execute(1)
