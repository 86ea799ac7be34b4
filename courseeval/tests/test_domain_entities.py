import pytest
from courseeval.domain import InvariantViolation
from courseeval.domain.courses.entities import Course
from courseeval.domain.evaluations.entities import Evaluation
from courseeval.domain.users.entities import Credential, Role


def _evaluation(**overrides) -> Evaluation:
    values = {
        "id": 1,
        "user_id": 1,
        "course_id": 1,
        "overall_rating": 5,
        "teaching_difficulty": 1,
        "assignment_difficulty": 3,
        "exam_difficulty": 3,
    }
    values.update(overrides)
    return Evaluation(**values)


def test_evaluation_accepts_boundary_ratings() -> None:
    evaluation = _evaluation(overall_rating=1, exam_difficulty=5)
    assert evaluation.overall_rating == 1
    assert evaluation.attendance_checked is False


@pytest.mark.parametrize("value", [0, 6, 2.5, "3", None, False])
def test_evaluation_rejects_invalid_ratings(value) -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        _evaluation(teaching_difficulty=value)
    assert exc_info.value.field == "teaching_difficulty"


def test_evaluation_flags_must_be_booleans() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        _evaluation(has_final_exam=1)
    assert exc_info.value.field == "has_final_exam"


def test_course_requires_code_and_name() -> None:
    with pytest.raises(InvariantViolation):
        Course(id=1, course_code="COMP1117", course_name=" ")
    course = Course(id=1, course_code="COMP1117", course_name="Programming")
    assert course.major is None


def test_credential_can_modify_own_or_as_admin() -> None:
    user = Credential(identity=3, username="bob", role=Role.USER)
    admin = Credential(identity=1, username="root", role=Role.ADMIN)

    assert user.can_modify(3)
    assert not user.can_modify(4)
    assert admin.can_modify(4)
    assert admin.is_admin and not user.is_admin
