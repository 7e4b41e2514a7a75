import math

import pytest

from mentorium.models import Student, MentorAssignment, AssignmentResult
from mentorium.utils import clamp_cwa, clamp_mentor_count, round_score, is_finite_number


@pytest.mark.parametrize("value,expected", [
    (150, 100), (-20, 0), (88.456, 88.46), (55, 55), (math.nan, 0), (math.inf, 0), (None, 0),
])
def test_clamp_cwa(value, expected) -> None:
    assert clamp_cwa(value) == expected


def test_round_score_half_up() -> None:
    assert round_score(0.125) == 0.13
    assert round_score(66.666) == 66.67
    assert math.isnan(round_score(math.nan))


@pytest.mark.parametrize("value,size,expected", [
    (6, 36, 6), (0, 36, 1), (50, 36, 36), (4, 0, 4), (-3, 0, 1),
])
def test_clamp_mentor_count(value, size, expected) -> None:
    assert clamp_mentor_count(value, size) == expected


def test_is_finite_number() -> None:
    assert is_finite_number(3)
    assert is_finite_number(2.5)
    assert not is_finite_number(True)
    assert not is_finite_number("3")
    assert not is_finite_number(math.nan)


def test_student_is_read_only() -> None:
    student = Student("12345678", "1234567", "Kofi", 70.0)
    with pytest.raises(AttributeError):
        student.cwa = 80.0


def test_with_cwa_returns_clamped_copy() -> None:
    student = Student("12345678", "1234567", "Kofi", 70.0)
    edited = student.with_cwa(150)
    assert edited.cwa == 100
    assert student.cwa == 70.0
    assert edited.student_id == student.student_id


def test_student_dict_round_trip() -> None:
    student = Student("12345678", "1234567", "Kofi", 70.25)
    assert Student.from_dict(student.to_dict()) == student
    assert student.to_row() == {"STUDENTID": "12345678", "INDEXNO": "1234567", "NAME": "Kofi", "CWA": 70.25}


def test_assignment_result_properties() -> None:
    students = [Student("12345678", "1234567", "Kofi", 70.0)]
    result = AssignmentResult([MentorAssignment(0, students), MentorAssignment(1)], ["forward"])
    assert result.num_mentors == 2
    assert result.total_students == 1
    assert result.assignments[1].display_number == 2
    assert result.to_dict()["passes"] == ["forward"]
