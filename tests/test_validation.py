"""입력 검증 함수 테스트.

Validation function tests — each validator returns the full list of
field violations rather than stopping at the first one.
"""

from datetime import date, timedelta

from app.schemas.student import StudentCreate, StudentUpdate
from app.schemas.teacher import TeacherCreate, TeacherUpdate
from app.utils.validation import validate_class_id, validate_student, validate_teacher


def _fields(errors) -> set[str]:
    return {e.field for e in errors}


class TestValidateStudent:
    """학생 검증 테스트."""

    def test_valid(self):
        data = StudentCreate(name="Jane", email="jane@x.com", dob=date(2000, 1, 1), address="1 Main St")
        assert validate_student(data) == []

    def test_everything_missing(self):
        assert _fields(validate_student(StudentCreate())) == {"name", "email", "dob", "address"}

    def test_blank_strings(self):
        data = StudentUpdate(name="", email=" ", dob=date(2000, 1, 1), address="\t")
        errors = validate_student(data)
        assert _fields(errors) == {"name", "email", "address"}
        assert all("empty" in e.message for e in errors)

    def test_bad_email(self):
        data = StudentCreate(name="Jane", email="jane@", dob=date(2000, 1, 1), address="x")
        errors = validate_student(data)
        assert _fields(errors) == {"email"}
        assert "valid email" in errors[0].message

    def test_dob_today_allowed(self):
        data = StudentCreate(name="Jane", email="jane@x.com", dob=date.today(), address="x")
        assert validate_student(data) == []

    def test_name_too_long(self):
        data = StudentCreate(name="J" * 256, email="jane@x.com", dob=date(2000, 1, 1), address="x")
        assert _fields(validate_student(data)) == {"name"}

    def test_dob_future_rejected(self):
        data = StudentCreate(
            name="Jane", email="jane@x.com", dob=date.today() + timedelta(days=1), address="x"
        )
        errors = validate_student(data)
        assert _fields(errors) == {"dob"}
        assert "future" in errors[0].message


class TestValidateClassId:
    """수업 ID 검증 테스트."""

    def test_valid(self):
        assert validate_class_id("MATH101") == []

    def test_blank(self):
        assert _fields(validate_class_id("   ")) == {"classId"}

    def test_missing(self):
        assert _fields(validate_class_id(None)) == {"classId"}

    def test_column_length_limit(self):
        assert validate_class_id("C" * 255) == []
        errors = validate_class_id("C" * 256)
        assert _fields(errors) == {"classId"}
        assert "at most 255" in errors[0].message


class TestValidateTeacher:
    """교사 검증 테스트."""

    def test_valid_create(self):
        data = TeacherCreate(first_name="Ada", last_name="Lovelace", email="ada@school.edu")
        assert validate_teacher(data) == []

    def test_update_requires_active(self):
        data = TeacherUpdate(first_name="Ada", last_name="Lovelace", email="ada@school.edu")
        assert _fields(validate_teacher(data)) == {"active"}

    def test_long_names_and_subject(self):
        data = TeacherCreate(
            first_name="A" * 101, last_name="L" * 101, email="ada@school.edu", subject="S" * 101
        )
        assert _fields(validate_teacher(data)) == {"first_name", "last_name", "subject"}

    def test_optional_fields_not_required(self):
        data = TeacherUpdate(
            first_name="Ada", last_name="Lovelace", email="ada@school.edu", active=False
        )
        assert validate_teacher(data) == []
