"""요청 페이로드 검증 유틸리티.

Inbound payload validation utilities.
Each ``validate_*`` function inspects a request schema and returns the full
list of field violations (empty when the payload is valid). Routers call
them before any service method and raise ``ValidationError`` on a non-empty
result, so invalid input never reaches the database.

Usage:
    errors = validate_student(data)
    if errors:
        raise ValidationError(errors)
"""

from datetime import date

from email_validator import EmailNotValidError, validate_email

from app.models.student import Enrollment, Student
from app.models.teacher import Teacher
from app.schemas.common import FieldViolation
from app.schemas.student import StudentCreate, StudentUpdate
from app.schemas.teacher import TeacherCreate, TeacherUpdate


def _column_length(model: type, column: str) -> int | None:
    """문자열 컬럼 길이 — VARCHAR length of a mapped column, None for TEXT."""
    return getattr(model.__table__.c[column].type, "length", None)


def _require_text(
    errors: list[FieldViolation],
    field: str,
    value: str | None,
    max_length: int | None = None,
) -> bool:
    """필수 텍스트 필드 확인 — Missing, blank or longer than the column allows."""
    if value is None:
        errors.append(FieldViolation(field=field, message=f"{field} is required"))
        return False
    if not value.strip():
        errors.append(FieldViolation(field=field, message=f"{field} cannot be empty"))
        return False
    return _check_max_length(errors, field, value, max_length)


def _check_max_length(
    errors: list[FieldViolation],
    field: str,
    value: str | None,
    max_length: int | None,
) -> bool:
    if value is None or max_length is None or len(value) <= max_length:
        return True
    errors.append(FieldViolation(field=field, message=f"{field} must be at most {max_length} characters"))
    return False


def _check_email(
    errors: list[FieldViolation],
    field: str,
    value: str | None,
    max_length: int | None = None,
) -> None:
    """이메일 형식 확인 — Syntax only, no DNS/deliverability lookup."""
    if not _require_text(errors, field, value, max_length):
        return
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        errors.append(FieldViolation(field=field, message=f"{field} should be a valid email address"))


def _check_past_or_present(
    errors: list[FieldViolation],
    field: str,
    value: date | None,
    required: bool = True,
) -> None:
    """날짜가 미래가 아닌지 확인 — Date must be today or earlier."""
    if value is None:
        if required:
            errors.append(FieldViolation(field=field, message=f"{field} is required"))
        return
    if value > date.today():
        errors.append(FieldViolation(field=field, message=f"{field} cannot be in the future"))


def validate_student(data: StudentCreate | StudentUpdate) -> list[FieldViolation]:
    """학생 생성/수정 페이로드를 검증합니다.

    Validate a student create or update payload.

    Args:
        data: 학생 요청 스키마 (Student request schema)

    Returns:
        list[FieldViolation]: 위반 목록, 유효하면 빈 리스트 (Violations, empty when valid)
    """
    errors: list[FieldViolation] = []
    _require_text(errors, "name", data.name, _column_length(Student, "name"))
    _check_email(errors, "email", data.email, _column_length(Student, "email"))
    _check_past_or_present(errors, "dob", data.dob)
    _require_text(errors, "address", data.address)
    return errors


def validate_class_id(class_id: str | None) -> list[FieldViolation]:
    """수업 ID 검증 — classId must be non-blank and fit the class_id column."""
    errors: list[FieldViolation] = []
    _require_text(errors, "classId", class_id, _column_length(Enrollment, "class_id"))
    return errors


def validate_teacher(data: TeacherCreate | TeacherUpdate) -> list[FieldViolation]:
    """교사 생성/수정 페이로드를 검증합니다.

    Validate a teacher create or update payload. ``active`` is checked only
    on updates, where it has no default.

    Args:
        data: 교사 요청 스키마 (Teacher request schema)

    Returns:
        list[FieldViolation]: 위반 목록 (Violations, empty when valid)
    """
    errors: list[FieldViolation] = []
    _require_text(errors, "first_name", data.first_name, _column_length(Teacher, "first_name"))
    _require_text(errors, "last_name", data.last_name, _column_length(Teacher, "last_name"))
    _check_email(errors, "email", data.email, _column_length(Teacher, "email"))
    _check_max_length(errors, "subject", data.subject, _column_length(Teacher, "subject"))
    if data.active is None:
        errors.append(FieldViolation(field="active", message="active is required"))
    return errors
