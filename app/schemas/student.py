"""학생 및 수강 등록 Pydantic 요청/응답 스키마 정의.

Student and Enrollment Pydantic request/response schema definitions.
Request fields are declared optional so that missing or blank values reach
the explicit validators in ``app.utils.validation`` and come back as one
list of field violations instead of failing field by field.
"""

from datetime import date, datetime

from pydantic import BaseModel

from app.models.student import EnrollmentStatus


# === 학생 (Student) 스키마 ===

class StudentCreate(BaseModel):
    """학생 생성 요청 스키마.

    Student creation request schema.

    Attributes:
        name: 이름 (Full name, required)
        email: 이메일 (Email, required, unique)
        dob: 생년월일 (Date of birth, not in the future)
        address: 주소 (Address, required)
        enrollment_date: 입학 일시 (Optional, defaults to now)
    """

    name: str | None = None
    email: str | None = None
    dob: date | None = None
    address: str | None = None
    enrollment_date: datetime | None = None  # 생략 시 서버 시각 (Server time when omitted)


class StudentUpdate(BaseModel):
    """학생 수정 요청 스키마 (전체 교체).

    Student update request schema (full replace of the editable fields).
    enrollment_date is intentionally absent: it never changes after creation.
    """

    name: str | None = None
    email: str | None = None
    dob: date | None = None
    address: str | None = None


class StudentResponse(BaseModel):
    """학생 응답 스키마."""

    id: str  # 학생 UUID 문자열 (Student UUID as string)
    name: str
    email: str
    dob: date
    address: str
    enrollment_date: datetime


# === 수강 등록 (Enrollment) 스키마 ===

class EnrollmentResponse(BaseModel):
    """수강 등록 응답 스키마.

    Attributes:
        id: 등록 UUID (Enrollment identifier)
        student_id: 학생 UUID (Owning student)
        class_id: 외부 수업 ID (External class identifier)
        enrollment_date: 등록 일시 (Creation timestamp)
        status: 등록 상태 (Lifecycle status)
        completion_date: 수료 일시 (Set only while COMPLETED)
    """

    id: str
    student_id: str
    class_id: str
    enrollment_date: datetime
    status: EnrollmentStatus
    completion_date: datetime | None = None


class StudentDetailResponse(StudentResponse):
    """학생 상세 응답 — 수강 등록 목록 포함.

    Student detail response with the owned enrollments embedded.
    """

    enrollments: list[EnrollmentResponse] = []
