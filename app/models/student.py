"""학생 및 수강 등록 SQLAlchemy ORM 모델 정의.

Student and enrollment SQLAlchemy ORM model definitions.
A student owns its enrollments; each enrollment joins the student to an
externally managed class identifier.

Tables:
    - students: 학생 프로필 (Student profile)
    - enrollments: 학생-수업 등록 (Student-to-class enrollment)
"""

import enum
import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Enum, ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class EnrollmentStatus(str, enum.Enum):
    """수강 등록 상태 — Enrollment lifecycle tag."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"
    PENDING = "PENDING"


class Student(Base):
    """학생 모델 — 등록 기록을 소유하는 프로필 엔티티.

    Student profile model. Owns a list of Enrollment rows.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 이름 (Full name)
        email: 이메일, 전역 고유 (Email, globally unique)
        dob: 생년월일 (Date of birth)
        address: 주소 (Postal address)
        enrollment_date: 입학 일시 UTC (Enrollment timestamp)

    Relationships:
        enrollments: 수강 등록 목록 (Owned enrollments, ordered by enrollment date)
    """

    __tablename__ = "students"

    # 학생 고유 식별자 — Student unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 — Unique across all students (DB unique constraint)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    # 입학 일시 — Defaulted by the service when the client omits it
    enrollment_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # 관계 — 자식 행은 서비스에서 명시적으로 먼저 삭제 (children are deleted explicitly first)
    # passive_deletes="all": ORM이 자식 FK를 건드리지 않음 (ORM never touches child rows on parent delete)
    enrollments = relationship(
        "Enrollment",
        back_populates="student",
        passive_deletes="all",
        order_by="Enrollment.enrollment_date",
    )


class Enrollment(Base):
    """수강 등록 모델 — 학생과 외부 수업 ID의 연결.

    Enrollment model joining one student to an external class identifier.
    At most one enrollment exists per (student_id, class_id).

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        student_id: 소속 학생 FK (Owning student)
        class_id: 외부 수업 식별자 (External class identifier, no FK)
        enrollment_date: 등록 일시 (Creation timestamp)
        status: 등록 상태 (ACTIVE / COMPLETED / DROPPED / PENDING)
        completion_date: 수료 일시, COMPLETED일 때만 설정 (Set only while COMPLETED)
    """

    __tablename__ = "enrollments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소속 학생 FK — DB 레벨 CASCADE는 보조 안전장치 (DB-level cascade as backstop)
    student_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    class_id: Mapped[str] = mapped_column(String(255), nullable=False)
    enrollment_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    status: Mapped[EnrollmentStatus] = mapped_column(
        Enum(EnrollmentStatus, native_enum=False, length=20),
        nullable=False,
        default=EnrollmentStatus.ACTIVE,
    )
    completion_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    student = relationship("Student", back_populates="enrollments")

    __table_args__ = (
        UniqueConstraint("student_id", "class_id", name="uq_enrollment_student_class"),
    )
