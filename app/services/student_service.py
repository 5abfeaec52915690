"""학생 서비스 — 학생 프로필 CRUD 비즈니스 로직.

Student Service — Business logic for student profile CRUD.
Absence is always signalled with NotFoundError; duplicate emails surface
as ConflictError from the repository's unique-constraint handling.
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.student import Enrollment, Student
from app.repositories.enrollment_repository import EnrollmentRepository, enrollment_repository
from app.repositories.student_repository import StudentRepository, student_repository
from app.schemas.student import (
    EnrollmentResponse,
    StudentCreate,
    StudentDetailResponse,
    StudentResponse,
    StudentUpdate,
)
from app.utils.exceptions import NotFoundError


def enrollment_to_response(enrollment: Enrollment) -> EnrollmentResponse:
    """수강 등록 모델을 응답 스키마로 변환합니다."""
    return EnrollmentResponse(
        id=str(enrollment.id),
        student_id=str(enrollment.student_id),
        class_id=enrollment.class_id,
        enrollment_date=enrollment.enrollment_date,
        status=enrollment.status,
        completion_date=enrollment.completion_date,
    )


class StudentService:
    """학생 관련 비즈니스 로직을 처리하는 서비스.

    Service handling student business logic. Holds references to the
    repositories it uses; their lifetime belongs to the caller.

    Attributes:
        students: 학생 레포지토리 (Student repository)
        enrollments: 수강 등록 레포지토리 (Enrollment repository, used for delete)
    """

    def __init__(
        self,
        students: StudentRepository,
        enrollments: EnrollmentRepository,
    ) -> None:
        self.students: StudentRepository = students
        self.enrollments: EnrollmentRepository = enrollments

    def _to_response(self, student: Student) -> StudentResponse:
        """학생 모델을 응답 스키마로 변환합니다.

        Convert a Student model instance to a StudentResponse schema.
        """
        return StudentResponse(
            id=str(student.id),
            name=student.name,
            email=student.email,
            dob=student.dob,
            address=student.address,
            enrollment_date=student.enrollment_date,
        )

    async def _get_or_404(self, db: AsyncSession, student_id: UUID) -> Student:
        student: Student | None = await self.students.get_by_id(db, student_id)
        if student is None:
            raise NotFoundError(f"Student not found with id: {student_id}")
        return student

    async def create_student(
        self,
        db: AsyncSession,
        data: StudentCreate,
    ) -> StudentResponse:
        """새 학생을 생성합니다.

        Create a new student. enrollment_date defaults to the current time
        when the client omits it.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 검증된 학생 생성 데이터 (Validated creation data)

        Returns:
            StudentResponse: 생성된 학생 응답 (Created student response)

        Raises:
            ConflictError: 이메일 중복 시 (Duplicate email)
        """
        enrollment_date: datetime = data.enrollment_date or datetime.now(timezone.utc)
        student: Student = await self.students.create(
            db,
            {
                "name": data.name,
                "email": data.email,
                "dob": data.dob,
                "address": data.address,
                "enrollment_date": enrollment_date,
            },
        )
        return self._to_response(student)

    async def list_students(
        self,
        db: AsyncSession,
        email: str | None = None,
    ) -> list[StudentResponse]:
        """학생 목록을 조회합니다. 이메일이 주어지면 해당 학생만 반환.

        List all students in storage order, optionally narrowed to one email.
        """
        if email is not None:
            student: Student | None = await self.students.get_by_email(db, email)
            return [self._to_response(student)] if student is not None else []
        students = await self.students.get_all(db)
        return [self._to_response(s) for s in students]

    async def get_student(
        self,
        db: AsyncSession,
        student_id: UUID,
    ) -> StudentDetailResponse:
        """학생 상세 정보를 수강 등록 목록과 함께 조회합니다.

        Retrieve a student with its enrollments.

        Raises:
            NotFoundError: 학생을 찾을 수 없을 때 (Student not found)
        """
        student: Student | None = await self.students.get_detail(db, student_id)
        if student is None:
            raise NotFoundError(f"Student not found with id: {student_id}")

        return StudentDetailResponse(
            **self._to_response(student).model_dump(),
            enrollments=[enrollment_to_response(e) for e in student.enrollments],
        )

    async def update_student(
        self,
        db: AsyncSession,
        student_id: UUID,
        data: StudentUpdate,
    ) -> StudentResponse:
        """학생 정보를 수정합니다 (전체 교체).

        Replace name, email, dob and address. enrollment_date is left as is.

        Raises:
            NotFoundError: 학생을 찾을 수 없을 때 (Student not found)
            ConflictError: 이메일 중복 시 (Duplicate email)
        """
        student: Student | None = await self.students.update(
            db,
            student_id,
            {
                "name": data.name,
                "email": data.email,
                "dob": data.dob,
                "address": data.address,
            },
        )
        if student is None:
            raise NotFoundError(f"Student not found with id: {student_id}")
        return self._to_response(student)

    async def delete_student(
        self,
        db: AsyncSession,
        student_id: UUID,
    ) -> None:
        """학생과 모든 수강 등록을 삭제합니다.

        Delete the student's enrollments, then the student, on the same
        session so both steps commit or roll back together.

        Raises:
            NotFoundError: 학생을 찾을 수 없을 때 (Student not found)
        """
        await self._get_or_404(db, student_id)
        await self.enrollments.delete_by_student(db, student_id)
        await self.students.delete(db, student_id)


# 싱글턴 인스턴스 — Singleton instance wired with the module-level repositories
student_service: StudentService = StudentService(student_repository, enrollment_repository)
