"""수강 등록 서비스 — 학생-수업 등록 및 상태 전이 비즈니스 로직.

Enrollment Service — Enrolling students in classes and moving enrollments
through their status lifecycle.

Rules:
    - (student_id, class_id) 조합당 최대 1건 (At most one enrollment per pair)
    - COMPLETED 전이 시 completion_date 설정, 그 외 상태는 초기화
      (COMPLETED stamps completion_date; every other status clears it)
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.student import Enrollment, EnrollmentStatus
from app.repositories.enrollment_repository import EnrollmentRepository, enrollment_repository
from app.repositories.student_repository import StudentRepository, student_repository
from app.schemas.student import EnrollmentResponse
from app.services.student_service import enrollment_to_response
from app.utils.exceptions import ConflictError, NotFoundError


class EnrollmentService:
    """수강 등록 관련 비즈니스 로직을 처리하는 서비스.

    Attributes:
        students: 학생 레포지토리 (Student repository, existence checks)
        enrollments: 수강 등록 레포지토리 (Enrollment repository)
    """

    def __init__(
        self,
        students: StudentRepository,
        enrollments: EnrollmentRepository,
    ) -> None:
        self.students: StudentRepository = students
        self.enrollments: EnrollmentRepository = enrollments

    async def _require_student(self, db: AsyncSession, student_id: UUID) -> None:
        if not await self.students.exists(db, {"id": student_id}):
            raise NotFoundError(f"Student not found with id: {student_id}")

    async def _get_or_404(self, db: AsyncSession, enrollment_id: UUID) -> Enrollment:
        enrollment: Enrollment | None = await self.enrollments.get_by_id(db, enrollment_id)
        if enrollment is None:
            raise NotFoundError(f"Enrollment not found with id: {enrollment_id}")
        return enrollment

    async def enroll_student(
        self,
        db: AsyncSession,
        student_id: UUID,
        class_id: str,
    ) -> EnrollmentResponse:
        """학생을 수업에 등록합니다.

        Enroll a student in a class with status ACTIVE. A concurrent
        duplicate that passes the pre-check is still rejected by the
        (student_id, class_id) unique constraint.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            student_id: 학생 ID (Student UUID)
            class_id: 외부 수업 ID (External class identifier)

        Returns:
            EnrollmentResponse: 생성된 등록 응답 (Created enrollment)

        Raises:
            NotFoundError: 학생을 찾을 수 없을 때 (Student not found)
            ConflictError: 이미 등록된 수업일 때 (Already enrolled in the class)
        """
        await self._require_student(db, student_id)

        existing: Enrollment | None = await self.enrollments.get_by_student_and_class(
            db, student_id, class_id
        )
        if existing is not None:
            raise ConflictError(f"Student is already enrolled in class: {class_id}")

        enrollment: Enrollment = await self.enrollments.create(
            db,
            {
                "student_id": student_id,
                "class_id": class_id,
                "enrollment_date": datetime.now(timezone.utc),
                "status": EnrollmentStatus.ACTIVE,
                "completion_date": None,
            },
        )
        return enrollment_to_response(enrollment)

    async def list_enrollments(
        self,
        db: AsyncSession,
        student_id: UUID,
    ) -> list[EnrollmentResponse]:
        """학생의 수강 등록 목록을 조회합니다.

        Raises:
            NotFoundError: 학생을 찾을 수 없을 때 (Student not found)
        """
        await self._require_student(db, student_id)
        enrollments: list[Enrollment] = await self.enrollments.get_by_student(db, student_id)
        return [enrollment_to_response(e) for e in enrollments]

    async def get_enrollment(
        self,
        db: AsyncSession,
        enrollment_id: UUID,
    ) -> EnrollmentResponse:
        """단일 수강 등록을 조회합니다."""
        return enrollment_to_response(await self._get_or_404(db, enrollment_id))

    async def update_status(
        self,
        db: AsyncSession,
        enrollment_id: UUID,
        new_status: EnrollmentStatus,
    ) -> EnrollmentResponse:
        """수강 등록 상태를 변경합니다.

        Set the status. COMPLETED stamps completion_date with the current
        time; any other status clears it, including a revert from COMPLETED.

        Raises:
            NotFoundError: 등록을 찾을 수 없을 때 (Enrollment not found)
        """
        enrollment: Enrollment = await self._get_or_404(db, enrollment_id)

        enrollment.status = new_status
        enrollment.completion_date = (
            datetime.now(timezone.utc) if new_status == EnrollmentStatus.COMPLETED else None
        )
        return enrollment_to_response(await self.enrollments.save(db, enrollment))

    async def delete_enrollment(
        self,
        db: AsyncSession,
        enrollment_id: UUID,
    ) -> None:
        """수강 등록을 삭제합니다.

        Raises:
            NotFoundError: 등록을 찾을 수 없을 때 (Enrollment not found)
        """
        deleted: bool = await self.enrollments.delete(db, enrollment_id)
        if not deleted:
            raise NotFoundError(f"Enrollment not found with id: {enrollment_id}")


# 싱글턴 인스턴스 — Singleton instance
enrollment_service: EnrollmentService = EnrollmentService(student_repository, enrollment_repository)
