"""수강 등록 레포지토리 — 등록 CRUD 및 학생/수업 기준 쿼리.

Enrollment Repository — CRUD plus queries derived from student_id and
(student_id, class_id).
"""

from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.student import Enrollment
from app.repositories.base import BaseRepository


class EnrollmentRepository(BaseRepository[Enrollment]):
    """수강 등록 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the enrollments table.
    """

    def __init__(self) -> None:
        super().__init__(Enrollment, conflict_detail="Student is already enrolled in this class")

    async def get_by_student(
        self,
        db: AsyncSession,
        student_id: UUID,
    ) -> list[Enrollment]:
        """학생의 모든 수강 등록을 조회합니다.

        Retrieve every enrollment of a student, oldest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            student_id: 학생 ID (Student UUID)

        Returns:
            list[Enrollment]: 등록 목록 (List of enrollments)
        """
        query: Select = (
            select(Enrollment)
            .where(Enrollment.student_id == student_id)
            .order_by(Enrollment.enrollment_date)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_student_and_class(
        self,
        db: AsyncSession,
        student_id: UUID,
        class_id: str,
    ) -> Enrollment | None:
        """학생+수업 조합의 등록을 조회합니다 — At most one row exists per pair."""
        query: Select = select(Enrollment).where(
            Enrollment.student_id == student_id,
            Enrollment.class_id == class_id,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def delete_by_student(
        self,
        db: AsyncSession,
        student_id: UUID,
    ) -> int:
        """학생의 모든 수강 등록을 삭제합니다.

        Delete every enrollment referencing a student. Matching objects
        already in the session are synchronized as deleted.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            student_id: 학생 ID (Student UUID)

        Returns:
            int: 삭제된 행 수 (Number of rows removed)
        """
        result = await db.execute(
            delete(Enrollment)
            .where(Enrollment.student_id == student_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0


# 싱글턴 인스턴스 — Singleton instance
enrollment_repository: EnrollmentRepository = EnrollmentRepository()
