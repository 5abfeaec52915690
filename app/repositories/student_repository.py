"""학생 레포지토리 — 학생 CRUD 및 관련 쿼리.

Student Repository — CRUD and related queries for students.
Extends BaseRepository with email lookup and enrollment eager loading.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.student import Student
from app.repositories.base import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """학생 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the students table.
    """

    def __init__(self) -> None:
        super().__init__(Student, conflict_detail="A student with this email already exists")

    async def get_detail(
        self,
        db: AsyncSession,
        student_id: UUID,
    ) -> Student | None:
        """학생 상세 정보를 수강 등록 목록과 함께 조회합니다.

        Retrieve a student with enrollments eagerly loaded.
        populate_existing refreshes a collection already sitting in the
        session identity map.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            student_id: 학생 ID (Student UUID)

        Returns:
            Student | None: 등록 목록이 로드된 학생 또는 None
                            (Student with enrollments loaded, or None)
        """
        query: Select = (
            select(Student)
            .options(selectinload(Student.enrollments))
            .where(Student.id == student_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Student | None:
        """이메일로 학생을 조회합니다 — Find a student by exact email."""
        result = await db.execute(select(Student).where(Student.email == email))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
student_repository: StudentRepository = StudentRepository()
