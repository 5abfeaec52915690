"""교사 레포지토리 — 교사 CRUD 및 이메일/과목 쿼리.

Teacher Repository — CRUD plus lookups by email and subject.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.teacher import Teacher
from app.repositories.base import BaseRepository


class TeacherRepository(BaseRepository[Teacher]):
    """교사 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Teacher, conflict_detail="A teacher with this email already exists")

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Teacher | None:
        """이메일로 교사를 조회합니다 — Find a teacher by exact email."""
        result = await db.execute(select(Teacher).where(Teacher.email == email))
        return result.scalar_one_or_none()

    async def get_by_subject(
        self,
        db: AsyncSession,
        subject: str,
    ) -> list[Teacher]:
        """과목별 교사 목록을 조회합니다 — Teachers for one subject, by id."""
        rows = await self.get_all(db, filters={"subject": subject}, order_by=Teacher.id)
        return list(rows)


# 싱글턴 인스턴스 — Singleton instance
teacher_repository: TeacherRepository = TeacherRepository()
