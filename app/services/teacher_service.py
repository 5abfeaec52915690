"""교사 서비스 — 교사 CRUD 비즈니스 로직.

Teacher Service — Business logic for teacher CRUD.
Uses the same NotFoundError/ConflictError convention as the student domain.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.teacher import Teacher
from app.repositories.teacher_repository import TeacherRepository, teacher_repository
from app.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from app.utils.exceptions import ConflictError, NotFoundError


class TeacherService:
    """교사 관련 비즈니스 로직을 처리하는 서비스.

    Attributes:
        teachers: 교사 레포지토리 (Teacher repository)
    """

    def __init__(self, teachers: TeacherRepository) -> None:
        self.teachers: TeacherRepository = teachers

    def _to_response(self, teacher: Teacher) -> TeacherResponse:
        """교사 모델을 응답 스키마로 변환합니다."""
        return TeacherResponse(
            id=teacher.id,
            first_name=teacher.first_name,
            last_name=teacher.last_name,
            email=teacher.email,
            subject=teacher.subject,
            date_of_joining=teacher.date_of_joining,
            active=teacher.active,
        )

    async def list_teachers(
        self,
        db: AsyncSession,
        subject: str | None = None,
    ) -> list[TeacherResponse]:
        """교사 목록을 조회합니다. 과목이 주어지면 해당 과목 교사만 반환.

        List teachers, optionally filtered by subject.
        """
        if subject is not None:
            teachers = await self.teachers.get_by_subject(db, subject)
        else:
            teachers = await self.teachers.get_all(db, order_by=Teacher.id)
        return [self._to_response(t) for t in teachers]

    async def get_teacher(
        self,
        db: AsyncSession,
        teacher_id: int,
    ) -> TeacherResponse:
        """교사를 조회합니다.

        Raises:
            NotFoundError: 교사를 찾을 수 없을 때 (Teacher not found)
        """
        teacher: Teacher | None = await self.teachers.get_by_id(db, teacher_id)
        if teacher is None:
            raise NotFoundError(f"Teacher not found with id: {teacher_id}")
        return self._to_response(teacher)

    async def create_teacher(
        self,
        db: AsyncSession,
        data: TeacherCreate,
    ) -> TeacherResponse:
        """새 교사를 생성합니다.

        Create a teacher. A duplicate email is rejected up front; a racing
        duplicate is still caught by the unique constraint.

        Raises:
            ConflictError: 이메일 중복 시 (Duplicate email)
        """
        if await self.teachers.get_by_email(db, data.email) is not None:
            raise ConflictError("A teacher with this email already exists")

        teacher: Teacher = await self.teachers.create(db, data.model_dump())
        return self._to_response(teacher)

    async def update_teacher(
        self,
        db: AsyncSession,
        teacher_id: int,
        data: TeacherUpdate,
    ) -> TeacherResponse:
        """교사 정보를 수정합니다 (전체 교체).

        Replace every editable field of the teacher.

        Raises:
            NotFoundError: 교사를 찾을 수 없을 때 (Teacher not found)
            ConflictError: 이메일 중복 시 (Duplicate email)
        """
        teacher: Teacher | None = await self.teachers.update(db, teacher_id, data.model_dump())
        if teacher is None:
            raise NotFoundError(f"Teacher not found with id: {teacher_id}")
        return self._to_response(teacher)

    async def delete_teacher(
        self,
        db: AsyncSession,
        teacher_id: int,
    ) -> None:
        """교사를 삭제합니다.

        Raises:
            NotFoundError: 교사를 찾을 수 없을 때 (Teacher not found)
        """
        deleted: bool = await self.teachers.delete(db, teacher_id)
        if not deleted:
            raise NotFoundError(f"Teacher not found with id: {teacher_id}")


# 싱글턴 인스턴스 — Singleton instance
teacher_service: TeacherService = TeacherService(teacher_repository)
