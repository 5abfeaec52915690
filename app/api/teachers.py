"""교사 라우터 — 교사 CRUD 엔드포인트.

Teacher Router — CRUD endpoints for teacher records.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from app.services.teacher_service import teacher_service
from app.utils.exceptions import ValidationError
from app.utils.validation import validate_teacher

router: APIRouter = APIRouter()


@router.get("", response_model=list[TeacherResponse])
async def list_teachers(
    db: Annotated[AsyncSession, Depends(get_db)],
    subject: str | None = None,
) -> list[TeacherResponse]:
    """교사 목록을 조회합니다. subject로 과목 필터링 가능."""
    return await teacher_service.list_teachers(db, subject=subject)


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeacherResponse:
    """교사를 조회합니다."""
    return await teacher_service.get_teacher(db, teacher_id)


@router.post("", response_model=TeacherResponse, status_code=201)
async def create_teacher(
    data: TeacherCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeacherResponse:
    """새 교사를 생성합니다.

    Create a teacher. active defaults to true.
    """
    errors = validate_teacher(data)
    if errors:
        raise ValidationError(errors)
    result: TeacherResponse = await teacher_service.create_teacher(db, data)
    await db.commit()
    return result


@router.put("/{teacher_id}", response_model=TeacherResponse)
async def update_teacher(
    teacher_id: int,
    data: TeacherUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeacherResponse:
    """교사 정보를 수정합니다 (전체 교체)."""
    errors = validate_teacher(data)
    if errors:
        raise ValidationError(errors)
    result: TeacherResponse = await teacher_service.update_teacher(db, teacher_id, data)
    await db.commit()
    return result


@router.delete("/{teacher_id}", status_code=204)
async def delete_teacher(
    teacher_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """교사를 삭제합니다."""
    await teacher_service.delete_teacher(db, teacher_id)
    await db.commit()
