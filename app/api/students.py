"""학생/수강 등록 라우터 — 학생 CRUD 및 수강 등록 엔드포인트.

Student Router — CRUD endpoints for students and their enrollments.
Payloads are validated explicitly before any service call; each endpoint
commits once, so every request is a single unit of work.

Endpoints:
    - POST   /                                  학생 생성 (201)
    - GET    /                                  학생 목록 (?email=)
    - GET    /{student_id}                      학생 상세 (수강 등록 포함)
    - PUT    /{student_id}                      학생 수정 (전체 교체)
    - DELETE /{student_id}                      학생 삭제 (수강 등록 포함, 204)
    - POST   /{student_id}/enrollments?classId= 수강 등록 (201)
    - GET    /{student_id}/enrollments          학생별 수강 등록 목록
    - GET    /enrollments/{enrollment_id}       수강 등록 조회
    - PUT    /enrollments/{enrollment_id}/status?newStatus= 상태 변경
    - DELETE /enrollments/{enrollment_id}       수강 등록 삭제 (204)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.student import EnrollmentStatus
from app.schemas.student import (
    EnrollmentResponse,
    StudentCreate,
    StudentDetailResponse,
    StudentResponse,
    StudentUpdate,
)
from app.services.enrollment_service import enrollment_service
from app.services.student_service import student_service
from app.utils.exceptions import ValidationError
from app.utils.validation import validate_class_id, validate_student

router: APIRouter = APIRouter()


# === 수강 등록 (Enrollment) — /enrollments/* 경로를 먼저 등록 ===

@router.get("/enrollments/{enrollment_id}", response_model=EnrollmentResponse)
async def get_enrollment(
    enrollment_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EnrollmentResponse:
    """수강 등록 단건 조회."""
    return await enrollment_service.get_enrollment(db, enrollment_id)


@router.put("/enrollments/{enrollment_id}/status", response_model=EnrollmentResponse)
async def update_enrollment_status(
    enrollment_id: UUID,
    new_status: Annotated[EnrollmentStatus, Query(alias="newStatus")],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EnrollmentResponse:
    """수강 등록 상태를 변경합니다.

    Change an enrollment's status. COMPLETED stamps completion_date,
    any other status clears it.
    """
    result: EnrollmentResponse = await enrollment_service.update_status(db, enrollment_id, new_status)
    await db.commit()
    return result


@router.delete("/enrollments/{enrollment_id}", status_code=204)
async def delete_enrollment(
    enrollment_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """수강 등록을 삭제합니다."""
    await enrollment_service.delete_enrollment(db, enrollment_id)
    await db.commit()


# === 학생 (Student) ===

@router.post("", response_model=StudentResponse, status_code=201)
async def create_student(
    data: StudentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """새 학생을 생성합니다.

    Create a student. enrollment_date defaults to now when omitted.
    """
    errors = validate_student(data)
    if errors:
        raise ValidationError(errors)
    result: StudentResponse = await student_service.create_student(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[StudentResponse])
async def list_students(
    db: Annotated[AsyncSession, Depends(get_db)],
    email: str | None = None,
) -> list[StudentResponse]:
    """학생 목록을 조회합니다."""
    return await student_service.list_students(db, email=email)


@router.get("/{student_id}", response_model=StudentDetailResponse)
async def get_student(
    student_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentDetailResponse:
    """학생 상세 정보를 조회합니다 (수강 등록 포함)."""
    return await student_service.get_student(db, student_id)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: UUID,
    data: StudentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """학생 정보를 수정합니다.

    Replace name, email, dob and address of an existing student.
    """
    errors = validate_student(data)
    if errors:
        raise ValidationError(errors)
    result: StudentResponse = await student_service.update_student(db, student_id, data)
    await db.commit()
    return result


@router.delete("/{student_id}", status_code=204)
async def delete_student(
    student_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """학생과 모든 수강 등록을 삭제합니다."""
    await student_service.delete_student(db, student_id)
    await db.commit()


@router.post("/{student_id}/enrollments", response_model=EnrollmentResponse, status_code=201)
async def enroll_student(
    student_id: UUID,
    class_id: Annotated[str, Query(alias="classId")],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EnrollmentResponse:
    """학생을 수업에 등록합니다.

    Enroll a student in a class. 404 if the student is missing,
    400 if the student is already enrolled in the class.
    """
    errors = validate_class_id(class_id)
    if errors:
        raise ValidationError(errors)
    result: EnrollmentResponse = await enrollment_service.enroll_student(db, student_id, class_id)
    await db.commit()
    return result


@router.get("/{student_id}/enrollments", response_model=list[EnrollmentResponse])
async def list_enrollments(
    student_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[EnrollmentResponse]:
    """학생별 수강 등록 목록을 조회합니다."""
    return await enrollment_service.list_enrollments(db, student_id)
