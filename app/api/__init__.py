"""API 라우터 패키지 — 도메인별 라우터 통합.

API Router package — Aggregates the domain routers into a single router
for inclusion in the FastAPI application.

Included routers:
    - students: 학생 및 수강 등록 관리 (Student and enrollment management)
    - teachers: 교사 관리 (Teacher management)
"""

from fastapi import APIRouter

from app.api.students import router as students_router
from app.api.teachers import router as teachers_router
from app.schemas.common import ErrorResponse, ValidationErrorResponse

# 공통 오류 응답 문서화 — Shared error bodies for the OpenAPI schema
_ERROR_RESPONSES: dict = {
    400: {"model": ValidationErrorResponse, "description": "Invalid input or duplicate"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}

api_router: APIRouter = APIRouter()

api_router.include_router(students_router, prefix="/students", tags=["Students"], responses=_ERROR_RESPONSES)
api_router.include_router(teachers_router, prefix="/teachers", tags=["Teachers"], responses=_ERROR_RESPONSES)
