"""API 예외 핸들러 — 검증 오류를 400 응답으로 변환.

API exception handlers. Both explicit ValidationError raises and payloads
FastAPI cannot parse at all (bad date literal, unknown enum value,
malformed UUID) are rendered as 400 with the same violation list body.
NotFoundError and ConflictError use FastAPI's stock HTTPException handling.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.common import FieldViolation, ValidationErrorResponse
from app.utils.exceptions import ValidationError

# 위치 접두어 — Location prefixes stripped from pydantic error locs
_LOC_PREFIXES = {"body", "query", "path"}


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc if p not in _LOC_PREFIXES]
    if parts:
        return ".".join(parts)
    # 본문 전체 누락 등 — e.g. missing body reports loc ("body",)
    return str(loc[0]) if loc else "request"


def _violation_response(detail: str, errors: list[FieldViolation]) -> JSONResponse:
    body = ValidationErrorResponse(detail=detail, errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """명시적 검증 실패 — Explicit validator violations."""
    return _violation_response(exc.detail, exc.errors)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """파싱 불가 입력 — Unparseable body/query/path values."""
    errors = [
        FieldViolation(field=_field_name(tuple(err.get("loc", ()))), message=err.get("msg", "Invalid value"))
        for err in exc.errors()
    ]
    return _violation_response("Validation failed", errors)


def register_exception_handlers(app: FastAPI) -> None:
    """앱에 예외 핸들러를 등록합니다."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
