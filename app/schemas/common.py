"""공통 Pydantic 스키마 정의.

Common Pydantic schema definitions shared by both domains:
field-level validation violations and the error response bodies.
"""

from pydantic import BaseModel


class FieldViolation(BaseModel):
    """필드 단위 검증 위반.

    A single field-level validation violation.

    Attributes:
        field: 위반 필드 이름 (Offending field name)
        message: 사람이 읽을 수 있는 사유 (Human-readable reason)
    """

    field: str
    message: str


class ErrorResponse(BaseModel):
    """일반 오류 응답 (404, 중복 등)."""

    detail: str


class ValidationErrorResponse(BaseModel):
    """검증 오류 응답 — Validation error body with per-field violations."""

    detail: str
    errors: list[FieldViolation]
