"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the three error kinds
of the service. Both domains signal failures the same way: services raise,
FastAPI renders the status code.

Usage:
    from app.utils.exceptions import NotFoundError, ConflictError
    raise NotFoundError("Student not found")
    raise ConflictError("Student is already enrolled in class MATH101")
"""

from fastapi import HTTPException, status

from app.schemas.common import FieldViolation


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a referenced student, enrollment, or teacher does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    """고유성 위반 예외 — 중복 이메일, 중복 수강 등록.

    Raised when a write would violate a uniqueness invariant
    (duplicate email, duplicate student/class enrollment pair).
    Reported as 400, matching the other client-side input failures.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ValidationError(HTTPException):
    """400 Bad Request 예외 — 입력 검증 실패 시 사용.

    Raised by routers before any service call when the inbound payload
    has field-level violations. The violations travel on ``errors`` and are
    rendered by the handler in ``app.api.errors``.

    Args:
        errors: 필드별 위반 목록 (Field-level violations)
        detail: 오류 메시지 (Error message, default: "Validation failed")
    """

    def __init__(
        self,
        errors: list[FieldViolation],
        detail: str = "Validation failed",
    ) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
        self.errors: list[FieldViolation] = errors
