"""교사 Pydantic 요청/응답 스키마 정의.

Teacher Pydantic request/response schema definitions.
"""

from datetime import date

from pydantic import BaseModel


class TeacherCreate(BaseModel):
    """교사 생성 요청 스키마.

    Teacher creation request schema.

    Attributes:
        first_name: 이름 (Given name, required)
        last_name: 성 (Family name, required)
        email: 이메일 (Email, required, unique)
        subject: 담당 과목 (Optional)
        date_of_joining: 입사일 (Optional)
        active: 재직 여부 (Defaults to True)
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    subject: str | None = None
    date_of_joining: date | None = None
    active: bool = True


class TeacherUpdate(BaseModel):
    """교사 수정 요청 스키마 (전체 교체).

    Teacher update request schema. Every field is replaced, so ``active``
    must be sent explicitly; the validator reports it when missing.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    subject: str | None = None
    date_of_joining: date | None = None
    active: bool | None = None


class TeacherResponse(BaseModel):
    """교사 응답 스키마."""

    id: int
    first_name: str
    last_name: str
    email: str
    subject: str | None = None
    date_of_joining: date | None = None
    active: bool
