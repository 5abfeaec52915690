"""교사 SQLAlchemy ORM 모델 정의.

Teacher SQLAlchemy ORM model definition. Flat entity, no relationships.
"""

from datetime import date

from sqlalchemy import Boolean, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Teacher(Base):
    """교사 모델.

    Teacher (staff) record.

    Attributes:
        id: 자동 증가 정수 ID (Auto-increment identifier)
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        email: 이메일, 전역 고유 (Email, globally unique)
        subject: 담당 과목 (Subject taught, optional)
        date_of_joining: 입사일 (Joining date, optional)
        active: 재직 여부 (Active flag, default True)
    """

    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    subject: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)
    date_of_joining: Mapped[date | None] = mapped_column(Date, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
