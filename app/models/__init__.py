"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which relationship resolution and schema creation depend on.

Modules:
    student: 학생 및 수강 등록 (Student, Enrollment, EnrollmentStatus)
    teacher: 교사 (Teacher)
"""

from app.models.student import Enrollment, EnrollmentStatus, Student
from app.models.teacher import Teacher

__all__ = [
    "Student", "Enrollment", "EnrollmentStatus",
    "Teacher",
]
