"""테스트 인프라 — 테스트 DB 엔진, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Test database engine, session, and httpx client fixtures.
Uses TEST_DATABASE_URL when set (e.g. a throwaway PostgreSQL database),
otherwise an in-memory SQLite database via aiosqlite.
The schema is created fresh for every test and dropped afterwards.
"""

import os
from collections.abc import AsyncGenerator
from datetime import date, datetime, timezone

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, engine_options, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _engine_kwargs(url: str) -> dict:
    """SQLite 메모리 DB는 단일 커넥션을 공유해야 스키마가 유지됩니다."""
    if url.startswith("sqlite"):
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return engine_options(url)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성하고 종료 시 삭제합니다."""
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL))
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성 (커밋하여 이후 롤백에 영향받지 않음)
# ---------------------------------------------------------------------------
def student_payload(**overrides) -> dict:
    """유효한 학생 요청 본문을 만듭니다."""
    payload = {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "dob": "2000-01-01",
        "address": "1 Main St",
    }
    payload.update(overrides)
    return payload


def teacher_payload(**overrides) -> dict:
    """유효한 교사 요청 본문을 만듭니다."""
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@school.edu",
        "subject": "Mathematics",
        "date_of_joining": "2020-08-15",
    }
    payload.update(overrides)
    return payload


@pytest_asyncio.fixture
async def student(db: AsyncSession):
    """테스트 학생을 생성합니다."""
    from app.models.student import Student
    s = Student(
        name="John Smith",
        email="john@school.edu",
        dob=date(2001, 5, 20),
        address="22 Oak Ave",
        enrollment_date=datetime(2023, 9, 1, tzinfo=timezone.utc),
    )
    db.add(s)
    await db.commit()
    await db.refresh(s)
    return s


@pytest_asyncio.fixture
async def enrollment(db: AsyncSession, student):
    """테스트 학생의 MATH101 수강 등록을 생성합니다."""
    from app.models.student import Enrollment, EnrollmentStatus
    e = Enrollment(
        student_id=student.id,
        class_id="MATH101",
        enrollment_date=datetime.now(timezone.utc),
        status=EnrollmentStatus.ACTIVE,
    )
    db.add(e)
    await db.commit()
    await db.refresh(e)
    return e


@pytest_asyncio.fixture
async def teacher(db: AsyncSession):
    """테스트 교사를 생성합니다."""
    from app.models.teacher import Teacher
    t = Teacher(
        first_name="Grace",
        last_name="Hopper",
        email="grace@school.edu",
        subject="Computer Science",
        date_of_joining=date(2019, 1, 7),
    )
    db.add(t)
    await db.commit()
    await db.refresh(t)
    return t
