"""테스트 인프라: 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: in-memory SQLite database, session, and httpx client fixtures.
Every test gets a fresh schema through Base.metadata.create_all, so no
cleanup between tests is needed.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403  register all models with metadata
from app.models.address import Address
from app.models.user import User, UserRole
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserServiceImpl

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

USERS_URL = "/api/users"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
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


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트: DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def repository() -> UserRepository:
    return UserRepository()


@pytest.fixture
def service(repository: UserRepository) -> UserServiceImpl:
    return UserServiceImpl(repository)


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def ana(db: AsyncSession) -> User:
    """주소가 있는 고객 사용자를 생성합니다."""
    user = User(
        first_name="Ana",
        last_name="Silva",
        email="ana@x.com",
        phone="12345",
        role=UserRole.CUSTOMER,
        address=Address(
            street="Rua das Flores 10",
            city="Lisboa",
            state="Lisboa",
            country="Portugal",
            zipcode="1000-001",
        ),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def bruno(db: AsyncSession) -> User:
    """주소가 없는 관리자 사용자를 생성합니다."""
    user = User(
        first_name="Bruno",
        last_name="Costa",
        email="bruno@x.com",
        phone="67890",
        role=UserRole.ADMIN,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


def user_payload(**overrides) -> dict:
    """기본 사용자 요청 본문 (Default camelCase request body)."""
    payload = {
        "firstName": "Ana",
        "lastName": "Silva",
        "email": "ana@x.com",
        "phone": "12345",
    }
    payload.update(overrides)
    return payload
