"""E-Commerce 데이터베이스 연결 모듈.

Database access for the user/address store.
One async engine per process, one AsyncSession per HTTP request. A
request's User and Address writes share that session, and the router
commits them together.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

# user_table / address_table 이 있는 DB 엔진 (Engine for the ecom database)
# 끊긴 연결은 사용 전에 폐기 (Stale pooled connections are replaced before use)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

# 커밋 후에도 응답 변환 시 속성 접근 가능 (Entities stay readable after commit for response mapping)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """User/Address 모델의 선언적 베이스 (Declarative base for the User and Address tables)."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 세션 (Per-request session dependency).

    Yields:
        AsyncSession: 요청 동안 사용하는 세션. 커밋은 라우터가 담당
            (Session for the request; the router commits)
    """
    async with async_session() as session:
        yield session
