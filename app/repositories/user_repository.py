"""사용자 레포지토리: 사용자/주소 애그리거트 쿼리.

User Repository, queries for the User/Address aggregate.
Extends BaseRepository with User-specific operations. The address is
loaded eagerly (``lazy="selectin"``) so it can be read outside of an
awaited lazy load.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.address import Address
from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for user_table and, through the
    cascade on ``User.address``, address_table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_all_users(self, db: AsyncSession) -> list[User]:
        """모든 사용자를 ID 순으로 조회합니다.

        Retrieve every user ordered by id, addresses included.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[User]: 사용자 목록 (List of users, may be empty)
        """
        query: Select = select(User).order_by(User.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def create_user(self, db: AsyncSession, user: User) -> User:
        """사용자와 (있다면) 주소를 한 번에 저장합니다.

        Persist a fully built user together with its address in one flush.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 저장할 사용자 (Transient user, address attached if any)

        Returns:
            User: 식별자가 할당된 사용자 (Stored user with generated id)
        """
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    async def save(self, db: AsyncSession, user: User) -> User:
        """변경된 사용자를 flush 합니다 (Flush pending changes of a loaded user)."""
        await db.flush()
        await db.refresh(user)
        return user

    async def count_addresses(self, db: AsyncSession) -> int:
        """주소 행 수 (Number of address rows, used to detect orphans)."""
        return await BaseRepository(Address).count(db)
