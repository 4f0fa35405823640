"""사용자 레포지토리 테스트.

User repository tests: persistence of the aggregate root and the
User -> Address cascade (create, delete-orphan, delete).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.address import Address
from app.models.user import User, UserRole
from app.repositories.user_repository import UserRepository


class TestCreate:
    """생성 테스트."""

    async def test_create_assigns_sequential_ids(
        self, db: AsyncSession, repository: UserRepository
    ):
        first = await repository.create_user(db, User(first_name="Ana"))
        second = await repository.create_user(db, User(first_name="Bruno"))
        assert first.id is not None
        assert second.id > first.id

    async def test_create_defaults(self, db: AsyncSession, repository: UserRepository):
        user = await repository.create_user(db, User(email="c@x.com"))
        assert user.role == UserRole.CUSTOMER
        assert user.created_at is not None
        assert user.updated_at is not None
        assert user.address is None

    async def test_create_user_with_address(
        self, db: AsyncSession, repository: UserRepository
    ):
        """사용자와 주소가 함께 저장됨."""
        user = User(first_name="Ana", address=Address(city="Lisboa"))
        stored = await repository.create_user(db, user)
        await db.commit()

        assert stored.address_id is not None
        assert stored.address.city == "Lisboa"
        assert await repository.count(db) == 1
        assert await repository.count_addresses(db) == 1


class TestRead:
    """조회 테스트."""

    async def test_get_by_id_missing(self, db: AsyncSession, repository: UserRepository):
        assert await repository.get_by_id(db, 999) is None

    async def test_get_by_id(self, db: AsyncSession, repository: UserRepository, ana):
        found = await repository.get_by_id(db, ana.id)
        assert found is not None
        assert found.address.city == "Lisboa"

    async def test_get_all_users_ordered(
        self, db: AsyncSession, repository: UserRepository, ana, bruno
    ):
        users = await repository.get_all_users(db)
        assert [u.id for u in users] == [ana.id, bruno.id]

    async def test_get_all_users_empty(self, db: AsyncSession, repository: UserRepository):
        assert await repository.get_all_users(db) == []


class TestSave:
    """수정 저장 테스트."""

    async def test_save_flushes_changes(
        self, db: AsyncSession, repository: UserRepository, bruno
    ):
        bruno.phone = "11111"
        await repository.save(db, bruno)
        await db.commit()

        reloaded = await repository.get_by_id(db, bruno.id)
        assert reloaded.phone == "11111"


class TestDelete:
    """삭제 테스트."""

    async def test_delete_cascades_to_address(
        self, db: AsyncSession, repository: UserRepository, ana, bruno
    ):
        """사용자 삭제 시 주소도 삭제됨."""
        assert await repository.delete(db, ana.id) is True
        await db.commit()

        assert await repository.count(db) == 1
        assert await repository.count_addresses(db) == 0

    async def test_delete_missing(self, db: AsyncSession, repository: UserRepository):
        assert await repository.delete(db, 999) is False
