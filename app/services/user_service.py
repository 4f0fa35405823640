"""사용자 서비스: 사용자/주소 CRUD 비즈니스 로직.

User Service, business logic for the User/Address aggregate.
``UserService`` is the contract the HTTP layer depends on;
``UserServiceImpl`` maps transfer objects to ORM entities and delegates
row operations to a repository received through its constructor.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.address import Address
from app.models.user import User, UserRole
from app.repositories.user_repository import UserRepository
from app.schemas.user import AddressDTO, UserRequest, UserResponse


# Integer 컬럼 최대값 (Largest value the 32-bit id column can hold)
_MAX_ID = 2**31 - 1


def _parse_id(user_id: str) -> int | None:
    """경로 ID를 정수로 변환, 유효하지 않으면 None.

    Only ASCII digits within the id column's range are ids. Anything else
    (``1_0``, `` 1``, ``abc``, overflowing values) is treated as absent so it
    never reaches the database driver.
    """
    if not user_id or not user_id.isascii() or not user_id.isdecimal():
        return None
    record_id = int(user_id)
    if record_id > _MAX_ID:
        return None
    return record_id


class UserService(ABC):
    """사용자 서비스 계약 (User service contract)."""

    @abstractmethod
    async def fetch_all_users(self, db: AsyncSession) -> list[UserResponse]:
        """모든 사용자 조회, 없으면 빈 목록 (All users, empty list when none)."""

    @abstractmethod
    async def add_user(self, db: AsyncSession, request: UserRequest) -> None:
        """사용자 생성. 생성된 ID는 반환하지 않음 (Create; the new id is not returned)."""

    @abstractmethod
    async def fetch_user(self, db: AsyncSession, user_id: str) -> UserResponse | None:
        """단일 사용자 조회, 없으면 None (Single user, None when absent)."""

    @abstractmethod
    async def update_user(
        self, db: AsyncSession, user_id: str, request: UserRequest
    ) -> bool:
        """사용자 전체 필드 덮어쓰기 (Overwrite all mutable fields; False when absent)."""


class UserServiceImpl(UserService):
    """사용자 관련 비즈니스 로직을 처리하는 서비스.

    Default UserService backed by a UserRepository.
    The service keeps the aggregate invariant explicit: the address is
    created, updated or detached together with its user inside the caller's
    transaction, and detached addresses are deleted (never orphaned).

    Attributes:
        repository: 사용자 레포지토리 (User repository)
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository: UserRepository = repository

    def _to_response(self, user: User) -> UserResponse:
        """사용자 모델을 응답 스키마로 변환합니다.

        Convert a User model instance to a UserResponse schema.

        Args:
            user: 주소가 로드된 사용자 모델 (User model with address loaded)

        Returns:
            UserResponse: 사용자 응답 (User response)
        """
        address: AddressDTO | None = None
        if user.address is not None:
            address = AddressDTO(
                street=user.address.street,
                city=user.address.city,
                state=user.address.state,
                country=user.address.country,
                zipcode=user.address.zipcode,
            )
        return UserResponse(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            role=user.role,
            address=address,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _apply_request(self, user: User, request: UserRequest) -> None:
        """요청 값으로 사용자 필드를 덮어씁니다.

        Overwrite the user's mutable fields with the request values.
        Full replacement, not a merge: a missing address detaches the current
        one (delete-orphan removes the row), an existing address row is
        updated in place so no second row is created.
        """
        user.first_name = request.first_name
        user.last_name = request.last_name
        user.email = request.email
        user.phone = request.phone
        user.role = request.role or UserRole.CUSTOMER

        if request.address is None:
            user.address = None
            return

        if user.address is None:
            user.address = Address()
        for field, value in request.address.model_dump().items():
            setattr(user.address, field, value)

    async def fetch_all_users(self, db: AsyncSession) -> list[UserResponse]:
        users: list[User] = await self.repository.get_all_users(db)
        return [self._to_response(u) for u in users]

    async def add_user(self, db: AsyncSession, request: UserRequest) -> None:
        """새 사용자를 생성합니다.

        Create a user (and its address, when supplied) in one flush.
        The stored entity is deliberately not returned to the caller.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            request: 사용자 생성 데이터 (User creation data)
        """
        user: User = User()
        self._apply_request(user, request)
        await self.repository.create_user(db, user)

    async def fetch_user(self, db: AsyncSession, user_id: str) -> UserResponse | None:
        """사용자 상세 정보를 조회합니다.

        Retrieve a single user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID 문자열 (User id as received on the path)

        Returns:
            UserResponse | None: 사용자 응답 또는 None (Response, or None if absent)
        """
        record_id: int | None = _parse_id(user_id)
        if record_id is None:
            return None

        user: User | None = await self.repository.get_by_id(db, record_id)
        if user is None:
            return None
        return self._to_response(user)

    async def update_user(
        self, db: AsyncSession, user_id: str, request: UserRequest
    ) -> bool:
        """사용자 정보를 수정합니다.

        Overwrite an existing user's fields and address.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID 문자열 (User id as received on the path)
            request: 수정 데이터 (Replacement data)

        Returns:
            bool: 사용자가 존재하여 수정되었는지 여부 (True if the user existed)
        """
        record_id: int | None = _parse_id(user_id)
        if record_id is None:
            return False

        user: User | None = await self.repository.get_by_id(db, record_id)
        if user is None:
            return False

        self._apply_request(user, request)
        # 주소만 바뀌어도 수정 일시 갱신 (Bump updated_at even for address-only changes)
        user.updated_at = datetime.now(timezone.utc)
        await self.repository.save(db, user)
        return True
