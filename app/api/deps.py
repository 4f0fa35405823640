"""FastAPI 의존성 주입 모듈: 레포지토리 및 서비스 구성.

FastAPI dependency injection module, the wiring of repository and service.
Routers depend on the ``UserService`` contract; the concrete implementation
is built here with its repository passed through the constructor, so tests
can swap either piece via ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService, UserServiceImpl


def get_user_repository() -> UserRepository:
    """사용자 레포지토리를 생성합니다 (Build the user repository)."""
    return UserRepository()


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    """사용자 서비스 구현을 생성합니다.

    Build the UserService implementation around the injected repository.

    Args:
        repository: 사용자 레포지토리 (User repository dependency)

    Returns:
        UserService: 서비스 구현 (Service implementation)
    """
    return UserServiceImpl(repository)
