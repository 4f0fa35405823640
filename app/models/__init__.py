"""SQLAlchemy ORM 모델 패키지: 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package, the central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    address: 주소 (Address, owned by a user)
    user: 사용자 및 역할 (User and UserRole)
"""

from app.models.address import Address
from app.models.user import User, UserRole

__all__ = [
    "Address",
    "User", "UserRole",
]
