"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
The User is the aggregate root: it owns zero or one Address, which is
cascaded on create/update/delete and removed when detached (delete-orphan).

Tables:
    - user_table: 사용자 계정 (User accounts, nullable FK to address_table)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.address import Address


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRole(str, enum.Enum):
    """사용자 역할 (User role). 저장 시 이름 문자열로 기록 (stored by name)."""

    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class User(Base):
    """사용자 모델: 시스템 사용자 계정 정보.

    User model, the aggregate root of the user/address pair.

    Attributes:
        id: 자동 증가 식별자 (Database-generated sequential identifier)
        keycloak_id: 외부 인증 식별자 (Opaque external identity reference)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        email: 이메일 (Email, intentionally NOT unique)
        phone: 전화번호 (Phone number, max 20 chars)
        role: 사용자 역할 (Role, default CUSTOMER, not enforced anywhere)
        address_id: 주소 FK (Nullable foreign key to address_table)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        address: 소유 주소 (Owned address, cascade all + delete-orphan)
    """

    __tablename__ = "user_table"

    # 사용자 식별자 (Identity column, generated by the database)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 외부 인증 식별자 (Keycloak subject, not exposed over HTTP)
    keycloak_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # 이메일: 고유 제약 없음 (no unique constraint)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # 역할: enum 이름 문자열로 저장 (Stored as the enum name string)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role", native_enum=False, length=20),
        nullable=False,
        default=UserRole.CUSTOMER,
    )
    address_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("address_table.id"), nullable=True
    )
    # 생성/수정 일시 (Audit timestamps, populated by the application)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    __table_args__ = (
        UniqueConstraint("address_id", name="uq_user_table_address_id"),
    )

    # 관계 (Relationships): 주소는 사용자와 함께 생성/삭제됨
    address: Mapped[Address | None] = relationship(
        Address,
        cascade="all, delete-orphan",
        single_parent=True,
        lazy="selectin",
    )
