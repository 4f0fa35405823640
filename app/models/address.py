"""주소 SQLAlchemy ORM 모델 정의.

Address SQLAlchemy ORM model definition.
An address has no lifecycle of its own: it is created, updated and deleted
only through the owning User (see ``User.address``).

Tables:
    - address_table: 사용자 주소 (User postal address, one-to-one with user_table)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Address(Base):
    """주소 모델: 사용자 한 명에게 독점적으로 소속.

    Address model, exclusively owned by a single User.

    Attributes:
        id: 자동 증가 식별자 (Database-generated sequential identifier)
        street: 거리 주소 (Street line, max 200 chars)
        city: 도시 (City, max 100 chars)
        state: 주/도 (State or province, max 100 chars)
        country: 국가 (Country, max 100 chars)
        zipcode: 우편번호 (Postal code, max 20 chars)
    """

    __tablename__ = "address_table"

    # 주소 식별자 (Identity column, generated by the database)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    street: Mapped[str | None] = mapped_column(String(200), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)
