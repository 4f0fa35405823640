"""사용자 및 주소 관련 Pydantic 요청/응답 스키마 정의.

User and Address Pydantic request/response schema definitions.
Wire format uses camelCase keys (``firstName``, ``createdAt``); snake_case
field names are accepted on input as well. Length limits mirror the
column sizes of user_table / address_table.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.user import UserRole


class CamelModel(BaseModel):
    """camelCase 별칭을 사용하는 기본 스키마 (Base schema with camelCase aliases)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === 주소 (Address) 스키마 ===

class AddressDTO(CamelModel):
    """주소 요청/응답 스키마.

    Address schema shared by requests and responses.
    The address id is never exposed; an address has no identity of its own.

    Attributes:
        street: 거리 주소 (Street line)
        city: 도시 (City)
        state: 주/도 (State or province)
        country: 국가 (Country)
        zipcode: 우편번호 (Postal code)
    """

    street: str | None = Field(default=None, max_length=200)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    country: str | None = Field(default=None, max_length=100)
    zipcode: str | None = Field(default=None, max_length=20)


# === 사용자 (User) 스키마 ===

class UserRequest(CamelModel):
    """사용자 생성/수정 요청 스키마.

    User create/update request schema.
    Used for both POST and PUT: an update overwrites every mutable field,
    so omitted fields are reset (role back to CUSTOMER, address detached).

    Attributes:
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        email: 이메일 (Email, not validated or de-duplicated)
        phone: 전화번호 (Phone number)
        role: 역할 (Role; omitted or null is stored as CUSTOMER)
        address: 주소 (Optional nested address)
    """

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=20)
    role: UserRole | None = None  # 누락/null이면 CUSTOMER (omitted or null is stored as CUSTOMER)
    address: AddressDTO | None = None


class UserResponse(CamelModel):
    """사용자 응답 스키마.

    User response schema returned from the API.

    Attributes:
        id: 사용자 식별자 문자열 (User identifier as string)
        first_name / last_name / email / phone / role: 사용자 필드 (User fields)
        address: 주소 (Nested address or null)
        created_at: 생성 일시 (Creation timestamp)
        updated_at: 수정 일시 (Last update timestamp)
    """

    id: str  # 사용자 ID 문자열 (User id as string)
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    role: UserRole
    address: AddressDTO | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
