"""상품 관련 Pydantic 요청/응답 스키마 정의.

Product Pydantic request/response schema definitions.
Only consumed by the ProductService interface; no product routes exist yet.
"""

from decimal import Decimal

from pydantic import Field

from app.schemas.user import CamelModel


class ProductRequest(CamelModel):
    """상품 생성/수정 요청 스키마 (Product create/update request schema)."""

    name: str = Field(max_length=200)
    description: str | None = None
    price: Decimal = Field(ge=0)
    stock_quantity: int = Field(default=0, ge=0)
    category: str | None = Field(default=None, max_length=100)
    image_url: str | None = None
    active: bool = True


class ProductResponse(CamelModel):
    """상품 응답 스키마 (Product response schema)."""

    id: str
    name: str
    description: str | None = None
    price: Decimal
    stock_quantity: int
    category: str | None = None
    image_url: str | None = None
    active: bool = True
