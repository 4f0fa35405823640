"""상품 서비스 계약 테스트.

ProductService is an interface only; these tests pin down its shape and
the ProductRequest/ProductResponse transfer objects.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.schemas.product import ProductRequest, ProductResponse
from app.services.product_service import ProductService


class InMemoryProductService(ProductService):
    """계약 검증용 최소 구현 (Minimal implementation to exercise the contract)."""

    def __init__(self) -> None:
        self._items: dict[int, ProductResponse] = {}

    async def create_product(self, request: ProductRequest) -> ProductResponse:
        product_id = len(self._items) + 1
        product = ProductResponse(id=str(product_id), **request.model_dump())
        self._items[product_id] = product
        return product

    async def update_product(self, product_id, request):
        if product_id not in self._items:
            return None
        product = ProductResponse(id=str(product_id), **request.model_dump())
        self._items[product_id] = product
        return product

    async def get_all_products(self):
        return list(self._items.values())

    async def delete_product(self, product_id):
        return self._items.pop(product_id, None) is not None

    async def search_products(self, keyword):
        return [p for p in self._items.values() if keyword.lower() in p.name.lower()]

    async def get_product_by_id(self, product_id):
        return self._items.get(int(product_id))


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        ProductService()  # type: ignore[abstract]


def test_abstract_methods():
    assert ProductService.__abstractmethods__ == {
        "create_product",
        "update_product",
        "get_all_products",
        "delete_product",
        "search_products",
        "get_product_by_id",
    }


def test_request_uses_camel_case():
    request = ProductRequest.model_validate(
        {"name": "Caneca", "price": "19.90", "stockQuantity": 3, "imageUrl": "http://img"}
    )
    assert request.price == Decimal("19.90")
    assert request.stock_quantity == 3
    assert request.model_dump(by_alias=True)["imageUrl"] == "http://img"


def test_request_active_flag():
    assert ProductRequest(name="Caneca", price=Decimal("1")).active is True
    request = ProductRequest.model_validate({"name": "Caneca", "price": "1", "active": False})
    assert request.active is False


async def test_inactive_product_round_trip():
    service = InMemoryProductService()
    created = await service.create_product(
        ProductRequest(name="Caneca", price=Decimal("10"), active=False)
    )
    assert created.active is False


def test_request_rejects_negative_price():
    with pytest.raises(ValidationError):
        ProductRequest(name="Caneca", price=Decimal("-1"))


async def test_contract_round_trip():
    service = InMemoryProductService()
    created = await service.create_product(ProductRequest(name="Caneca", price=Decimal("10")))
    assert created.active is True

    assert await service.get_product_by_id(created.id) == created
    assert await service.search_products("cane") == [created]
    assert await service.update_product(99, ProductRequest(name="X", price=Decimal("1"))) is None
    assert await service.delete_product(1) is True
    assert await service.get_all_products() == []
