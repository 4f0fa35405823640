"""상품 서비스 계약.

Product Service contract.
Declares the CRUD shape for products; there is no implementation, model
or route yet. Implementations subclass ``ProductService``.
"""

from abc import ABC, abstractmethod

from app.schemas.product import ProductRequest, ProductResponse


class ProductService(ABC):
    """상품 서비스 계약 (Product service contract)."""

    @abstractmethod
    async def create_product(self, request: ProductRequest) -> ProductResponse:
        ...

    @abstractmethod
    async def update_product(
        self, product_id: int, request: ProductRequest
    ) -> ProductResponse | None:
        ...

    @abstractmethod
    async def get_all_products(self) -> list[ProductResponse]:
        ...

    @abstractmethod
    async def delete_product(self, product_id: int) -> bool:
        ...

    @abstractmethod
    async def search_products(self, keyword: str) -> list[ProductResponse]:
        ...

    @abstractmethod
    async def get_product_by_id(self, product_id: str) -> ProductResponse | None:
        ...
