from abc import ABC, abstractmethod
from typing import List, Optional

from marketplace.product.domain.product_entity import Product, ProductStatus


class ProductRepo(ABC):
    @abstractmethod
    async def create(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        pass

    @abstractmethod
    async def list_by_seller(self, seller_id: int) -> List[Product]:
        pass

    @abstractmethod
    async def list_by_status(self, status: ProductStatus) -> List[Product]:
        pass

    @abstractmethod
    async def list_approved_by_category(self, category: str) -> List[Product]:
        pass

    @abstractmethod
    async def search_approved(self, query: str) -> List[Product]:
        pass

    @abstractmethod
    async def is_referenced_by_orders(self, product_id: int) -> bool:
        pass

    @abstractmethod
    async def decrement_stock_atomically(self, product_id: int, quantity: int) -> Product:
        """Take `quantity` units off the shelf only if that many are in stock."""
        pass

    @abstractmethod
    async def count(
        self, *, seller_id: Optional[int] = None, status: Optional[ProductStatus] = None
    ) -> int:
        pass

    @abstractmethod
    async def get_seller_name(self, seller_id: int) -> Optional[str]:
        pass
