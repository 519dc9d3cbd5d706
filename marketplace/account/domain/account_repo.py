from abc import ABC, abstractmethod
from typing import List, Optional

from marketplace.account.domain.account_entity import Admin, Customer, Seller


class AdminRepo(ABC):
    @abstractmethod
    async def create(self, admin: Admin) -> Admin:
        pass

    @abstractmethod
    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Admin]:
        pass


class SellerRepo(ABC):
    @abstractmethod
    async def create(self, seller: Seller) -> Seller:
        pass

    @abstractmethod
    async def get_by_id(self, seller_id: int) -> Optional[Seller]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Seller]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Seller]:
        pass

    @abstractmethod
    async def update(self, seller: Seller) -> Seller:
        pass

    @abstractmethod
    async def delete(self, seller_id: int) -> bool:
        pass

    @abstractmethod
    async def has_products_or_orders(self, seller_id: int) -> bool:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class CustomerRepo(ABC):
    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass
