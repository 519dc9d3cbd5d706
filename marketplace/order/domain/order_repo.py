from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from marketplace.order.domain.order_entity import Order, OrderStatus


class OrderRepo(ABC):
    @abstractmethod
    async def create(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Optional[Order]:
        pass

    @abstractmethod
    async def transition_atomically(
        self,
        *,
        order_id: int,
        from_status: OrderStatus,
        to_status: OrderStatus,
        tracking_number: Optional[str] = None,
    ) -> Order:
        """Move the order forward only while it is still in `from_status`."""
        pass

    @abstractmethod
    async def get_with_details(self, order_id: int) -> Optional[dict]:
        pass

    @abstractmethod
    async def list_with_details(
        self,
        *,
        status: Optional[OrderStatus] = None,
        seller_id: Optional[int] = None,
        customer_id: Optional[int] = None,
    ) -> List[dict]:
        pass

    @abstractmethod
    async def count(
        self, *, seller_id: Optional[int] = None, status: Optional[OrderStatus] = None
    ) -> int:
        pass

    @abstractmethod
    async def fulfilled_revenue(self, *, seller_id: Optional[int] = None) -> Decimal:
        pass
