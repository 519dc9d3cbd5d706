from typing import List, Optional

from fastapi import Depends

from marketplace.order.domain.order_entity import OrderStatus
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.exception.exceptions import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from marketplace.platform.logging.loguru_io import Logger


def parse_order_status(raw_status: str) -> OrderStatus:
    try:
        return OrderStatus(raw_status)
    except ValueError:
        raise ValidationError('Invalid status parameter')


class ListOrdersUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def list_all(self, status: Optional[OrderStatus] = None) -> List[dict]:
        async with self.uow:
            return await self.uow.orders.list_with_details(status=status)

    @Logger.io
    async def list_for_seller(self, seller_id: int) -> List[dict]:
        async with self.uow:
            return await self.uow.orders.list_with_details(seller_id=seller_id)

    @Logger.io
    async def list_for_customer(self, customer_id: int) -> List[dict]:
        async with self.uow:
            return await self.uow.orders.list_with_details(customer_id=customer_id)


class GetOrderUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @staticmethod
    def _can_view(order: dict, viewer: CurrentUserInfo) -> bool:
        if viewer.is_admin():
            return True
        if viewer.is_customer():
            return order['customer_id'] == viewer.user_id
        if viewer.is_seller():
            return order['seller_id'] == viewer.user_id
        return False

    @Logger.io
    async def get(self, order_id: int, *, viewer: CurrentUserInfo) -> dict:
        async with self.uow:
            order = await self.uow.orders.get_with_details(order_id)
        if not order:
            raise NotFoundError('Order not found')
        if not self._can_view(order, viewer):
            raise ForbiddenError('You do not have permission to view this order')
        return order
