"""Forward-only status transitions: placed -> ready -> fulfilled."""

from fastapi import Depends

from marketplace.order.domain.order_entity import Order, OrderStatus
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.exception.exceptions import NotFoundError, ValidationError
from marketplace.platform.logging.loguru_io import Logger


class FulfillmentUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    async def _get_or_404(self, order_id: int) -> Order:
        order = await self.uow.orders.get_by_id(order_id)
        if not order:
            raise NotFoundError('Order not found')
        return order

    @Logger.io
    async def mark_ready(self, *, order_id: int, seller_id: int) -> Order:
        async with self.uow:
            order = (await self._get_or_404(order_id)).mark_ready(seller_id=seller_id)
            updated = await self.uow.orders.transition_atomically(
                order_id=order_id, from_status=OrderStatus.PLACED, to_status=order.status
            )
            await self.uow.commit()
        return updated

    @Logger.io
    async def add_tracking(self, *, order_id: int, tracking_number: str) -> Order:
        if not tracking_number or not tracking_number.strip():
            raise ValidationError('Tracking number is required')

        async with self.uow:
            order = (await self._get_or_404(order_id)).fulfill(tracking_number=tracking_number)
            updated = await self.uow.orders.transition_atomically(
                order_id=order_id,
                from_status=OrderStatus.READY,
                to_status=order.status,
                tracking_number=order.tracking_number,
            )
            await self.uow.commit()
        return updated
