from decimal import Decimal

import attrs
from fastapi import Depends

from marketplace.order.domain.order_entity import OrderStatus
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.domain.product_entity import ProductStatus


@attrs.define(frozen=True)
class AdminStats:
    total_sellers: int
    pending_products: int
    ready_orders: int
    total_revenue: Decimal


@attrs.define(frozen=True)
class SellerStats:
    total_products: int
    pending_approvals: int
    new_orders: int
    total_revenue: Decimal


class StatsUseCase:
    """Read-only aggregates for the admin and seller dashboards."""

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def admin_stats(self) -> AdminStats:
        async with self.uow:
            return AdminStats(
                total_sellers=await self.uow.sellers.count(),
                pending_products=await self.uow.products.count(status=ProductStatus.PENDING),
                ready_orders=await self.uow.orders.count(status=OrderStatus.READY),
                total_revenue=await self.uow.orders.fulfilled_revenue(),
            )

    @Logger.io
    async def seller_stats(self, seller_id: int) -> SellerStats:
        async with self.uow:
            return SellerStats(
                total_products=await self.uow.products.count(seller_id=seller_id),
                pending_approvals=await self.uow.products.count(
                    seller_id=seller_id, status=ProductStatus.PENDING
                ),
                new_orders=await self.uow.orders.count(
                    seller_id=seller_id, status=OrderStatus.PLACED
                ),
                total_revenue=await self.uow.orders.fulfilled_revenue(seller_id=seller_id),
            )
