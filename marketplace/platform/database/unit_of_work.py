from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.platform.database.db_setting import get_async_session


if TYPE_CHECKING:
    from marketplace.account.domain.account_repo import AdminRepo, CustomerRepo, SellerRepo
    from marketplace.cart.domain.cart_repo import CartRepo
    from marketplace.order.domain.order_repo import OrderRepo
    from marketplace.product.domain.product_repo import ProductRepo


class AbstractUnitOfWork(abc.ABC):
    admins: AdminRepo
    sellers: SellerRepo
    customers: CustomerRepo
    products: ProductRepo
    carts: CartRepo
    orders: OrderRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        # No-op after a successful commit
        await self.rollback()

    async def commit(self):
        await self._commit()

    @abc.abstractmethod
    async def _commit(self):
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self):
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        from marketplace.account.infra.account_repo_impl import (
            AdminRepoImpl,
            CustomerRepoImpl,
            SellerRepoImpl,
        )
        from marketplace.cart.infra.cart_repo_impl import CartRepoImpl
        from marketplace.order.infra.order_repo_impl import OrderRepoImpl
        from marketplace.product.infra.product_repo_impl import ProductRepoImpl

        self.admins = AdminRepoImpl(self.session)
        self.sellers = SellerRepoImpl(self.session)
        self.customers = CustomerRepoImpl(self.session)
        self.products = ProductRepoImpl(self.session)
        self.carts = CartRepoImpl(self.session)
        self.orders = OrderRepoImpl(self.session)
        return await super().__aenter__()

    async def _commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()


def get_unit_of_work(session: AsyncSession = Depends(get_async_session)) -> AbstractUnitOfWork:
    return SqlAlchemyUnitOfWork(session)
