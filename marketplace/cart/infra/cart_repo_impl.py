"""Carts live as a JSON document on the customer row."""

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.account.infra.account_model import CustomerModel
from marketplace.cart.domain.cart_entity import Cart, CartItem
from marketplace.cart.domain.cart_repo import CartRepo
from marketplace.platform.exception.exceptions import NotFoundError
from marketplace.platform.logging.loguru_io import Logger


class CartRepoImpl(CartRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get(self, customer_id: int) -> Cart:
        result = await self.session.execute(
            select(CustomerModel.cart_data).where(CustomerModel.id == customer_id)
        )
        row = result.one_or_none()
        if row is None:
            raise NotFoundError('Customer not found')

        cart_data = row[0] or {}
        items = [CartItem.from_dict(item) for item in cart_data.get('items', [])]
        return Cart(customer_id=customer_id, items=items)

    @Logger.io
    async def save(self, cart: Cart) -> Cart:
        stmt = (
            sql_update(CustomerModel)
            .where(CustomerModel.id == cart.customer_id)
            .values(cart_data={'items': [item.to_dict() for item in cart.items]})
            .returning(CustomerModel.id)
        )
        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise NotFoundError('Customer not found')
        return cart

    @Logger.io
    async def clear(self, customer_id: int) -> None:
        await self.save(Cart(customer_id=customer_id, items=[]))
