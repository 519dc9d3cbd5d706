from typing import List

from fastapi import Depends

from marketplace.cart.domain.cart_entity import ensure_purchasable
from marketplace.order.domain.order_entity import Order
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.exception.exceptions import (
    EmptyCartError,
    NotFoundError,
    ValidationError,
)
from marketplace.platform.logging.loguru_io import Logger


class PlaceOrderUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def place_order(self, *, customer_id: int, address: str) -> List[Order]:
        """
        Turn the customer's cart into one order per line item.

        Every line is re-validated against current stock before anything is written,
        and orders, stock decrements and the cart reset commit together.
        """
        if not address or not address.strip():
            raise ValidationError('Delivery address is required')

        async with self.uow:
            customer = await self.uow.customers.get_by_id(customer_id)
            if not customer:
                raise NotFoundError('Customer not found')

            cart = await self.uow.carts.get(customer_id)
            if cart.is_empty:
                raise EmptyCartError()

            lines = [
                (item, ensure_purchasable(item, await self.uow.products.get_by_id(item.product_id)))
                for item in cart.items
            ]

            orders: List[Order] = []
            for item, product in lines:
                if product.id is None:
                    raise ValueError('Product ID should not be None for a stored product.')
                order = Order.place(
                    product_id=product.id,
                    seller_id=product.seller_id,
                    customer_id=customer_id,
                    customer_name=customer.name,
                    address=address,
                    unit_price=product.price,
                    quantity=item.quantity,
                    customer_message=item.message,
                )
                orders.append(await self.uow.orders.create(order))
                await self.uow.products.decrement_stock_atomically(product.id, item.quantity)

            await self.uow.carts.clear(customer_id)
            await self.uow.commit()

        Logger.base.info(f'Customer {customer_id} placed {len(orders)} order(s)')
        return orders
