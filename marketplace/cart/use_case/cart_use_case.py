from typing import List, Optional, Tuple

from fastapi import Depends

from marketplace.cart.domain.cart_entity import Cart, CartItem, ensure_purchasable
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.domain.product_entity import Product


class GetCartUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def get(self, customer_id: int) -> List[Tuple[CartItem, Optional[Product]]]:
        """Pair every line with the product as it is now; vanished products pair with None."""
        async with self.uow:
            cart = await self.uow.carts.get(customer_id)
            return [
                (item, await self.uow.products.get_by_id(item.product_id)) for item in cart.items
            ]


class UpdateCartUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def replace(self, customer_id: int, items: List[CartItem]) -> Cart:
        async with self.uow:
            # Validate everything before writing anything
            for item in items:
                ensure_purchasable(item, await self.uow.products.get_by_id(item.product_id))

            cart = await self.uow.carts.save(Cart(customer_id=customer_id, items=list(items)))
            await self.uow.commit()
        return cart
