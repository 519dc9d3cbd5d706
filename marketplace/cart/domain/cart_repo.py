from abc import ABC, abstractmethod

from marketplace.cart.domain.cart_entity import Cart


class CartRepo(ABC):
    @abstractmethod
    async def get(self, customer_id: int) -> Cart:
        pass

    @abstractmethod
    async def save(self, cart: Cart) -> Cart:
        pass

    @abstractmethod
    async def clear(self, customer_id: int) -> None:
        pass
