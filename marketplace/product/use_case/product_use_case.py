"""Product use cases."""

from decimal import Decimal
from typing import List, Optional

from fastapi import Depends

from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.exception.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.domain.product_entity import Product, ProductStatus


class CreateProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def create(
        self,
        *,
        seller_id: int,
        name: str,
        description: str,
        category: str,
        price: Decimal,
        quantity: int = 0,
        image: Optional[str] = None,
    ) -> Product:
        async with self.uow:
            product = Product.create(
                seller_id=seller_id,
                name=name,
                description=description,
                category=category,
                price=price,
                quantity=quantity,
                image=image,
            )
            created_product = await self.uow.products.create(product)
            await self.uow.commit()
        return created_product


class UpdateProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def update(self, product_id: int, *, seller_id: int, **changes) -> Product:
        """Only the fields passed in change; ``image=None`` clears the image."""
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id)
            if not product:
                raise NotFoundError('Product not found')
            if not product.is_owned_by(seller_id):
                raise ForbiddenError('You do not have permission to update this product')

            revised = product.revise(**changes)
            updated_product = await self.uow.products.update(revised)
            await self.uow.commit()
        return updated_product


class ReviewProductUseCase:
    """Admin approval gate: pending products become approved or rejected."""

    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    async def _get_or_404(self, product_id: int) -> Product:
        product = await self.uow.products.get_by_id(product_id)
        if not product:
            raise NotFoundError('Product not found')
        return product

    @Logger.io
    async def approve(self, product_id: int) -> Product:
        async with self.uow:
            product = (await self._get_or_404(product_id)).approve()
            updated_product = await self.uow.products.update(product)
            await self.uow.commit()
        return updated_product

    @Logger.io
    async def reject(self, product_id: int) -> Product:
        async with self.uow:
            product = (await self._get_or_404(product_id)).reject()
            updated_product = await self.uow.products.update(product)
            await self.uow.commit()
        return updated_product

    @Logger.io
    async def list_pending(self) -> List[Product]:
        async with self.uow:
            return await self.uow.products.list_by_status(ProductStatus.PENDING)


class DeleteProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def delete(self, product_id: int, *, seller_id: Optional[int] = None) -> None:
        """Admins pass no seller_id; a seller may only delete their own products."""
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id)
            if not product:
                raise NotFoundError('Product not found')
            if seller_id is not None and not product.is_owned_by(seller_id):
                raise ForbiddenError('You do not have permission to delete this product')
            if await self.uow.products.is_referenced_by_orders(product_id):
                raise ConflictError('Cannot delete product referenced in orders')
            await self.uow.products.delete(product_id)
            await self.uow.commit()


class GetProductUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @staticmethod
    def _can_see_unapproved(product: Product, viewer: Optional[CurrentUserInfo]) -> bool:
        if viewer is None:
            return False
        return viewer.is_admin() or (viewer.is_seller() and product.is_owned_by(viewer.user_id))

    @Logger.io
    async def get_with_seller(
        self, product_id: int, *, viewer: Optional[CurrentUserInfo] = None
    ) -> tuple[Product, Optional[str]]:
        """Unapproved products are hidden from everyone but their seller and admins."""
        async with self.uow:
            product = await self.uow.products.get_by_id(product_id)
            if not product or (
                not product.is_approved and not self._can_see_unapproved(product, viewer)
            ):
                raise NotFoundError('Product not found')
            seller_name = await self.uow.products.get_seller_name(product.seller_id)
        return product, seller_name


class ListProductsUseCase:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow)

    @Logger.io
    async def list_approved(self) -> List[Product]:
        async with self.uow:
            return await self.uow.products.list_by_status(ProductStatus.APPROVED)

    @Logger.io
    async def list_by_category(self, category: str) -> List[Product]:
        async with self.uow:
            return await self.uow.products.list_approved_by_category(category)

    @Logger.io
    async def search(self, query: Optional[str]) -> List[Product]:
        if not query or not query.strip():
            raise ValidationError('Search query is required')
        async with self.uow:
            return await self.uow.products.search_approved(query.strip())

    @Logger.io
    async def list_by_seller(self, seller_id: int) -> List[Product]:
        async with self.uow:
            return await self.uow.products.list_by_seller(seller_id)
