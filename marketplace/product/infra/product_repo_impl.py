"""Product repository implementation."""

from typing import List, Optional

from sqlalchemy import delete as sql_delete, exists, func, or_, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.account.infra.account_model import SellerModel
from marketplace.order.infra.order_model import OrderModel
from marketplace.platform.exception.exceptions import NotFoundError, ValidationError
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.domain.product_entity import Product, ProductStatus
from marketplace.product.domain.product_repo import ProductRepo
from marketplace.product.infra.product_model import ProductModel


class ProductRepoImpl(ProductRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_product: ProductModel) -> Product:
        return Product(
            seller_id=db_product.seller_id,
            name=db_product.name,
            description=db_product.description,
            category=db_product.category,
            price=db_product.price,
            quantity=db_product.quantity,
            image=db_product.image,
            status=ProductStatus(db_product.status),
            id=db_product.id,
            created_at=db_product.created_at,
        )

    async def _fetch_all(self, stmt) -> List[Product]:
        result = await self.session.execute(stmt)
        return [ProductRepoImpl._to_entity(db_product) for db_product in result.scalars().all()]

    @Logger.io
    async def create(self, product: Product) -> Product:
        db_product = ProductModel(
            seller_id=product.seller_id,
            name=product.name,
            description=product.description,
            category=product.category,
            image=product.image,
            price=product.price,
            quantity=product.quantity,
            status=product.status.value,
        )
        self.session.add(db_product)
        await self.session.flush()
        await self.session.refresh(db_product)

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        result = await self.session.execute(
            select(ProductModel).where(ProductModel.id == product_id)
        )
        db_product = result.scalar_one_or_none()

        if not db_product:
            return None

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def update(self, product: Product) -> Product:
        stmt = (
            sql_update(ProductModel)
            .where(ProductModel.id == product.id)
            .values(
                name=product.name,
                description=product.description,
                category=product.category,
                image=product.image,
                price=product.price,
                quantity=product.quantity,
                status=product.status.value,
            )
            .returning(ProductModel)
        )

        result = await self.session.execute(stmt)
        db_product = result.scalar_one_or_none()

        if not db_product:
            raise NotFoundError('Product not found')

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def delete(self, product_id: int) -> bool:
        stmt = (
            sql_delete(ProductModel).where(ProductModel.id == product_id).returning(ProductModel.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_by_seller(self, seller_id: int) -> List[Product]:
        return await self._fetch_all(
            select(ProductModel)
            .where(ProductModel.seller_id == seller_id)
            .order_by(ProductModel.id.desc())
        )

    @Logger.io
    async def list_by_status(self, status: ProductStatus) -> List[Product]:
        return await self._fetch_all(
            select(ProductModel)
            .where(ProductModel.status == status.value)
            .order_by(ProductModel.id.desc())
        )

    @Logger.io
    async def list_approved_by_category(self, category: str) -> List[Product]:
        return await self._fetch_all(
            select(ProductModel)
            .where(ProductModel.status == ProductStatus.APPROVED.value)
            .where(func.lower(ProductModel.category) == category.lower())
            .order_by(ProductModel.id.desc())
        )

    @Logger.io
    async def search_approved(self, query: str) -> List[Product]:
        pattern = f'%{query}%'
        return await self._fetch_all(
            select(ProductModel)
            .where(ProductModel.status == ProductStatus.APPROVED.value)
            .where(or_(ProductModel.name.ilike(pattern), ProductModel.description.ilike(pattern)))
            .order_by(ProductModel.id.desc())
        )

    @Logger.io
    async def is_referenced_by_orders(self, product_id: int) -> bool:
        result = await self.session.execute(
            select(exists().where(OrderModel.product_id == product_id))
        )
        return bool(result.scalar())

    @Logger.io
    async def decrement_stock_atomically(self, product_id: int, quantity: int) -> Product:
        stmt = (
            sql_update(ProductModel)
            .where(ProductModel.id == product_id)
            .where(ProductModel.quantity >= quantity)
            .values(quantity=ProductModel.quantity - quantity)
            .returning(ProductModel)
        )

        result = await self.session.execute(stmt)
        db_product = result.scalar_one_or_none()

        if not db_product:
            existing = await self.get_by_id(product_id)
            if not existing:
                raise NotFoundError(f'Product with ID {product_id} not found')
            raise ValidationError(f'Not enough quantity available for {existing.name}')

        return ProductRepoImpl._to_entity(db_product)

    @Logger.io
    async def count(
        self, *, seller_id: Optional[int] = None, status: Optional[ProductStatus] = None
    ) -> int:
        stmt = select(func.count()).select_from(ProductModel)
        if seller_id is not None:
            stmt = stmt.where(ProductModel.seller_id == seller_id)
        if status is not None:
            stmt = stmt.where(ProductModel.status == status.value)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @Logger.io
    async def get_seller_name(self, seller_id: int) -> Optional[str]:
        result = await self.session.execute(
            select(SellerModel.business_name).where(SellerModel.id == seller_id)
        )
        return result.scalar_one_or_none()
