"""Order repository implementation."""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.account.infra.account_model import CustomerModel, SellerModel
from marketplace.order.domain.order_entity import Order, OrderStatus
from marketplace.order.domain.order_repo import OrderRepo
from marketplace.order.infra.order_model import OrderModel
from marketplace.platform.exception.exceptions import ConflictError, NotFoundError
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.infra.product_model import ProductModel


class OrderRepoImpl(OrderRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_order: OrderModel) -> Order:
        return Order(
            product_id=db_order.product_id,
            seller_id=db_order.seller_id,
            customer_id=db_order.customer_id,
            customer_name=db_order.customer_name,
            address=db_order.address,
            quantity=db_order.quantity,
            total_price=db_order.total_price,
            customer_message=db_order.customer_message,
            tracking_number=db_order.tracking_number,
            status=OrderStatus(db_order.status),
            id=db_order.id,
            created_at=db_order.created_at,
        )

    @staticmethod
    def _to_order_dict(row) -> dict:
        db_order: OrderModel = row.OrderModel
        return {
            'id': db_order.id,
            'product_id': db_order.product_id,
            'seller_id': db_order.seller_id,
            'customer_id': db_order.customer_id,
            'customer_name': db_order.customer_name,
            'customer_email': row.customer_email,
            'address': db_order.address,
            'quantity': db_order.quantity,
            'total_price': db_order.total_price,
            'customer_message': db_order.customer_message,
            'tracking_number': db_order.tracking_number,
            'status': db_order.status,
            'created_at': db_order.created_at,
            'product_name': row.product_name or 'Unknown Product',
            'product_image': row.product_image,
            'seller_business_name': row.seller_business_name or 'Unknown Seller',
        }

    @staticmethod
    def _details_query():
        return (
            select(
                OrderModel,
                ProductModel.name.label('product_name'),
                ProductModel.image.label('product_image'),
                SellerModel.business_name.label('seller_business_name'),
                CustomerModel.email.label('customer_email'),
            )
            .outerjoin(ProductModel, ProductModel.id == OrderModel.product_id)
            .outerjoin(SellerModel, SellerModel.id == OrderModel.seller_id)
            .outerjoin(CustomerModel, CustomerModel.id == OrderModel.customer_id)
        )

    @Logger.io
    async def create(self, order: Order) -> Order:
        db_order = OrderModel(
            product_id=order.product_id,
            seller_id=order.seller_id,
            customer_id=order.customer_id,
            customer_name=order.customer_name,
            address=order.address,
            quantity=order.quantity,
            total_price=order.total_price,
            customer_message=order.customer_message,
            tracking_number=order.tracking_number,
            status=order.status.value,
        )
        self.session.add(db_order)
        await self.session.flush()
        await self.session.refresh(db_order)

        return OrderRepoImpl._to_entity(db_order)

    @Logger.io
    async def get_by_id(self, order_id: int) -> Optional[Order]:
        result = await self.session.execute(select(OrderModel).where(OrderModel.id == order_id))
        db_order = result.scalar_one_or_none()

        if not db_order:
            return None

        return OrderRepoImpl._to_entity(db_order)

    @Logger.io
    async def transition_atomically(
        self,
        *,
        order_id: int,
        from_status: OrderStatus,
        to_status: OrderStatus,
        tracking_number: Optional[str] = None,
    ) -> Order:
        values: dict = {'status': to_status.value}
        if tracking_number is not None:
            values['tracking_number'] = tracking_number

        stmt = (
            sql_update(OrderModel)
            .where(OrderModel.id == order_id)
            .where(OrderModel.status == from_status.value)
            .values(**values)
            .returning(OrderModel)
        )
        result = await self.session.execute(stmt)
        db_order = result.scalar_one_or_none()

        if not db_order:
            existing_order = await self.get_by_id(order_id)
            if not existing_order:
                raise NotFoundError('Order not found')
            raise ConflictError(
                f'Order status changed concurrently (now {existing_order.status.value})'
            )

        return OrderRepoImpl._to_entity(db_order)

    @Logger.io
    async def get_with_details(self, order_id: int) -> Optional[dict]:
        result = await self.session.execute(
            OrderRepoImpl._details_query().where(OrderModel.id == order_id)
        )
        row = result.one_or_none()
        return OrderRepoImpl._to_order_dict(row) if row else None

    @Logger.io
    async def list_with_details(
        self,
        *,
        status: Optional[OrderStatus] = None,
        seller_id: Optional[int] = None,
        customer_id: Optional[int] = None,
    ) -> List[dict]:
        query = OrderRepoImpl._details_query()
        if status is not None:
            query = query.where(OrderModel.status == status.value)
        if seller_id is not None:
            query = query.where(OrderModel.seller_id == seller_id)
        if customer_id is not None:
            query = query.where(OrderModel.customer_id == customer_id)

        result = await self.session.execute(
            query.order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        )
        return [OrderRepoImpl._to_order_dict(row) for row in result.all()]

    @Logger.io
    async def count(
        self, *, seller_id: Optional[int] = None, status: Optional[OrderStatus] = None
    ) -> int:
        stmt = select(func.count()).select_from(OrderModel)
        if seller_id is not None:
            stmt = stmt.where(OrderModel.seller_id == seller_id)
        if status is not None:
            stmt = stmt.where(OrderModel.status == status.value)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @Logger.io
    async def fulfilled_revenue(self, *, seller_id: Optional[int] = None) -> Decimal:
        stmt = select(func.coalesce(func.sum(OrderModel.total_price), 0)).where(
            OrderModel.status == OrderStatus.FULFILLED.value
        )
        if seller_id is not None:
            stmt = stmt.where(OrderModel.seller_id == seller_id)
        result = await self.session.execute(stmt)
        return Decimal(str(result.scalar_one())).quantize(Decimal('0.01'))
