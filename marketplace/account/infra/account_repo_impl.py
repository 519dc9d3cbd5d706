from typing import List, Optional

from sqlalchemy import delete as sql_delete, exists, func, or_, select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.account.domain.account_entity import Admin, Customer, Seller
from marketplace.account.domain.account_repo import AdminRepo, CustomerRepo, SellerRepo
from marketplace.account.infra.account_model import AdminModel, CustomerModel, SellerModel
from marketplace.order.infra.order_model import OrderModel
from marketplace.platform.exception.exceptions import NotFoundError
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.infra.product_model import ProductModel


class AdminRepoImpl(AdminRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_admin: AdminModel) -> Admin:
        return Admin(
            email=db_admin.email,
            name=db_admin.name,
            hashed_password=db_admin.hashed_password,
            id=db_admin.id,
            created_at=db_admin.created_at,
        )

    @Logger.io
    async def create(self, admin: Admin) -> Admin:
        db_admin = AdminModel(
            email=admin.email,
            name=admin.name,
            hashed_password=admin.hashed_password,
        )
        self.session.add(db_admin)
        await self.session.flush()
        await self.session.refresh(db_admin)

        return AdminRepoImpl._to_entity(db_admin)

    @Logger.io
    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        db_admin = await self.session.get(AdminModel, admin_id)
        return AdminRepoImpl._to_entity(db_admin) if db_admin else None

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[Admin]:
        result = await self.session.execute(select(AdminModel).where(AdminModel.email == email))
        db_admin = result.scalar_one_or_none()
        return AdminRepoImpl._to_entity(db_admin) if db_admin else None


class SellerRepoImpl(SellerRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_seller: SellerModel) -> Seller:
        return Seller(
            email=db_seller.email,
            business_name=db_seller.business_name,
            hashed_password=db_seller.hashed_password,
            warehouse_address=db_seller.warehouse_address,
            business_address=db_seller.business_address,
            zip_code=db_seller.zip_code,
            phone=db_seller.phone,
            gst=db_seller.gst,
            admin_id=db_seller.admin_id,
            approved=db_seller.approved,
            rejected=db_seller.rejected,
            id=db_seller.id,
            created_at=db_seller.created_at,
        )

    @Logger.io
    async def create(self, seller: Seller) -> Seller:
        db_seller = SellerModel(
            email=seller.email,
            business_name=seller.business_name,
            hashed_password=seller.hashed_password,
            warehouse_address=seller.warehouse_address,
            business_address=seller.business_address,
            zip_code=seller.zip_code,
            phone=seller.phone,
            gst=seller.gst,
            admin_id=seller.admin_id,
            approved=seller.approved,
            rejected=seller.rejected,
        )
        self.session.add(db_seller)
        await self.session.flush()
        await self.session.refresh(db_seller)

        return SellerRepoImpl._to_entity(db_seller)

    @Logger.io
    async def get_by_id(self, seller_id: int) -> Optional[Seller]:
        db_seller = await self.session.get(SellerModel, seller_id)
        return SellerRepoImpl._to_entity(db_seller) if db_seller else None

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[Seller]:
        result = await self.session.execute(select(SellerModel).where(SellerModel.email == email))
        db_seller = result.scalar_one_or_none()
        return SellerRepoImpl._to_entity(db_seller) if db_seller else None

    @Logger.io
    async def list_all(self) -> List[Seller]:
        result = await self.session.execute(select(SellerModel).order_by(SellerModel.id))
        return [SellerRepoImpl._to_entity(db_seller) for db_seller in result.scalars().all()]

    @Logger.io
    async def update(self, seller: Seller) -> Seller:
        stmt = (
            sql_update(SellerModel)
            .where(SellerModel.id == seller.id)
            .values(
                email=seller.email,
                business_name=seller.business_name,
                hashed_password=seller.hashed_password,
                warehouse_address=seller.warehouse_address,
                business_address=seller.business_address,
                zip_code=seller.zip_code,
                phone=seller.phone,
                gst=seller.gst,
                approved=seller.approved,
                rejected=seller.rejected,
            )
            .returning(SellerModel)
        )
        result = await self.session.execute(stmt)
        db_seller = result.scalar_one_or_none()

        if not db_seller:
            raise NotFoundError('Seller not found')

        return SellerRepoImpl._to_entity(db_seller)

    @Logger.io
    async def delete(self, seller_id: int) -> bool:
        stmt = sql_delete(SellerModel).where(SellerModel.id == seller_id).returning(SellerModel.id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @Logger.io
    async def has_products_or_orders(self, seller_id: int) -> bool:
        stmt = select(
            or_(
                exists().where(ProductModel.seller_id == seller_id),
                exists().where(OrderModel.seller_id == seller_id),
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    @Logger.io
    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(SellerModel))
        return result.scalar_one()


class CustomerRepoImpl(CustomerRepo):
    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _to_entity(db_customer: CustomerModel) -> Customer:
        return Customer(
            email=db_customer.email,
            name=db_customer.name,
            hashed_password=db_customer.hashed_password,
            address=db_customer.address,
            id=db_customer.id,
            created_at=db_customer.created_at,
        )

    @Logger.io
    async def create(self, customer: Customer) -> Customer:
        db_customer = CustomerModel(
            email=customer.email,
            name=customer.name,
            hashed_password=customer.hashed_password,
            address=customer.address,
            cart_data={'items': []},
        )
        self.session.add(db_customer)
        await self.session.flush()
        await self.session.refresh(db_customer)

        return CustomerRepoImpl._to_entity(db_customer)

    @Logger.io
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        db_customer = await self.session.get(CustomerModel, customer_id)
        return CustomerRepoImpl._to_entity(db_customer) if db_customer else None

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[Customer]:
        result = await self.session.execute(
            select(CustomerModel).where(CustomerModel.email == email)
        )
        db_customer = result.scalar_one_or_none()
        return CustomerRepoImpl._to_entity(db_customer) if db_customer else None

    @Logger.io
    async def update(self, customer: Customer) -> Customer:
        stmt = (
            sql_update(CustomerModel)
            .where(CustomerModel.id == customer.id)
            .values(
                name=customer.name,
                address=customer.address,
                hashed_password=customer.hashed_password,
            )
            .returning(CustomerModel)
        )
        result = await self.session.execute(stmt)
        db_customer = result.scalar_one_or_none()

        if not db_customer:
            raise NotFoundError('Customer not found')

        return CustomerRepoImpl._to_entity(db_customer)
