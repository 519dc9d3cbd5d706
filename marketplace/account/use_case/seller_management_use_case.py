from typing import List, Optional

import attrs
from fastapi import Depends
from pydantic import SecretStr

from marketplace.account.domain.account_entity import Seller
from marketplace.account.domain.password_hasher import PasswordHasher
from marketplace.account.infra.bcrypt_password_hasher import BcryptPasswordHasher
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.exception.exceptions import ConflictError, NotFoundError
from marketplace.platform.logging.loguru_io import Logger


class SellerManagementUseCase:
    def __init__(self, uow: AbstractUnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow, BcryptPasswordHasher())

    async def _get_or_404(self, seller_id: int) -> Seller:
        seller = await self.uow.sellers.get_by_id(seller_id)
        if not seller:
            raise NotFoundError('Seller not found')
        return seller

    @Logger.io
    async def list_all(self) -> List[Seller]:
        async with self.uow:
            return await self.uow.sellers.list_all()

    @Logger.io
    async def get(self, seller_id: int) -> Seller:
        async with self.uow:
            return await self._get_or_404(seller_id)

    @Logger.io
    async def update(
        self,
        seller_id: int,
        *,
        email: Optional[str] = None,
        business_name: Optional[str] = None,
        warehouse_address: Optional[str] = None,
        business_address: Optional[str] = None,
        zip_code: Optional[str] = None,
        phone: Optional[str] = None,
        gst: Optional[str] = None,
        password: Optional[SecretStr] = None,
    ) -> Seller:
        """Partial update; unlike the self-service profile, email and business name may change."""
        async with self.uow:
            seller = await self._get_or_404(seller_id)
            if email is not None and email != seller.email:
                if await self.uow.sellers.get_by_email(email):
                    raise ConflictError('Email already registered')

            changes = {
                'email': email,
                'business_name': business_name,
                'warehouse_address': warehouse_address,
                'business_address': business_address,
                'zip_code': zip_code,
                'phone': phone,
                'gst': gst,
            }
            changes = {key: value for key, value in changes.items() if value is not None}
            if password is not None:
                changes['hashed_password'] = self.password_hasher.hash_password(
                    plain_password=password
                )
            updated = await self.uow.sellers.update(attrs.evolve(seller, **changes))
            await self.uow.commit()
        return updated

    @Logger.io
    async def approve(self, seller_id: int) -> Seller:
        async with self.uow:
            seller = (await self._get_or_404(seller_id)).approve()
            updated = await self.uow.sellers.update(seller)
            await self.uow.commit()
        return updated

    @Logger.io
    async def reject(self, seller_id: int) -> Seller:
        async with self.uow:
            seller = (await self._get_or_404(seller_id)).reject()
            updated = await self.uow.sellers.update(seller)
            await self.uow.commit()
        return updated

    @Logger.io
    async def delete(self, seller_id: int) -> None:
        async with self.uow:
            await self._get_or_404(seller_id)
            if await self.uow.sellers.has_products_or_orders(seller_id):
                raise ConflictError('Cannot delete seller with existing products or orders')
            await self.uow.sellers.delete(seller_id)
            await self.uow.commit()
