"""Self-service profile reads and updates for sellers and customers."""

from typing import Optional

import attrs
from fastapi import Depends
from pydantic import SecretStr

from marketplace.account.domain.account_entity import Customer, Seller
from marketplace.account.domain.password_hasher import PasswordHasher
from marketplace.account.infra.bcrypt_password_hasher import BcryptPasswordHasher
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.exception.exceptions import NotFoundError, ValidationError
from marketplace.platform.logging.loguru_io import Logger


def _rehash_password(
    password_hasher: PasswordHasher,
    *,
    hashed_password: str,
    current_password: Optional[SecretStr],
    new_password: Optional[SecretStr],
) -> str:
    if new_password is None:
        return hashed_password
    if current_password is None:
        raise ValidationError('Current password is required to set a new password')
    if not password_hasher.verify_password(
        plain_password=current_password, hashed_password=hashed_password
    ):
        raise ValidationError('Current password is incorrect')
    return password_hasher.hash_password(plain_password=new_password)


class SellerProfileUseCase:
    def __init__(self, uow: AbstractUnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow, BcryptPasswordHasher())

    @Logger.io
    async def get(self, seller_id: int) -> Seller:
        async with self.uow:
            seller = await self.uow.sellers.get_by_id(seller_id)
        if not seller:
            raise NotFoundError('Seller not found')
        return seller

    @Logger.io
    async def update(
        self,
        seller_id: int,
        *,
        warehouse_address: Optional[str] = None,
        business_address: Optional[str] = None,
        zip_code: Optional[str] = None,
        phone: Optional[str] = None,
        gst: Optional[str] = None,
        current_password: Optional[SecretStr] = None,
        new_password: Optional[SecretStr] = None,
    ) -> Seller:
        async with self.uow:
            seller = await self.uow.sellers.get_by_id(seller_id)
            if not seller:
                raise NotFoundError('Seller not found')

            changes = {
                'warehouse_address': warehouse_address,
                'business_address': business_address,
                'zip_code': zip_code,
                'phone': phone,
                'gst': gst,
            }
            seller = attrs.evolve(
                seller,
                **{key: value for key, value in changes.items() if value is not None},
                hashed_password=_rehash_password(
                    self.password_hasher,
                    hashed_password=seller.hashed_password,
                    current_password=current_password,
                    new_password=new_password,
                ),
            )
            updated = await self.uow.sellers.update(seller)
            await self.uow.commit()
        return updated


class CustomerProfileUseCase:
    def __init__(self, uow: AbstractUnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow, BcryptPasswordHasher())

    @Logger.io
    async def get(self, customer_id: int) -> Customer:
        async with self.uow:
            customer = await self.uow.customers.get_by_id(customer_id)
        if not customer:
            raise NotFoundError('Customer not found')
        return customer

    @Logger.io
    async def update(
        self,
        customer_id: int,
        *,
        name: Optional[str] = None,
        address: Optional[str] = None,
        current_password: Optional[SecretStr] = None,
        new_password: Optional[SecretStr] = None,
    ) -> Customer:
        async with self.uow:
            customer = await self.uow.customers.get_by_id(customer_id)
            if not customer:
                raise NotFoundError('Customer not found')

            customer = attrs.evolve(
                customer,
                name=name if name is not None else customer.name,
                address=address if address is not None else customer.address,
                hashed_password=_rehash_password(
                    self.password_hasher,
                    hashed_password=customer.hashed_password,
                    current_password=current_password,
                    new_password=new_password,
                ),
            )
            updated = await self.uow.customers.update(customer)
            await self.uow.commit()
        return updated
