"""Registration and login for the three account kinds."""

from typing import Optional, Tuple, Union

from fastapi import Depends
from pydantic import SecretStr

from marketplace.account.domain.account_entity import AccountRole, Admin, Customer, Seller
from marketplace.account.domain.password_hasher import PasswordHasher
from marketplace.account.infra.bcrypt_password_hasher import BcryptPasswordHasher
from marketplace.account.use_case.jwt_auth_service import jwt_auth_service
from marketplace.platform.config.core_setting import settings
from marketplace.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from marketplace.platform.exception.exceptions import AuthenticationError, ConflictError
from marketplace.platform.logging.loguru_io import Logger


Account = Union[Admin, Seller, Customer]


def issue_token(account: Account, role: AccountRole) -> str:
    if account.id is None:
        raise ValueError('Account ID should not be None when issuing a token.')
    return jwt_auth_service.create_token(user_id=account.id, email=account.email, role=role.value)


async def _email_taken(uow: AbstractUnitOfWork, role: AccountRole, email: str) -> bool:
    repo = {
        AccountRole.ADMIN: uow.admins,
        AccountRole.SELLER: uow.sellers,
        AccountRole.CUSTOMER: uow.customers,
    }[role]
    return await repo.get_by_email(email) is not None


class RegisterUseCase:
    def __init__(self, uow: AbstractUnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow, BcryptPasswordHasher())

    @Logger.io
    async def register_customer(
        self, *, email: str, password: SecretStr, name: str, address: Optional[str] = None
    ) -> Customer:
        async with self.uow:
            if await _email_taken(self.uow, AccountRole.CUSTOMER, email):
                raise ConflictError('Email already registered')
            customer = Customer(
                email=email,
                name=name,
                address=address,
                hashed_password=self.password_hasher.hash_password(plain_password=password),
            )
            created = await self.uow.customers.create(customer)
            await self.uow.commit()
        return created

    @Logger.io
    async def register_seller(
        self,
        *,
        email: str,
        password: SecretStr,
        business_name: str,
        warehouse_address: Optional[str] = None,
        business_address: Optional[str] = None,
        zip_code: Optional[str] = None,
        phone: Optional[str] = None,
        gst: Optional[str] = None,
        admin_id: Optional[int] = None,
    ) -> Seller:
        """Self-registered sellers wait for review; admin-created ones start approved."""
        async with self.uow:
            if await _email_taken(self.uow, AccountRole.SELLER, email):
                raise ConflictError('Email already registered')
            seller = Seller(
                email=email,
                business_name=business_name,
                warehouse_address=warehouse_address,
                business_address=business_address,
                zip_code=zip_code,
                phone=phone,
                gst=gst,
                admin_id=admin_id,
                approved=admin_id is not None,
                hashed_password=self.password_hasher.hash_password(plain_password=password),
            )
            created = await self.uow.sellers.create(seller)
            await self.uow.commit()
        return created

    @Logger.io
    async def register_admin(self, *, email: str, password: SecretStr, name: str) -> Admin:
        async with self.uow:
            if await _email_taken(self.uow, AccountRole.ADMIN, email):
                raise ConflictError('Email already registered')
            admin = Admin(
                email=email,
                name=name,
                hashed_password=self.password_hasher.hash_password(plain_password=password),
            )
            created = await self.uow.admins.create(admin)
            await self.uow.commit()
        return created


class LoginUseCase:
    def __init__(self, uow: AbstractUnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
        return cls(uow, BcryptPasswordHasher())

    @Logger.io
    async def login(
        self, *, role: AccountRole, email: str, password: SecretStr
    ) -> Tuple[Account, str]:
        async with self.uow:
            account: Optional[Account]
            if role == AccountRole.ADMIN:
                account = await self.uow.admins.get_by_email(email)
            elif role == AccountRole.SELLER:
                account = await self.uow.sellers.get_by_email(email)
            else:
                account = await self.uow.customers.get_by_email(email)

        if account is None or not self.password_hasher.verify_password(
            plain_password=password, hashed_password=account.hashed_password
        ):
            raise AuthenticationError('Invalid email or password')

        if isinstance(account, Seller):
            account.ensure_can_login()

        return account, issue_token(account, role)


@Logger.io
async def seed_default_admin(uow: AbstractUnitOfWork, password_hasher: PasswordHasher) -> Admin:
    """Create the configured default admin unless it already exists."""
    async with uow:
        existing = await uow.admins.get_by_email(settings.DEFAULT_ADMIN_EMAIL)
        if existing:
            return existing
        admin = await uow.admins.create(
            Admin(
                email=settings.DEFAULT_ADMIN_EMAIL,
                name=settings.DEFAULT_ADMIN_NAME,
                hashed_password=password_hasher.hash_password(
                    plain_password=settings.DEFAULT_ADMIN_PASSWORD
                ),
            )
        )
        await uow.commit()
    Logger.base.info(f'Seeded default admin {admin.email}')
    return admin
