"""Account entities: admins, sellers and customers."""

from datetime import datetime
from enum import Enum
from typing import Optional

import attrs

from marketplace.platform.exception.exceptions import ConflictError, ForbiddenError, ValidationError


class AccountRole(str, Enum):
    ADMIN = 'admin'
    SELLER = 'seller'
    CUSTOMER = 'customer'


class SellerStatus(str, Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


def validate_email(instance, attribute, value):
    if not value or '@' not in value:
        raise ValidationError('A valid email is required')


def validate_not_blank(instance, attribute, value):
    if not value or not value.strip():
        raise ValidationError(f'{attribute.name.replace("_", " ").capitalize()} is required')


@attrs.define
class Admin:
    email: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_email])
    name: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_not_blank])
    hashed_password: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None


@attrs.define
class Seller:
    email: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_email])
    business_name: str = attrs.field(
        validator=[attrs.validators.instance_of(str), validate_not_blank]
    )
    hashed_password: str = ''
    warehouse_address: Optional[str] = None
    business_address: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    gst: Optional[str] = None
    admin_id: Optional[int] = None
    approved: bool = False
    rejected: bool = False
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def status(self) -> SellerStatus:
        if self.rejected:
            return SellerStatus.REJECTED
        if self.approved:
            return SellerStatus.APPROVED
        return SellerStatus.PENDING

    def approve(self) -> 'Seller':
        if self.status == SellerStatus.APPROVED:
            raise ConflictError('Seller is already approved')
        return attrs.evolve(self, approved=True, rejected=False)

    def reject(self) -> 'Seller':
        if self.status == SellerStatus.REJECTED:
            raise ConflictError('Seller is already rejected')
        return attrs.evolve(self, approved=False, rejected=True)

    def ensure_can_login(self) -> None:
        if self.status == SellerStatus.REJECTED:
            raise ForbiddenError('Your account has been rejected')
        if self.status == SellerStatus.PENDING:
            raise ForbiddenError('Your account is pending approval')


@attrs.define
class Customer:
    email: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_email])
    name: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_not_blank])
    hashed_password: str = ''
    address: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
