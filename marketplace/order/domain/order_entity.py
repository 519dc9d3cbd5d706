from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

import attrs

from marketplace.platform.exception.exceptions import (
    ConflictError,
    ForbiddenError,
    ValidationError,
)


class OrderStatus(str, Enum):
    PLACED = 'placed'
    READY = 'ready'
    FULFILLED = 'fulfilled'


def validate_positive(instance, attribute, value):
    if value <= 0:
        raise ValidationError(f'{attribute.name.replace("_", " ").capitalize()} must be positive')


def validate_address(instance, attribute, value):
    if not value or not value.strip():
        raise ValidationError('Delivery address is required')


@attrs.define
class Order:
    product_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    seller_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    customer_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    customer_name: str = attrs.field(validator=attrs.validators.instance_of(str))
    address: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_address])
    quantity: int = attrs.field(validator=[attrs.validators.instance_of(int), validate_positive])
    total_price: Decimal = attrs.field(
        converter=lambda value: Decimal(str(value)).quantize(Decimal('0.01')),
        validator=validate_positive,
    )
    customer_message: Optional[str] = None
    tracking_number: Optional[str] = None
    status: OrderStatus = attrs.field(
        default=OrderStatus.PLACED, validator=attrs.validators.instance_of(OrderStatus)
    )
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def place(
        cls,
        *,
        product_id: int,
        seller_id: int,
        customer_id: int,
        customer_name: str,
        address: str,
        unit_price: Decimal,
        quantity: int,
        customer_message: Optional[str] = None,
    ) -> 'Order':
        return cls(
            product_id=product_id,
            seller_id=seller_id,
            customer_id=customer_id,
            customer_name=customer_name,
            address=address.strip(),
            quantity=quantity,
            total_price=Decimal(unit_price) * quantity,
            customer_message=customer_message,
            status=OrderStatus.PLACED,
        )

    def mark_ready(self, *, seller_id: int) -> 'Order':
        if self.seller_id != seller_id:
            raise ForbiddenError('You do not have permission to update this order')
        if self.status != OrderStatus.PLACED:
            raise ConflictError('Order is not in the placed status')
        return attrs.evolve(self, status=OrderStatus.READY)

    def fulfill(self, *, tracking_number: str) -> 'Order':
        if not tracking_number or not tracking_number.strip():
            raise ValidationError('Tracking number is required')
        if self.status != OrderStatus.READY:
            raise ConflictError('Order is not ready for fulfillment')
        return attrs.evolve(
            self, status=OrderStatus.FULFILLED, tracking_number=tracking_number.strip()
        )
