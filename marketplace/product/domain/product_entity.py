"""Product entity and its approval gate."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

import attrs

from marketplace.platform.exception.exceptions import ConflictError, ValidationError


class ProductStatus(str, Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


# A change to any of these sends the product back to review
REVIEWED_FIELDS = ('name', 'description', 'price', 'image')

# Optional on the entity, so an explicit None clears them
NULLABLE_FIELDS = ('image',)


def _to_price(value) -> Decimal:
    return Decimal(str(value)).quantize(Decimal('0.01'))


def validate_positive_price(instance, attribute, value):
    if value <= 0:
        raise ValidationError('Price must be positive')


def validate_quantity(instance, attribute, value):
    if value < 0:
        raise ValidationError('Quantity cannot be negative')


def validate_not_blank(instance, attribute, value):
    if not value or not value.strip():
        raise ValidationError(f'Product {attribute.name} is required')


@attrs.define
class Product:
    seller_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    name: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_not_blank])
    description: str = attrs.field(
        validator=[attrs.validators.instance_of(str), validate_not_blank]
    )
    category: str = attrs.field(validator=[attrs.validators.instance_of(str), validate_not_blank])
    price: Decimal = attrs.field(converter=_to_price, validator=validate_positive_price)
    quantity: int = attrs.field(
        default=0, validator=[attrs.validators.instance_of(int), validate_quantity]
    )
    image: Optional[str] = None
    status: ProductStatus = attrs.field(
        default=ProductStatus.PENDING, validator=attrs.validators.instance_of(ProductStatus)
    )
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        seller_id: int,
        name: str,
        description: str,
        category: str,
        price: Decimal,
        quantity: int = 0,
        image: Optional[str] = None,
    ) -> 'Product':
        return cls(
            seller_id=seller_id,
            name=name,
            description=description,
            category=category,
            price=price,
            quantity=quantity,
            image=image,
            status=ProductStatus.PENDING,
        )

    @property
    def is_approved(self) -> bool:
        return self.status == ProductStatus.APPROVED

    def is_owned_by(self, seller_id: int) -> bool:
        return self.seller_id == seller_id

    def approve(self) -> 'Product':
        if self.status != ProductStatus.PENDING:
            raise ConflictError('Invalid or non-pending product')
        return attrs.evolve(self, status=ProductStatus.APPROVED)

    def reject(self) -> 'Product':
        if self.status != ProductStatus.PENDING:
            raise ConflictError('Invalid or non-pending product')
        return attrs.evolve(self, status=ProductStatus.REJECTED)

    def revise(self, **changes) -> 'Product':
        """Apply seller edits; touching a reviewed field resets approval."""
        changes = {
            key: value
            for key, value in changes.items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if 'price' in changes:
            changes['price'] = _to_price(changes['price'])

        needs_review = any(
            field in changes and changes[field] != getattr(self, field)
            for field in REVIEWED_FIELDS
        )
        if needs_review:
            changes['status'] = ProductStatus.PENDING
        return attrs.evolve(self, **changes)
