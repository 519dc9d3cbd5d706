"""Cart line items and the purchasability rules shared with checkout."""

from typing import Any, Dict, List, Optional

import attrs

from marketplace.platform.exception.exceptions import ValidationError
from marketplace.product.domain.product_entity import Product


def validate_positive_quantity(instance, attribute, value):
    if value <= 0:
        raise ValidationError('Quantity must be a positive integer')


@attrs.define(frozen=True)
class CartItem:
    product_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    quantity: int = attrs.field(
        validator=[attrs.validators.instance_of(int), validate_positive_quantity]
    )
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'product_id': self.product_id, 'quantity': self.quantity, 'message': self.message}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CartItem':
        return cls(
            product_id=int(data['product_id']),
            quantity=int(data['quantity']),
            message=data.get('message'),
        )


@attrs.define
class Cart:
    customer_id: int
    items: List[CartItem] = attrs.field(factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items


def ensure_purchasable(item: CartItem, product: Optional[Product]) -> Product:
    """Raise ValidationError unless `product` can fill `item` right now."""
    if product is None:
        raise ValidationError(f'Product with ID {item.product_id} not found')
    if not product.is_approved:
        raise ValidationError(f'Product {product.name} is not available for purchase')
    if item.quantity > product.quantity:
        raise ValidationError(f'Not enough quantity available for {product.name}')
    return product
