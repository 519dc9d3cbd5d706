"""Cart entity unit tests"""

from decimal import Decimal

import attrs
import pytest

from marketplace.cart.domain.cart_entity import Cart, CartItem, ensure_purchasable
from marketplace.platform.exception.exceptions import ValidationError
from marketplace.product.domain.product_entity import Product, ProductStatus


@pytest.fixture
def approved_product():
    return Product(
        seller_id=1,
        name='Pashmina Shawl',
        description='Hand woven',
        category='textiles',
        price=Decimal('2500.00'),
        quantity=3,
        status=ProductStatus.APPROVED,
        id=11,
    )


class TestCartItem:
    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError, match='Quantity must be a positive integer'):
            CartItem(product_id=1, quantity=0)

    def test_from_dict_reads_stored_line(self):
        item = CartItem.from_dict({'product_id': '11', 'quantity': 2, 'message': 'Gift'})

        assert item == CartItem(product_id=11, quantity=2, message='Gift')
        assert item.to_dict() == {'product_id': 11, 'quantity': 2, 'message': 'Gift'}

    def test_empty_cart(self):
        assert Cart(customer_id=1).is_empty
        assert not Cart(customer_id=1, items=[CartItem(product_id=1, quantity=1)]).is_empty


class TestEnsurePurchasable:
    def test_approved_product_with_stock_passes(self, approved_product):
        item = CartItem(product_id=11, quantity=3)

        assert ensure_purchasable(item, approved_product) is approved_product

    def test_missing_product(self):
        with pytest.raises(ValidationError, match='Product with ID 42 not found'):
            ensure_purchasable(CartItem(product_id=42, quantity=1), None)

    @pytest.mark.parametrize('status', [ProductStatus.PENDING, ProductStatus.REJECTED])
    def test_unapproved_product(self, approved_product, status):
        product = attrs.evolve(approved_product, status=status)

        with pytest.raises(ValidationError, match='is not available for purchase'):
            ensure_purchasable(CartItem(product_id=11, quantity=1), product)

    def test_quantity_above_stock(self, approved_product):
        with pytest.raises(
            ValidationError, match='Not enough quantity available for Pashmina Shawl'
        ):
            ensure_purchasable(CartItem(product_id=11, quantity=4), approved_product)
