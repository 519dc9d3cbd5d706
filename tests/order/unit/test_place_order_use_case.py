"""
PlaceOrderUseCase unit tests
"""

from decimal import Decimal
from unittest.mock import call

import attrs
import pytest

from marketplace.account.domain.account_entity import Customer
from marketplace.cart.domain.cart_entity import Cart, CartItem
from marketplace.order.domain.order_entity import OrderStatus
from marketplace.order.use_case.place_order_use_case import PlaceOrderUseCase
from marketplace.platform.exception.exceptions import EmptyCartError, ValidationError
from marketplace.product.domain.product_entity import Product, ProductStatus


class TestPlaceOrderUseCase:
    @pytest.fixture
    def customer(self):
        return Customer(email='asha@example.com', name='Asha', id=5)

    @pytest.fixture
    def products(self):
        return {
            7: Product(
                seller_id=2,
                name='Saffron',
                description='Threads',
                category='spices',
                price=Decimal('500.00'),
                quantity=10,
                status=ProductStatus.APPROVED,
                id=7,
            ),
            8: Product(
                seller_id=3,
                name='Shawl',
                description='Pashmina',
                category='textiles',
                price=Decimal('1200.00'),
                quantity=1,
                status=ProductStatus.APPROVED,
                id=8,
            ),
        }

    @pytest.fixture
    def use_case(self, mock_uow, customer, products):
        mock_uow.customers.get_by_id.return_value = customer
        mock_uow.products.get_by_id.side_effect = lambda product_id: products.get(product_id)
        mock_uow.orders.create.side_effect = lambda order: attrs.evolve(order, id=100 + order.product_id)
        return PlaceOrderUseCase(mock_uow)

    @pytest.mark.asyncio
    async def test_one_order_per_cart_line(self, use_case, mock_uow):
        # Arrange
        mock_uow.carts.get.return_value = Cart(
            customer_id=5,
            items=[
                CartItem(product_id=7, quantity=2, message='Gift wrap'),
                CartItem(product_id=8, quantity=1),
            ],
        )

        # Act
        orders = await use_case.place_order(customer_id=5, address='12 MG Road')

        # Assert
        assert [order.id for order in orders] == [107, 108]
        assert orders[0].total_price == Decimal('1000.00')
        assert orders[0].seller_id == 2
        assert orders[0].customer_message == 'Gift wrap'
        assert orders[1].seller_id == 3
        assert all(order.status == OrderStatus.PLACED for order in orders)
        assert all(order.tracking_number is None for order in orders)
        mock_uow.products.decrement_stock_atomically.assert_has_awaits([call(7, 2), call(8, 1)])
        mock_uow.carts.clear.assert_awaited_once_with(5)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_cart_is_rejected(self, use_case, mock_uow):
        mock_uow.carts.get.return_value = Cart(customer_id=5)

        with pytest.raises(EmptyCartError):
            await use_case.place_order(customer_id=5, address='12 MG Road')

        mock_uow.orders.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_address_is_rejected(self, use_case, mock_uow):
        with pytest.raises(ValidationError, match='Delivery address is required'):
            await use_case.place_order(customer_id=5, address='  ')

        mock_uow.carts.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_any_invalid_line_aborts_before_writing(self, use_case, mock_uow):
        mock_uow.carts.get.return_value = Cart(
            customer_id=5,
            items=[CartItem(product_id=7, quantity=2), CartItem(product_id=8, quantity=5)],
        )

        with pytest.raises(ValidationError, match='Not enough quantity available for Shawl'):
            await use_case.place_order(customer_id=5, address='12 MG Road')

        mock_uow.orders.create.assert_not_awaited()
        mock_uow.products.decrement_stock_atomically.assert_not_awaited()
        mock_uow.carts.clear.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lost_stock_race_does_not_commit(self, use_case, mock_uow):
        mock_uow.carts.get.return_value = Cart(
            customer_id=5, items=[CartItem(product_id=7, quantity=2)]
        )
        mock_uow.products.decrement_stock_atomically.side_effect = ValidationError(
            'Not enough quantity available for Saffron'
        )

        with pytest.raises(ValidationError):
            await use_case.place_order(customer_id=5, address='12 MG Road')

        mock_uow.carts.clear.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()
