"""FulfillmentUseCase unit tests"""

from decimal import Decimal

import attrs
import pytest

from marketplace.order.domain.order_entity import Order, OrderStatus
from marketplace.order.use_case.fulfillment_use_case import FulfillmentUseCase
from marketplace.platform.exception.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def placed_order():
    order = Order.place(
        product_id=7,
        seller_id=2,
        customer_id=5,
        customer_name='Asha',
        address='12 MG Road',
        unit_price=Decimal('500.00'),
        quantity=2,
    )
    return attrs.evolve(order, id=1)


@pytest.fixture
def use_case(mock_uow):
    mock_uow.orders.transition_atomically.side_effect = (
        lambda *, order_id, from_status, to_status, tracking_number=None: {
            'order_id': order_id,
            'from_status': from_status,
            'to_status': to_status,
            'tracking_number': tracking_number,
        }
    )
    return FulfillmentUseCase(mock_uow)


class TestMarkReady:
    @pytest.mark.asyncio
    async def test_owner_moves_placed_to_ready(self, use_case, mock_uow, placed_order):
        mock_uow.orders.get_by_id.return_value = placed_order

        result = await use_case.mark_ready(order_id=1, seller_id=2)

        assert result == {
            'order_id': 1,
            'from_status': OrderStatus.PLACED,
            'to_status': OrderStatus.READY,
            'tracking_number': None,
        }
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_other_seller_is_forbidden(self, use_case, mock_uow, placed_order):
        mock_uow.orders.get_by_id.return_value = placed_order

        with pytest.raises(ForbiddenError):
            await use_case.mark_ready(order_id=1, seller_id=3)

        mock_uow.orders.transition_atomically.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_order(self, use_case, mock_uow):
        mock_uow.orders.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Order not found'):
            await use_case.mark_ready(order_id=404, seller_id=2)


class TestAddTracking:
    @pytest.mark.asyncio
    async def test_ready_order_is_fulfilled(self, use_case, mock_uow, placed_order):
        mock_uow.orders.get_by_id.return_value = attrs.evolve(
            placed_order, status=OrderStatus.READY
        )

        result = await use_case.add_tracking(order_id=1, tracking_number='DTDC-88213412')

        assert result['from_status'] == OrderStatus.READY
        assert result['to_status'] == OrderStatus.FULFILLED
        assert result['tracking_number'] == 'DTDC-88213412'

    @pytest.mark.asyncio
    async def test_placed_order_cannot_be_fulfilled(self, use_case, mock_uow, placed_order):
        mock_uow.orders.get_by_id.return_value = placed_order

        with pytest.raises(ConflictError, match='Order is not ready for fulfillment'):
            await use_case.add_tracking(order_id=1, tracking_number='DTDC-1')

        mock_uow.orders.transition_atomically.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_tracking_number(self, use_case, mock_uow):
        with pytest.raises(ValidationError, match='Tracking number is required'):
            await use_case.add_tracking(order_id=1, tracking_number=' ')

        mock_uow.orders.get_by_id.assert_not_awaited()
