"""Order controllers grouped by caller role."""

from typing import List

from fastapi import APIRouter, Depends, status

from marketplace.account.use_case.role_auth_service import (
    get_current_user,
    require_admin,
    require_customer,
    require_seller,
)
from marketplace.order.port.order_schema import (
    OrderDetailResponse,
    OrderResponse,
    PlaceOrderRequest,
    PlaceOrderResponse,
    TrackingRequest,
)
from marketplace.order.use_case.fulfillment_use_case import FulfillmentUseCase
from marketplace.order.use_case.place_order_use_case import PlaceOrderUseCase
from marketplace.order.use_case.query_order_use_case import (
    GetOrderUseCase,
    ListOrdersUseCase,
    parse_order_status,
)
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.logging.loguru_io import Logger


router = APIRouter()
customer_router = APIRouter()
seller_router = APIRouter()
admin_router = APIRouter()


def _to_details(orders: List[dict]) -> List[OrderDetailResponse]:
    return [OrderDetailResponse(**order) for order in orders]


# === Any authenticated caller ===


@router.get('/{order_id}', response_model=OrderDetailResponse)
@Logger.io
async def get_order(
    order_id: int,
    current_user: CurrentUserInfo = Depends(get_current_user),
    use_case: GetOrderUseCase = Depends(GetOrderUseCase.depends),
) -> OrderDetailResponse:
    return OrderDetailResponse(**await use_case.get(order_id, viewer=current_user))


# === Customer ===


@customer_router.post('', response_model=PlaceOrderResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def place_order(
    request: PlaceOrderRequest,
    current_user: CurrentUserInfo = Depends(require_customer),
    use_case: PlaceOrderUseCase = Depends(PlaceOrderUseCase.depends),
) -> PlaceOrderResponse:
    orders = await use_case.place_order(customer_id=current_user.user_id, address=request.address)
    return PlaceOrderResponse(
        message='Orders placed successfully',
        orders=[OrderResponse.model_validate(order) for order in orders],
    )


@customer_router.get('', response_model=List[OrderDetailResponse])
@Logger.io
async def list_my_orders(
    current_user: CurrentUserInfo = Depends(require_customer),
    use_case: ListOrdersUseCase = Depends(ListOrdersUseCase.depends),
) -> List[OrderDetailResponse]:
    return _to_details(await use_case.list_for_customer(current_user.user_id))


@customer_router.get('/{order_id}', response_model=OrderDetailResponse)
@Logger.io
async def get_my_order(
    order_id: int,
    current_user: CurrentUserInfo = Depends(require_customer),
    use_case: GetOrderUseCase = Depends(GetOrderUseCase.depends),
) -> OrderDetailResponse:
    return OrderDetailResponse(**await use_case.get(order_id, viewer=current_user))


# === Seller ===


@seller_router.get('', response_model=List[OrderDetailResponse])
@Logger.io
async def list_seller_orders(
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: ListOrdersUseCase = Depends(ListOrdersUseCase.depends),
) -> List[OrderDetailResponse]:
    return _to_details(await use_case.list_for_seller(current_user.user_id))


@seller_router.put('/{order_id}/ready', response_model=OrderResponse)
@Logger.io
async def mark_order_ready(
    order_id: int,
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: FulfillmentUseCase = Depends(FulfillmentUseCase.depends),
) -> OrderResponse:
    order = await use_case.mark_ready(order_id=order_id, seller_id=current_user.user_id)
    return OrderResponse.model_validate(order)


# === Admin ===


@admin_router.get('', response_model=List[OrderDetailResponse])
@Logger.io
async def list_all_orders(
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: ListOrdersUseCase = Depends(ListOrdersUseCase.depends),
) -> List[OrderDetailResponse]:
    return _to_details(await use_case.list_all())


@admin_router.get('/status/{order_status}', response_model=List[OrderDetailResponse])
@Logger.io
async def list_orders_by_status(
    order_status: str,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: ListOrdersUseCase = Depends(ListOrdersUseCase.depends),
) -> List[OrderDetailResponse]:
    return _to_details(await use_case.list_all(parse_order_status(order_status)))


@admin_router.put('/{order_id}/tracking', response_model=OrderResponse)
@Logger.io
async def add_tracking(
    order_id: int,
    request: TrackingRequest,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: FulfillmentUseCase = Depends(FulfillmentUseCase.depends),
) -> OrderResponse:
    order = await use_case.add_tracking(order_id=order_id, tracking_number=request.tracking_number)
    return OrderResponse.model_validate(order)
