from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends

from marketplace.account.use_case.role_auth_service import require_customer
from marketplace.cart.domain.cart_entity import CartItem
from marketplace.cart.port.cart_schema import (
    CartItemResponse,
    CartProductInfo,
    CartResponse,
    CartUpdateRequest,
)
from marketplace.cart.use_case.cart_use_case import GetCartUseCase, UpdateCartUseCase
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.logging.loguru_io import Logger
from marketplace.product.domain.product_entity import Product


router = APIRouter()

UNAVAILABLE_PRODUCT = CartProductInfo(name='Product not available', price=0)


def _to_cart_response(lines: List[Tuple[CartItem, Optional[Product]]]) -> CartResponse:
    items = []
    for item, product in lines:
        product_info = (
            CartProductInfo(
                id=product.id,
                name=product.name,
                price=product.price,
                image=product.image,
                quantity=product.quantity,
                status=product.status,
            )
            if product
            else UNAVAILABLE_PRODUCT
        )
        items.append(
            CartItemResponse(
                product_id=item.product_id,
                quantity=item.quantity,
                message=item.message,
                product=product_info,
            )
        )
    return CartResponse(items=items)


@router.get('', response_model=CartResponse)
@Logger.io
async def get_cart(
    current_user: CurrentUserInfo = Depends(require_customer),
    use_case: GetCartUseCase = Depends(GetCartUseCase.depends),
) -> CartResponse:
    return _to_cart_response(await use_case.get(current_user.user_id))


@router.post('', response_model=CartResponse)
@Logger.io
async def update_cart(
    request: CartUpdateRequest,
    current_user: CurrentUserInfo = Depends(require_customer),
    update_use_case: UpdateCartUseCase = Depends(UpdateCartUseCase.depends),
    get_use_case: GetCartUseCase = Depends(GetCartUseCase.depends),
) -> CartResponse:
    await update_use_case.replace(
        current_user.user_id,
        [
            CartItem(product_id=item.product_id, quantity=item.quantity, message=item.message)
            for item in request.items
        ],
    )
    return _to_cart_response(await get_use_case.get(current_user.user_id))
