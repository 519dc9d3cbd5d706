from fastapi import APIRouter, Depends
from pydantic import SecretStr

from marketplace.account.port.account_schema import (
    CustomerProfileUpdateRequest,
    CustomerResponse,
    SellerProfileUpdateRequest,
    SellerResponse,
)
from marketplace.account.use_case.profile_use_case import (
    CustomerProfileUseCase,
    SellerProfileUseCase,
)
from marketplace.account.use_case.role_auth_service import require_customer, require_seller
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.logging.loguru_io import Logger


seller_router = APIRouter()
customer_router = APIRouter()


def _secret(value):
    return SecretStr(value) if value is not None else None


@seller_router.get('/profile', response_model=SellerResponse)
@Logger.io
async def get_seller_profile(
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: SellerProfileUseCase = Depends(SellerProfileUseCase.depends),
) -> SellerResponse:
    seller = await use_case.get(current_user.user_id)
    return SellerResponse.model_validate(seller)


@seller_router.put('/profile', response_model=SellerResponse)
@Logger.io
async def update_seller_profile(
    request: SellerProfileUpdateRequest,
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: SellerProfileUseCase = Depends(SellerProfileUseCase.depends),
) -> SellerResponse:
    seller = await use_case.update(
        current_user.user_id,
        warehouse_address=request.warehouse_address,
        business_address=request.business_address,
        zip_code=request.zip_code,
        phone=request.phone,
        gst=request.gst,
        current_password=_secret(request.current_password),
        new_password=_secret(request.new_password),
    )
    return SellerResponse.model_validate(seller)


@customer_router.get('/profile', response_model=CustomerResponse)
@Logger.io
async def get_customer_profile(
    current_user: CurrentUserInfo = Depends(require_customer),
    use_case: CustomerProfileUseCase = Depends(CustomerProfileUseCase.depends),
) -> CustomerResponse:
    customer = await use_case.get(current_user.user_id)
    return CustomerResponse.model_validate(customer)


@customer_router.put('/profile', response_model=CustomerResponse)
@Logger.io
async def update_customer_profile(
    request: CustomerProfileUpdateRequest,
    current_user: CurrentUserInfo = Depends(require_customer),
    use_case: CustomerProfileUseCase = Depends(CustomerProfileUseCase.depends),
) -> CustomerResponse:
    customer = await use_case.update(
        current_user.user_id,
        name=request.name,
        address=request.address,
        current_password=_secret(request.current_password),
        new_password=_secret(request.new_password),
    )
    return CustomerResponse.model_validate(customer)
