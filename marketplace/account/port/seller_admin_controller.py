"""Admin-side seller management."""

from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import SecretStr

from marketplace.account.port.account_schema import (
    SellerAdminUpdateRequest,
    SellerRegisterRequest,
    SellerResponse,
)
from marketplace.account.use_case.auth_use_case import RegisterUseCase
from marketplace.account.use_case.role_auth_service import require_admin
from marketplace.account.use_case.seller_management_use_case import SellerManagementUseCase
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.logging.loguru_io import Logger


router = APIRouter()


@router.get('', response_model=List[SellerResponse])
@Logger.io
async def list_sellers(
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: SellerManagementUseCase = Depends(SellerManagementUseCase.depends),
) -> List[SellerResponse]:
    sellers = await use_case.list_all()
    return [SellerResponse.model_validate(seller) for seller in sellers]


@router.post('', response_model=SellerResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_seller(
    request: SellerRegisterRequest,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: RegisterUseCase = Depends(RegisterUseCase.depends),
) -> SellerResponse:
    seller = await use_case.register_seller(
        email=request.email,
        password=SecretStr(request.password),
        business_name=request.business_name,
        warehouse_address=request.warehouse_address,
        business_address=request.business_address,
        zip_code=request.zip_code,
        phone=request.phone,
        gst=request.gst,
        admin_id=current_user.user_id,
    )
    return SellerResponse.model_validate(seller)


@router.get('/{seller_id}', response_model=SellerResponse)
@Logger.io
async def get_seller(
    seller_id: int,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: SellerManagementUseCase = Depends(SellerManagementUseCase.depends),
) -> SellerResponse:
    return SellerResponse.model_validate(await use_case.get(seller_id))


@router.put('/{seller_id}', response_model=SellerResponse)
@Logger.io
async def update_seller(
    seller_id: int,
    request: SellerAdminUpdateRequest,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: SellerManagementUseCase = Depends(SellerManagementUseCase.depends),
) -> SellerResponse:
    seller = await use_case.update(
        seller_id,
        email=request.email,
        business_name=request.business_name,
        warehouse_address=request.warehouse_address,
        business_address=request.business_address,
        zip_code=request.zip_code,
        phone=request.phone,
        gst=request.gst,
        password=SecretStr(request.password) if request.password else None,
    )
    return SellerResponse.model_validate(seller)


@router.put('/{seller_id}/approve', response_model=SellerResponse)
@Logger.io
async def approve_seller(
    seller_id: int,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: SellerManagementUseCase = Depends(SellerManagementUseCase.depends),
) -> SellerResponse:
    return SellerResponse.model_validate(await use_case.approve(seller_id))


@router.put('/{seller_id}/reject', response_model=SellerResponse)
@Logger.io
async def reject_seller(
    seller_id: int,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: SellerManagementUseCase = Depends(SellerManagementUseCase.depends),
) -> SellerResponse:
    return SellerResponse.model_validate(await use_case.reject(seller_id))


@router.delete('/{seller_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_seller(
    seller_id: int,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: SellerManagementUseCase = Depends(SellerManagementUseCase.depends),
) -> None:
    await use_case.delete(seller_id)
