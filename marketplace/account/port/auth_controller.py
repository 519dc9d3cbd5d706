"""
Authentication Controller - register and login per account role
"""

from fastapi import APIRouter, Depends, status
from pydantic import SecretStr

from marketplace.account.domain.account_entity import AccountRole
from marketplace.account.port.account_schema import (
    AdminAuthResponse,
    AdminRegisterRequest,
    AdminResponse,
    CustomerAuthResponse,
    CustomerRegisterRequest,
    CustomerResponse,
    LoginRequest,
    SellerAuthResponse,
    SellerRegisteredResponse,
    SellerRegisterRequest,
    SellerResponse,
)
from marketplace.account.use_case.auth_use_case import LoginUseCase, RegisterUseCase, issue_token
from marketplace.account.use_case.role_auth_service import require_admin
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.logging.loguru_io import Logger


router = APIRouter()


@router.post(
    '/customer/register', response_model=CustomerAuthResponse, status_code=status.HTTP_201_CREATED
)
@Logger.io
async def register_customer(
    request: CustomerRegisterRequest,
    use_case: RegisterUseCase = Depends(RegisterUseCase.depends),
) -> CustomerAuthResponse:
    customer = await use_case.register_customer(
        email=request.email,
        password=SecretStr(request.password),
        name=request.name,
        address=request.address,
    )
    return CustomerAuthResponse(
        token=issue_token(customer, AccountRole.CUSTOMER),
        user=CustomerResponse.model_validate(customer),
    )


@router.post(
    '/seller/register', response_model=SellerRegisteredResponse, status_code=status.HTTP_201_CREATED
)
@Logger.io
async def register_seller(
    request: SellerRegisterRequest,
    use_case: RegisterUseCase = Depends(RegisterUseCase.depends),
) -> SellerRegisteredResponse:
    seller = await use_case.register_seller(
        email=request.email,
        password=SecretStr(request.password),
        business_name=request.business_name,
        warehouse_address=request.warehouse_address,
        business_address=request.business_address,
        zip_code=request.zip_code,
        phone=request.phone,
        gst=request.gst,
    )
    return SellerRegisteredResponse(
        message='Registration successful. Your account is pending approval.',
        user=SellerResponse.model_validate(seller),
    )


@router.post('/admin/register', response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_admin(
    request: AdminRegisterRequest,
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: RegisterUseCase = Depends(RegisterUseCase.depends),
) -> AdminResponse:
    admin = await use_case.register_admin(
        email=request.email, password=SecretStr(request.password), name=request.name
    )
    return AdminResponse.model_validate(admin)


@router.post('/admin/login', response_model=AdminAuthResponse)
@Logger.io
async def login_admin(
    request: LoginRequest, use_case: LoginUseCase = Depends(LoginUseCase.depends)
) -> AdminAuthResponse:
    admin, token = await use_case.login(
        role=AccountRole.ADMIN, email=request.email, password=SecretStr(request.password)
    )
    return AdminAuthResponse(token=token, user=AdminResponse.model_validate(admin))


@router.post('/seller/login', response_model=SellerAuthResponse)
@Logger.io
async def login_seller(
    request: LoginRequest, use_case: LoginUseCase = Depends(LoginUseCase.depends)
) -> SellerAuthResponse:
    seller, token = await use_case.login(
        role=AccountRole.SELLER, email=request.email, password=SecretStr(request.password)
    )
    return SellerAuthResponse(token=token, user=SellerResponse.model_validate(seller))


@router.post('/customer/login', response_model=CustomerAuthResponse)
@Logger.io
async def login_customer(
    request: LoginRequest, use_case: LoginUseCase = Depends(LoginUseCase.depends)
) -> CustomerAuthResponse:
    customer, token = await use_case.login(
        role=AccountRole.CUSTOMER, email=request.email, password=SecretStr(request.password)
    )
    return CustomerAuthResponse(token=token, user=CustomerResponse.model_validate(customer))
