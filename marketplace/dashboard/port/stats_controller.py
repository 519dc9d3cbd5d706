from fastapi import APIRouter, Depends

from marketplace.account.use_case.role_auth_service import require_admin, require_seller
from marketplace.dashboard.port.stats_schema import AdminStatsResponse, SellerStatsResponse
from marketplace.dashboard.use_case.stats_use_case import StatsUseCase
from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.logging.loguru_io import Logger


admin_router = APIRouter()
seller_router = APIRouter()


@admin_router.get('', response_model=AdminStatsResponse)
@Logger.io
async def get_admin_stats(
    current_user: CurrentUserInfo = Depends(require_admin),
    use_case: StatsUseCase = Depends(StatsUseCase.depends),
) -> AdminStatsResponse:
    return AdminStatsResponse.model_validate(await use_case.admin_stats())


@seller_router.get('', response_model=SellerStatsResponse)
@Logger.io
async def get_seller_stats(
    current_user: CurrentUserInfo = Depends(require_seller),
    use_case: StatsUseCase = Depends(StatsUseCase.depends),
) -> SellerStatsResponse:
    return SellerStatsResponse.model_validate(await use_case.seller_stats(current_user.user_id))
