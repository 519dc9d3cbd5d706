from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class AdminStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_sellers: int
    pending_products: int
    ready_orders: int
    total_revenue: Decimal


class SellerStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_products: int
    pending_approvals: int
    new_orders: int
    total_revenue: Decimal
