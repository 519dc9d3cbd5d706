from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from marketplace.order.domain.order_entity import OrderStatus


class PlaceOrderRequest(BaseModel):
    address: str = Field(..., max_length=500)

    class Config:
        json_schema_extra = {'example': {'address': '12 MG Road, Pune 411001'}}


class TrackingRequest(BaseModel):
    tracking_number: str = Field(..., max_length=100)

    class Config:
        json_schema_extra = {'example': {'tracking_number': 'DTDC-88213412'}}


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    seller_id: int
    customer_id: int
    customer_name: str
    address: str
    quantity: int
    total_price: Decimal
    customer_message: Optional[str] = None
    tracking_number: Optional[str] = None
    status: OrderStatus
    created_at: Optional[datetime] = None


class OrderDetailResponse(OrderResponse):
    product_name: str
    product_image: Optional[str] = None
    seller_business_name: str
    customer_email: Optional[str] = None


class PlaceOrderResponse(BaseModel):
    message: str
    orders: List[OrderResponse]
