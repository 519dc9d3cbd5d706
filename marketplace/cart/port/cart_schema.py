from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from marketplace.product.domain.product_entity import ProductStatus


class CartItemRequest(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0)
    message: Optional[str] = Field(None, max_length=1000)


class CartUpdateRequest(BaseModel):
    items: List[CartItemRequest]

    class Config:
        json_schema_extra = {
            'example': {'items': [{'product_id': 7, 'quantity': 2, 'message': 'Gift wrap please'}]}
        }


class CartProductInfo(BaseModel):
    id: Optional[int] = None
    name: str
    price: Decimal
    image: Optional[str] = None
    quantity: int = 0
    status: Optional[ProductStatus] = None


class CartItemResponse(BaseModel):
    product_id: int
    quantity: int
    message: Optional[str] = None
    product: CartProductInfo


class CartResponse(BaseModel):
    items: List[CartItemResponse]
