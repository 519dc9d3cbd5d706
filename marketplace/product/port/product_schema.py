from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from marketplace.product.domain.product_entity import ProductStatus


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    quantity: int = Field(0, ge=0)
    image: Optional[str] = Field(None, max_length=1000, description='Image URL')

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Kashmiri Saffron 2g',
                'description': 'Grade A1 saffron threads',
                'category': 'spices',
                'price': '499.00',
                'quantity': 25,
                'image': 'https://cdn.example.com/saffron.jpg',
            }
        }


class ProductUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    quantity: Optional[int] = Field(None, ge=0)
    image: Optional[str] = Field(None, max_length=1000)

    class Config:
        json_schema_extra = {'example': {'price': '549.00', 'quantity': 30}}


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    seller_id: int
    name: str
    description: str
    category: str
    price: Decimal
    quantity: int
    image: Optional[str] = None
    status: ProductStatus
    created_at: Optional[datetime] = None


class ProductSellerInfo(BaseModel):
    id: int
    business_name: Optional[str] = None


class ProductDetailResponse(ProductResponse):
    seller: ProductSellerInfo
