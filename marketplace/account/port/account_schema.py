"""
Account API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from marketplace.account.domain.account_entity import SellerStatus


PASSWORD_FIELD = Field(..., min_length=6, max_length=72, description='Plain password')

# bcrypt works on at most 72 bytes of input
PASSWORD_MAX_BYTES = 72


def check_password_bytes(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value.encode('utf-8')) > PASSWORD_MAX_BYTES:
        raise PydanticCustomError('password_too_long', 'Password cannot be longer than 72 bytes')
    return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator('password')
    @classmethod
    def validate_password_bytes(cls, v):
        return check_password_bytes(v)

    class Config:
        json_schema_extra = {'example': {'email': 'buyer@example.com', 'password': 'P@ssw0rd'}}


class CustomerRegisterRequest(BaseModel):
    email: EmailStr
    password: str = PASSWORD_FIELD
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=500)

    @field_validator('password')
    @classmethod
    def validate_password_bytes(cls, v):
        return check_password_bytes(v)

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'buyer@example.com',
                'password': 'P@ssw0rd',
                'name': 'Asha Buyer',
                'address': '12 MG Road, Pune',
            }
        }


class SellerRegisterRequest(BaseModel):
    email: EmailStr
    password: str = PASSWORD_FIELD
    business_name: str = Field(..., min_length=1, max_length=255)
    warehouse_address: Optional[str] = Field(None, max_length=500)
    business_address: Optional[str] = Field(None, max_length=500)
    zip_code: Optional[str] = Field(None, max_length=20)
    phone: Optional[str] = Field(None, max_length=50)
    gst: Optional[str] = Field(None, max_length=50)

    @field_validator('password')
    @classmethod
    def validate_password_bytes(cls, v):
        return check_password_bytes(v)

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'spices@example.com',
                'password': 'P@ssw0rd',
                'business_name': 'Kerala Spice Co.',
                'warehouse_address': 'Plot 4, Kochi',
                'business_address': 'MG Road, Kochi',
                'zip_code': '682001',
                'phone': '+91-9876543210',
                'gst': '32ABCDE1234F1Z5',
            }
        }


class AdminRegisterRequest(BaseModel):
    email: EmailStr
    password: str = PASSWORD_FIELD
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator('password')
    @classmethod
    def validate_password_bytes(cls, v):
        return check_password_bytes(v)


class PasswordChangeMixin(BaseModel):
    current_password: Optional[str] = Field(None, max_length=72)
    new_password: Optional[str] = Field(None, min_length=6, max_length=72)

    @field_validator('current_password', 'new_password')
    @classmethod
    def validate_password_bytes(cls, v):
        return check_password_bytes(v)


class SellerProfileUpdateRequest(PasswordChangeMixin):
    """Business name and email are fixed once the seller is registered."""

    model_config = ConfigDict(extra='forbid')

    warehouse_address: Optional[str] = Field(None, max_length=500)
    business_address: Optional[str] = Field(None, max_length=500)
    zip_code: Optional[str] = Field(None, max_length=20)
    phone: Optional[str] = Field(None, max_length=50)
    gst: Optional[str] = Field(None, max_length=50)

    @model_validator(mode='before')
    @classmethod
    def reject_immutable_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and ({'business_name', 'email'} & data.keys()):
            raise PydanticCustomError(
                'immutable_field', 'Business name and email cannot be changed'
            )
        return data


class CustomerProfileUpdateRequest(PasswordChangeMixin):
    model_config = ConfigDict(extra='forbid')

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, max_length=500)


class SellerAdminUpdateRequest(BaseModel):
    """Admin edit of any seller field; a new password is stored re-hashed."""

    model_config = ConfigDict(extra='forbid')

    email: Optional[EmailStr] = None
    business_name: Optional[str] = Field(None, min_length=1, max_length=255)
    warehouse_address: Optional[str] = Field(None, max_length=500)
    business_address: Optional[str] = Field(None, max_length=500)
    zip_code: Optional[str] = Field(None, max_length=20)
    phone: Optional[str] = Field(None, max_length=50)
    gst: Optional[str] = Field(None, max_length=50)
    password: Optional[str] = Field(None, min_length=6, max_length=72)

    @field_validator('password')
    @classmethod
    def validate_password_bytes(cls, v):
        return check_password_bytes(v)


class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    created_at: Optional[datetime] = None


class SellerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    business_name: str
    warehouse_address: Optional[str] = None
    business_address: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    gst: Optional[str] = None
    admin_id: Optional[int] = None
    approved: bool
    rejected: bool
    status: SellerStatus
    created_at: Optional[datetime] = None


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    address: Optional[str] = None
    created_at: Optional[datetime] = None


class AdminAuthResponse(BaseModel):
    token: str
    user: AdminResponse


class SellerAuthResponse(BaseModel):
    token: str
    user: SellerResponse


class CustomerAuthResponse(BaseModel):
    token: str
    user: CustomerResponse


class SellerRegisteredResponse(BaseModel):
    message: str
    user: SellerResponse
