"""
Pydantic schemas for product request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from growcery.models.product import ProductType


class ProductBase(BaseModel):
    """Base Product schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    product_type: ProductType = Field(..., description="1 = Crop, 2 = Poultry")
    quantity: int = Field(..., ge=0, description="Quantity on hand")
    price: float = Field(..., ge=0, description="Unit price")
    image_url: Optional[str] = Field(None, max_length=500, description="Product image URL")


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    pass


class ProductUpdate(BaseModel):
    """Schema for updating a product (all fields optional)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    product_type: Optional[ProductType] = None
    quantity: Optional[int] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=500)
    
    @field_validator("name", "product_type", "quantity", "price")
    @classmethod
    def not_null(cls, value):
        # Omit a field to leave it unchanged; null is not a value for these columns
        if value is None:
            raise ValueError("may not be null")
        return value


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: int
    quantity_sold: int
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class ProductEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    product: ProductResponse


class ProductListResponse(BaseModel):
    """Schema for list of products response"""
    success: bool = True
    products: list[ProductResponse]
    total: int
