"""
Pydantic schemas for the shopping cart
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

from growcery.schemas.product import ProductResponse


class CartAddRequest(BaseModel):
    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(1, gt=0, description="Quantity to add")


class CartUpdateRequest(BaseModel):
    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(..., description="New quantity, at least 1")


class CartLineResponse(BaseModel):
    """Cart line with its product resolved (None if the product was deleted)"""
    product_id: int
    quantity: int
    product: Optional[ProductResponse] = None
    
    model_config = ConfigDict(from_attributes=True)


class CartResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    cart: list[CartLineResponse]
