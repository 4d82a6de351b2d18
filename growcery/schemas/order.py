"""
Pydantic schemas for order request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

from growcery.models.order import OrderStatus
from growcery.schemas.product import ProductResponse


class OrderItemResponse(BaseModel):
    """Order line with captured unit price"""
    product_id: int
    quantity: int
    unit_price: float
    product: Optional[ProductResponse] = None
    
    model_config = ConfigDict(from_attributes=True)


class OrderOwner(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    
    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """Schema for order response"""
    id: int
    user_id: int
    items: list[OrderItemResponse]
    total_amount: float
    status: OrderStatus
    created_at: datetime
    time: str
    updated_at: datetime
    user: Optional[OrderOwner] = None
    
    model_config = ConfigDict(from_attributes=True)


class OrderEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    order: OrderResponse


class OrderListResponse(BaseModel):
    """Schema for list of orders response"""
    success: bool = True
    orders: list[OrderResponse]
    total: int


class OrderStatusUpdate(BaseModel):
    """Schema for updating order status"""
    status: OrderStatus = Field(
        ...,
        description="0 = Pending, 1 = Approved, 2 = Completed, 3 = Canceled"
    )
