"""
Schemas package
"""
from growcery.schemas.common import MessageResponse, ErrorResponse
from growcery.schemas.auth import Identity, SignupRequest, LoginRequest, TokenResponse
from growcery.schemas.product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductEnvelope,
    ProductListResponse
)
from growcery.schemas.user import UserResponse, UserListResponse
from growcery.schemas.cart import CartAddRequest, CartUpdateRequest, CartLineResponse, CartResponse
from growcery.schemas.order import (
    OrderItemResponse,
    OrderOwner,
    OrderResponse,
    OrderEnvelope,
    OrderListResponse,
    OrderStatusUpdate
)

__all__ = [
    "MessageResponse",
    "ErrorResponse",
    "Identity",
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductEnvelope",
    "ProductListResponse",
    "UserResponse",
    "UserListResponse",
    "CartAddRequest",
    "CartUpdateRequest",
    "CartLineResponse",
    "CartResponse",
    "OrderItemResponse",
    "OrderOwner",
    "OrderResponse",
    "OrderEnvelope",
    "OrderListResponse",
    "OrderStatusUpdate"
]
