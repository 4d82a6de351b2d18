"""
Models package
"""
from growcery.models.product import Product, ProductType
from growcery.models.user import User, CartItem, Role
from growcery.models.order import Order, OrderItem, OrderStatus, ALLOWED_TRANSITIONS

__all__ = [
    "Product",
    "ProductType",
    "User",
    "CartItem",
    "Role",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ALLOWED_TRANSITIONS"
]
