"""
Services package
"""
from growcery.services.auth_service import AuthService
from growcery.services.product_service import ProductService
from growcery.services.user_service import UserService
from growcery.services.cart_service import CartService
from growcery.services.order_service import OrderService

__all__ = ["AuthService", "ProductService", "UserService", "CartService", "OrderService"]
