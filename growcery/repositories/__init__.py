"""
Repositories package
"""
from growcery.repositories.product_repository import ProductRepository
from growcery.repositories.user_repository import UserRepository
from growcery.repositories.cart_repository import CartRepository
from growcery.repositories.order_repository import OrderRepository

__all__ = ["ProductRepository", "UserRepository", "CartRepository", "OrderRepository"]
