"""
SQLAlchemy User and CartItem models
"""
from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from growcery.database import Base


class Role(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


class User(Base):
    """User account model"""
    
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default=Role.CUSTOMER.value)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    cart_items = relationship(
        "CartItem",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="CartItem.id"
    )
    
    __table_args__ = (
        CheckConstraint("role IN ('customer', 'admin')", name='check_role_valid'),
    )
    
    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"


class CartItem(Base):
    """
    One cart line, keyed by (user_id, product_id)
    
    The product reference is weak: deleting a product leaves the line in
    place and it resolves to no product.
    """
    
    __tablename__ = "cart_items"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    
    user = relationship("User", back_populates="cart_items")
    product = relationship(
        "Product",
        primaryjoin="foreign(CartItem.product_id) == Product.id",
        viewonly=True,
        lazy="joined"
    )
    
    __table_args__ = (
        UniqueConstraint('user_id', 'product_id', name='uq_cart_user_product'),
        CheckConstraint('quantity >= 1', name='check_cart_quantity_positive'),
    )
    
    def __repr__(self):
        return f"<CartItem(user_id={self.user_id}, product_id={self.product_id}, quantity={self.quantity})>"
