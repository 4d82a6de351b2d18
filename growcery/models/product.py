"""
SQLAlchemy Product model
"""
from enum import IntEnum

from sqlalchemy import Column, Integer, String, Float, DateTime, Text, CheckConstraint
from sqlalchemy.sql import func
from growcery.database import Base


class ProductType(IntEnum):
    CROP = 1
    POULTRY = 2


class Product(Base):
    """Product database model"""
    
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    product_type = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)  # on hand
    quantity_sold = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
        CheckConstraint('quantity >= 0', name='check_quantity_non_negative'),
        CheckConstraint('quantity_sold >= 0', name='check_quantity_sold_non_negative'),
        CheckConstraint('product_type IN (1, 2)', name='check_product_type_valid'),
    )
    
    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', quantity={self.quantity}, sold={self.quantity_sold})>"
