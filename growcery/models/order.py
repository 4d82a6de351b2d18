"""
SQLAlchemy Order and OrderItem models
"""
from datetime import datetime, timezone
from enum import IntEnum

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from growcery.database import Base


class OrderStatus(IntEnum):
    PENDING = 0
    APPROVED = 1
    COMPLETED = 2
    CANCELED = 3


# Status changes an admin may request. Re-asserting the current status is
# always accepted and never touches stock.
ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.APPROVED, OrderStatus.CANCELED},
    OrderStatus.APPROVED: {OrderStatus.PENDING, OrderStatus.COMPLETED, OrderStatus.CANCELED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELED: set(),
}


TIME_OF_DAY_FORMAT = "%I:%M:%S %p"


def _time_of_day() -> str:
    return datetime.now(timezone.utc).strftime(TIME_OF_DAY_FORMAT)


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    total_amount = Column(Float, nullable=False)
    status = Column(Integer, nullable=False, default=OrderStatus.PENDING.value, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    time = Column(String(20), nullable=False, default=_time_of_day)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy="selectin"
    )
    user = relationship(
        "User",
        primaryjoin="foreign(Order.user_id) == User.id",
        viewonly=True
    )
    
    __table_args__ = (
        CheckConstraint('total_amount >= 0', name='check_total_non_negative'),
        CheckConstraint('status IN (0, 1, 2, 3)', name='check_status_valid'),
    )
    
    def __repr__(self):
        return f"<Order(id={self.id}, user_id={self.user_id}, total={self.total_amount}, status={self.status})>"


class OrderItem(Base):
    """Order line with the unit price captured at checkout"""
    
    __tablename__ = "order_items"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    
    order = relationship("Order", back_populates="items")
    product = relationship(
        "Product",
        primaryjoin="foreign(OrderItem.product_id) == Product.id",
        viewonly=True,
        lazy="joined"
    )
    
    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_item_quantity_positive'),
        CheckConstraint('unit_price >= 0', name='check_unit_price_non_negative'),
    )
    
    def __repr__(self):
        return f"<OrderItem(order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity})>"
