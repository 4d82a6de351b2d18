"""
Order Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc

from growcery.models.order import Order, OrderStatus


class OrderRepository:
    """
    Repository for Order operations
    
    Writes only flush; OrderService commits them together with the stock
    and cart changes they belong to.
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Order]:
        """Get all orders, newest first"""
        return self.db.query(Order).order_by(
            desc(Order.created_at), desc(Order.id)
        ).offset(skip).limit(limit).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def get_by_user(self, user_id: int) -> List[Order]:
        """Get orders placed by a user, newest first"""
        return self.db.query(Order).filter(
            Order.user_id == user_id
        ).order_by(desc(Order.created_at), desc(Order.id)).all()
    
    def add(self, order: Order) -> Order:
        """Stage a new order with its line items"""
        self.db.add(order)
        self.db.flush()
        return order
    
    def set_status(self, order: Order, new_status: OrderStatus) -> Order:
        order.status = int(new_status)
        self.db.flush()
        return order
    
    def count(self) -> int:
        """Get total count of orders"""
        return self.db.query(Order).count()
