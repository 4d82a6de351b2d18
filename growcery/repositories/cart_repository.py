"""
Cart Repository - Data Access Layer

Cart lines live in their own table keyed by (user_id, product_id).
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from growcery.models.user import CartItem


class CartRepository:
    """Repository for cart lines"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_items(self, user_id: int) -> List[CartItem]:
        """Get a user's cart lines with products resolved"""
        return self.db.query(CartItem).filter(
            CartItem.user_id == user_id
        ).order_by(CartItem.id).all()
    
    def get_item(self, user_id: int, product_id: int) -> Optional[CartItem]:
        return self.db.query(CartItem).filter(
            CartItem.user_id == user_id,
            CartItem.product_id == product_id
        ).first()
    
    def add(self, user_id: int, product_id: int, quantity: int) -> CartItem:
        """Insert a new cart line"""
        item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item
    
    def set_quantity(self, item: CartItem, quantity: int) -> CartItem:
        """Overwrite the quantity of an existing line"""
        item.quantity = quantity
        self.db.commit()
        self.db.refresh(item)
        return item
    
    def remove(self, user_id: int, product_id: int) -> int:
        """Remove one line if present, returns number of rows deleted"""
        deleted = self.db.query(CartItem).filter(
            CartItem.user_id == user_id,
            CartItem.product_id == product_id
        ).delete(synchronize_session="evaluate")
        self.db.commit()
        return deleted
    
    def delete_all(self, user_id: int) -> int:
        """Delete every line of a cart without committing"""
        return self.db.query(CartItem).filter(
            CartItem.user_id == user_id
        ).delete(synchronize_session="evaluate")
    
    def clear(self, user_id: int) -> int:
        deleted = self.delete_all(user_id)
        self.db.commit()
        return deleted
