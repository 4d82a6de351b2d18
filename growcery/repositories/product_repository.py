"""
Product Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session

from growcery.models.product import Product
from growcery.schemas.product import ProductCreate, ProductUpdate


class ProductRepository:
    """Repository for Product CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Product]:
        """Get all products with pagination"""
        return self.db.query(Product).order_by(Product.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def create(self, product_data: ProductCreate) -> Product:
        """Create new product"""
        product = Product(**product_data.model_dump())
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def update(self, product_id: int, product_data: ProductUpdate) -> Optional[Product]:
        """Update existing product"""
        product = self.get_by_id(product_id)
        if not product:
            return None
        
        # Update only provided fields
        update_data = product_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def delete(self, product_id: int) -> bool:
        """Delete product"""
        product = self.get_by_id(product_id)
        if not product:
            return False
        
        self.db.delete(product)
        self.db.commit()
        return True
    
    def reserve_stock(self, product_id: int, quantity: int) -> bool:
        """
        Move quantity from on-hand to sold in a single conditional UPDATE
        
        Does not commit; the caller owns the transaction.
        
        Returns:
            False if the product is gone or has less than quantity on hand
        """
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id, Product.quantity >= quantity)
            .values(
                quantity=Product.quantity - quantity,
                quantity_sold=Product.quantity_sold + quantity
            )
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount == 1
    
    def release_stock(self, product_id: int, quantity: int) -> bool:
        """
        Move quantity from sold back to on-hand (reverse of reserve_stock)
        
        Does not commit; the caller owns the transaction.
        
        Returns:
            False if the product no longer exists
        """
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(
                quantity=Product.quantity + quantity,
                quantity_sold=Product.quantity_sold - quantity
            )
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount == 1
    
    def count(self) -> int:
        """Get total count of products"""
        return self.db.query(Product).count()
