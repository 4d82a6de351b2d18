"""
Product Service - Catalog business logic
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from growcery.repositories.product_repository import ProductRepository
from growcery.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse
)

logger = logging.getLogger(__name__)


class ProductService:
    """Service layer for product business logic"""
    
    def __init__(self, db: Session):
        self.repository = ProductRepository(db)
    
    def get_all_products(self, skip: int = 0, limit: int = 100) -> ProductListResponse:
        """Get all products with pagination"""
        products = self.repository.get_all(skip=skip, limit=limit)
        total = self.repository.count()
        
        return ProductListResponse(
            products=[ProductResponse.model_validate(p) for p in products],
            total=total
        )
    
    def get_product_by_id(self, product_id: int) -> Optional[ProductResponse]:
        """Get product by ID"""
        product = self.repository.get_by_id(product_id)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create new product"""
        product = self.repository.create(product_data)
        logger.info("Product %s created: %s (stock %d)", product.id, product.name, product.quantity)
        return ProductResponse.model_validate(product)
    
    def update_product(self, product_id: int, product_data: ProductUpdate) -> Optional[ProductResponse]:
        """Update existing product"""
        product = self.repository.update(product_id, product_data)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    def delete_product(self, product_id: int) -> Optional[ProductResponse]:
        """Delete product, returns the deleted product or None if it did not exist"""
        product = self.repository.get_by_id(product_id)
        if not product:
            return None
        deleted = ProductResponse.model_validate(product)
        self.repository.delete(product_id)
        logger.info("Product %s deleted", product_id)
        return deleted
