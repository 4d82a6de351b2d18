"""
Product catalog endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from growcery.api.deps import require_admin
from growcery.database import get_db
from growcery.schemas.auth import Identity
from growcery.services.product_service import ProductService
from growcery.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductEnvelope,
    ProductListResponse
)

router = APIRouter(tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(db)


@router.get("/products", response_model=ProductListResponse, summary="Get all products")
def get_products(
    skip: int = Query(0, ge=0, description="Number of products to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of products to return"),
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve all products with pagination
    
    - **skip**: Number of products to skip (default: 0)
    - **limit**: Maximum number of products to return (default: 100, max: 1000)
    """
    return service.get_all_products(skip=skip, limit=limit)


@router.get("/product/{product_id}", response_model=ProductEnvelope, summary="Get product by ID")
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve a specific product by ID
    
    - **product_id**: Product ID
    """
    product = service.get_product_by_id(product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return ProductEnvelope(product=product)


@router.post("/create-product", response_model=ProductEnvelope, status_code=status.HTTP_201_CREATED, summary="Create product")
def create_product(
    product_data: ProductCreate,
    admin: Identity = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product (admin only)
    
    - **name**: Product name (required)
    - **description**: Product description (optional)
    - **product_type**: 1 = Crop, 2 = Poultry (required)
    - **quantity**: Quantity on hand (required, non-negative)
    - **price**: Unit price (required, non-negative)
    - **image_url**: Product image URL (optional)
    """
    product = service.create_product(product_data)
    return ProductEnvelope(message="Product created successfully", product=product)


@router.put("/products/{product_id}", response_model=ProductEnvelope, summary="Update product")
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    admin: Identity = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """
    Update an existing product (admin only)
    
    All fields are optional. Only provided fields will be updated.
    """
    product = service.update_product(product_id, product_data)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return ProductEnvelope(message="Product updated successfully", product=product)


@router.delete("/delete-product/{product_id}", response_model=ProductEnvelope, summary="Delete product")
def delete_product(
    product_id: int,
    admin: Identity = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """
    Delete a product (admin only)
    
    Orders and carts referencing it are left in place.
    """
    product = service.delete_product(product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return ProductEnvelope(message="Product deleted successfully", product=product)
