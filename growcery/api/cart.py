"""
Shopping cart endpoints (customers only)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from growcery.api.deps import require_customer
from growcery.database import get_db
from growcery.schemas.auth import Identity
from growcery.schemas.cart import CartAddRequest, CartUpdateRequest, CartResponse
from growcery.schemas.common import MessageResponse
from growcery.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_cart_service(db: Session = Depends(get_db)) -> CartService:
    """Dependency to get CartService instance"""
    return CartService(db)


@router.get("", response_model=CartResponse, summary="Get cart")
def get_cart(
    identity: Identity = Depends(require_customer),
    service: CartService = Depends(get_cart_service)
):
    """Cart lines with products resolved"""
    return service.get_cart(identity)


@router.post("/add", response_model=CartResponse, summary="Add item to cart")
def add_to_cart(
    payload: CartAddRequest,
    identity: Identity = Depends(require_customer),
    service: CartService = Depends(get_cart_service)
):
    """
    Add a product, merging with an existing line
    
    - **product_id**: Product ID (required)
    - **quantity**: Quantity to add (default: 1)
    """
    return service.add_item(identity, payload.product_id, payload.quantity)


@router.put("/update", response_model=CartResponse, summary="Set cart line quantity")
def update_cart_item(
    payload: CartUpdateRequest,
    identity: Identity = Depends(require_customer),
    service: CartService = Depends(get_cart_service)
):
    return service.update_item(identity, payload.product_id, payload.quantity)


@router.delete("/remove/{product_id}", response_model=MessageResponse, summary="Remove cart line")
def remove_from_cart(
    product_id: int,
    identity: Identity = Depends(require_customer),
    service: CartService = Depends(get_cart_service)
):
    service.remove_item(identity, product_id)
    return MessageResponse(message="Item removed from cart successfully")


@router.delete("/clear", response_model=MessageResponse, summary="Empty cart")
def clear_cart(
    identity: Identity = Depends(require_customer),
    service: CartService = Depends(get_cart_service)
):
    service.clear(identity)
    return MessageResponse(message="Cart cleared successfully")
