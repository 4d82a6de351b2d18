"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from growcery.api.deps import require_admin, require_customer
from growcery.database import get_db
from growcery.schemas.auth import Identity
from growcery.services.order_service import OrderService
from growcery.schemas.order import (
    OrderStatusUpdate,
    OrderEnvelope,
    OrderListResponse
)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.post("/checkout", response_model=OrderEnvelope, status_code=status.HTTP_201_CREATED, summary="Create order from cart")
def checkout(
    identity: Identity = Depends(require_customer),
    service: OrderService = Depends(get_order_service)
):
    """
    Create a Pending order from the caller's cart
    
    Process:
    1. Validate every cart product exists and has enough stock
    2. Capture unit prices and compute the total
    3. Save the order and empty the cart
    
    Stock is committed only when an admin approves the order.
    """
    order = service.checkout(identity)
    return OrderEnvelope(message="Order created successfully", order=order)


@router.get("", response_model=OrderListResponse, summary="Get own orders")
def get_user_orders(
    identity: Identity = Depends(require_customer),
    service: OrderService = Depends(get_order_service)
):
    """Orders placed by the caller, newest first"""
    return service.get_user_orders(identity)


@router.get("/all", response_model=OrderListResponse, summary="Get all orders")
def get_all_orders(
    skip: int = Query(0, ge=0, description="Number of orders to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of orders to return"),
    admin: Identity = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve every order with its owner, newest first (admin only)
    
    - **skip**: Number of orders to skip (default: 0)
    - **limit**: Maximum number of orders to return (default: 100, max: 1000)
    """
    return service.get_all_orders(skip=skip, limit=limit)


@router.put("/{order_id}/status", response_model=OrderEnvelope, summary="Update order status")
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    admin: Identity = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status (admin only)
    
    - **order_id**: Order ID
    - **status**: 0 = Pending, 1 = Approved, 2 = Completed, 3 = Canceled
    
    Approving consumes stock; moving an Approved order back to Pending or
    canceling it restores stock.
    """
    order = service.update_order_status(order_id, status_data.status)
    return OrderEnvelope(message="Order status updated successfully", order=order)
