"""
Order Service - checkout and order lifecycle

Stock is consumed only when an order moves Pending -> Approved and is given
back when an Approved order returns to Pending or is canceled. Each of those
operations runs in one transaction together with the status write.
"""
import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from growcery.exceptions import (
    EmptyCart,
    InsufficientStock,
    InvalidTransition,
    NotFound,
    ProductMissing
)
from growcery.models.order import ALLOWED_TRANSITIONS, TIME_OF_DAY_FORMAT, Order, OrderItem, OrderStatus
from growcery.repositories.cart_repository import CartRepository
from growcery.repositories.order_repository import OrderRepository
from growcery.repositories.product_repository import ProductRepository
from growcery.repositories.user_repository import UserRepository
from growcery.schemas.auth import Identity
from growcery.schemas.order import OrderResponse, OrderListResponse

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = OrderRepository(db)
        self.product_repository = ProductRepository(db)
        self.cart_repository = CartRepository(db)
        self.user_repository = UserRepository(db)
    
    def get_user_orders(self, identity: Identity) -> OrderListResponse:
        """Get the caller's orders, newest first"""
        orders = self.repository.get_by_user(identity.id)
        return OrderListResponse(
            orders=[OrderResponse.model_validate(o) for o in orders],
            total=len(orders)
        )
    
    def get_all_orders(self, skip: int = 0, limit: int = 100) -> OrderListResponse:
        """Get every order, newest first"""
        orders = self.repository.get_all(skip=skip, limit=limit)
        total = self.repository.count()
        
        return OrderListResponse(
            orders=[OrderResponse.model_validate(o) for o in orders],
            total=total
        )
    
    def checkout(self, identity: Identity) -> OrderResponse:
        """
        Create a Pending order from the caller's cart
        
        Steps:
        1. Load cart lines with products resolved
        2. Verify every product exists and has enough stock
        3. Snapshot quantity and current unit price of every line
        4. Save the order and clear the cart in one transaction
        
        Stock is not touched here; it is committed on approval.
        
        Raises:
            NotFound: If the caller's account no longer exists
            EmptyCart: If the cart has no lines
            ProductMissing: If a cart line's product was deleted
            InsufficientStock: If a line asks for more than is on hand
        """
        user = self.user_repository.get_by_id(identity.id)
        if not user:
            raise NotFound("User not found")
        
        cart = self.cart_repository.get_items(user.id)
        if not cart:
            raise EmptyCart("Cart is empty")
        
        total_amount = 0.0
        order_items = []
        for line in cart:
            product = line.product
            if product is None:
                raise ProductMissing("Product not found in cart")
            if product.quantity < line.quantity:
                raise InsufficientStock(product.name, product.quantity, line.quantity)
            
            order_items.append(OrderItem(
                product_id=product.id,
                quantity=line.quantity,
                unit_price=product.price
            ))
            total_amount += product.price * line.quantity
        
        # created_at and time come from the same instant
        placed_at = datetime.now(timezone.utc)
        order = Order(
            user_id=user.id,
            created_at=placed_at,
            time=placed_at.strftime(TIME_OF_DAY_FORMAT),
            items=order_items,
            total_amount=total_amount,
            status=OrderStatus.PENDING.value
        )
        
        try:
            self.repository.add(order)
            self.cart_repository.delete_all(user.id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        
        self.db.refresh(order)
        logger.info(
            "Order %s created for user %s: %d line(s), total %.2f",
            order.id, user.id, len(order_items), total_amount
        )
        return OrderResponse.model_validate(order)
    
    def update_order_status(self, order_id: int, new_status: OrderStatus) -> OrderResponse:
        """
        Move an order to new_status, reconciling catalog stock
        
        - Pending -> Approved: every line is checked first, then stock is
          moved from on-hand to sold for all lines
        - Approved -> Pending / Canceled: stock moves back from sold to on-hand
        - Any other permitted change writes the status only
        
        Raises:
            NotFound: If the order does not exist
            InvalidTransition: If new_status is not reachable from the current status
            ProductMissing / InsufficientStock: If approval cannot be fulfilled;
                no product is modified in that case
        """
        new_status = OrderStatus(new_status)
        order = self.repository.get_by_id(order_id)
        if not order:
            raise NotFound("Order not found")
        
        previous = OrderStatus(order.status)
        if new_status != previous and new_status not in ALLOWED_TRANSITIONS[previous]:
            raise InvalidTransition(
                f"Cannot change order status from {previous.name.title()} to {new_status.name.title()}"
            )
        
        try:
            if previous == OrderStatus.PENDING and new_status == OrderStatus.APPROVED:
                self._commit_stock(order)
            elif previous == OrderStatus.APPROVED and new_status in (OrderStatus.PENDING, OrderStatus.CANCELED):
                self._release_stock(order)
            self.repository.set_status(order, new_status)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        
        self.db.refresh(order)
        if new_status != previous:
            logger.info(
                "Order %s status changed: %s -> %s",
                order.id, previous.name, new_status.name
            )
        return OrderResponse.model_validate(order)
    
    def _commit_stock(self, order: Order) -> None:
        # Check every line before touching any product
        for item in order.items:
            product = item.product
            if product is None:
                raise ProductMissing("Product not found")
            if product.quantity < item.quantity:
                raise InsufficientStock(product.name, product.quantity, item.quantity)
        
        for item in order.items:
            if not self.product_repository.reserve_stock(item.product_id, item.quantity):
                # Stock was taken by a concurrent approval after the check
                product = self.product_repository.get_by_id(item.product_id)
                if product is None:
                    raise ProductMissing("Product not found")
                self.db.refresh(product)
                raise InsufficientStock(product.name, product.quantity, item.quantity)
            logger.info(
                "Order %s: product %s stock -%d, sold +%d",
                order.id, item.product_id, item.quantity, item.quantity
            )
    
    def _release_stock(self, order: Order) -> None:
        for item in order.items:
            if not self.product_repository.release_stock(item.product_id, item.quantity):
                logger.warning(
                    "Order %s: product %s no longer exists, %d unit(s) not restocked",
                    order.id, item.product_id, item.quantity
                )
                continue
            logger.info(
                "Order %s: product %s stock +%d, sold -%d",
                order.id, item.product_id, item.quantity, item.quantity
            )
    
