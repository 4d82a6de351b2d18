"""
Cart Service - shopping cart business logic

Stock is validated against the live catalog on every mutation but never
reserved; it is checked again at checkout and at approval.
"""
from typing import Optional
from sqlalchemy.orm import Session

from growcery.exceptions import InsufficientStock, InvalidArgument, NotFound
from growcery.models.user import User
from growcery.repositories.cart_repository import CartRepository
from growcery.repositories.product_repository import ProductRepository
from growcery.repositories.user_repository import UserRepository
from growcery.schemas.auth import Identity
from growcery.schemas.cart import CartLineResponse, CartResponse


class CartService:
    """Service layer for cart operations"""
    
    def __init__(self, db: Session):
        self.repository = CartRepository(db)
        self.product_repository = ProductRepository(db)
        self.user_repository = UserRepository(db)
    
    def get_cart(self, identity: Identity) -> CartResponse:
        """Get the cart with every line's product resolved"""
        user = self._get_user(identity)
        return self._cart_response(user)
    
    def add_item(self, identity: Identity, product_id: int, quantity: int = 1) -> CartResponse:
        """
        Add a product to the cart, merging with an existing line
        
        Raises:
            NotFound: If the product does not exist
            InsufficientStock: If the requested or merged quantity exceeds stock
        """
        user = self._get_user(identity)
        if quantity < 1:
            raise InvalidArgument("Quantity must be at least 1")
        
        product = self.product_repository.get_by_id(product_id)
        if not product:
            raise NotFound("Product not found")
        if quantity > product.quantity:
            raise InsufficientStock(product.name, product.quantity, quantity)
        
        item = self.repository.get_item(user.id, product_id)
        if item:
            new_quantity = item.quantity + quantity
            if new_quantity > product.quantity:
                raise InsufficientStock(product.name, product.quantity, new_quantity)
            self.repository.set_quantity(item, new_quantity)
        else:
            self.repository.add(user.id, product_id, quantity)
        
        return self._cart_response(user, "Item added to cart successfully")
    
    def update_item(self, identity: Identity, product_id: int, quantity: int) -> CartResponse:
        """
        Overwrite the quantity of a cart line
        
        Raises:
            InvalidArgument: If quantity is below 1
            NotFound: If the product does not exist or is not in the cart
            InsufficientStock: If quantity exceeds stock
        """
        user = self._get_user(identity)
        if quantity < 1:
            raise InvalidArgument("Quantity must be at least 1")
        
        product = self.product_repository.get_by_id(product_id)
        if not product:
            raise NotFound("Product not found")
        if quantity > product.quantity:
            raise InsufficientStock(product.name, product.quantity, quantity)
        
        item = self.repository.get_item(user.id, product_id)
        if not item:
            raise NotFound("Item not found in cart")
        
        self.repository.set_quantity(item, quantity)
        return self._cart_response(user, "Cart item updated successfully")
    
    def remove_item(self, identity: Identity, product_id: int) -> None:
        """Remove a line; removing an absent product is not an error"""
        user = self._get_user(identity)
        self.repository.remove(user.id, product_id)
    
    def clear(self, identity: Identity) -> None:
        user = self._get_user(identity)
        self.repository.clear(user.id)
    
    def _get_user(self, identity: Identity) -> User:
        user = self.user_repository.get_by_id(identity.id)
        if not user:
            raise NotFound("User not found")
        return user
    
    def _cart_response(self, user: User, message: Optional[str] = None) -> CartResponse:
        items = self.repository.get_items(user.id)
        return CartResponse(
            message=message,
            cart=[CartLineResponse.model_validate(i) for i in items]
        )
