"""
Domain errors raised by the service layer

Each error carries the HTTP status code it is rendered with.
"""
from fastapi import status


class GrowceryError(Exception):
    """Base exception for GrowCery errors"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(GrowceryError):
    """Missing, invalid or expired credential"""
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(GrowceryError):
    """Role mismatch or disallowed action"""
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(GrowceryError):
    """Entity does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


class InvalidArgument(GrowceryError):
    """Missing or malformed input"""
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidTransition(InvalidArgument):
    """Order status change not permitted from the current status"""


class Conflict(GrowceryError):
    """Entity already exists"""
    status_code = status.HTTP_400_BAD_REQUEST


class EmptyCart(GrowceryError):
    """Checkout attempted with no cart lines"""
    status_code = status.HTTP_400_BAD_REQUEST


class ProductMissing(GrowceryError):
    """A cart or order line references a product that no longer exists"""
    status_code = status.HTTP_400_BAD_REQUEST


class InsufficientStock(GrowceryError):
    """Requested quantity exceeds quantity on hand"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, product_name: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for {product_name}. "
            f"Available: {available}, Requested: {requested}"
        )
        self.product_name = product_name
        self.available = available
        self.requested = requested
