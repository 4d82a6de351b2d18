"""
Response envelopes shared by every endpoint
"""
from pydantic import BaseModel
from typing import Optional


class MessageResponse(BaseModel):
    """Success response without payload"""
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Failure response"""
    success: bool = False
    message: str
    error: Optional[str] = None
