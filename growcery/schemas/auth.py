"""
Authentication schemas and the caller identity
"""
from pydantic import BaseModel, Field, EmailStr, ConfigDict
from typing import Optional

from growcery.models.user import Role


class Identity(BaseModel):
    """Decoded token claims of the authenticated caller"""
    id: int
    email: str
    role: Role
    
    model_config = ConfigDict(frozen=True)


class SignupRequest(BaseModel):
    """Schema for creating a customer account"""
    first_name: str = Field(..., min_length=1, max_length=100)
    middle_name: Optional[str] = Field(None, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
