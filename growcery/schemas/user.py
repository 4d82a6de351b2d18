"""
Pydantic schemas for user administration
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

from growcery.models.user import Role


class UserResponse(BaseModel):
    """User without credential"""
    id: int
    first_name: str
    middle_name: Optional[str]
    last_name: str
    email: str
    role: Role
    created_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    success: bool = True
    users: list[UserResponse]
