"""
User administration endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from growcery.api.deps import require_admin
from growcery.database import get_db
from growcery.schemas.auth import Identity
from growcery.schemas.common import MessageResponse
from growcery.schemas.user import UserListResponse
from growcery.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("/all", response_model=UserListResponse, summary="Get all users")
def get_all_users(
    admin: Identity = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """List every account without password hashes (admin only)"""
    return service.list_users()


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete user")
def delete_user(
    user_id: int,
    admin: Identity = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """
    Delete a customer account (admin only)
    
    Admin accounts cannot be deleted.
    """
    service.delete_user(user_id)
    return MessageResponse(message="User account deleted successfully")
