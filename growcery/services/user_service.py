"""
User Service - account administration
"""
import logging
from sqlalchemy.orm import Session

from growcery.exceptions import Forbidden, NotFound
from growcery.models.user import Role
from growcery.repositories.user_repository import UserRepository
from growcery.schemas.user import UserResponse, UserListResponse

logger = logging.getLogger(__name__)


class UserService:
    
    def __init__(self, db: Session):
        self.repository = UserRepository(db)
    
    def list_users(self) -> UserListResponse:
        users = self.repository.get_all()
        return UserListResponse(users=[UserResponse.model_validate(u) for u in users])
    
    def delete_user(self, user_id: int) -> None:
        """
        Delete a customer account
        
        Raises:
            NotFound: If the user does not exist
            Forbidden: If the user is an admin
        """
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        if user.role == Role.ADMIN.value:
            raise Forbidden("Cannot delete admin accounts")
        
        self.repository.delete(user)
        logger.info("User %s deleted", user_id)
