"""
User Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from growcery.models.user import User


class UserRepository:
    """Repository for User accounts"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()
    
    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()
    
    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()
    
    def create(self, user_data: dict) -> User:
        """
        Create new user
        
        Args:
            user_data: Dictionary with user fields, password already hashed
        """
        user = User(**user_data)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
    
    def delete(self, user: User) -> None:
        """Delete user together with their cart"""
        self.db.delete(user)
        self.db.commit()
