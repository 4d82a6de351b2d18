"""
Auth Service - signup, login and admin bootstrap
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from growcery.exceptions import Conflict, NotFound, Unauthenticated
from growcery.models.user import Role, User
from growcery.repositories.user_repository import UserRepository
from growcery.schemas.auth import SignupRequest, LoginRequest
from growcery.security import hash_password, verify_password, create_token

logger = logging.getLogger(__name__)


class AuthService:
    """Service layer for account creation and token issuance"""
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)
    
    def signup(self, data: SignupRequest) -> str:
        """
        Create a customer account and return a bearer token for it
        
        Raises:
            Conflict: If the email is already registered
        """
        if self.repository.get_by_email(data.email):
            raise Conflict("User already exists")
        
        try:
            user = self.repository.create({
                "first_name": data.first_name,
                "middle_name": data.middle_name,
                "last_name": data.last_name,
                "email": data.email,
                "password_hash": hash_password(data.password),
                "role": Role.CUSTOMER.value
            })
        except IntegrityError:
            # Concurrent signup with the same email
            self.db.rollback()
            raise Conflict("User already exists")
        
        logger.info("Customer %s signed up", user.id)
        return self._issue_token(user)
    
    def login(self, data: LoginRequest) -> str:
        """
        Verify credentials and return a bearer token
        
        Raises:
            NotFound: If no account uses the email
            Unauthenticated: If the password does not match
        """
        user = self.repository.get_by_email(data.email)
        if not user:
            raise NotFound("User not found")
        if not verify_password(data.password, user.password_hash):
            raise Unauthenticated("Invalid credentials")
        return self._issue_token(user)
    
    def ensure_admin(self, email: str, password: str) -> User:
        """Create the admin account if it does not exist yet"""
        user = self.repository.get_by_email(email)
        if user:
            if user.role != Role.ADMIN.value:
                logger.warning("Account %s exists but is not an admin", email)
            return user
        
        user = self.repository.create({
            "first_name": "Admin",
            "last_name": "Account",
            "email": email,
            "password_hash": hash_password(password),
            "role": Role.ADMIN.value
        })
        logger.info("Admin account %s created", email)
        return user
    
    @staticmethod
    def _issue_token(user: User) -> str:
        return create_token(user.id, user.email, user.role)
