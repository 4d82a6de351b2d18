"""
Authentication endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from growcery.database import get_db
from growcery.schemas.auth import SignupRequest, LoginRequest, TokenResponse
from growcery.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Dependency to get AuthService instance"""
    return AuthService(db)


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED, summary="Create customer account")
def signup(
    payload: SignupRequest,
    service: AuthService = Depends(get_auth_service)
):
    """
    Register a customer and return a bearer token
    
    - **first_name**, **last_name**, **email**, **password**: required
    - **middle_name**: optional
    """
    return TokenResponse(token=service.signup(payload))


@router.post("/login", response_model=TokenResponse, summary="Log in")
def login(
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange email and password for a bearer token"""
    return TokenResponse(token=service.login(payload))
