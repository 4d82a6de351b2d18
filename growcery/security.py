"""
Password hashing and JWT helpers
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from growcery.config import settings
from growcery.exceptions import Unauthenticated

pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_ctx.verify(plain, hashed)


def create_token(user_id: int, email: str, role: str, expires_minutes: Optional[int] = None) -> str:
    """Sign a bearer token carrying the identity claims"""
    expires = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode = {"id": user_id, "email": email, "role": role, "exp": expires}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict:
    """
    Verify signature and expiry of a bearer token
    
    Raises:
        Unauthenticated: If the token is malformed, tampered with or expired
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise Unauthenticated("Invalid token") from e
