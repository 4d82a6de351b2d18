"""
Auth gate: bearer token verification and role checks
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from growcery.exceptions import Forbidden, Unauthenticated
from growcery.models.user import Role
from growcery.schemas.auth import Identity
from growcery.security import decode_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Identity:
    """Decode the bearer token into the caller's identity"""
    if credentials is None:
        raise Unauthenticated("No token")
    
    payload = decode_token(credentials.credentials)
    try:
        return Identity(id=payload["id"], email=payload["email"], role=payload["role"])
    except (KeyError, ValidationError):
        raise Unauthenticated("Invalid token")


def require_role(role: Role):
    """Build a dependency admitting only callers whose token carries role"""
    def dependency(identity: Identity = Depends(get_identity)) -> Identity:
        if identity.role != role:
            raise Forbidden("Wrong user type")
        return identity
    return dependency


require_customer = require_role(Role.CUSTOMER)
require_admin = require_role(Role.ADMIN)
