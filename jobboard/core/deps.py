"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.errors import ForbiddenError, UnauthorizedError
from jobboard.core.security import decode_token
from jobboard.crud import user as crud_user
from jobboard.models.user import User

# HTTP Bearer token scheme (Authorization: Bearer <token>).
# auto_error is off so a missing header gets the same 401 envelope as a bad token.
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from the bearer token.

    This dependency:
    1. Extracts the Bearer token from Authorization header
    2. Decodes and validates the JWT
    3. Re-resolves the username in the "sub" claim to a stored user

    Raises:
        UnauthorizedError 401: If the token is missing, invalid, expired or
            names a user that no longer exists
    """
    if credentials is None:
        raise UnauthorizedError()

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError()

    username = payload.get("sub")
    if not username:
        raise UnauthorizedError()

    user = crud_user.get_by_username(db, username)
    if user is None:
        raise UnauthorizedError()

    return user


def get_current_admin(user: User = Depends(get_current_user)) -> User:
    """
    Get the current user and ensure they hold the Admin role.

    Raises:
        ForbiddenError 403: If the user is not an admin
    """
    if not user.is_admin:
        raise ForbiddenError()
    return user
