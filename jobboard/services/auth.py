"""
Credential check for login.
"""

import logging

from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.errors import UnauthorizedError
from jobboard.core.security import create_access_token, verify_password
from jobboard.crud import user as crud_user
from jobboard.services.base import translate_errors

logger = logging.getLogger(__name__)


def authenticate(db: Session, username: str, password: str) -> str:
    """
    Verify credentials and issue a bearer token.

    Unknown usernames and wrong passwords fail the same way so callers
    cannot probe which usernames exist.

    Returns:
        Signed JWT whose "sub" claim is the username

    Raises:
        UnauthorizedError: "Authentication failed"
    """
    with translate_errors("Auth", "authenticate", db):
        user = crud_user.get_by_username(db, username)
        if user is None or not verify_password(password, user.password):
            logger.info(f"Failed login attempt for username '{username}'")
            raise UnauthorizedError(messages.AUTHENTICATION_FAILED)

        logger.info(f"User logged in: {user.username}")
        return create_access_token(data={"sub": user.username})
