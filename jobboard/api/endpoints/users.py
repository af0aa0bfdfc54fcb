"""
User account endpoints (mounted under /p, bearer token required):
- GET /users: the authenticated user's account
- GET /users/username, /users/email: account lookups
- GET /users/role: accounts by role (admin only)
- PUT /users/account: partial account update (own account unless admin)
- DELETE /users/account: remove an account (admin only)
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.database import get_db
from jobboard.core.deps import get_current_admin, get_current_user
from jobboard.core.errors import ForbiddenError
from jobboard.mappers.user import to_role, to_user_update
from jobboard.models.user import User
from jobboard.schemas.common import Envelope
from jobboard.schemas.user import (
    UserByEmailQuery,
    UserByRoleQuery,
    UserByUsernameQuery,
    UserRemovalRequest,
    UserResponse,
    UserUpdateRequest,
)
from jobboard.services import user as user_service

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.get("", response_model=Envelope[UserResponse])
def get_me(current_user: User = Depends(get_current_user)):
    """Get the account the bearer token belongs to."""
    return Envelope(message=messages.USER_RETRIEVED, data=UserResponse.model_validate(current_user))


@router.get("/username", response_model=Envelope[UserResponse])
def get_user_by_username(query: Annotated[UserByUsernameQuery, Query()], db: Session = Depends(get_db)):
    user = user_service.retrieve_user_by_username(db, query.username)
    return Envelope(message=messages.USER_RETRIEVED, data=UserResponse.model_validate(user))


@router.get("/email", response_model=Envelope[UserResponse])
def get_user_by_email(query: Annotated[UserByEmailQuery, Query()], db: Session = Depends(get_db)):
    user = user_service.retrieve_user_by_email(db, query.email)
    return Envelope(message=messages.USER_RETRIEVED, data=UserResponse.model_validate(user))


@router.get("/role", response_model=Envelope[List[UserResponse]])
def get_users_by_role(
    query: Annotated[UserByRoleQuery, Query()],
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    users = user_service.retrieve_users_by_role(db, to_role(query.role))
    return Envelope(message=messages.USERS_RETRIEVED, data=[UserResponse.model_validate(u) for u in users])


@router.put("/account", response_model=Envelope[UserResponse])
def update_account(
    request: UserUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Partially update an account. Regular users may only change their own
    account; admins may change any.
    """
    if not current_user.is_admin and request.id != current_user.id:
        raise ForbiddenError(messages.OWN_ACCOUNT_ONLY)

    user_id, changes = to_user_update(request)
    user = user_service.update_user(db, user_id, changes)
    logger.info(f"User {user.id} updated fields: {sorted(changes)}")
    return Envelope(message=messages.USER_UPDATED, data=UserResponse.model_validate(user))


@router.delete("/account", status_code=status.HTTP_204_NO_CONTENT)
def remove_account(
    request: UserRemovalRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    user_service.remove_user(db, request.id)
    logger.info(f"User {request.id} removed by {admin.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
