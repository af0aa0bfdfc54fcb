"""
Open authentication endpoints:
- POST /login: Authenticate and receive a bearer token
- POST /register: Create a new user account
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.database import get_db
from jobboard.mappers.user import to_user
from jobboard.schemas.common import Envelope
from jobboard.schemas.user import TokenResponse, UserLoginRequest, UserRegisterRequest, UserResponse
from jobboard.services import auth as auth_service
from jobboard.services import user as user_service

router = APIRouter(tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=TokenResponse)
def login(request: UserLoginRequest, db: Session = Depends(get_db)):
    """
    Authenticate with username and password.

    Returns a bearer token to send as ``Authorization: Bearer <token>`` on
    every /p route.
    """
    token = auth_service.authenticate(db, str(request.username), str(request.password))
    return TokenResponse(message=messages.AUTHENTICATION_SUCCESSFUL, token=token)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=Envelope[UserResponse])
def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
    """Register a new user account. Username and email must both be unused."""
    user = user_service.create_user(db, to_user(request))
    logger.info(f"New user registered: {user.username} (role: {user.role.value})")
    return Envelope(message=messages.USER_REGISTERED, data=UserResponse.model_validate(user))
