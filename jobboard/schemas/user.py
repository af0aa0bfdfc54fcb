"""
Pydantic schemas for users: registration, login, account updates and lookups.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from jobboard.core import rule_sets as rs
from jobboard.core.enums import RoleType
from jobboard.schemas.common import CamelModel, RequestModel, checked, checked_if_present


class UserRegisterRequest(RequestModel):
    """Request schema for user registration."""
    username: Annotated[Any, checked(rs.USERNAME)] = None
    email: Annotated[Any, checked(rs.EMAIL)] = None
    password: Annotated[Any, checked(rs.PASSWORD)] = None
    role: Annotated[Any, checked(rs.ROLE)] = None


class UserLoginRequest(RequestModel):
    username: Annotated[Any, checked(rs.LOGIN_USERNAME)] = None
    password: Annotated[Any, checked(rs.LOGIN_PASSWORD)] = None


class UserUpdateRequest(RequestModel):
    """Partial account update: only the supplied fields change."""
    id: Annotated[Any, checked(rs.USER_ID)] = None
    username: Annotated[Any, checked_if_present(rs.USERNAME)] = None
    email: Annotated[Any, checked_if_present(rs.EMAIL)] = None
    password: Annotated[Any, checked_if_present(rs.PASSWORD)] = None


class UserRemovalRequest(RequestModel):
    id: Annotated[Any, checked(rs.USER_ID)] = None


class UserByUsernameQuery(RequestModel):
    username: Annotated[Optional[str], checked(rs.USERNAME)] = None


class UserByEmailQuery(RequestModel):
    email: Annotated[Optional[str], checked(rs.EMAIL)] = None


class UserByRoleQuery(RequestModel):
    role: Annotated[Optional[str], checked(rs.ROLE)] = None


class UserResponse(CamelModel):
    """User account as returned to clients (never includes the password hash)."""
    id: str
    username: str
    email: str
    role: RoleType
    created_at: Optional[datetime] = None


class TokenResponse(CamelModel):
    message: str
    token: str
