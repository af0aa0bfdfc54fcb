from typing import Any, Dict, Tuple

from jobboard.core.enums import RoleType
from jobboard.core.security import get_password_hash
from jobboard.mappers.common import supplied
from jobboard.models.user import User
from jobboard.schemas.user import UserRegisterRequest, UserUpdateRequest


def to_role(value: Any) -> RoleType:
    """Anything other than "Admin" maps to a regular user."""
    return RoleType.ADMIN if value == RoleType.ADMIN.value else RoleType.USER


def to_user(request: UserRegisterRequest) -> User:
    """Build a new User, hashing the plain-text password."""
    return User(
        username=request.username,
        email=request.email,
        password=get_password_hash(request.password),
        role=to_role(request.role),
    )


def to_user_update(request: UserUpdateRequest) -> Tuple[str, Dict[str, Any]]:
    """
    Map an account update to ``(user_id, changes)``.

    Only supplied fields appear in ``changes``; a new password is hashed.
    """
    password = get_password_hash(request.password) if request.password else None
    return request.id, supplied(username=request.username, email=request.email, password=password)
