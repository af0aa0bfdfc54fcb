"""
User service: account lookups and writes with typed errors.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.enums import RoleType
from jobboard.crud import user as crud_user
from jobboard.models.user import User
from jobboard.services.base import found, translate_errors

RESOURCE = "User"


def retrieve_user_by_username(db: Session, username: str) -> User:
    with translate_errors(RESOURCE, "retrieve_user_by_username", db):
        return found(crud_user.get_by_username(db, username), messages.USER_NOT_FOUND)


def retrieve_user_by_email(db: Session, email: str) -> User:
    with translate_errors(RESOURCE, "retrieve_user_by_email", db):
        return found(crud_user.get_by_email(db, email), messages.USER_NOT_FOUND)


def retrieve_users_by_role(db: Session, role: RoleType) -> List[User]:
    with translate_errors(RESOURCE, "retrieve_users_by_role", db):
        return found(crud_user.get_by_role(db, role), messages.USERS_NOT_FOUND)


def create_user(db: Session, user: User) -> User:
    with translate_errors(RESOURCE, "create_user", db, conflict_message=messages.USER_ALREADY_EXISTS):
        return crud_user.create(db, user)


def update_user(db: Session, user_id: str, changes: Dict[str, Any]) -> User:
    with translate_errors(RESOURCE, "update_user", db, conflict_message=messages.USER_ALREADY_EXISTS):
        return found(crud_user.update(db, user_id, changes), messages.USER_NOT_FOUND)


def remove_user(db: Session, user_id: str) -> User:
    with translate_errors(RESOURCE, "remove_user", db):
        return found(crud_user.delete(db, user_id), messages.USER_NOT_FOUND)
