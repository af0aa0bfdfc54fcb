"""
CRUD operations for User model.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from jobboard.core.enums import RoleType
from jobboard.crud import base
from jobboard.models.user import User


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_by_role(db: Session, role: RoleType) -> List[User]:
    return db.query(User).filter(User.role == role).order_by(User.created_at, User.id).all()


def get_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def create(db: Session, user: User) -> User:
    return base.create(db, user)


def update(db: Session, user_id: str, changes: Dict[str, Any]) -> Optional[User]:
    return base.update_by_id(db, User, user_id, changes)


def delete(db: Session, user_id: str) -> Optional[User]:
    return base.delete_by_id(db, User, user_id)
