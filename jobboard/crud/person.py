"""
CRUD operations for Person model.
"""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from jobboard.crud import base
from jobboard.models.person import Person


def get_by_username(db: Session, username: str) -> Optional[Person]:
    """
    Retrieve the profile registered under a username.

    Args:
        db: Database session
        username: Username the profile belongs to

    Returns:
        Person instance if found, None otherwise
    """
    return db.query(Person).filter(Person.username == username).first()


def get_by_id(db: Session, person_id: str) -> Optional[Person]:
    return db.get(Person, person_id)


def create(db: Session, person: Person) -> Person:
    return base.create(db, person)


def update(db: Session, person_id: str, changes: Dict[str, Any]) -> Optional[Person]:
    return base.update_by_id(db, Person, person_id, changes)


def delete(db: Session, person_id: str) -> Optional[Person]:
    return base.delete_by_id(db, Person, person_id)
