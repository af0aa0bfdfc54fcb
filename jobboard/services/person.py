"""
Person service: personal profile lookups and writes with typed errors.
"""

from typing import Any, Dict

from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.crud import person as crud_person
from jobboard.models.person import Person
from jobboard.services.base import found, translate_errors

RESOURCE = "Person"


def retrieve_person_by_username(db: Session, username: str) -> Person:
    with translate_errors(RESOURCE, "retrieve_person_by_username", db):
        return found(crud_person.get_by_username(db, username), messages.PERSON_NOT_FOUND)


def create_person(db: Session, person: Person) -> Person:
    with translate_errors(RESOURCE, "create_person", db, conflict_message=messages.PERSON_ALREADY_EXISTS):
        return crud_person.create(db, person)


def update_person(db: Session, person_id: str, changes: Dict[str, Any]) -> Person:
    with translate_errors(RESOURCE, "update_person", db):
        return found(crud_person.update(db, person_id, changes), messages.PERSON_NOT_FOUND)


def remove_person(db: Session, person_id: str) -> Person:
    with translate_errors(RESOURCE, "remove_person", db):
        return found(crud_person.delete(db, person_id), messages.PERSON_NOT_FOUND)
