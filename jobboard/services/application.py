"""
Application service: application lookups and writes with typed errors.
"""

from typing import List

from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.crud import application as crud_application
from jobboard.models.application import Application
from jobboard.services.base import found, translate_errors

RESOURCE = "Application"


def retrieve_applications_by_person_id(db: Session, person_id: str) -> List[Application]:
    with translate_errors(RESOURCE, "retrieve_applications_by_person_id", db):
        return found(crud_application.get_by_person_id(db, person_id), messages.APPLICATIONS_NOT_FOUND)


def retrieve_applications_by_listing_id(db: Session, listing_id: str) -> List[Application]:
    with translate_errors(RESOURCE, "retrieve_applications_by_listing_id", db):
        return found(crud_application.get_by_listing_id(db, listing_id), messages.APPLICATIONS_NOT_FOUND)


def retrieve_application_by_unique_index(db: Session, person_id: str, listing_id: str) -> Application:
    with translate_errors(RESOURCE, "retrieve_application_by_unique_index", db):
        return found(
            crud_application.get_by_unique_index(db, person_id, listing_id),
            messages.APPLICATION_NOT_FOUND,
        )


def create_application(db: Session, application: Application) -> Application:
    with translate_errors(RESOURCE, "create_application", db, conflict_message=messages.APPLICATION_ALREADY_EXISTS):
        return crud_application.create(db, application)


def remove_application_by_id(db: Session, application_id: str) -> Application:
    with translate_errors(RESOURCE, "remove_application_by_id", db):
        return found(crud_application.delete_by_id(db, application_id), messages.APPLICATION_NOT_FOUND)


def remove_application_by_unique_index(db: Session, person_id: str, listing_id: str) -> Application:
    with translate_errors(RESOURCE, "remove_application_by_unique_index", db):
        return found(
            crud_application.delete_by_unique_index(db, person_id, listing_id),
            messages.APPLICATION_NOT_FOUND,
        )
