"""
CRUD operations for Application model.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from jobboard.crud import base
from jobboard.models.application import Application


def get_by_person_id(db: Session, person_id: str) -> List[Application]:
    return db.query(Application).filter(Application.person_id == person_id).order_by(Application.created_at, Application.id).all()


def get_by_listing_id(db: Session, listing_id: str) -> List[Application]:
    return db.query(Application).filter(Application.listing_id == listing_id).order_by(Application.created_at, Application.id).all()


def get_by_unique_index(db: Session, person_id: str, listing_id: str) -> Optional[Application]:
    return (
        db.query(Application)
        .filter(Application.person_id == person_id, Application.listing_id == listing_id)
        .first()
    )


def create(db: Session, application: Application) -> Application:
    return base.create(db, application)


def delete_by_id(db: Session, application_id: str) -> Optional[Application]:
    return base.delete_by_id(db, Application, application_id)


def delete_by_unique_index(db: Session, person_id: str, listing_id: str) -> Optional[Application]:
    """
    Delete the application for a (person, listing) pair.

    Resolves the pair to an id, then deletes by id. The two steps are not
    atomic: a concurrent delete in between makes this return None.

    Returns:
        The deleted application, or None if the pair has no application
    """
    application = get_by_unique_index(db, person_id, listing_id)
    if application is None:
        return None
    return delete_by_id(db, application.id)
