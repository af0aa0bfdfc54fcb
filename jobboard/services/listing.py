"""
Listing service: listing filters, lookups and writes with typed errors.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.enums import EmploymentType, ExperienceLevel, ListingStatus, WorkType
from jobboard.crud import listing as crud_listing
from jobboard.models.listing import Listing
from jobboard.services.base import found, translate_errors

RESOURCE = "Listing"


def retrieve_listings_by_status(db: Session, status: ListingStatus) -> List[Listing]:
    with translate_errors(RESOURCE, "retrieve_listings_by_status", db):
        return found(crud_listing.get_by_status(db, status), messages.LISTINGS_NOT_FOUND)


def retrieve_listings_by_work_type(db: Session, work_type: WorkType) -> List[Listing]:
    with translate_errors(RESOURCE, "retrieve_listings_by_work_type", db):
        return found(crud_listing.get_by_work_type(db, work_type), messages.LISTINGS_NOT_FOUND)


def retrieve_listings_by_employment_type(db: Session, employment_type: EmploymentType) -> List[Listing]:
    with translate_errors(RESOURCE, "retrieve_listings_by_employment_type", db):
        return found(crud_listing.get_by_employment_type(db, employment_type), messages.LISTINGS_NOT_FOUND)


def retrieve_listings_by_experience_level(db: Session, experience_level: ExperienceLevel) -> List[Listing]:
    with translate_errors(RESOURCE, "retrieve_listings_by_experience_level", db):
        return found(crud_listing.get_by_experience_level(db, experience_level), messages.LISTINGS_NOT_FOUND)


def retrieve_listing_by_id(db: Session, listing_id: str) -> Listing:
    with translate_errors(RESOURCE, "retrieve_listing_by_id", db):
        return found(crud_listing.get_by_id(db, listing_id), messages.LISTING_NOT_FOUND)


def create_listing(db: Session, listing: Listing) -> Listing:
    with translate_errors(RESOURCE, "create_listing", db):
        return crud_listing.create(db, listing)


def update_listing(db: Session, listing_id: str, changes: Dict[str, Any]) -> Listing:
    with translate_errors(RESOURCE, "update_listing", db):
        return found(crud_listing.update(db, listing_id, changes), messages.LISTING_NOT_FOUND)


def remove_listing(db: Session, listing_id: str) -> Listing:
    with translate_errors(RESOURCE, "remove_listing", db):
        return found(crud_listing.delete(db, listing_id), messages.LISTING_NOT_FOUND)
