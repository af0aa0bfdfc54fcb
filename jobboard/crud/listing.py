"""
CRUD operations for Listing model.

Filters return every matching listing, oldest first.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from jobboard.core.enums import EmploymentType, ExperienceLevel, ListingStatus, WorkType
from jobboard.crud import base
from jobboard.models.listing import Listing


def _filter_by(db: Session, column, value) -> List[Listing]:
    return db.query(Listing).filter(column == value).order_by(Listing.created_at, Listing.id).all()


def get_by_status(db: Session, status: ListingStatus) -> List[Listing]:
    return _filter_by(db, Listing.status, status)


def get_by_work_type(db: Session, work_type: WorkType) -> List[Listing]:
    return _filter_by(db, Listing.work_type, work_type)


def get_by_employment_type(db: Session, employment_type: EmploymentType) -> List[Listing]:
    return _filter_by(db, Listing.employment_type, employment_type)


def get_by_experience_level(db: Session, experience_level: ExperienceLevel) -> List[Listing]:
    return _filter_by(db, Listing.experience_level, experience_level)


def get_by_id(db: Session, listing_id: str) -> Optional[Listing]:
    return db.get(Listing, listing_id)


def create(db: Session, listing: Listing) -> Listing:
    return base.create(db, listing)


def update(db: Session, listing_id: str, changes: Dict[str, Any]) -> Optional[Listing]:
    return base.update_by_id(db, Listing, listing_id, changes)


def delete(db: Session, listing_id: str) -> Optional[Listing]:
    return base.delete_by_id(db, Listing, listing_id)
