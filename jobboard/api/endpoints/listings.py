"""
Job listing endpoints (mounted under /p, bearer token required).

Creating, updating and removing listings requires the Admin role; any
authenticated user can browse them.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.database import get_db
from jobboard.core.deps import get_current_admin
from jobboard.mappers.listing import (
    to_employment_type,
    to_experience_level,
    to_listing,
    to_listing_update,
    to_status,
    to_work_type,
)
from jobboard.models.user import User
from jobboard.schemas.common import Envelope
from jobboard.schemas.listing import (
    ListingByEmploymentTypeQuery,
    ListingByExperienceLevelQuery,
    ListingByIdQuery,
    ListingByStatusQuery,
    ListingByWorkTypeQuery,
    ListingCreateRequest,
    ListingRemovalRequest,
    ListingResponse,
    ListingUpdateRequest,
)
from jobboard.services import listing as listing_service

router = APIRouter(prefix="/listings", tags=["Listings"])
logger = logging.getLogger(__name__)


def _listings(listings) -> Envelope[List[ListingResponse]]:
    return Envelope(
        message=messages.LISTINGS_RETRIEVED,
        data=[ListingResponse.model_validate(listing) for listing in listings],
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[ListingResponse])
def create_listing(
    request: ListingCreateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    listing = listing_service.create_listing(db, to_listing(request))
    logger.info(f"Listing {listing.id} created by {admin.username}")
    return Envelope(message=messages.LISTING_CREATED, data=ListingResponse.model_validate(listing))


@router.put("", response_model=Envelope[ListingResponse])
def update_listing(
    request: ListingUpdateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    listing_id, changes = to_listing_update(request)
    listing = listing_service.update_listing(db, listing_id, changes)
    return Envelope(message=messages.LISTING_UPDATED, data=ListingResponse.model_validate(listing))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def remove_listing(
    request: ListingRemovalRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    listing_service.remove_listing(db, request.id)
    logger.info(f"Listing {request.id} removed by {admin.username}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=Envelope[ListingResponse])
def get_listing(query: Annotated[ListingByIdQuery, Query()], db: Session = Depends(get_db)):
    listing = listing_service.retrieve_listing_by_id(db, query.id)
    return Envelope(message=messages.LISTING_RETRIEVED, data=ListingResponse.model_validate(listing))


@router.get("/status", response_model=Envelope[List[ListingResponse]])
def get_listings_by_status(query: Annotated[ListingByStatusQuery, Query()], db: Session = Depends(get_db)):
    return _listings(listing_service.retrieve_listings_by_status(db, to_status(query.status)))


@router.get("/workType", response_model=Envelope[List[ListingResponse]])
def get_listings_by_work_type(query: Annotated[ListingByWorkTypeQuery, Query()], db: Session = Depends(get_db)):
    return _listings(listing_service.retrieve_listings_by_work_type(db, to_work_type(query.work_type)))


@router.get("/employmentType", response_model=Envelope[List[ListingResponse]])
def get_listings_by_employment_type(
    query: Annotated[ListingByEmploymentTypeQuery, Query()],
    db: Session = Depends(get_db),
):
    return _listings(listing_service.retrieve_listings_by_employment_type(db, to_employment_type(query.employment_type)))


@router.get("/experienceLevel", response_model=Envelope[List[ListingResponse]])
def get_listings_by_experience_level(
    query: Annotated[ListingByExperienceLevelQuery, Query()],
    db: Session = Depends(get_db),
):
    return _listings(listing_service.retrieve_listings_by_experience_level(db, to_experience_level(query.experience_level)))
