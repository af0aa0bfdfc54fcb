"""
Application endpoints (mounted under /p, bearer token required).
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.database import get_db
from jobboard.mappers.application import to_application, to_unique_index
from jobboard.schemas.application import (
    ApplicationByListingIdQuery,
    ApplicationByPersonIdQuery,
    ApplicationByUniqueIndexQuery,
    ApplicationCreateRequest,
    ApplicationRemovalRequest,
    ApplicationResponse,
)
from jobboard.schemas.common import Envelope
from jobboard.services import application as application_service

router = APIRouter(prefix="/applications", tags=["Applications"])
logger = logging.getLogger(__name__)


def _applications(applications) -> Envelope[List[ApplicationResponse]]:
    return Envelope(
        message=messages.APPLICATIONS_RETRIEVED,
        data=[ApplicationResponse.model_validate(a) for a in applications],
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[ApplicationResponse])
def create_application(request: ApplicationCreateRequest, db: Session = Depends(get_db)):
    """Apply a person to a listing. Each (person, listing) pair can apply once."""
    application = application_service.create_application(db, to_application(request))
    logger.info(f"Application {application.id} created for listing {application.listing_id}")
    return Envelope(message=messages.APPLICATION_CREATED, data=ApplicationResponse.model_validate(application))


@router.get("/personId", response_model=Envelope[List[ApplicationResponse]])
def get_applications_by_person_id(query: Annotated[ApplicationByPersonIdQuery, Query()], db: Session = Depends(get_db)):
    return _applications(application_service.retrieve_applications_by_person_id(db, query.person_id))


@router.get("/listingId", response_model=Envelope[List[ApplicationResponse]])
def get_applications_by_listing_id(query: Annotated[ApplicationByListingIdQuery, Query()], db: Session = Depends(get_db)):
    return _applications(application_service.retrieve_applications_by_listing_id(db, query.listing_id))


@router.get("/uniqueIndex", response_model=Envelope[ApplicationResponse])
def get_application_by_unique_index(
    query: Annotated[ApplicationByUniqueIndexQuery, Query()],
    db: Session = Depends(get_db),
):
    person_id, listing_id = to_unique_index(query)
    application = application_service.retrieve_application_by_unique_index(db, person_id, listing_id)
    return Envelope(message=messages.APPLICATION_RETRIEVED, data=ApplicationResponse.model_validate(application))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def remove_application(request: ApplicationRemovalRequest, db: Session = Depends(get_db)):
    """Remove an application by ``id``, or by its ``personId`` + ``listingId`` pair."""
    if request.by_id:
        application_service.remove_application_by_id(db, request.id)
    else:
        person_id, listing_id = to_unique_index(request)
        application_service.remove_application_by_unique_index(db, person_id, listing_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
