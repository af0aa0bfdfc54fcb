"""
Personal profile endpoints (mounted under /p, bearer token required).

Profiles share the /users path with accounts: the body of POST/PUT/DELETE
/users is a profile, /users/profile looks one up by username.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jobboard.core import messages
from jobboard.core.database import get_db
from jobboard.core.deps import get_current_user
from jobboard.mappers.person import to_person, to_person_update
from jobboard.models.user import User
from jobboard.schemas.common import Envelope
from jobboard.schemas.person import (
    PersonByUsernameQuery,
    PersonCreateRequest,
    PersonRemovalRequest,
    PersonResponse,
    PersonUpdateRequest,
)
from jobboard.services import person as person_service

router = APIRouter(prefix="/users", tags=["Persons"])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[PersonResponse])
def create_person_info(
    request: PersonCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Register the authenticated user's personal profile (one per user)."""
    person = person_service.create_person(db, to_person(request, current_user.username))
    logger.info(f"Personal info registered for {person.username}")
    return Envelope(message=messages.PERSON_REGISTERED, data=PersonResponse.model_validate(person))


@router.put("", response_model=Envelope[PersonResponse])
def update_person_info(request: PersonUpdateRequest, db: Session = Depends(get_db)):
    person_id, changes = to_person_update(request)
    person = person_service.update_person(db, person_id, changes)
    return Envelope(message=messages.PERSON_UPDATED, data=PersonResponse.model_validate(person))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def remove_person_info(request: PersonRemovalRequest, db: Session = Depends(get_db)):
    person_service.remove_person(db, request.id)
    logger.info(f"Personal info {request.id} removed")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/profile", response_model=Envelope[PersonResponse])
def get_person_info(query: Annotated[PersonByUsernameQuery, Query()], db: Session = Depends(get_db)):
    person = person_service.retrieve_person_by_username(db, query.username)
    return Envelope(message=messages.PERSON_RETRIEVED, data=PersonResponse.model_validate(person))
