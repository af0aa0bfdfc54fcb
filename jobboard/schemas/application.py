"""
Pydantic schemas for applications.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import model_validator

from jobboard.core import rule_sets as rs
from jobboard.core.rules import run_chain
from jobboard.schemas.common import CamelModel, RequestModel, checked, raise_for


class ApplicationCreateRequest(RequestModel):
    person_id: Annotated[Any, checked(rs.PERSON_ID)] = None
    listing_id: Annotated[Any, checked(rs.LISTING_ID)] = None


class ApplicationByUniqueIndexQuery(RequestModel):
    person_id: Annotated[Optional[str], checked(rs.PERSON_ID)] = None
    listing_id: Annotated[Optional[str], checked(rs.LISTING_ID)] = None


class ApplicationByPersonIdQuery(RequestModel):
    person_id: Annotated[Optional[str], checked(rs.PERSON_ID)] = None


class ApplicationByListingIdQuery(RequestModel):
    listing_id: Annotated[Optional[str], checked(rs.LISTING_ID)] = None


class ApplicationRemovalRequest(RequestModel):
    """
    Removal target: either the application ``id`` or the
    ``personId`` + ``listingId`` pair. ``id`` wins when both are given.
    """
    id: Any = None
    person_id: Any = None
    listing_id: Any = None

    @model_validator(mode="after")
    def check_target(self):
        if self.id is not None:
            raise_for(run_chain(self.id, rs.APPLICATION_ID))
        else:
            raise_for(run_chain(self.person_id, rs.PERSON_ID) + run_chain(self.listing_id, rs.LISTING_ID))
        return self

    @property
    def by_id(self) -> bool:
        return self.id is not None


class ApplicationResponse(CamelModel):
    id: str
    person_id: str
    listing_id: str
    created_at: Optional[datetime] = None
