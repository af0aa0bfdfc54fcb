from typing import Tuple, Union

from jobboard.models.application import Application
from jobboard.schemas.application import (
    ApplicationByUniqueIndexQuery,
    ApplicationCreateRequest,
    ApplicationRemovalRequest,
)


def to_application(request: ApplicationCreateRequest) -> Application:
    return Application(person_id=request.person_id, listing_id=request.listing_id)


def to_unique_index(request: Union[ApplicationByUniqueIndexQuery, ApplicationRemovalRequest]) -> Tuple[str, str]:
    """The ``(person_id, listing_id)`` pair identifying one application."""
    return request.person_id, request.listing_id
