from fastapi import APIRouter, Depends

from jobboard.api.endpoints import applications, auth, listings, persons, users
from jobboard.core.config import settings
from jobboard.core.deps import get_current_user
from jobboard.schemas.common import MessageResponse, ValidationErrorResponse

# Error bodies shared by every route, for the OpenAPI docs
ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse},
    404: {"model": MessageResponse},
    409: {"model": MessageResponse},
    500: {"model": MessageResponse},
}

# Everything under /p needs a valid bearer token
protected_router = APIRouter(
    prefix=settings.API_PREFIX,
    dependencies=[Depends(get_current_user)],
    responses={401: {"model": MessageResponse}, 403: {"model": MessageResponse}},
)
protected_router.include_router(users.router)
protected_router.include_router(persons.router)
protected_router.include_router(listings.router)
protected_router.include_router(applications.router)

api_router = APIRouter(responses=ERROR_RESPONSES)
api_router.include_router(auth.router)
api_router.include_router(protected_router)
