from typing import Any, Dict, Optional, Tuple

from jobboard.core.enums import EmploymentType, ExperienceLevel, ListingStatus, WorkType, lookup
from jobboard.mappers.common import supplied, to_date
from jobboard.models.listing import Listing
from jobboard.schemas.listing import ListingCreateRequest, ListingUpdateRequest, SalaryRange


def to_status(value: Any) -> ListingStatus:
    """Anything other than "Closed" maps to an open listing."""
    return ListingStatus.CLOSED if value == ListingStatus.CLOSED.value else ListingStatus.OPEN


def to_work_type(value: Any) -> Optional[WorkType]:
    return lookup(WorkType, value)


def to_employment_type(value: Any) -> Optional[EmploymentType]:
    return lookup(EmploymentType, value)


def to_experience_level(value: Any) -> Optional[ExperienceLevel]:
    return lookup(ExperienceLevel, value)


def to_salary_range(value: Any) -> Optional[dict]:
    if value is None:
        return None
    return SalaryRange.model_validate(value).model_dump(mode="json")


def to_listing(request: ListingCreateRequest) -> Listing:
    """
    Build a new Listing.

    Unknown enum strings become None and are rejected by the record's
    schema validation on insert.
    """
    return Listing(
        title=request.title,
        organization_name=request.organization_name,
        date_posted=to_date(request.date_posted),
        work_type=to_work_type(request.work_type),
        employment_type=to_employment_type(request.employment_type),
        experience_level=to_experience_level(request.experience_level),
        city=request.city,
        country=request.country,
        listing_desc=request.listing_desc,
        salary_range=to_salary_range(request.salary_range),
        status=to_status(request.status),
    )


def to_listing_update(request: ListingUpdateRequest) -> Tuple[str, Dict[str, Any]]:
    """Map a listing update to ``(listing_id, changes)``."""
    return request.id, supplied(
        title=request.title,
        organization_name=request.organization_name,
        date_posted=to_date(request.date_posted),
        work_type=to_work_type(request.work_type),
        employment_type=to_employment_type(request.employment_type),
        experience_level=to_experience_level(request.experience_level),
        city=request.city,
        country=request.country,
        listing_desc=request.listing_desc,
        salary_range=to_salary_range(request.salary_range),
        status=to_status(request.status) if request.status is not None else None,
    )
