"""
Pydantic schemas for job listings.
"""

from datetime import date
from typing import Annotated, Any, Optional, Union

from pydantic import AfterValidator, model_validator

from jobboard.core import rule_sets as rs
from jobboard.core.enums import EmploymentType, ExperienceLevel, ListingStatus, WorkType
from jobboard.core.rules import run_chain
from jobboard.schemas.common import CamelModel, RequestModel, checked, checked_if_present, raise_for


def _check_salary_range(value):
    # An absent salary range is not checked
    if value is None:
        return value
    record = value if isinstance(value, dict) else {}
    raise_for(
        run_chain(record.get("minAmount"), rs.MIN_AMOUNT)
        + run_chain(record.get("maxAmount"), rs.MAX_AMOUNT)
    )
    return value


SalaryRangeField = Annotated[Any, AfterValidator(_check_salary_range)]


class SalaryRange(CamelModel):
    min_amount: Union[int, float]
    max_amount: Union[int, float]


class SalaryRangeRequest(RequestModel):
    """Request carrying an optional salary range. A null range is checked like an empty one."""

    @model_validator(mode="before")
    @classmethod
    def null_salary_range_is_checked(cls, data):
        if isinstance(data, dict):
            for key in ("salaryRange", "salary_range"):
                if key in data and data[key] is None:
                    data = {**data, key: {}}
        return data


class ListingCreateRequest(SalaryRangeRequest):
    title: Annotated[Any, checked(rs.TITLE)] = None
    organization_name: Annotated[Any, checked(rs.ORGANIZATION_NAME)] = None
    date_posted: Annotated[Any, checked(rs.DATE_POSTED)] = None
    work_type: Annotated[Any, checked(rs.WORK_TYPE)] = None
    employment_type: Annotated[Any, checked(rs.EMPLOYMENT_TYPE)] = None
    experience_level: Annotated[Any, checked(rs.EXPERIENCE_LEVEL)] = None
    city: Annotated[Any, checked(rs.CITY)] = None
    country: Annotated[Any, checked(rs.COUNTRY)] = None
    listing_desc: Annotated[Any, checked(rs.LISTING_DESC)] = None
    salary_range: SalaryRangeField = None
    status: Annotated[Any, checked(rs.STATUS)] = None


class ListingUpdateRequest(SalaryRangeRequest):
    """Partial listing update: only the supplied fields change."""
    id: Annotated[Any, checked(rs.LISTING_ID)] = None
    title: Annotated[Any, checked_if_present(rs.TITLE)] = None
    organization_name: Annotated[Any, checked_if_present(rs.ORGANIZATION_NAME)] = None
    date_posted: Annotated[Any, checked_if_present(rs.DATE_POSTED)] = None
    work_type: Annotated[Any, checked_if_present(rs.WORK_TYPE)] = None
    employment_type: Annotated[Any, checked_if_present(rs.EMPLOYMENT_TYPE)] = None
    experience_level: Annotated[Any, checked_if_present(rs.EXPERIENCE_LEVEL)] = None
    city: Annotated[Any, checked_if_present(rs.CITY)] = None
    country: Annotated[Any, checked_if_present(rs.COUNTRY)] = None
    listing_desc: Annotated[Any, checked_if_present(rs.LISTING_DESC)] = None
    salary_range: SalaryRangeField = None
    status: Annotated[Any, checked_if_present(rs.STATUS)] = None


class ListingRemovalRequest(RequestModel):
    id: Annotated[Any, checked(rs.LISTING_ID)] = None


class ListingByIdQuery(RequestModel):
    id: Annotated[Optional[str], checked(rs.LISTING_ID)] = None


class ListingByStatusQuery(RequestModel):
    status: Annotated[Optional[str], checked(rs.STATUS)] = None


class ListingByWorkTypeQuery(RequestModel):
    work_type: Annotated[Optional[str], checked(rs.WORK_TYPE)] = None


class ListingByEmploymentTypeQuery(RequestModel):
    employment_type: Annotated[Optional[str], checked(rs.EMPLOYMENT_TYPE)] = None


class ListingByExperienceLevelQuery(RequestModel):
    experience_level: Annotated[Optional[str], checked(rs.EXPERIENCE_LEVEL)] = None


class ListingResponse(CamelModel):
    id: str
    title: str
    organization_name: str
    date_posted: date
    work_type: WorkType
    employment_type: EmploymentType
    experience_level: ExperienceLevel
    city: str
    country: str
    listing_desc: str
    salary_range: Optional[SalaryRange] = None
    status: ListingStatus
