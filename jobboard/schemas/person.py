"""
Pydantic schemas for personal profiles and their embedded records.
"""

from datetime import date
from typing import Annotated, Any, List, Optional

from pydantic import field_validator

from jobboard.core import rule_sets as rs
from jobboard.schemas.common import CamelModel, RequestModel, checked, checked_if_present


class TaskRecord(CamelModel):
    name: str
    description: str


class EducationRecord(CamelModel):
    degree_title: str
    institution: str
    starting_date: date
    graduation_date: Optional[date] = None
    is_ongoing: bool


class WorkExperienceRecord(CamelModel):
    job_title: str
    organization_name: str
    city: str
    country: Optional[str] = None
    starting_date: date
    ending_date: Optional[date] = None
    is_ongoing: bool
    tasks: List[TaskRecord] = []

    @field_validator("tasks", mode="before")
    @classmethod
    def null_tasks_are_empty(cls, value):
        return [] if value is None else value


class PersonCreateRequest(RequestModel):
    """
    Profile registration. The profile belongs to the authenticated user, so
    the username comes from the bearer token rather than the body.
    """
    first_name: Annotated[Any, checked(rs.FIRST_NAME)] = None
    last_name: Annotated[Any, checked(rs.LAST_NAME)] = None
    phone_number: Annotated[Any, checked(rs.PHONE_NUMBER)] = None
    address: Annotated[Any, checked(rs.ADDRESS)] = None
    date_of_birth: Annotated[Any, checked_if_present(rs.DATE_OF_BIRTH)] = None
    education: Annotated[Any, checked(rs.EDUCATION)] = None
    work_experience: Annotated[Any, checked(rs.WORK_EXPERIENCE)] = None


class PersonUpdateRequest(RequestModel):
    """Partial profile update; supplied lists replace the stored ones."""
    id: Annotated[Any, checked(rs.PERSON_ID)] = None
    first_name: Annotated[Any, checked_if_present(rs.FIRST_NAME)] = None
    last_name: Annotated[Any, checked_if_present(rs.LAST_NAME)] = None
    phone_number: Annotated[Any, checked_if_present(rs.PHONE_NUMBER)] = None
    address: Annotated[Any, checked_if_present(rs.ADDRESS)] = None
    date_of_birth: Annotated[Any, checked_if_present(rs.DATE_OF_BIRTH)] = None
    education: Annotated[Any, checked_if_present(rs.EDUCATION)] = None
    work_experience: Annotated[Any, checked_if_present(rs.WORK_EXPERIENCE)] = None


class PersonRemovalRequest(RequestModel):
    id: Annotated[Any, checked(rs.PERSON_ID)] = None


class PersonByUsernameQuery(RequestModel):
    username: Annotated[Optional[str], checked(rs.USERNAME)] = None


class PersonResponse(CamelModel):
    id: str
    username: str
    first_name: str
    last_name: str
    phone_number: str
    address: str
    date_of_birth: Optional[date] = None
    education: List[EducationRecord] = []
    work_experience: List[WorkExperienceRecord] = []
