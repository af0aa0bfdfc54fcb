from typing import Any, Dict, List, Optional, Tuple

from jobboard.mappers.common import supplied, to_date
from jobboard.models.person import Person
from jobboard.schemas.person import EducationRecord, PersonCreateRequest, PersonUpdateRequest, WorkExperienceRecord


def to_education(items: List[dict]) -> List[EducationRecord]:
    return [EducationRecord.model_validate(item) for item in items]


def to_work_experience(items: List[dict]) -> List[WorkExperienceRecord]:
    """Work experience records in input order, each with its tasks in input order."""
    return [WorkExperienceRecord.model_validate(item) for item in items]


def _stored(records: Optional[list]) -> Optional[List[dict]]:
    # JSON column layout: snake_case keys, ISO dates
    if records is None:
        return None
    return [record.model_dump(mode="json") for record in records]


def to_person(request: PersonCreateRequest, username: str) -> Person:
    return Person(
        username=username,
        first_name=request.first_name,
        last_name=request.last_name,
        phone_number=request.phone_number,
        address=request.address,
        date_of_birth=to_date(request.date_of_birth),
        education=_stored(to_education(request.education)),
        work_experience=_stored(to_work_experience(request.work_experience)),
    )


def to_person_update(request: PersonUpdateRequest) -> Tuple[str, Dict[str, Any]]:
    """Map a profile update to ``(person_id, changes)``; supplied lists replace stored ones."""
    education = to_education(request.education) if request.education is not None else None
    work_experience = to_work_experience(request.work_experience) if request.work_experience is not None else None
    return request.id, supplied(
        first_name=request.first_name,
        last_name=request.last_name,
        phone_number=request.phone_number,
        address=request.address,
        date_of_birth=to_date(request.date_of_birth),
        education=_stored(education),
        work_experience=_stored(work_experience),
    )
