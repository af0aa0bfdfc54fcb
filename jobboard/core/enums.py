"""Closed value sets. Members compare equal to their wire values."""

import enum
from typing import Optional, Type, TypeVar


class RoleType(str, enum.Enum):
    ADMIN = "Admin"
    USER = "User"


class WorkType(str, enum.Enum):
    ON_SITE = "On-site"
    HYBRID = "Hybrid"
    REMOTE = "Remote"


class EmploymentType(str, enum.Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    TEMPORARY = "Temporary"
    OTHER = "Other"


class ExperienceLevel(str, enum.Enum):
    INTERNSHIP = "Internship"
    ENTRY_LEVEL = "Entry-level"
    ASSOCIATE = "Associate"
    MID_SENIOR_LEVEL = "Mid-Senior level"
    DIRECTOR = "Director"
    EXECUTIVE = "Executive"


class ListingStatus(str, enum.Enum):
    OPEN = "Open"
    CLOSED = "Closed"


E = TypeVar("E", bound=enum.Enum)


def lookup(enum_cls: Type[E], value) -> Optional[E]:
    """Resolve a wire value to its member. Unknown values resolve to None."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    return {member.value: member for member in enum_cls}.get(value)


def values(enum_cls) -> list:
    return [member.value for member in enum_cls]
