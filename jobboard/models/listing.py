from sqlalchemy import Column, Date, Enum, String, Text

from jobboard.core import rule_sets as rs
from jobboard.core.database import Base
from jobboard.core.enums import EmploymentType, ExperienceLevel, ListingStatus, WorkType, values
from jobboard.core.rules import Nested
from jobboard.models.document import DocumentMixin, JSONDocument, register_schema_validation


def _enum(enum_cls, name):
    # Store the wire values ("On-site", "Mid-Senior level"), not member names
    return Enum(enum_cls, name=name, values_callable=values)


@register_schema_validation
class Listing(DocumentMixin, Base):
    """
    A job listing.

    work_type, employment_type, experience_level and status are closed enums;
    salary_range is an optional embedded {min_amount, max_amount} record.
    """
    __tablename__ = "listings"

    document_name = "Listing"
    document_rules = (
        ("title", rs.TITLE, False),
        ("organization_name", rs.ORGANIZATION_NAME, False),
        ("date_posted", rs.DATE_POSTED, False),
        ("work_type", rs.WORK_TYPE, False),
        ("employment_type", rs.EMPLOYMENT_TYPE, False),
        ("experience_level", rs.EXPERIENCE_LEVEL, False),
        ("city", rs.CITY, False),
        ("country", rs.COUNTRY, False),
        ("listing_desc", rs.LISTING_DESC, False),
        ("salary_range", [Nested(rs.SALARY_RANGE_ITEM)], True),
        ("status", rs.STATUS, False),
    )

    title = Column(String, nullable=False, index=True)
    organization_name = Column(String, nullable=False)
    date_posted = Column(Date, nullable=False)
    work_type = Column(_enum(WorkType, "work_type"), nullable=False, index=True)
    employment_type = Column(_enum(EmploymentType, "employment_type"), nullable=False, index=True)
    experience_level = Column(_enum(ExperienceLevel, "experience_level"), nullable=False, index=True)
    city = Column(String, nullable=False)
    country = Column(String, nullable=False)
    listing_desc = Column(Text, nullable=False)
    salary_range = Column(JSONDocument, nullable=True)
    status = Column(_enum(ListingStatus, "listing_status"), nullable=False, default=ListingStatus.OPEN, index=True)

    def __repr__(self):
        return f"<Listing(id={self.id}, title='{self.title}', status={self.status})>"
