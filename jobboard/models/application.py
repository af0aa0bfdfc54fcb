from sqlalchemy import Column, String, UniqueConstraint

from jobboard.core import rule_sets as rs
from jobboard.core.constants import ID_LENGTH
from jobboard.core.database import Base
from jobboard.models.document import DocumentMixin, register_schema_validation


@register_schema_validation
class Application(DocumentMixin, Base):
    """
    A person's application to a listing.

    (person_id, listing_id) is unique: a person applies to a listing at most
    once. Neither id is a foreign key; removing a person or listing leaves
    its applications in place.
    """
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("person_id", "listing_id", name="uq_applications_person_listing"),
    )

    document_name = "Application"
    document_rules = (
        ("person_id", rs.PERSON_ID, False),
        ("listing_id", rs.LISTING_ID, False),
    )

    person_id = Column(String(ID_LENGTH), nullable=False, index=True)
    listing_id = Column(String(ID_LENGTH), nullable=False, index=True)

    def __repr__(self):
        return f"<Application(id={self.id}, person_id='{self.person_id}', listing_id='{self.listing_id}')>"
