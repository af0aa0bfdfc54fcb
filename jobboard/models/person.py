from sqlalchemy import Column, Date, String

from jobboard.core import rule_sets as rs
from jobboard.core.constants import USERNAME_MAX_LENGTH
from jobboard.core.database import Base
from jobboard.core.rules import when_present
from jobboard.models.document import DocumentMixin, JSONDocument, register_schema_validation


@register_schema_validation
class Person(DocumentMixin, Base):
    """
    Personal profile of a registered user, one per username.

    Education and work experience are embedded, ordered lists of records
    (see jobboard.schemas.person) stored as JSON with snake_case keys.
    Updates replace each list wholesale.
    """
    __tablename__ = "persons"

    document_name = "Person"
    document_rules = (
        ("username", rs.USERNAME, False),
        ("first_name", rs.FIRST_NAME, False),
        ("last_name", rs.LAST_NAME, False),
        ("phone_number", rs.PHONE_NUMBER, False),
        ("address", rs.ADDRESS, False),
        ("date_of_birth", rs.DATE_OF_BIRTH, True),
        ("education", when_present(rs.education_list(camel_keys=False)), True),
        ("work_experience", when_present(rs.work_experience_list(camel_keys=False)), True),
    )

    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    address = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=True)

    education = Column(JSONDocument, nullable=False, default=list)
    work_experience = Column(JSONDocument, nullable=False, default=list)

    def __repr__(self):
        return f"<Person(id={self.id}, username='{self.username}')>"
