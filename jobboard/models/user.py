"""
User model for authentication and authorization.

A User is an account (credentials + role). The personal profile lives on
Person and is matched by username, not by a foreign key.
"""

from sqlalchemy import Column, Enum, String

from jobboard.core import messages
from jobboard.core import rule_sets as rs
from jobboard.core.constants import USERNAME_MAX_LENGTH
from jobboard.core.database import Base
from jobboard.core.enums import RoleType, values
from jobboard.core.rules import required
from jobboard.models.document import DocumentMixin, register_schema_validation


@register_schema_validation
class User(DocumentMixin, Base):
    __tablename__ = "users"

    document_name = "User"
    document_rules = (
        ("username", rs.USERNAME, False),
        ("email", rs.EMAIL, False),
        # Only the bcrypt hash is stored, so strength is checked on the way in
        ("password", [required(messages.PASSWORD_REQUIRED)], False),
        ("role", rs.ROLE, False),
    )

    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    role = Column(
        Enum(RoleType, name="role_type", values_callable=values),
        nullable=False,
        default=RoleType.USER,
        index=True,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == RoleType.ADMIN

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role={self.role})>"
