"""
Shared columns and write-time schema validation for every stored record.

Records are keyed by 24-character lowercase hex ids (4-byte creation time
followed by 8 random bytes) so ids keep the same shape the API validates.
"""

import secrets
import time

from sqlalchemy import JSON, Column, DateTime, String, event, func
from sqlalchemy.dialects.postgresql import JSONB

from jobboard.core.constants import ID_LENGTH
from jobboard.core.errors import DocumentValidationError
from jobboard.core.rules import run_chain

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


def generate_object_id() -> str:
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


class DocumentMixin:
    """
    Columns every record carries plus its field rules.

    Subclasses set ``document_name`` and ``document_rules`` as
    ``(attribute, chain, optional)`` triples.
    """

    document_name = "Document"
    document_rules = ()

    id = Column(String(ID_LENGTH), primary_key=True, default=generate_object_id, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def validate_document(self) -> None:
        """
        Run every field rule against the current attribute values.

        Raises:
            DocumentValidationError: listing each failing field and message
        """
        failures = []
        for name, chain, optional in self.document_rules:
            for message in run_chain(getattr(self, name), chain, optional):
                failures.append((name, message))
        if failures:
            raise DocumentValidationError(self.document_name, failures)


def _validate_before_write(mapper, connection, target):
    target.validate_document()


def register_schema_validation(model):
    """Validate ``model`` instances right before every INSERT and UPDATE."""
    event.listen(model, "before_insert", _validate_before_write)
    event.listen(model, "before_update", _validate_before_write)
    return model
