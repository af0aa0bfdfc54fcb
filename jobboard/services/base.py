"""
Error translation shared by all services.

Each service function wraps exactly one persistence call in
``translate_errors``:

- typed errors (NotFoundError raised by the service itself) pass through;
- a unique index violation becomes UniqueConstraintError (409);
- a record schema violation becomes SchemaValidationError (400);
- anything else becomes ServerError (500) with a generic message.

Every branch is logged, and a failed write rolls the session back first.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.errors import (
    AppError,
    DocumentValidationError,
    NotFoundError,
    SchemaValidationError,
    ServerError,
    UniqueConstraintError,
)

logger = logging.getLogger(__name__)


def _rollback(db: Optional[Session]) -> None:
    if db is not None:
        db.rollback()


def _log(resource: str, operation: str, error_name: str) -> None:
    logger.error("%s service: %s -> %s detected and re-raised", resource, operation, error_name)


@contextmanager
def translate_errors(resource: str, operation: str, db: Optional[Session] = None, conflict_message: Optional[str] = None):
    """
    Args:
        resource: Resource name used in log lines ("User", "Listing", ...)
        operation: Service function name
        db: Session to roll back when a write fails (omit for reads)
        conflict_message: Message for unique index violations
    """
    try:
        yield
    except AppError as exc:
        _log(resource, operation, type(exc).__name__)
        raise
    except IntegrityError as exc:
        _rollback(db)
        _log(resource, operation, UniqueConstraintError.__name__)
        raise UniqueConstraintError(conflict_message or str(exc.orig)) from exc
    except DocumentValidationError as exc:
        _rollback(db)
        _log(resource, operation, SchemaValidationError.__name__)
        raise SchemaValidationError(str(exc)) from exc
    except Exception as exc:
        _rollback(db)
        logger.exception("%s service: %s -> unexpected %s", resource, operation, type(exc).__name__)
        _log(resource, operation, ServerError.__name__)
        raise ServerError() from exc


def found(result, message: str):
    """Return ``result``, or raise NotFoundError when it is None or an empty list."""
    if result is None or result == []:
        raise NotFoundError(message)
    return result
