from typing import Any, Dict, Optional, Type

from sqlalchemy.orm import Session


def create(db: Session, record):
    """
    Insert a new record.

    Args:
        db: Database session
        record: Unsaved model instance

    Returns:
        The stored record with its generated id and timestamps
    """
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def update_by_id(db: Session, model: Type, record_id: str, changes: Dict[str, Any]) -> Optional[Any]:
    """
    Apply the supplied fields to a record and return the updated record.

    The record's schema validation runs before the UPDATE is issued.

    Args:
        db: Database session
        model: Model class
        record_id: Id of the record to update
        changes: Attribute name -> new value; only these fields change

    Returns:
        Updated record, or None if no record has that id
    """
    record = db.get(model, record_id)
    if record is None:
        return None

    for field, value in changes.items():
        setattr(record, field, value)

    db.commit()
    db.refresh(record)
    return record


def delete_by_id(db: Session, model: Type, record_id: str) -> Optional[Any]:
    """Delete a record by id. Returns the deleted record, or None if absent."""
    record = db.get(model, record_id)
    if record is None:
        return None

    db.delete(record)
    db.commit()
    return record
