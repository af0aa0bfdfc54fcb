"""
Base classes and helpers shared by all request/response schemas.

Request fields are declared loosely (``Any``/``Optional[str]``) and checked by
rule chains, so a bad field yields the catalogue messages instead of
pydantic's generic type errors. Every failing field reports all of its
messages; main.py flattens them into the ``errors`` list of a 400 response.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from jobboard.core.rules import run_chain, when_present


def raise_for(messages: List[str]) -> None:
    """Turn rule failures into a pydantic error carrying every message."""
    if messages:
        raise PydanticCustomError("rule_chain", "; ".join(messages), {"messages": messages})


def checked(chain) -> AfterValidator:
    """Field validator running a full rule chain (presence check included)."""
    def validate(value):
        raise_for(run_chain(value, chain))
        return value
    return AfterValidator(validate)


def checked_if_present(chain) -> AfterValidator:
    """Field validator for fields that may be omitted; runs the chain only when supplied."""
    relaxed = when_present(chain)

    def validate(value):
        raise_for(run_chain(value, relaxed, optional=True))
        return value
    return AfterValidator(validate)


class RequestModel(BaseModel):
    """Request body / query string. camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_default=True)


class CamelModel(BaseModel):
    """Records returned to clients and embedded sub-records."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Success envelope: ``{"message": ..., "data": ...}``."""
    message: str
    data: Optional[DataT] = None


class MessageResponse(BaseModel):
    message: str


class ErrorItem(BaseModel):
    message: str


class ValidationErrorResponse(BaseModel):
    message: str
    errors: List[ErrorItem]
