"""
Declarative field rules.

A field is checked by running its chain of rules in order. A rule that fails
contributes its message; a failing rule marked ``bail`` stops the chain, any
other failing rule lets the rest of the chain run, so one field can report
several messages. ``required`` rules always bail.

The same chains back both request validation (schemas) and the record
schemas enforced right before a write (models).
"""

import enum
import math
from datetime import date
from numbers import Number
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from pydantic.alias_generators import to_camel

from jobboard.core import constants as c


class Rule:
    """A single check on a field value."""

    def __init__(self, predicate: Callable[[Any], bool], message: str, bail: bool = False, presence: bool = False):
        self.predicate = predicate
        self.message = message
        self.bail = bail
        self.presence = presence

    def __call__(self, value: Any) -> Optional[str]:
        return None if self.predicate(value) else self.message

    def __repr__(self):
        return f"<Rule(message='{self.message}', bail={self.bail})>"


class EachItem(Rule):
    """
    Checks every record of a list against an item spec and reports the first
    failure found, scanning records in order and fields in spec order.
    """

    def __init__(self, spec: "ItemSpec", camel_keys: bool):
        super().__init__(lambda value: True, "")
        self.spec = spec
        self.camel_keys = camel_keys

    def __call__(self, value: Any) -> Optional[str]:
        if not isinstance(value, list):
            return None
        for item in value:
            message = first_failure(item, self.spec, self.camel_keys)
            if message:
                return message
        return None


# (attribute name, chain, optional)
ItemSpec = Sequence[Tuple[str, Sequence[Rule], bool]]


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def run_chain(value: Any, chain: Iterable[Rule], optional: bool = False) -> List[str]:
    """Run a rule chain and return the failure messages in rule order."""
    if optional and value is None:
        return []

    messages = []
    for rule in chain:
        message = rule(value)
        if message:
            messages.append(message)
            if rule.bail:
                break
    return messages


def first_failure(item: Any, spec: ItemSpec, camel_keys: bool = False) -> Optional[str]:
    """Return the first failure message of a nested record, or None."""
    if not isinstance(item, dict):
        item = {}
    for name, chain, optional in spec:
        key = to_camel(name) if camel_keys else name
        messages = run_chain(item.get(key), chain, optional)
        if messages:
            return messages[0]
    return None


# Rule builders

def required(message: str) -> Rule:
    return Rule(lambda v: not is_missing(v), message, bail=True, presence=True)


def min_length(length: int, message: str) -> Rule:
    return Rule(lambda v: isinstance(v, str) and len(v) >= length, message)


def max_length(length: int, message: str) -> Rule:
    return Rule(lambda v: isinstance(v, str) and len(v) <= length, message)


def exact_length(length: int, message: str) -> Rule:
    return Rule(lambda v: isinstance(v, str) and len(v) == length, message)


def matches(pattern, message: str) -> Rule:
    return Rule(lambda v: isinstance(v, str) and pattern.match(v) is not None, message)


def one_of(values: Iterable[str], message: str) -> Rule:
    allowed = frozenset(values)

    def check(value):
        # Enum members hash by name, compare by wire value
        if isinstance(value, enum.Enum):
            value = value.value
        return isinstance(value, str) and value in allowed

    return Rule(check, message)


def _is_date(value: Any) -> bool:
    if isinstance(value, date):
        return True
    if not isinstance(value, str) or not c.DATE_REGEX.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def valid_date(message: str) -> Rule:
    return Rule(_is_date, message)


def boolean(message: str) -> Rule:
    return Rule(lambda v: isinstance(v, bool) or v in ("true", "false"), message)


def _is_numeric(value: Any) -> bool:
    # Finite numbers only: JSON cannot carry NaN or Infinity
    if isinstance(value, bool) or not isinstance(value, (Number, str)):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError, OverflowError):
        return False


def numeric(message: str, bail: bool = True) -> Rule:
    return Rule(_is_numeric, message, bail=bail)


def non_negative(message: str) -> Rule:
    return Rule(lambda v: float(v) >= 0, message)


def is_list(message: str) -> Rule:
    return Rule(lambda v: isinstance(v, list), message, bail=True)


def max_items(count: int, message: str) -> Rule:
    return Rule(lambda v: isinstance(v, list) and len(v) <= count, message)


def identifier(required_message: str, length_message: str, hex_message: str) -> List[Rule]:
    return [
        required(required_message),
        exact_length(c.ID_LENGTH, length_message),
        matches(c.ID_REGEX, hex_message),
    ]


def when_present(chain: Sequence[Rule]) -> List[Rule]:
    """The same chain without its presence check, for fields that may be omitted."""
    return [rule for rule in chain if not rule.presence]


class Nested(Rule):
    """Checks one embedded record against an item spec, reporting its first failure."""

    def __init__(self, spec: ItemSpec, camel_keys: bool = False):
        super().__init__(lambda value: True, "")
        self.spec = spec
        self.camel_keys = camel_keys

    def __call__(self, value: Any) -> Optional[str]:
        return first_failure(value, self.spec, self.camel_keys)
