from datetime import date
from typing import Any, Dict, Optional


def to_date(value: Any) -> Optional[date]:
    """``"YYYY-MM-DD"`` to a date; empty values map to None."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def supplied(**fields: Any) -> Dict[str, Any]:
    """Keep only the fields a partial update actually carries."""
    return {name: value for name, value in fields.items() if value is not None}
