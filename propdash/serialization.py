"""JSON-ready conversion of records, pages and stats for the view layer."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from propdash.models import DashboardStats, PaginatedResult


def to_dict(obj: Any) -> dict:
    """Convert a record, result page or stats object to a dictionary.

    Computed properties the view layer relies on (``total_pages``,
    ``occupancy_rate``) are included alongside the stored fields.
    """
    if isinstance(obj, PaginatedResult):
        return {
            "data": [to_dict(item) for item in obj.data],
            "total": obj.total,
            "page": obj.page,
            "limit": obj.limit,
            "total_pages": obj.total_pages,
        }
    if isinstance(obj, DashboardStats):
        result = dataclass_to_dict(obj)
        result["occupancy_rate"] = round(obj.occupancy_rate, 1)
        return result
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass to a dict, recursing into nested dataclasses."""
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
