"""Query and result envelopes for collection reads."""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from propdash.models.enums import SortOrder

T = TypeVar("T")


@dataclass
class QueryOptions:
    """Paging, sorting and filtering options for ``get_*`` list reads.

    ``page`` is 1-based. ``filters`` maps a record field name to the value
    it must equal; a list, tuple or set value matches any of its members.
    """

    page: int = 1
    limit: int = 10
    sort_by: str | None = None
    sort_order: SortOrder = SortOrder.ASC
    filters: dict[str, Any] = field(default_factory=dict)


@dataclass
class PaginatedResult(Generic[T]):
    """One page of a collection read."""

    data: list[T]
    total: int  # Size of the (filtered) collection before paging
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
