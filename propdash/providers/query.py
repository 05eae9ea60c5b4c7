"""Filtering, sorting and pagination over an in-memory collection."""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Sequence, TypeVar

from propdash.exceptions import InvalidQueryError
from propdash.models import PaginatedResult, QueryOptions, SortOrder

T = TypeVar("T")


def apply_query(
    items: Sequence[T],
    record_type: type[T],
    options: QueryOptions | None = None,
) -> PaginatedResult[T]:
    """Filter, sort and slice ``items`` according to ``options``.

    Options are validated against ``record_type`` before any record is
    looked at, so a bad query fails the same way on an empty collection
    as on a full one. Without ``sort_by`` the stored (insertion) order is
    kept. Sorting is stable and puts records whose sort field is ``None``
    last in either direction.

    Parameters
    ----------
    items : Sequence[T]
        Records of ``record_type``, in stored order.
    record_type : type[T]
        Dataclass the filter and sort field names are checked against.
    options : QueryOptions | None
        Query options; defaults to page 1 of 10.

    Returns
    -------
    PaginatedResult[T]
        The requested page and the filtered total.

    Raises
    ------
    InvalidQueryError
        If ``page`` or ``limit`` is below 1, a filter or sort field does
        not exist on ``record_type``, ``sort_order`` is not a
        :class:`SortOrder`, or the sort field holds unorderable values.
    """
    options = options or QueryOptions()
    if options.page < 1:
        raise InvalidQueryError(f"page must be >= 1, got {options.page}")
    if options.limit < 1:
        raise InvalidQueryError(f"limit must be >= 1, got {options.limit}")

    known = {f.name for f in fields(record_type)}
    for name in options.filters or {}:
        _check_field(record_type, known, name, "filter")
    descending = False
    if options.sort_by:
        _check_field(record_type, known, options.sort_by, "sort")
        descending = _sort_order(options.sort_order) == SortOrder.DESC

    selected = list(items)
    if options.filters:
        selected = [item for item in selected if _matches(item, options.filters)]
    if options.sort_by:
        selected = _sort(selected, options.sort_by, descending)

    return paginate(selected, options.page, options.limit)


def paginate(items: Sequence[T], page: int = 1, limit: int = 10) -> PaginatedResult[T]:
    """Return the half-open slice ``[(page-1)*limit, page*limit)`` of ``items``."""
    start = (page - 1) * limit
    end = start + limit
    return PaginatedResult(
        data=list(items[start:end]),
        total=len(items),
        page=page,
        limit=limit,
    )


def _check_field(record_type: type, known: set[str], name: str, purpose: str) -> None:
    if name not in known:
        raise InvalidQueryError(
            f"Unknown {purpose} field {name!r} for {record_type.__name__}"
        )


def _sort_order(value: SortOrder | str) -> SortOrder:
    try:
        return SortOrder(value)
    except ValueError as e:
        allowed = [order.value for order in SortOrder]
        raise InvalidQueryError(
            f"Invalid sort_order {value!r}; expected one of {allowed}"
        ) from e


def _matches(item: Any, filters: dict[str, Any]) -> bool:
    for name, expected in filters.items():
        actual = getattr(item, name)
        if isinstance(expected, (list, tuple, set, frozenset)):
            # Compare by equality; str enums hash by name, not value
            if not any(actual == value for value in expected):
                return False
        elif actual != expected:
            return False
    return True


def _sort(items: list[T], sort_by: str, descending: bool) -> list[T]:
    present = [item for item in items if getattr(item, sort_by) is not None]
    missing = [item for item in items if getattr(item, sort_by) is None]
    try:
        present.sort(key=lambda item: getattr(item, sort_by), reverse=descending)
    except TypeError as e:
        raise InvalidQueryError(f"Field {sort_by!r} cannot be used for sorting") from e
    return present + missing
