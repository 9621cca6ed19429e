"""Filter, sort, group and count collections of works.

All functions are pure: they never modify the input collection and always
return new lists/dicts. They accept WorkSummary/Work records as well as
plain dicts keyed by the same field names (``type``, ``publication_year``,
...). Summaries carry no ``type`` and count as "unknown" where a type is
needed.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .models import WorkStats, YearRange

T = TypeVar("T")

UNKNOWN = "unknown"


def _field(work, name: str) -> Any:
    if isinstance(work, Mapping):
        return work.get(name)
    return getattr(work, name, None)


def _year(work) -> int | None:
    """Publication year when it is a real number, else None."""
    year = _field(work, "publication_year")
    if isinstance(year, bool) or not isinstance(year, (int, float)):
        return None
    if year != year:  # NaN
        return None
    return year


def filter_by_type(works: Iterable[T], types) -> list[T]:
    """Keep works whose type is one of ``types`` (a single type or a collection).

    Types may be WorkType members or their string values. Works without a
    type are always dropped.
    """
    if isinstance(types, str):
        wanted = {str(types)}
    else:
        wanted = {str(t) for t in types}

    result = []
    for work in works:
        work_type = _field(work, "type")
        if work_type and str(work_type) in wanted:
            result.append(work)
    return result


def filter_by_year_range(works: Iterable[T], start: int, end: int) -> list[T]:
    """Keep works published between ``start`` and ``end``, both inclusive.

    Works with no publication year are excluded.
    """
    result = []
    for work in works:
        year = _year(work)
        if year is not None and start <= year <= end:
            result.append(work)
    return result


def _date_key(work) -> tuple:
    return (
        _year(work) or 0,
        _field(work, "publication_month") or 1,
        _field(work, "publication_day") or 1,
    )


def sort_by_date(works: Iterable[T], order: str = "desc") -> list[T]:
    """Return works sorted by publication date.

    The sort key is (year, month, day) with missing parts read as 0, 1 and 1,
    so undated works go last for "desc" and first for "asc". "asc" is a
    stable sort; "desc" is exactly "asc" reversed, ties included.

    Raises:
        ValueError: if ``order`` is not "asc" or "desc"
    """
    if order not in ("asc", "desc"):
        raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")
    ascending = sorted(works, key=_date_key)
    if order == "desc":
        ascending.reverse()
    return ascending


def get_stats(works: Iterable) -> WorkStats:
    """Count works by type and by year, and track the year range.

    Works without a year count towards ``total`` and ``by_type`` only.
    """
    works = list(works)
    stats = WorkStats(total=len(works))
    year_min = year_max = None

    for work in works:
        work_type = _field(work, "type")
        type_key = str(work_type) if work_type is not None else UNKNOWN
        stats.by_type[type_key] = stats.by_type.get(type_key, 0) + 1

        year = _year(work)
        if year is None:
            continue
        stats.by_year[year] = stats.by_year.get(year, 0) + 1
        year_min = year if year_min is None else min(year_min, year)
        year_max = year if year_max is None else max(year_max, year)

    stats.year_range = YearRange(min=year_min, max=year_max)
    return stats


def group_by(works: Iterable[T], key: str) -> dict[str, list[T]]:
    """Bucket works by the string form of field ``key``.

    Works where the field is missing or None land in "unknown". Order inside
    each bucket follows the input.
    """
    groups: dict[str, list[T]] = {}
    for work in works:
        value = _field(work, key)
        bucket = str(value) if value is not None else UNKNOWN
        groups.setdefault(bucket, []).append(work)
    return groups
