"""Normalized work records produced by orcid_works.parser.

The raw registry shapes these are built from are documented in
orcid_works.schema. Every record here is immutable and flat: nested
``{"value": ...}`` wrappers are gone, dates are datetimes, publication date
parts are ints, and list fields are never None.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Union

from .work_types import WorkType

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _to_json_value(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_to_json_value(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class _Record:
    """Mixin giving dataclass records a JSON-friendly dict form."""

    def to_dict(self) -> dict:
        return {f.name: _to_json_value(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class ExternalId(_Record):
    """Alternate identifier attached to a work (DOI, ISBN, arXiv, ...)."""
    type: str | None
    value: str | None
    url: str | None = None
    relationship: str | None = None  # "self", "part-of", "version-of", ...


@dataclass(frozen=True)
class Contributor(_Record):
    """One credited person on a work."""
    name: str | None = None
    role: str | None = None      # "author", "editor", ...
    sequence: str | None = None  # "first", "additional"


@dataclass(frozen=True)
class Citation(_Record):
    """Citation block, usually BibTeX."""
    type: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class WorkSummary(_Record):
    """Abbreviated work record, as listed by ``GET /{orcid}/works``.

    ``title`` is None when the registry sent no title; it is never replaced
    with a placeholder. Publication date parts are None when missing or
    unparseable.
    """
    put_code: int | None
    created_date: datetime = UNIX_EPOCH
    last_modified_date: datetime = UNIX_EPOCH
    source: str | None = None
    title: str | None = None
    subtitle: str | None = None
    translated_title: str | None = None
    external_ids: tuple[ExternalId, ...] = ()
    publication_year: int | None = None
    publication_month: int | None = None
    publication_day: int | None = None
    journal_title: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class Work(WorkSummary):
    """Full work record, as returned by the single and bulk work endpoints."""
    short_description: str | None = None
    citation: Citation | None = None
    type: WorkType = WorkType.UNSUPPORTED
    contributors: tuple[Contributor, ...] = ()
    language_code: str | None = None
    country: str | None = None


AnyWork = Union[WorkSummary, Work]


@dataclass(frozen=True)
class YearRange(_Record):
    min: int | None = None
    max: int | None = None


@dataclass
class WorkStats(_Record):
    """Aggregate counts over a collection of works; see query.get_stats()."""
    total: int = 0
    by_type: dict[str, int] = field(default_factory=dict)
    by_year: dict[int, int] = field(default_factory=dict)
    year_range: YearRange = field(default_factory=YearRange)
