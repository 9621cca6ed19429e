"""Parse raw ORCID works JSON into orcid_works.models records.

Registry payloads are deeply nested and loosely typed: optional blocks may
be missing, null, or hold numbers as strings. Every field is read with
dig(), which returns None on any missing hop, so a sparse payload yields a
sparse record rather than an exception.
"""

import logging
import math
from collections.abc import Mapping
from datetime import datetime, timezone

from .exceptions import WorkParseError
from .models import UNIX_EPOCH, Citation, Contributor, ExternalId, Work, WorkSummary
from .schema import BulkWorks, RawWork, RawWorkSummary, WorksListing
from .work_types import coerce_work_type

# Module logger
logger = logging.getLogger("orcid_works.parser")


def dig(raw, *keys, default=None):
    """Walk nested mappings along ``keys``.

    Returns ``default`` when any hop is missing, None, or not a mapping.

        dig(work, "title", "title", "value")
    """
    current = raw
    for key in keys:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


def _to_number(value) -> float | None:
    """Numeric value of an int/float or numeric string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_epoch_millis(value) -> datetime:
    """Convert an epoch-milliseconds value to an aware UTC datetime.

    Accepts numbers and numeric strings. Anything else, including values
    outside the platform's datetime range, gives the Unix epoch.
    """
    millis = _to_number(value)
    if millis is None:
        return UNIX_EPOCH
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return UNIX_EPOCH


def parse_date_part(value) -> int | None:
    """Parse a year/month/day value ("2021", "06", 6) into a positive int."""
    number = _to_number(value)
    if number is None or not number.is_integer() or number <= 0:
        return None
    return int(number)


def parse_put_code(value) -> int | None:
    """Put codes arrive as ints or numeric strings."""
    number = _to_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def parse_external_ids(block) -> tuple[ExternalId, ...]:
    """Parse an ``external-ids`` block; missing block gives an empty tuple."""
    return tuple(
        ExternalId(
            type=entry.get("external-id-type"),
            value=entry.get("external-id-value"),
            url=dig(entry, "external-id-url", "value"),
            relationship=entry.get("external-id-relationship"),
        )
        for entry in _as_list(dig(block, "external-id"))
        if isinstance(entry, Mapping)
    )


def parse_contributors(block) -> tuple[Contributor, ...]:
    """Parse a ``contributors`` block; missing block gives an empty tuple."""
    return tuple(
        Contributor(
            name=dig(entry, "credit-name", "value"),
            role=dig(entry, "contributor-attributes", "contributor-role"),
            sequence=dig(entry, "contributor-attributes", "contributor-sequence"),
        )
        for entry in _as_list(dig(block, "contributor"))
        if isinstance(entry, Mapping)
    )


def parse_citation(block) -> Citation | None:
    """Citation only when the raw block is present; never an empty stand-in."""
    if not isinstance(block, Mapping):
        return None
    return Citation(type=block.get("citation-type"), value=block.get("citation-value"))


def _require_mapping(raw, what: str) -> Mapping:
    if not isinstance(raw, Mapping):
        raise WorkParseError(f"Cannot parse {what}: expected an object, got {type(raw).__name__}")
    return raw


def _summary_fields(raw: Mapping) -> dict:
    """Fields shared by work summaries and full works."""
    return {
        "put_code": parse_put_code(raw.get("put-code")),
        "created_date": parse_epoch_millis(dig(raw, "created-date", "value")),
        "last_modified_date": parse_epoch_millis(dig(raw, "last-modified-date", "value")),
        "source": dig(raw, "source", "source-name", "value"),
        "title": dig(raw, "title", "title", "value"),
        "subtitle": dig(raw, "title", "subtitle", "value"),
        "translated_title": dig(raw, "title", "translated-title", "value"),
        "external_ids": parse_external_ids(raw.get("external-ids")),
        "publication_year": parse_date_part(dig(raw, "publication-date", "year", "value")),
        "publication_month": parse_date_part(dig(raw, "publication-date", "month", "value")),
        "publication_day": parse_date_part(dig(raw, "publication-date", "day", "value")),
        "journal_title": dig(raw, "journal-title", "value"),
        "url": dig(raw, "url", "value"),
    }


def parse_work_summary(raw: RawWorkSummary) -> WorkSummary:
    """Parse one ``work-summary`` object.

    Raises:
        WorkParseError: if ``raw`` is None or not an object
    """
    raw = _require_mapping(raw, "work summary")
    return WorkSummary(**_summary_fields(raw))


def parse_work(raw: RawWork) -> Work:
    """Parse one full work object (single-work body or a bulk ``work`` entry).

    Raises:
        WorkParseError: if ``raw`` is None or not an object
    """
    raw = _require_mapping(raw, "work")
    return Work(
        **_summary_fields(raw),
        short_description=raw.get("short-description"),
        citation=parse_citation(raw.get("citation")),
        type=coerce_work_type(raw.get("type")),
        contributors=parse_contributors(raw.get("contributors")),
        language_code=raw.get("language-code"),
        country=dig(raw, "country", "value"),
    )


def parse_work_summaries(listing: WorksListing) -> list[WorkSummary]:
    """Parse the first summary of every group in a works listing."""
    summaries = []
    for group in _as_list(dig(listing, "group")):
        entries = _as_list(dig(group, "work-summary"))
        if not entries or not isinstance(entries[0], Mapping):
            continue
        summaries.append(parse_work_summary(entries[0]))
    return summaries


def collect_put_codes(listing: WorksListing) -> list[int]:
    """Put codes of every summary in every group, in listing order."""
    codes = []
    for group in _as_list(dig(listing, "group")):
        for entry in _as_list(dig(group, "work-summary")):
            code = parse_put_code(dig(entry, "put-code"))
            if code is None:
                logger.debug("Skipping work summary without a numeric put-code")
                continue
            codes.append(code)
    return codes


def parse_bulk(payload: BulkWorks) -> list[Work]:
    """Parse a bulk works response.

    One result per entry, or none at all: an entry that carries an
    ``error`` (for example an unknown put code) instead of a ``work`` fails
    the whole response.

    Raises:
        WorkParseError: if any entry has no work object
    """
    works = []
    for index, entry in enumerate(_as_list(dig(payload, "bulk"))):
        work = dig(entry, "work")
        if not isinstance(work, Mapping):
            detail = dig(entry, "error", "developer-message") or dig(entry, "error", "user-message")
            logger.warning(f"Bulk entry {index} has no work: {detail or 'no details'}")
            raise WorkParseError(f"Cannot parse bulk entry {index}: {detail or 'no work object'}")
        works.append(parse_work(work))
    return works
