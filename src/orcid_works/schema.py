"""ORCID works API schema - the raw JSON shapes orcid_works.parser reads.

Full schema documentation:
    https://github.com/ORCID/orcid-model/tree/master/src/main/resources/record_3.0
    https://info.orcid.org/documentation/integration-guide/orcid-record/#h-works

API version: 3.0
Endpoints:
    GET https://pub.orcid.org/v3.0/{orcid}/works              -> WorksListing
    GET https://pub.orcid.org/v3.0/{orcid}/work/{put-code}    -> RawWork
    GET https://pub.orcid.org/v3.0/{orcid}/works/{c1},{c2}    -> BulkWorks

These types document the structure; nothing validates responses against
them. Every field is optional in practice, and the parser treats them so.
"""

from typing import TypedDict


# =============================================================================
# Value Wrappers
# ORCID often wraps simple values in {"value": ...} objects
# =============================================================================

class StringValue(TypedDict, total=False):
    """Wrapper for string values."""
    value: str


class DatePart(TypedDict, total=False):
    """Year, month, or day component."""
    value: str  # e.g., "2024", "01", "15"


class EpochValue(TypedDict, total=False):
    """Timestamp in milliseconds since the Unix epoch."""
    value: int  # e.g., 1609459200000


# =============================================================================
# Identifiers
# =============================================================================

class ExternalId(TypedDict, total=False):
    """External identifier (DOI, PMID, etc.).

    Path: group/work-summary/external-ids/external-id[]
    """
    external_id_type: str           # "doi", "pmid", "isbn", "issn", etc.
    external_id_value: str          # The actual identifier value
    external_id_url: StringValue    # Optional URL
    external_id_relationship: str   # "self", "part-of", "version-of"


class ExternalIds(TypedDict, total=False):
    """Container for external identifiers."""
    external_id: list[ExternalId]


# =============================================================================
# Publication Date
# =============================================================================

class PublicationDate(TypedDict, total=False):
    """Publication date with optional precision.

    Note: May have year only, year+month, or full date
    """
    year: DatePart
    month: DatePart
    day: DatePart


# =============================================================================
# Contributors (Authors)
# =============================================================================

class ContributorAttributes(TypedDict, total=False):
    """Contributor role and sequence."""
    contributor_sequence: str  # "first", "additional"
    contributor_role: str      # "author", "editor", etc.


class Contributor(TypedDict, total=False):
    """Individual contributor to a work.

    Path: contributors/contributor[] (full work only)
    """
    credit_name: StringValue
    contributor_attributes: ContributorAttributes


class Contributors(TypedDict, total=False):
    """Container for contributors."""
    contributor: list[Contributor]


# =============================================================================
# Work
# =============================================================================

class WorkTitleWrapper(TypedDict, total=False):
    """Work title with optional subtitle and translated title."""
    title: StringValue
    subtitle: StringValue
    translated_title: StringValue


class Source(TypedDict, total=False):
    """Who added the work to the record."""
    source_name: StringValue


class Citation(TypedDict, total=False):
    """Citation block; citation_type is usually "bibtex"."""
    citation_type: str
    citation_value: str


class RawWorkSummary(TypedDict, total=False):
    """Summary of a single work.

    Path: group[]/work-summary[]
    """
    put_code: int
    created_date: EpochValue
    last_modified_date: EpochValue
    source: Source
    title: WorkTitleWrapper
    external_ids: ExternalIds
    type: str                       # see orcid_works.work_types.WorkType
    publication_date: PublicationDate
    journal_title: StringValue
    url: StringValue


class RawWork(RawWorkSummary, total=False):
    """Full work record.

    Path: bulk[]/work, or the whole body of GET /{orcid}/work/{put-code}
    """
    short_description: str
    citation: Citation
    contributors: Contributors
    language_code: str
    country: StringValue


class WorkGroup(TypedDict, total=False):
    """Group of related works (e.g., same work from multiple sources).

    Note: We use the first work-summary in each group for listings.
    """
    work_summary: list[RawWorkSummary]
    external_ids: ExternalIds  # Merged external IDs across group


class WorksListing(TypedDict, total=False):
    """Body of GET /{orcid}/works."""
    group: list[WorkGroup]


class BulkEntry(TypedDict, total=False):
    """One bulk result: either a work or an error for an unknown put code."""
    work: RawWork
    error: dict


class BulkWorks(TypedDict, total=False):
    """Body of GET /{orcid}/works/{c1},{c2},..."""
    bulk: list[BulkEntry]


# =============================================================================
# Field Mapping: JSON keys to Python
# =============================================================================
# ORCID JSON uses kebab-case, Python uses snake_case.
# When accessing the actual JSON, use the kebab-case keys:
#
#   listing["group"][0]["work-summary"][0]["put-code"]
#   work["publication-date"]["year"]["value"]
#   work["external-ids"]["external-id"]
#   contributor["contributor-attributes"]["contributor-role"]
#
# The TypedDict definitions above use snake_case for Python conventions,
# but the actual JSON access must use the original kebab-case keys.
# =============================================================================
