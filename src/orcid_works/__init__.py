"""orcid-works: fetch, normalize and query works from the ORCID public API."""

__version__ = "0.1.0"

from orcid_works.client import CacheState, OrcidClient
from orcid_works.exceptions import (
    OrcidConfigError,
    OrcidError,
    OrcidFetchError,
    OrcidHTTPError,
    OrcidTimeoutError,
    OrcidTransportError,
    TooManyPutCodesError,
    WorkParseError,
)
from orcid_works.models import Citation, Contributor, ExternalId, Work, WorkStats, WorkSummary, YearRange
from orcid_works.parser import parse_work, parse_work_summary
from orcid_works.query import filter_by_type, filter_by_year_range, get_stats, group_by, sort_by_date
from orcid_works.work_types import WorkType, format_work_type, parse_work_type
