"""Async client for the works section of an ORCID record.

    client = OrcidClient("https://orcid.org/0000-0002-1825-0097")
    works = await client.get_works()
    articles = await client.filter_by_type(WorkType.ARTICLE)

Retrieval methods always hit the network. get_works() and the convenience
query methods read from a per-client cache that is filled by the first
get_works() call and replaced only by refresh().
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from enum import Enum
from typing import Any

from . import query
from .config import Config, get_config
from .exceptions import OrcidTimeoutError, TooManyPutCodesError
from .identifiers import sanitize_orcid_id, validate_orcid_id
from .models import Work, WorkStats, WorkSummary
from .parser import collect_put_codes, parse_bulk, parse_work, parse_work_summaries
from .transport import fetch_json as default_fetch_json

# Module logger
logger = logging.getLogger("orcid_works.client")

# The bulk works endpoint accepts at most this many put codes per request
MAX_BULK_PUT_CODES = 100

FetchJson = Callable[[str, float], Awaitable[Any]]


class CacheState(Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class WorkCache:
    """Works from the most recent full fetch, or nothing yet.

    ``works`` hands out a new list each time; callers cannot edit the cache.
    """

    def __init__(self):
        self._state = CacheState.EMPTY
        self._works: list[Work] = []

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def works(self) -> list[Work]:
        if self._state is CacheState.EMPTY:
            raise LookupError("work cache is empty")
        return list(self._works)

    def populate(self, works: list[Work]) -> None:
        self._works = list(works)
        self._state = CacheState.POPULATED

    def clear(self) -> None:
        self._works = []
        self._state = CacheState.EMPTY


def _coerce_put_code(code) -> int:
    if isinstance(code, bool):
        raise ValueError(f"Invalid put code: {code!r}")
    try:
        return int(str(code).strip()) if isinstance(code, str) else int(code)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid put code: {code!r}") from e


class OrcidClient:
    """Client for one researcher's works on the ORCID public API."""

    def __init__(
        self,
        orcid_id: str,
        base_url: str | None = None,
        timeout: float | None = None,
        fetch_json: FetchJson | None = None,
        config: Config | None = None,
    ):
        """Create a client.

        Args:
            orcid_id: ORCID iD, bare or as an https://orcid.org/ URL
            base_url: API root (default: config ``api.base_url``)
            timeout: Per-request timeout in seconds (default: config ``api.timeout``)
            fetch_json: Transport coroutine ``(url, timeout) -> JSON``
            config: Configuration to read defaults from (default: get_config())

        Raises:
            OrcidConfigError: if ``orcid_id`` is empty
        """
        self._orcid_id = sanitize_orcid_id(orcid_id)
        if not validate_orcid_id(self._orcid_id):
            logger.warning(f"ORCID ID {self._orcid_id!r} does not look like XXXX-XXXX-XXXX-XXXX")

        if config is None:
            config = get_config()
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.timeout = timeout or config.api_timeout
        self._fetch_json = fetch_json or default_fetch_json
        self._cache = WorkCache()

    @property
    def orcid_id(self) -> str:
        """The ORCID iD without any URL prefix."""
        return self._orcid_id

    @property
    def cache_state(self) -> CacheState:
        return self._cache.state

    def __repr__(self) -> str:
        return f"OrcidClient({self._orcid_id!r}, base_url={self.base_url!r})"

    # ── Requests ──────────────────────────────────────────────────────────

    def _url(self, *parts) -> str:
        return "/".join([self.base_url, self._orcid_id, *(str(p) for p in parts)])

    async def _request(self, url: str):
        """Fetch ``url``, giving up after ``self.timeout`` seconds."""
        logger.debug(f"GET {url}")
        try:
            return await asyncio.wait_for(self._fetch_json(url, self.timeout), self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Request to {url} timed out after {self.timeout}s")
            raise OrcidTimeoutError(url, self.timeout) from e

    # ── Retrieval ─────────────────────────────────────────────────────────

    async def fetch_work_summaries(self) -> list[WorkSummary]:
        """Fetch the works listing: the first summary of every work group."""
        listing = await self._request(self._url("works"))
        summaries = parse_work_summaries(listing)
        logger.info(f"Fetched {len(summaries)} work summaries for {self._orcid_id}")
        return summaries

    async def fetch_work(self, put_code: int | str) -> Work:
        """Fetch one full work through the single-work endpoint."""
        data = await self._request(self._url("work", _coerce_put_code(put_code)))
        return parse_work(data)

    async def fetch_with_codes(self, put_codes: list[int]) -> list[Work]:
        """Fetch full works for up to 100 put codes in one bulk request.

        Raises:
            TooManyPutCodesError: more than 100 codes, raised before any request
        """
        if len(put_codes) > MAX_BULK_PUT_CODES:
            raise TooManyPutCodesError(len(put_codes), MAX_BULK_PUT_CODES)
        if not put_codes:
            return []

        joined = ",".join(str(code) for code in put_codes)
        payload = await self._request(self._url("works", joined))
        works = parse_bulk(payload)
        logger.info(f"Fetched {len(works)}/{len(put_codes)} works for {self._orcid_id}")
        return works

    async def fetch_works(self, put_codes: int | str | Iterable | None = None) -> list[Work]:
        """Fetch full works, bypassing the cache.

        Args:
            put_codes: A single put code, a list of them, or None. With None
                (or an empty list) the works listing is fetched first and its
                first 100 put codes are used.
        """
        if isinstance(put_codes, (int, str)):
            codes = [_coerce_put_code(put_codes)]
        elif put_codes:
            codes = [_coerce_put_code(code) for code in put_codes]
        else:
            listing = await self._request(self._url("works"))
            codes = collect_put_codes(listing)
            if len(codes) > MAX_BULK_PUT_CODES:
                logger.info(
                    f"{self._orcid_id} has {len(codes)} works; "
                    f"fetching the first {MAX_BULK_PUT_CODES}"
                )
            codes = codes[:MAX_BULK_PUT_CODES]

        return await self.fetch_with_codes(codes)

    async def get_works(self) -> list[Work]:
        """Cached works, fetching them on first use.

        Concurrent calls on an empty cache each fetch; the last one to finish
        fills the cache.
        """
        if self._cache.state is CacheState.POPULATED:
            return self._cache.works

        works = await self.fetch_works()
        self._cache.populate(works)
        return self._cache.works

    async def refresh(self) -> list[Work]:
        """Re-fetch all works and replace the cache."""
        works = await self.fetch_works()
        self._cache.populate(works)
        return self._cache.works

    def clear_cache(self) -> None:
        self._cache.clear()

    # ── Queries over the cached works ─────────────────────────────────────

    async def filter_by_type(self, types) -> list[Work]:
        return query.filter_by_type(await self.get_works(), types)

    async def filter_by_year_range(self, start: int, end: int) -> list[Work]:
        return query.filter_by_year_range(await self.get_works(), start, end)

    async def sort_by_date(self, order: str = "desc") -> list[Work]:
        return query.sort_by_date(await self.get_works(), order)

    async def get_stats(self) -> WorkStats:
        return query.get_stats(await self.get_works())

    async def group_by(self, key: str) -> dict[str, list[Work]]:
        return query.group_by(await self.get_works(), key)
