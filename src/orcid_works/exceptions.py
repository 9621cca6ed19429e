"""Exception types raised by orcid-works.

Configuration and bounds errors are raised synchronously, before any
network access. Fetch errors are raised after (or instead of) a response.
None of them are retried.
"""


class OrcidError(Exception):
    """Base class for all orcid-works errors."""


class OrcidConfigError(OrcidError, ValueError):
    """Raised when a client is constructed with an unusable identifier."""


class TooManyPutCodesError(OrcidError, ValueError):
    """Raised when a bulk fetch asks for more put codes than the API allows."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"Too many put codes: {count} (max {limit})")


class WorkParseError(OrcidError, ValueError):
    """Raised when there is no work object to parse at all."""


class OrcidFetchError(OrcidError):
    """Raised when a request to the ORCID API fails."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)


class OrcidHTTPError(OrcidFetchError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}", url)


class OrcidTimeoutError(OrcidFetchError):
    """No response arrived within the configured timeout."""

    def __init__(self, url: str | None = None, timeout: float | None = None):
        self.timeout = timeout
        super().__init__(f"Request timeout after {timeout}s", url)


class OrcidTransportError(OrcidFetchError):
    """Connection failure or an unreadable response body."""
