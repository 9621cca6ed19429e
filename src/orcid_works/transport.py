"""HTTP transport for the ORCID public API.

fetch_json() is the only function that touches the network. The blocking
``requests`` call runs in a worker thread so the client can await it and
race it against its own timeout.
"""

import asyncio
import logging

import requests

from .config import get_config
from .exceptions import OrcidHTTPError, OrcidTimeoutError, OrcidTransportError

# Module logger
logger = logging.getLogger("orcid_works.transport")


def default_headers() -> dict[str, str]:
    """Headers sent with every ORCID API request."""
    return {
        "Accept": "application/json",
        "User-Agent": get_config().user_agent,
    }


def get_json(url: str, timeout: float, headers: dict[str, str] | None = None):
    """Blocking GET returning the decoded JSON body.

    Raises:
        OrcidTimeoutError: the request timed out
        OrcidHTTPError: the API answered with a non-2xx status
        OrcidTransportError: connection failure or a body that is not JSON
    """
    if headers is None:
        headers = default_headers()

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.Timeout as e:
        logger.warning(f"Request to {url} timed out after {timeout}s")
        raise OrcidTimeoutError(url, timeout) from e
    except requests.RequestException as e:
        logger.warning(f"Network error fetching {url}: {type(e).__name__}: {e}")
        raise OrcidTransportError(f"Network error: {type(e).__name__}: {e}", url) from e

    if not 200 <= response.status_code < 300:
        logger.warning(f"ORCID API returned {response.status_code} for {url}")
        raise OrcidHTTPError(response.status_code, url)

    try:
        return response.json()
    except ValueError as e:  # includes json.JSONDecodeError
        logger.warning(f"Failed to parse JSON response from {url}: {e}")
        raise OrcidTransportError(f"Invalid JSON in response: {e}", url) from e


async def fetch_json(url: str, timeout: float):
    """Async wrapper around get_json().

    The worker thread is not interrupted when the caller stops waiting;
    ``requests`` enforces the same timeout so the thread ends on its own.
    """
    return await asyncio.to_thread(get_json, url, timeout)
