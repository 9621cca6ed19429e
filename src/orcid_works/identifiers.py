"""ORCID iD normalization and format checks."""

import re

from .exceptions import OrcidConfigError

# ORCID ID format: four blocks of four, last character may be the 'X' checksum
_ORCID_ID_PATTERN = re.compile(r'^\d{4}-\d{4}-\d{4}-\d{3}[0-9X]$')

# Registry URL prefix, e.g. "https://orcid.org/0000-0002-1825-0097"
_ORCID_URL_PREFIX = re.compile(r'^https?://(?:www\.)?orcid\.org/', re.IGNORECASE)


def sanitize_orcid_id(orcid_id: str) -> str:
    """Strip an optional ``https://orcid.org/`` prefix from an ORCID iD.

    Applying it twice gives the same result as applying it once. The
    identifier format itself is not checked here; see validate_orcid_id().

    Raises:
        OrcidConfigError: if the identifier is empty or not a string
    """
    if not orcid_id or not isinstance(orcid_id, str) or not orcid_id.strip():
        raise OrcidConfigError("ORCID ID is required")
    return _ORCID_URL_PREFIX.sub("", orcid_id.strip(), count=1)


def validate_orcid_id(orcid_id: str) -> bool:
    """Validate ORCID ID format.

    ORCID IDs must match the pattern: XXXX-XXXX-XXXX-XXXX where X is a digit,
    and the last character can be a digit or 'X'.

    Args:
        orcid_id: The ORCID ID to validate

    Returns:
        True if valid format, False otherwise
    """
    if not orcid_id or not isinstance(orcid_id, str):
        return False
    return _ORCID_ID_PATTERN.match(orcid_id) is not None
