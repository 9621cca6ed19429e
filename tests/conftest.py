"""Shared pytest fixtures for orcid_works tests."""

import copy
import logging

import pytest

from orcid_works import config as config_module

ORCID_ID = "0000-0002-1825-0097"
BASE_URL = "https://pub.orcid.org/v3.0"


def make_summary(put_code, title="Paper", year=None, month=None, day=None, **extra):
    """Helper to build a minimal ORCID work-summary object."""
    date = {}
    if year is not None:
        date["year"] = {"value": year}
    if month is not None:
        date["month"] = {"value": month}
    if day is not None:
        date["day"] = {"value": day}

    summary = {
        "put-code": put_code,
        "title": {"title": {"value": title}} if title is not None else None,
        "type": "journal-article",
        "publication-date": date or None,
        "external-ids": {"external-id": []},
    }
    summary.update(extra)
    return summary


def make_listing(*summary_groups):
    """Build a works listing; each argument is the list of summaries in one group."""
    return {"group": [{"work-summary": list(group)} for group in summary_groups]}


class FakeTransport:
    """Async stand-in for transport.fetch_json that replays canned responses.

    Responses are matched by URL suffix; an Exception instance is raised
    instead of returned.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    async def __call__(self, url, timeout):
        self.calls.append((url, timeout))
        for suffix, response in self.responses.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                return copy.deepcopy(response)
        raise AssertionError(f"Unexpected request: {url}")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and ORCID_* environment out of tests."""
    for name in ("ORCID_API_BASE_URL", "ORCID_API_TIMEOUT", "ORCID_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so level and handlers don't leak between tests."""
    package_logger = logging.getLogger("orcid_works")
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_summary():
    """Work summary with the fields the registry usually fills in."""
    return {
        "put-code": 123,
        "created-date": {"value": 1609459200000},
        "last-modified-date": {"value": "1612137600000"},
        "source": {"source-name": {"value": "ORCID"}},
        "title": {"title": {"value": "Paper A"}},
        "external-ids": {
            "external-id": [
                {
                    "external-id-type": "doi",
                    "external-id-value": "10.1000/xyz",
                    "external-id-url": {"value": "https://doi.org/10.1000/xyz"},
                    "external-id-relationship": "self",
                }
            ]
        },
        "type": "journal-article",
        "publication-date": {"year": {"value": "2021"}, "month": {"value": "06"}, "day": {"value": "01"}},
        "journal-title": {"value": "Journal X"},
        "url": {"value": "https://example.com/a"},
    }


@pytest.fixture
def sample_work():
    """Full work object as returned inside a bulk response."""
    return {
        "put-code": 123,
        "created-date": {"value": 1609459200000},
        "last-modified-date": {"value": 1612137600000},
        "source": {"source-name": {"value": "ORCID"}},
        "title": {
            "title": {"value": "Paper A"},
            "subtitle": {"value": "Sub"},
            "translated-title": {"value": "Papier A", "language-code": "fr"},
        },
        "type": "journal-article",
        "publication-date": {"year": {"value": 2021}, "month": {"value": 6}, "day": {"value": 1}},
        "journal-title": {"value": "Journal X"},
        "short-description": "desc",
        "citation": {"citation-type": "bibtex", "citation-value": "@article{a, title={Paper A}}"},
        "url": {"value": "https://example.com/a"},
        "contributors": {
            "contributor": [
                {
                    "credit-name": {"value": "Alice Smith"},
                    "contributor-attributes": {
                        "contributor-role": "author",
                        "contributor-sequence": "first",
                    },
                },
                {"credit-name": {"value": "Bob Jones"}, "contributor-attributes": None},
            ]
        },
        "external-ids": {"external-id": []},
        "language-code": "en",
        "country": {"value": "US"},
    }


@pytest.fixture
def works_listing(sample_summary):
    """Works listing with two groups; the second has two sources for one work."""
    return make_listing(
        [sample_summary],
        [make_summary(456, "Paper B", year=2019), make_summary(457, "Paper B (preprint)", year=2018)],
    )


@pytest.fixture
def bulk_response(sample_work):
    """Bulk response for put codes 123 and 456."""
    second = copy.deepcopy(sample_work)
    second["put-code"] = 456
    second["title"] = {"title": {"value": "Paper B"}}
    second["type"] = "book"
    second["publication-date"] = {"year": {"value": "2019"}}
    return {"bulk": [{"work": sample_work}, {"work": second}]}
