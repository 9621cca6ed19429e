"""Tests for orcid_works.export module."""

import json

from orcid_works.export import export_groups, export_stats, export_works
from orcid_works.models import Work, WorkSummary
from orcid_works.query import get_stats, group_by
from orcid_works.work_types import WorkType

from conftest import ORCID_ID


def sample_works():
    return [
        Work(put_code=1, title="Paper A", type=WorkType.ARTICLE, publication_year=2021),
        Work(put_code=2, title="Book B", type=WorkType.BOOK, publication_year=2019),
    ]


def test_export_works_envelope():
    result = export_works(ORCID_ID, sample_works())

    assert result["_meta"]["section"] == "orcid-works"
    assert result["_meta"]["orcid_id"] == ORCID_ID
    assert result["_meta"]["total_count"] == 2
    assert "generated_at" in result["_meta"]
    assert [w["put_code"] for w in result["works"]] == [1, 2]
    assert result["works"][0]["type"] == "journal-article"


def test_export_works_is_json_serializable():
    works = sample_works()
    result = export_works(ORCID_ID, works, stats=get_stats(works))
    json.dumps(result)


def test_export_works_with_stats():
    works = sample_works()
    result = export_works(ORCID_ID, works, stats=get_stats(works))
    assert result["stats"]["total"] == 2
    assert result["stats"]["by_year"] == {"2019": 1, "2021": 1}


def test_export_works_empty():
    assert export_works(ORCID_ID, []) == {}


def test_export_summaries_section_name():
    summaries = [WorkSummary(put_code=5, title="S")]
    result = export_works(ORCID_ID, summaries, section="orcid-work-summaries")
    assert result["_meta"]["section"] == "orcid-work-summaries"
    assert "type" not in result["works"][0]


def test_export_stats_year_keys_sorted_strings():
    works = [
        Work(put_code=1, publication_year=2022),
        Work(put_code=2, publication_year=2001),
        Work(put_code=3),
    ]
    data = export_stats(get_stats(works))
    assert list(data["by_year"]) == ["2001", "2022"]
    assert data["year_range"] == {"min": 2001, "max": 2022}
    assert data["by_type"] == {"unsupported": 3}


def test_export_groups():
    works = sample_works()
    result = export_groups(ORCID_ID, group_by(works, "type"), "type")

    assert result["_meta"]["group_by"] == "type"
    assert result["_meta"]["total_count"] == 2
    assert [w["put_code"] for w in result["groups"]["book"]] == [2]
    json.dumps(result)


def test_export_groups_empty():
    assert export_groups(ORCID_ID, {}, "type") == {}
