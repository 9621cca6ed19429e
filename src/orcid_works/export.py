"""JSON export for parsed works.

Wraps work records in a standard JSON envelope with a _meta section, the
same envelope for summaries and full works.
"""

from collections.abc import Sequence
from datetime import datetime, timezone

from .models import AnyWork, WorkStats


def export_stats(stats: WorkStats) -> dict:
    """Export statistics as a JSON-serializable dict.

    Year keys become strings, as JSON object keys must be.
    """
    data = stats.to_dict()
    data["by_year"] = {str(year): count for year, count in sorted(stats.by_year.items())}
    return data


def export_works(
    orcid_id: str,
    works: Sequence[AnyWork],
    stats: WorkStats | None = None,
    section: str = "orcid-works",
) -> dict:
    """Export works as a JSON-serializable dict.

    Args:
        orcid_id: ORCID identifier
        works: Parsed work summaries or full works
        stats: Optional statistics to include alongside the works
        section: Name recorded in _meta.section

    Returns:
        Dict ready for JSON serialization, or {} when there are no works
    """
    if not works:
        return {}

    exported = {
        "_meta": {
            "section": section,
            "orcid_id": orcid_id,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "total_count": len(works),
        },
        "works": [work.to_dict() for work in works],
    }
    if stats is not None:
        exported["stats"] = export_stats(stats)
    return exported


def export_groups(orcid_id: str, groups: dict[str, list[AnyWork]], key: str) -> dict:
    """Export the result of query.group_by() as a JSON-serializable dict."""
    total = sum(len(members) for members in groups.values())
    if total == 0:
        return {}

    return {
        "_meta": {
            "section": "orcid-works-grouped",
            "orcid_id": orcid_id,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "group_by": key,
            "total_count": total,
        },
        "groups": {
            name: [work.to_dict() for work in members]
            for name, members in groups.items()
        },
    }
