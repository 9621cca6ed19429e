"""Command-line interface for fetching ORCID works as JSON."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from orcid_works.client import OrcidClient
from orcid_works.config import get_config
from orcid_works.exceptions import OrcidConfigError, OrcidFetchError, WorkParseError
from orcid_works.export import export_groups, export_stats, export_works
from orcid_works.identifiers import sanitize_orcid_id, validate_orcid_id
from orcid_works.logging_config import setup_logging
from orcid_works.query import filter_by_type, filter_by_year_range, get_stats, group_by, sort_by_date
from orcid_works.work_types import WorkType, parse_work_type

MODE_SUMMARIES = "summaries"
MODE_WORKS = "works"
MODE_STATS = "stats"
VALID_MODES = [MODE_SUMMARIES, MODE_WORKS, MODE_STATS]

# Module logger
logger = logging.getLogger("orcid_works.cli")


def parse_year_filter(year_arg: str | None) -> tuple[int, int] | None:
    """Parse year argument into a (start_year, end_year) tuple.

    Formats:
        - "YYYY-YYYY": Year range (e.g., "2020-2024")
        - "YYYY": Single calendar year (e.g., "2024" -> 2024-2024)
        - "all": Include all works (returns None)
        - None: No filter specified (returns None)

    Returns:
        Tuple of (start_year, end_year) as integers, or None for no filtering.
    """
    if year_arg is None or year_arg.strip().lower() == "all":
        return None

    year_arg = year_arg.strip()

    # Range format: YYYY-YYYY
    if "-" in year_arg:
        parts = year_arg.split("-")
        if len(parts) != 2:
            logger.warning(f"Invalid year range '{year_arg}', ignoring filter")
            return None
        try:
            start = int(parts[0])
            end = int(parts[1])
        except ValueError:
            logger.warning(f"Invalid year range '{year_arg}', ignoring filter")
            return None

        if start > end:
            logger.warning(f"Invalid year range '{year_arg}' (start > end), ignoring filter")
            return None
        return (start, end)

    # Single year format: YYYY
    try:
        year = int(year_arg)
    except ValueError:
        logger.warning(f"Invalid year '{year_arg}', ignoring filter")
        return None
    return (year, year)


def parse_type_args(type_args: list[str] | None) -> list[WorkType]:
    """Resolve --type values; raises ValueError naming the first unknown one."""
    types = []
    for arg in type_args or []:
        work_type = parse_work_type(arg)
        if work_type is WorkType.UNSUPPORTED and arg.strip().lower() != WorkType.UNSUPPORTED.value:
            raise ValueError(arg)
        types.append(work_type)
    return types


async def _collect(client: OrcidClient, args, types, year_filter) -> dict:
    """Fetch, filter and export according to the parsed arguments."""
    if args.mode == MODE_SUMMARIES:
        works = await client.fetch_work_summaries()
    else:
        works = await client.get_works()
    logger.info(f"Found {len(works)} works for {client.orcid_id}")

    if types:
        works = filter_by_type(works, types)
    if year_filter:
        works = filter_by_year_range(works, *year_filter)
        logger.info(f"{len(works)} works after year filter ({year_filter[0]}-{year_filter[1]})")
    works = sort_by_date(works, args.sort)

    if args.mode == MODE_STATS:
        return export_stats(get_stats(works))
    if args.group_by:
        return export_groups(client.orcid_id, group_by(works, args.group_by), args.group_by)
    section = "orcid-work-summaries" if args.mode == MODE_SUMMARIES else "orcid-works"
    return export_works(client.orcid_id, works, section=section)


def main(argv: list[str] | None = None):
    """Fetch works for an ORCID iD and print or write them as JSON."""
    parser = argparse.ArgumentParser(
        description="Fetch works from the ORCID public API as normalized JSON."
    )
    parser.add_argument("--orcid", required=True, help="ORCID iD, bare or as https://orcid.org/ URL")
    parser.add_argument(
        "--mode",
        default=MODE_WORKS,
        choices=VALID_MODES,
        help="summaries: works listing only; works: full records (first 100); stats: aggregate counts"
    )
    parser.add_argument(
        "--type",
        dest="types",
        action="append",
        default=None,
        help="Keep only this work type (name or value, e.g. ARTICLE or journal-article). Repeatable."
    )
    parser.add_argument(
        "--year",
        default=None,
        help="Year filter (YYYY-YYYY range, YYYY single year, or 'all')"
    )
    parser.add_argument("--sort", default="desc", choices=["asc", "desc"], help="Date order (default: desc)")
    parser.add_argument("--group-by", default=None, help="Group works by this field (e.g. type, journal_title)")
    parser.add_argument("--output", default=None, help="Write JSON to this file instead of stdout")
    parser.add_argument("--base-url", default=None, help="API root (default from configuration)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML configuration file (optional, defaults to .orcid-works.yaml)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from configuration, INFO)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional log file path (logs to stderr if not specified)"
    )

    args = parser.parse_args(argv)

    # Load configuration (if specified via --config, or from default locations)
    config_file = Path(args.config) if args.config else None
    config = get_config(config_file)

    log_file = Path(args.log_file) if args.log_file else None
    setup_logging(level=args.log_level or config.log_level, log_file=log_file)
    logger.debug(f"Using configuration (API: {config.api_base_url}, timeout: {config.api_timeout}s)")

    if args.mode == MODE_SUMMARIES and args.types:
        parser.error("--type cannot be used with --mode summaries (summaries carry no type)")

    try:
        types = parse_type_args(args.types)
    except ValueError as e:
        parser.error(f"Unknown work type: {e}")

    try:
        orcid_id = sanitize_orcid_id(args.orcid)
    except OrcidConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    if not validate_orcid_id(orcid_id):
        logger.error(f"Invalid ORCID ID format: {orcid_id}")
        logger.error("ORCID IDs must match the pattern: XXXX-XXXX-XXXX-XXXX")
        sys.exit(1)

    year_filter = parse_year_filter(args.year)
    client = OrcidClient(orcid_id, base_url=args.base_url, timeout=args.timeout, config=config)

    try:
        result = asyncio.run(_collect(client, args, types, year_filter))
    except (OrcidFetchError, WorkParseError) as e:
        logger.error(f"ORCID API fetch failed for {orcid_id}: {e}")
        sys.exit(2)

    if not result:
        logger.info("No works matched; nothing to write.")
        return

    text = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Generated: {output_file}")
        print(str(output_file))
    else:
        print(text)
