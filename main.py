"""CLI entry point for jobpilot."""

import argparse
import asyncio
import logging
import sys

from jobpilot.core.config import Settings
from jobpilot.core.db import init_db, record_outcome
from jobpilot.core.schemas import ExperienceLevel
from jobpilot.pipeline.aggregator import JobSearchAggregator
from jobpilot.pipeline.filters import RecencyFilter
from jobpilot.pipeline.orchestrator import (
    export_jobs_json,
    export_outcomes_json,
    run_applications,
    run_search,
)
from jobpilot.pipeline.runner import ApplicationRunner
from jobpilot.platforms.registry import build_adapters
from jobpilot.profile.parser import parse_resume
from jobpilot.profile.schema import CandidateProfile

_LEVELS = [level.value for level in ExperienceLevel]


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML file (default: built-in defaults)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def _add_query(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--title",
        default="Software Developer",
        help="Job title to search for (default: Software Developer)",
    )
    parser.add_argument(
        "--level",
        default="mid",
        choices=_LEVELS,
        help="Experience level (default: mid)",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="jobpilot - search job sites and auto-apply with a resume profile",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- parse-resume ---
    parse_parser = subparsers.add_parser(
        "parse-resume",
        help="Extract a candidate profile from a resume (PDF or text)",
    )
    parse_parser.add_argument(
        "--resume",
        default=None,
        help="Path to resume file (default: resume.source_path from settings)",
    )
    parse_parser.add_argument(
        "--output",
        default="config/profile.yaml",
        help="Output path for profile YAML (default: config/profile.yaml)",
    )
    _add_common(parse_parser)

    # --- search ---
    search_parser = subparsers.add_parser("search", help="Search all configured job sites")
    _add_query(search_parser)
    search_parser.add_argument(
        "--export",
        choices=["json"],
        help="Export results to format (json)",
    )
    _add_common(search_parser)

    # --- apply ---
    apply_parser = subparsers.add_parser("apply", help="Apply to a single job URL")
    apply_parser.add_argument("--url", required=True, help="Job posting URL")
    apply_parser.add_argument(
        "--profile",
        default="config/profile.yaml",
        help="Path to profile YAML (default: config/profile.yaml)",
    )
    _add_common(apply_parser)

    # --- run ---
    run_parser = subparsers.add_parser("run", help="Search, then apply to every recent job")
    _add_query(run_parser)
    source = run_parser.add_mutually_exclusive_group()
    source.add_argument("--profile", default=None, help="Path to profile YAML")
    source.add_argument("--resume", default=None, help="Path to resume file")
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Search only; list the jobs that would be applied to",
    )
    _add_common(run_parser)

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_settings(path: str | None) -> Settings:
    if path is None:
        return Settings()
    return Settings.from_yaml(path)


def build_aggregator(settings: Settings) -> JobSearchAggregator:
    return JobSearchAggregator(
        build_adapters(settings),
        filters=[RecencyFilter(settings.search.recency_markers)],
        max_results_per_site=settings.search.max_results_per_site,
    )


def build_runner(settings: Settings) -> ApplicationRunner:
    return ApplicationRunner(build_adapters(settings), max_concurrent=settings.apply.max_concurrent)


def cmd_parse_resume(args: argparse.Namespace, settings: Settings) -> None:
    """Handle parse-resume subcommand."""
    source = args.resume or settings.resume.source_path
    print(f"Parsing resume from {source}...")
    profile = parse_resume(source)
    profile.to_yaml(args.output)
    print(f"Profile written to {args.output}")
    print(f"  Name: {profile.personal_info.name}")
    print(f"  Skills: {profile.skills}")
    print(f"  Experience entries: {len(profile.experience)}")
    print("Review the profile and then run: python main.py run --profile " + args.output)


async def cmd_search(args: argparse.Namespace, settings: Settings) -> None:
    """Handle search subcommand."""
    conn = init_db(settings.database.path)
    try:
        response = await run_search(
            build_aggregator(settings), conn, args.title, ExperienceLevel(args.level),
        )
    finally:
        conn.close()

    print(f"\nSearch complete: {response.total_count} recent jobs.")
    for job in response.jobs:
        print(f"  [{job.source}] {job.title} - {job.company} ({job.posted_date})")
        print(f"      {job.url}")

    if args.export == "json":
        print(f"\n{export_jobs_json(response)}")


async def cmd_apply(args: argparse.Namespace, settings: Settings) -> None:
    """Handle apply subcommand."""
    profile = CandidateProfile.from_yaml(args.profile)
    outcome = await build_runner(settings).apply(args.url, profile)

    conn = init_db(settings.database.path)
    try:
        record_outcome(conn, outcome)
    finally:
        conn.close()
    print(export_outcomes_json([outcome]))


async def cmd_run(args: argparse.Namespace, settings: Settings) -> None:
    """Handle run subcommand."""
    if args.profile:
        profile = CandidateProfile.from_yaml(args.profile)
    else:
        profile = parse_resume(args.resume or settings.resume.source_path)

    conn = init_db(settings.database.path)
    try:
        response = await run_search(
            build_aggregator(settings), conn, args.title, ExperienceLevel(args.level),
        )
        print(f"Found {response.total_count} recent jobs.")

        if args.dry_run:
            for job in response.jobs:
                print(f"[DRY RUN] Would apply: [{job.source}] {job.title} - {job.url}")
            return

        outcomes = await run_applications(build_runner(settings), conn, response.jobs, profile)
    finally:
        conn.close()

    counts: dict[str, int] = {}
    for outcome in outcomes:
        counts[outcome.status.value] = counts.get(outcome.status.value, 0) + 1
    print(f"\nRun complete: {len(outcomes)} attempts {counts}")
    for outcome in outcomes:
        print(f"  {outcome.status.value:<16} {outcome.job_url}  {outcome.message}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "parse-resume":
            cmd_parse_resume(args, settings)
        elif args.command == "search":
            asyncio.run(cmd_search(args, settings))
        elif args.command == "apply":
            asyncio.run(cmd_apply(args, settings))
        else:
            asyncio.run(cmd_run(args, settings))
    except (FileNotFoundError, ImportError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
