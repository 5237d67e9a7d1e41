"""Orchestrator: wires aggregator, runner and the SQLite log.

Data flow:
  1. Aggregator search -> raw postings (all sites, concurrent)
  2. Recency filter -> recent postings
  3. Record search run
  4. Skip URLs already recorded as applied
  5. Runner apply -> one outcome per job
  6. Record every outcome
"""

import json
import logging
import sqlite3
from datetime import UTC, datetime

from jobpilot.core.db import has_applied, insert_search_run, record_outcome
from jobpilot.core.schemas import (
    ApplicationOutcome,
    ExperienceLevel,
    JobPosting,
    SearchResponse,
)
from jobpilot.pipeline.aggregator import JobSearchAggregator
from jobpilot.pipeline.runner import ApplicationRunner
from jobpilot.profile.schema import CandidateProfile

logger = logging.getLogger(__name__)


async def run_search(
    aggregator: JobSearchAggregator,
    conn: sqlite3.Connection,
    title: str,
    experience_level: ExperienceLevel,
) -> SearchResponse:
    """Search every site, filter for recency and record the run."""
    started_at = datetime.now(UTC)
    raw = await aggregator.collect(title, experience_level)
    recent = aggregator.filter(raw)
    finished_at = datetime.now(UTC)

    insert_search_run(
        conn,
        sites=[a.site_id for a in aggregator.adapters],
        title=title,
        experience_level=experience_level.value,
        raw_count=len(raw),
        filtered_count=len(recent),
        started_at=started_at,
        finished_at=finished_at,
    )
    logger.info("Search '%s': %d raw, %d recent", title, len(raw), len(recent))
    return SearchResponse(jobs=recent, total_count=len(recent))


async def run_applications(
    runner: ApplicationRunner,
    conn: sqlite3.Connection,
    jobs: list[JobPosting],
    profile: CandidateProfile,
) -> list[ApplicationOutcome]:
    """Apply to each job not already applied to, recording every outcome.

    The same URL listed by two sites is attempted once.
    """
    pending: list[str] = []
    for job in jobs:
        if job.url in pending:
            continue
        if has_applied(conn, job.url):
            logger.info("Skipping already-applied job: %s", job.url)
            continue
        pending.append(job.url)

    logger.info("Applying to %d of %d jobs", len(pending), len(jobs))
    outcomes = await runner.apply_all(pending, profile)
    for outcome in outcomes:
        record_outcome(conn, outcome)
    return outcomes


def export_jobs_json(response: SearchResponse) -> str:
    """Export a search response as a JSON string."""
    return response.model_dump_json(indent=2)


def export_outcomes_json(outcomes: list[ApplicationOutcome]) -> str:
    """Export application outcomes as a JSON string."""
    data = [o.model_dump(mode="json") for o in outcomes]
    return json.dumps(data, indent=2)
