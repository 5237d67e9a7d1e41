"""Integration test: search and apply pipeline with fake adapters (no browser)."""

import json

import pytest

import main
from jobpilot.core.db import init_db, list_outcomes, record_outcome
from jobpilot.core.schemas import ApplicationOutcome, ApplicationStatus, ExperienceLevel
from jobpilot.pipeline.aggregator import JobSearchAggregator
from jobpilot.pipeline.orchestrator import (
    export_jobs_json,
    export_outcomes_json,
    run_applications,
    run_search,
)
from jobpilot.pipeline.runner import ApplicationRunner


@pytest.fixture()
def db(tmp_path):  # type: ignore[no-untyped-def]
    conn = init_db(tmp_path / "pipeline.db")
    yield conn
    conn.close()


# ---------------------------------------------------------------------------
# TestRunSearch
# ---------------------------------------------------------------------------


class TestRunSearch:
    async def test_records_raw_and_filtered_counts(  # type: ignore[no-untyped-def]
        self, db, adapter_factory, postings_factory,
    ) -> None:
        linkedin = adapter_factory(
            "linkedin", "linkedin.com", postings_factory("LinkedIn", "www.linkedin.com", 4),
        )
        naukri = adapter_factory(
            "naukri", "naukri.com",
            postings_factory("Naukri", "www.naukri.com", 3, posted_date="3 weeks ago"),
        )

        response = await run_search(
            JobSearchAggregator([linkedin, naukri]), db, "Python Developer", ExperienceLevel.MID,
        )

        assert response.total_count == 4
        row = db.execute("SELECT * FROM search_runs").fetchone()
        assert row["sites"] == "linkedin,naukri"
        assert row["title"] == "Python Developer"
        assert row["experience_level"] == "mid"
        assert row["raw_count"] == 7
        assert row["filtered_count"] == 4

    async def test_failing_site_still_records_run(  # type: ignore[no-untyped-def]
        self, db, adapter_factory,
    ) -> None:
        broken = adapter_factory("linkedin", "linkedin.com", search_error=RuntimeError("down"))

        response = await run_search(JobSearchAggregator([broken]), db, "Dev", ExperienceLevel.ENTRY)

        assert response.jobs == []
        assert db.execute("SELECT COUNT(*) FROM search_runs").fetchone()[0] == 1


# ---------------------------------------------------------------------------
# TestRunApplications
# ---------------------------------------------------------------------------


class TestRunApplications:
    async def test_applies_and_records_every_outcome(  # type: ignore[no-untyped-def]
        self, db, adapter_factory, postings_factory, profile,
    ) -> None:
        naukri = adapter_factory("naukri", "naukri.com")
        jobs = postings_factory("Naukri", "www.naukri.com", 3)

        outcomes = await run_applications(ApplicationRunner([naukri]), db, jobs, profile)

        assert [o.status for o in outcomes] == [ApplicationStatus.APPLIED] * 3
        assert [o.job_url for o in list_outcomes(db)] == [j.url for j in jobs]

    async def test_skips_already_applied(  # type: ignore[no-untyped-def]
        self, db, adapter_factory, postings_factory, profile,
    ) -> None:
        naukri = adapter_factory("naukri", "naukri.com")
        jobs = postings_factory("Naukri", "www.naukri.com", 3)
        record_outcome(db, ApplicationOutcome(
            job_url=jobs[1].url, status=ApplicationStatus.APPLIED, message="earlier run",
        ))

        outcomes = await run_applications(ApplicationRunner([naukri]), db, jobs, profile)

        assert naukri.applied == [jobs[0].url, jobs[2].url]
        assert len(outcomes) == 2

    async def test_failed_attempt_is_retried(  # type: ignore[no-untyped-def]
        self, db, adapter_factory, postings_factory, profile,
    ) -> None:
        naukri = adapter_factory("naukri", "naukri.com")
        jobs = postings_factory("Naukri", "www.naukri.com", 1)
        record_outcome(db, ApplicationOutcome.failed(jobs[0].url, "timeout"))

        await run_applications(ApplicationRunner([naukri]), db, jobs, profile)

        assert naukri.applied == [jobs[0].url]
        assert [o.status for o in list_outcomes(db, jobs[0].url)] == [
            ApplicationStatus.FAILED, ApplicationStatus.APPLIED,
        ]

    async def test_duplicate_urls_attempted_once(  # type: ignore[no-untyped-def]
        self, db, adapter_factory, postings_factory, profile,
    ) -> None:
        naukri = adapter_factory("naukri", "naukri.com")
        jobs = postings_factory("Naukri", "www.naukri.com", 2)

        await run_applications(ApplicationRunner([naukri]), db, jobs + jobs, profile)

        assert naukri.applied == [jobs[0].url, jobs[1].url]

    async def test_unsupported_urls_recorded_as_failed(  # type: ignore[no-untyped-def]
        self, db, adapter_factory, postings_factory, profile,
    ) -> None:
        jobs = postings_factory("Other", "jobs.example.org", 1)

        outcomes = await run_applications(
            ApplicationRunner([adapter_factory("naukri", "naukri.com")]), db, jobs, profile,
        )

        assert outcomes[0].status is ApplicationStatus.FAILED
        assert list_outcomes(db)[0].message.startswith("Unsupported job site")


# ---------------------------------------------------------------------------
# TestExport / TestCli
# ---------------------------------------------------------------------------


class TestExport:
    async def test_jobs_json(self, db, adapter_factory, postings_factory) -> None:  # type: ignore[no-untyped-def]
        adapter = adapter_factory("linkedin", "linkedin.com", postings_factory("LinkedIn", "www.linkedin.com", 2))
        response = await run_search(JobSearchAggregator([adapter]), db, "Dev", ExperienceLevel.MID)

        data = json.loads(export_jobs_json(response))

        assert data["total_count"] == 2
        assert data["jobs"][0]["url"] == "https://www.linkedin.com/jobs/0"

    def test_outcomes_json(self) -> None:
        outcomes = [ApplicationOutcome.failed("https://www.naukri.com/job-1", "boom")]
        data = json.loads(export_outcomes_json(outcomes))
        assert data[0]["status"] == "failed"
        assert data[0]["message"] == "boom"
        assert "timestamp" in data[0]


class TestCli:
    def test_run_defaults(self) -> None:
        args = main.parse_args(["run"])
        assert args.title == "Software Developer"
        assert args.level == "mid"
        assert args.dry_run is False
        assert args.config is None

    def test_apply_requires_url(self) -> None:
        with pytest.raises(SystemExit):
            main.parse_args(["apply"])

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(SystemExit):
            main.parse_args(["search", "--level", "principal"])

    def test_profile_and_resume_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            main.parse_args(["run", "--profile", "p.yaml", "--resume", "r.pdf"])

    def test_missing_config_exits(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(SystemExit) as exc_info:
            main.main(["search", "--config", str(tmp_path / "missing.yaml")])
        assert exc_info.value.code == 1

    def test_parse_resume_writes_default_profile(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        output = tmp_path / "profile.yaml"
        main.main(["parse-resume", "--resume", str(tmp_path / "missing.pdf"), "--output", str(output)])
        assert "John Developer" in output.read_text()
