"""Shared test doubles for pipeline tests."""

import asyncio
from collections.abc import Callable

import pytest

from jobpilot.core.schemas import (
    ApplicationOutcome,
    ApplicationStatus,
    ExperienceLevel,
    JobPosting,
)
from jobpilot.platforms.base import SiteAdapter
from jobpilot.profile.schema import CandidateProfile, PersonalInfo


class FakeAdapter(SiteAdapter):
    """In-memory SiteAdapter: canned postings, scripted outcomes, call log."""

    def __init__(
        self,
        site_id: str,
        domain: str,
        postings: list[JobPosting] | None = None,
        status: ApplicationStatus = ApplicationStatus.APPLIED,
        search_error: Exception | None = None,
        apply_error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self._site_id = site_id
        self._domain = domain
        self.postings = postings or []
        self.status = status
        self.search_error = search_error
        self.apply_error = apply_error
        self.gate = gate
        self.searched: list[tuple[str, ExperienceLevel]] = []
        self.applied: list[str] = []
        self.active = 0
        self.peak_active = 0

    @property
    def site_id(self) -> str:
        return self._site_id

    @property
    def domains(self) -> tuple[str, ...]:
        return (self._domain,)

    async def search(self, title: str, experience_level: ExperienceLevel) -> list[JobPosting]:
        self.searched.append((title, experience_level))
        if self.gate is not None:
            await self.gate.wait()
        if self.search_error is not None:
            raise self.search_error
        return list(self.postings)

    async def apply(self, job_url: str, profile: CandidateProfile) -> ApplicationOutcome:
        self.applied.append(job_url)
        self.active += 1
        self.peak_active = max(self.peak_active, self.active)
        try:
            await asyncio.sleep(0)
            if self.apply_error is not None:
                raise self.apply_error
            return ApplicationOutcome(job_url=job_url, status=self.status, message=self.status.value)
        finally:
            self.active -= 1


def make_postings(source: str, host: str, n: int, posted_date: str = "2 days ago") -> list[JobPosting]:
    return [
        JobPosting(
            title=f"{source} Job {i}",
            company="Acme",
            source=source,
            url=f"https://{host}/jobs/{i}",
            posted_date=posted_date,
        )
        for i in range(n)
    ]


@pytest.fixture()
def profile() -> CandidateProfile:
    return CandidateProfile(
        personal_info=PersonalInfo(name="Jane Smith", phone="+91-9876543210"),
        summary="Backend engineer.",
        skills=["Python"],
    )


@pytest.fixture()
def adapter_factory() -> Callable[..., FakeAdapter]:
    return FakeAdapter


@pytest.fixture()
def postings_factory() -> Callable[..., list[JobPosting]]:
    return make_postings
