"""Abstract base class for site adapters."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from jobpilot.core.schemas import ApplicationOutcome, ExperienceLevel, JobPosting
from jobpilot.profile.schema import CandidateProfile

# Opens an isolated browser page and releases it on exit.
PageFactory = Callable[[], AbstractAsyncContextManager[Any]]


class SiteAdapter(ABC):
    """Base class that every job site adapter must implement.

    Neither method may raise: search failures become an empty list and
    apply failures become a ``failed`` ApplicationOutcome.
    """

    @property
    @abstractmethod
    def site_id(self) -> str:
        """Unique identifier for this site (e.g. 'linkedin')."""

    @property
    @abstractmethod
    def domains(self) -> tuple[str, ...]:
        """Domains whose job URLs this adapter can apply to."""

    def handles(self, url: str) -> bool:
        """Return True if the job URL belongs to this site."""
        lowered = url.lower()
        return any(domain in lowered for domain in self.domains)

    @abstractmethod
    async def search(self, title: str, experience_level: ExperienceLevel) -> list[JobPosting]:
        """Return at most 10 postings for the query, or [] on any failure."""

    @abstractmethod
    async def apply(self, job_url: str, profile: CandidateProfile) -> ApplicationOutcome:
        """Drive the site's application flow to one terminal outcome."""
