"""Core data models for job discovery and application outcomes."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExperienceLevel(str, Enum):
    """Seniority bucket used to build site-specific search filters."""

    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class ApplicationStatus(str, Enum):
    """Terminal status of one application attempt."""

    APPLIED = "applied"
    FAILED = "failed"
    ALREADY_APPLIED = "already_applied"


class JobPosting(BaseModel):
    """A job listing discovered on one source site.

    Frozen. The URL is the de-facto key; the same job may appear on
    several sources and is not deduplicated.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    company: str = ""
    location: str = ""
    source: str
    url: str
    posted_date: str = ""
    experience: str = ""
    description: str = ""


class SearchResponse(BaseModel):
    """Aggregated, recency-filtered search result."""

    model_config = ConfigDict(frozen=True)

    jobs: list[JobPosting] = Field(default_factory=list)
    total_count: int = 0


class ApplicationOutcome(BaseModel):
    """The single observable result of an application attempt."""

    model_config = ConfigDict(frozen=True)

    job_url: str
    status: ApplicationStatus
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def failed(cls, job_url: str, message: str) -> "ApplicationOutcome":
        return cls(job_url=job_url, status=ApplicationStatus.FAILED, message=message)
