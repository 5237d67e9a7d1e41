"""ApplicationRunner: routes each job URL to its site adapter."""

import asyncio
import logging

from jobpilot.core.schemas import ApplicationOutcome, ApplicationStatus
from jobpilot.platforms.base import SiteAdapter
from jobpilot.profile.schema import CandidateProfile

logger = logging.getLogger(__name__)


class ApplicationRunner:
    """Selects the adapter for a job URL and runs its application flow.

    Produces exactly one ApplicationOutcome per job and never raises, so a
    failing job cannot abort the rest of a batch.
    """

    def __init__(self, adapters: list[SiteAdapter], max_concurrent: int = 1) -> None:
        self._adapters = list(adapters)
        self._max_concurrent = max(1, max_concurrent)

    def adapter_for(self, job_url: str) -> SiteAdapter | None:
        """Return the first adapter whose domain matches the URL."""
        for adapter in self._adapters:
            if adapter.handles(job_url):
                return adapter
        return None

    async def apply(self, job_url: str, profile: CandidateProfile) -> ApplicationOutcome:
        adapter = self.adapter_for(job_url)
        if adapter is None:
            supported = ", ".join(a.site_id for a in self._adapters) or "none"
            logger.warning("Unsupported job site: %s", job_url)
            return ApplicationOutcome.failed(
                job_url, f"Unsupported job site. Supported sites: {supported}",
            )

        try:
            return await adapter.apply(job_url, profile)
        except Exception as e:
            logger.error("%s adapter raised for %s: %s", adapter.site_id, job_url, e)
            return ApplicationOutcome.failed(job_url, f"Application failed: {e}")

    async def apply_all(
        self, job_urls: list[str], profile: CandidateProfile,
    ) -> list[ApplicationOutcome]:
        """Apply to every URL, at most ``max_concurrent`` at a time.

        Outcomes are returned in input order.
        """
        semaphore = asyncio.Semaphore(self._max_concurrent)

        async def _bounded(url: str) -> ApplicationOutcome:
            async with semaphore:
                return await self.apply(url, profile)

        outcomes = await asyncio.gather(*(_bounded(url) for url in job_urls))
        applied = sum(1 for o in outcomes if o.status is ApplicationStatus.APPLIED)
        logger.info("Batch finished: %d/%d applied", applied, len(outcomes))
        return list(outcomes)
