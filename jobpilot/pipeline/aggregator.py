"""Concurrent multi-site job search with recency filtering."""

import asyncio
import logging

from jobpilot.core.schemas import ExperienceLevel, JobPosting, SearchResponse
from jobpilot.pipeline.filters import Filter, RecencyFilter, run_filter_chain
from jobpilot.platforms.base import SiteAdapter

logger = logging.getLogger(__name__)

MAX_RESULTS_PER_SITE = 10


class JobSearchAggregator:
    """Fans a search out to every adapter and merges the results.

    Results keep adapter order, then each adapter's own order; there is no
    cross-site ranking or deduplication. Each adapter contributes at most
    ``max_results_per_site`` postings.
    """

    def __init__(
        self,
        adapters: list[SiteAdapter],
        filters: list[Filter] | None = None,
        max_results_per_site: int = MAX_RESULTS_PER_SITE,
    ) -> None:
        self._adapters = list(adapters)
        self._max_results_per_site = max(1, max_results_per_site)
        self._filters: list[Filter] = filters if filters is not None else [RecencyFilter()]

    @property
    def adapters(self) -> list[SiteAdapter]:
        return list(self._adapters)

    async def search(self, title: str, experience_level: ExperienceLevel) -> SearchResponse:
        """Search all sites concurrently and keep recent postings. Never raises."""
        recent = self.filter(await self.collect(title, experience_level))
        return SearchResponse(jobs=recent, total_count=len(recent))

    async def collect(self, title: str, experience_level: ExperienceLevel) -> list[JobPosting]:
        """Run every adapter concurrently and concatenate their raw results."""
        logger.info(
            "Starting job search for '%s' (%s) on %d site(s)",
            title, experience_level.value, len(self._adapters),
        )
        results = await asyncio.gather(
            *(adapter.search(title, experience_level) for adapter in self._adapters),
            return_exceptions=True,
        )

        postings: list[JobPosting] = []
        for adapter, result in zip(self._adapters, results):
            if isinstance(result, BaseException):
                logger.warning("%s search raised, treating as empty: %s", adapter.site_id, result)
                continue
            logger.info("%s returned %d postings", adapter.site_id, len(result))
            postings.extend(result[: self._max_results_per_site])
        return postings

    def filter(self, postings: list[JobPosting]) -> list[JobPosting]:
        recent = run_filter_chain(postings, self._filters)
        logger.info("Job search completed: %d total, %d recent", len(postings), len(recent))
        return recent
