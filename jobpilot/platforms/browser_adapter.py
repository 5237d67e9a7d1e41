"""Browser-backed SiteAdapter: shared search scraping and apply wiring.

Subclasses supply the search URL, result selectors, card parser and flow
spec; every search and every apply opens its own page via the injected
page factory and releases it on exit.
"""

import logging
from abc import abstractmethod

from jobpilot.browser.actions import query_all_first, wait_for_any
from jobpilot.core.config import ApplySettings, SearchSettings
from jobpilot.core.schemas import ApplicationOutcome, ExperienceLevel, JobPosting
from jobpilot.platforms.apply_flow import ApplicationFlow, FlowSpec
from jobpilot.platforms.base import PageFactory, SiteAdapter
from jobpilot.platforms.parser import CardParser
from jobpilot.profile.schema import CandidateProfile

logger = logging.getLogger(__name__)


class BrowserSiteAdapter(SiteAdapter):
    """SiteAdapter that scrapes and applies through a browser page."""

    card_selectors: tuple[str, ...] = ()

    def __init__(
        self,
        page_factory: PageFactory,
        search_settings: SearchSettings | None = None,
        apply_settings: ApplySettings | None = None,
    ) -> None:
        self._page_factory = page_factory
        self._search = search_settings or SearchSettings()
        self._flow = ApplicationFlow(
            self.flow_spec(), apply_settings or ApplySettings(), self.cover_letter,
        )

    @abstractmethod
    def build_search_url(self, title: str, experience_level: ExperienceLevel) -> str:
        """Site search URL for the query, in the configured region."""

    @abstractmethod
    def card_parser(self) -> CardParser:
        """Parser for this site's result cards."""

    @abstractmethod
    def flow_spec(self) -> FlowSpec:
        """Selectors and delays for this site's application flow."""

    @abstractmethod
    def cover_letter(self, profile: CandidateProfile) -> str:
        """Deterministic cover letter text for this site's message field."""

    async def search(self, title: str, experience_level: ExperienceLevel) -> list[JobPosting]:
        url = self.build_search_url(title, experience_level)
        limit = self._search.max_results_per_site
        logger.info("Searching %s for '%s' (%s): %s", self.site_id, title, experience_level.value, url)

        try:
            async with self._page_factory() as page:
                await page.goto(url, wait_until="networkidle")
                rendered = await wait_for_any(
                    page, self.card_selectors, self._search.results_timeout_ms,
                )
                if not rendered:
                    logger.warning(
                        "%s: no results rendered within %d ms",
                        self.site_id, self._search.results_timeout_ms,
                    )
                    return []
                cards = await query_all_first(page, self.card_selectors)
                postings = await self.card_parser().parse_cards(cards[:limit])
        except Exception as e:
            logger.warning("%s search failed: %s", self.site_id, e)
            return []

        logger.info("%s search completed: %d postings", self.site_id, len(postings))
        return postings[:limit]

    async def apply(self, job_url: str, profile: CandidateProfile) -> ApplicationOutcome:
        logger.info("Starting %s application: %s", self.site_id, job_url)
        try:
            async with self._page_factory() as page:
                outcome = await self._flow.run(page, job_url, profile)
        except Exception as e:
            logger.error("%s application process failed for %s: %s", self.site_id, job_url, e)
            outcome = ApplicationOutcome.failed(job_url, f"Application failed: {e}")

        logger.info(
            "%s application completed: %s (%s)", self.site_id, outcome.status.value, outcome.message,
        )
        return outcome
