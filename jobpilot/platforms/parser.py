"""Search-result card parser: converts card elements into JobPosting objects.

Design rules:
  - Every field lookup uses a fallback selector tuple.
  - Titles are split on '\\n' and the first line taken.
  - A missing optional field yields "" (never crashes).
  - A card without a title or link is skipped.
"""

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable
from urllib.parse import urljoin, urlparse, urlunparse

from jobpilot.browser.actions import find_first
from jobpilot.core.schemas import JobPosting

logger = logging.getLogger(__name__)


@runtime_checkable
class ElementLike(Protocol):
    """Minimal element interface so tests can use AsyncMock instead of patchright."""

    async def query_selector(self, selector: str) -> "ElementLike | None": ...
    async def get_attribute(self, name: str) -> str | None: ...
    async def text_content(self) -> str | None: ...


@dataclass(frozen=True)
class CardSelectors:
    """Structural lookups for one site's result card, each a fallback tuple."""

    title: tuple[str, ...]
    link: tuple[str, ...]
    company: tuple[str, ...] = ()
    location: tuple[str, ...] = ()
    posted_date: tuple[str, ...] = ()
    experience: tuple[str, ...] = ()


class CardParser:
    """Parses one site's search-result cards into JobPosting objects."""

    def __init__(self, source: str, base_url: str, selectors: CardSelectors) -> None:
        self._source = source
        self._base_url = base_url
        self._selectors = selectors

    async def parse_cards(self, cards: list[ElementLike]) -> list[JobPosting]:
        """Parse multiple cards, skipping any that fail."""
        results: list[JobPosting] = []
        for card in cards:
            try:
                posting = await self.parse_card(card)
            except Exception:
                logger.debug("Failed to parse %s card, skipping", self._source, exc_info=True)
                continue
            if posting is not None:
                results.append(posting)
        return results

    async def parse_card(self, card: ElementLike) -> JobPosting | None:
        """Parse a single card. Returns None if title or URL is missing."""
        title = await self._parse_title(card)
        url = await self._parse_url(card)
        if not title or not url:
            logger.debug("%s card missing title or url - skipping", self._source)
            return None

        return JobPosting(
            title=title,
            company=await self._parse_text(card, self._selectors.company),
            location=await self._parse_text(card, self._selectors.location),
            source=self._source,
            url=url,
            posted_date=await self._parse_text(card, self._selectors.posted_date),
            experience=await self._parse_text(card, self._selectors.experience),
        )

    async def _parse_title(self, card: ElementLike) -> str:
        raw = await self._parse_text(card, self._selectors.title)
        return raw.split("\n")[0].strip()

    async def _parse_url(self, card: ElementLike) -> str:
        link = await find_first(card, self._selectors.link)
        if link is None:
            return ""
        href = await link.get_attribute("href")
        if not href or not href.strip():
            return ""
        return self.clean_url(href.strip(), self._base_url)

    @staticmethod
    async def _parse_text(card: ElementLike, selectors: tuple[str, ...]) -> str:
        """Try selectors in order, return first element's stripped text or ""."""
        if not selectors:
            return ""
        el = await find_first(card, selectors)
        if el is None:
            return ""
        text = await el.text_content()
        return text.strip() if text else ""

    @staticmethod
    def clean_url(href: str, base_url: str) -> str:
        """Resolve relative links and drop tracking query params and fragment."""
        parsed = urlparse(urljoin(base_url, href))
        return urlunparse((parsed.scheme, parsed.netloc, parsed.path, "", "", ""))
