"""Posting filters applied after search aggregation.

A filter is a callable taking postings and returning the surviving subset,
so filters compose with run_filter_chain().
"""

import logging
from collections.abc import Callable

from jobpilot.core.config import DEFAULT_RECENCY_MARKERS
from jobpilot.core.schemas import JobPosting

logger = logging.getLogger(__name__)

Filter = Callable[[list[JobPosting]], list[JobPosting]]


class RecencyFilter:
    """Keep postings whose posted-date text contains any recency marker.

    Case-insensitive substring match on the site's own text ("3 days ago",
    "Just now", "Today"); no date parsing. "3 weeks ago" has no marker and
    is dropped, "11 weeks ago" contains "1 week" and is kept.
    """

    def __init__(self, markers: list[str] | None = None) -> None:
        source = DEFAULT_RECENCY_MARKERS if markers is None else markers
        self._markers = [m.lower().strip() for m in source if m.strip()]

    def __call__(self, postings: list[JobPosting]) -> list[JobPosting]:
        result = [p for p in postings if self.is_recent(p.posted_date)]
        dropped = len(postings) - len(result)
        if dropped:
            logger.debug("RecencyFilter: removed %d postings", dropped)
        return result

    def is_recent(self, posted_date: str) -> bool:
        text = posted_date.lower()
        return any(marker in text for marker in self._markers)


def run_filter_chain(postings: list[JobPosting], filters: list[Filter]) -> list[JobPosting]:
    """Apply filters in order, returning the surviving postings."""
    result = postings
    for f in filters:
        result = f(result)
    return result
