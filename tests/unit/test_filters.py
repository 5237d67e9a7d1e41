"""Tests for posting filters."""

import pytest

from jobpilot.core.schemas import JobPosting
from jobpilot.pipeline.filters import RecencyFilter, run_filter_chain


def _posting(posted_date: str, n: int = 0) -> JobPosting:
    return JobPosting(
        title=f"Dev {n}", source="Naukri", url=f"https://www.naukri.com/j{n}", posted_date=posted_date,
    )


class TestRecencyFilter:
    @pytest.mark.parametrize(
        "text",
        [
            "3 days ago",
            "1 day ago",
            "5 hours ago",
            "Today",
            "Posted Yesterday",
            "1 week ago",
            "Just now - 2 DAYS AGO",
            "11 weeks ago",
        ],
    )
    def test_kept(self, text: str) -> None:
        assert RecencyFilter().is_recent(text) is True

    @pytest.mark.parametrize(
        "text",
        ["3 weeks ago", "2 weeks ago", "1 month ago", "", "Just now"],
    )
    def test_dropped(self, text: str) -> None:
        assert RecencyFilter().is_recent(text) is False

    def test_thirty_plus_days_is_kept_by_substring(self) -> None:
        assert RecencyFilter().is_recent("30+ Days Ago") is True

    def test_filters_and_keeps_order(self) -> None:
        postings = [
            _posting("3 days ago", 0),
            _posting("3 weeks ago", 1),
            _posting("Today", 2),
            _posting("", 3),
        ]
        result = RecencyFilter()(postings)
        assert [p.title for p in result] == ["Dev 0", "Dev 2"]

    def test_custom_markers(self) -> None:
        f = RecencyFilter(markers=["Just now", "  "])
        assert f.is_recent("just NOW") is True
        assert f.is_recent("3 days ago") is False

    def test_empty_markers_drop_everything(self) -> None:
        assert RecencyFilter(markers=[])([_posting("Today")]) == []


class TestRunFilterChain:
    def test_applies_in_order(self) -> None:
        calls: list[str] = []

        def first(postings: list[JobPosting]) -> list[JobPosting]:
            calls.append("first")
            return postings[:2]

        def second(postings: list[JobPosting]) -> list[JobPosting]:
            calls.append("second")
            return postings[1:]

        postings = [_posting("Today", i) for i in range(4)]
        result = run_filter_chain(postings, [first, second])
        assert calls == ["first", "second"]
        assert [p.title for p in result] == ["Dev 1"]

    def test_no_filters(self) -> None:
        postings = [_posting("whenever")]
        assert run_filter_chain(postings, []) == postings
