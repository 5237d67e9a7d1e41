"""Tests for browser actions: settle, fallback lookups, bounded waits."""

import asyncio
from unittest.mock import AsyncMock, patch

from jobpilot.browser.actions import (
    clear_and_type,
    element_label,
    find_first,
    query_all_first,
    settle,
    wait_for_any,
)

# ---------------------------------------------------------------------------
# TestSettle
# ---------------------------------------------------------------------------


class TestSettle:
    """settle: the one place the package sleeps."""

    async def test_returns_duration(self) -> None:
        with patch.object(asyncio, "sleep", new_callable=AsyncMock):
            assert await settle(2.0) == 2.0

    async def test_actually_calls_asyncio_sleep(self) -> None:
        with patch.object(asyncio, "sleep", new_callable=AsyncMock) as mock_sleep:
            await settle(3.0)
        mock_sleep.assert_awaited_once_with(3.0)

    async def test_negative_clamped_to_zero(self) -> None:
        with patch.object(asyncio, "sleep", new_callable=AsyncMock) as mock_sleep:
            duration = await settle(-1.0)
        assert duration == 0.0
        mock_sleep.assert_awaited_once_with(0.0)


# ---------------------------------------------------------------------------
# TestFindFirst
# ---------------------------------------------------------------------------


def _routing_root(mapping: dict[str, object]) -> AsyncMock:
    root = AsyncMock()

    async def _query_selector(selector: str) -> object | None:
        value = mapping.get(selector)
        if isinstance(value, Exception):
            raise value
        return value

    root.query_selector = AsyncMock(side_effect=_query_selector)
    return root


class TestFindFirst:
    """find_first: priority order, misses, and selector errors."""

    async def test_first_match_wins(self) -> None:
        a, b = object(), object()
        root = _routing_root({".a": a, ".b": b})
        assert await find_first(root, (".a", ".b")) is a

    async def test_falls_back_in_order(self) -> None:
        b = object()
        root = _routing_root({".b": b})
        assert await find_first(root, (".a", ".b", ".c")) is b
        called = [c.args[0] for c in root.query_selector.call_args_list]
        assert called == [".a", ".b"]

    async def test_no_match_returns_none(self) -> None:
        root = _routing_root({})
        assert await find_first(root, (".a", ".b")) is None

    async def test_raising_selector_is_skipped(self) -> None:
        b = object()
        root = _routing_root({".bad": ValueError("invalid selector"), ".b": b})
        assert await find_first(root, (".bad", ".b")) is b

    async def test_empty_selectors(self) -> None:
        root = _routing_root({})
        assert await find_first(root, ()) is None
        root.query_selector.assert_not_called()


# ---------------------------------------------------------------------------
# TestWaitForAny
# ---------------------------------------------------------------------------


class TestWaitForAny:
    """wait_for_any: one bounded wait over the combined selectors."""

    async def test_found(self) -> None:
        page = AsyncMock()
        page.wait_for_selector.return_value = object()
        assert await wait_for_any(page, (".a", ".b"), 10000) is True
        page.wait_for_selector.assert_awaited_once_with(".a, .b", timeout=10000)

    async def test_timeout_returns_false(self) -> None:
        page = AsyncMock()
        page.wait_for_selector.side_effect = TimeoutError("Timeout 10000ms exceeded")
        assert await wait_for_any(page, (".a",), 10000) is False

    async def test_none_result_returns_false(self) -> None:
        page = AsyncMock()
        page.wait_for_selector.return_value = None
        assert await wait_for_any(page, (".a",), 1000) is False


# ---------------------------------------------------------------------------
# TestQueryAllFirst
# ---------------------------------------------------------------------------


class TestQueryAllFirst:
    async def test_uses_first_selector_with_matches(self) -> None:
        page = AsyncMock()
        cards = [object(), object()]

        async def _query_selector_all(selector: str) -> list[object]:
            return cards if selector == ".second" else []

        page.query_selector_all = AsyncMock(side_effect=_query_selector_all)
        assert await query_all_first(page, (".first", ".second", ".third")) == cards
        assert page.query_selector_all.await_count == 2

    async def test_nothing_matches(self) -> None:
        page = AsyncMock()
        page.query_selector_all.return_value = []
        assert await query_all_first(page, (".a", ".b")) == []


# ---------------------------------------------------------------------------
# TestElementLabel / TestClearAndType
# ---------------------------------------------------------------------------


def _control(text: str | None, attrs: dict[str, str] | None = None) -> AsyncMock:
    el = AsyncMock()
    el.text_content.return_value = text
    attrs = attrs or {}

    async def _get_attribute(name: str) -> str | None:
        return attrs.get(name)

    el.get_attribute = AsyncMock(side_effect=_get_attribute)
    return el


class TestElementLabel:
    async def test_visible_text_collapsed(self) -> None:
        assert await element_label(_control("  Submit\n  application ")) == "Submit application"

    async def test_aria_label_fallback(self) -> None:
        el = _control("", {"aria-label": "Continue to next step"})
        assert await element_label(el) == "Continue to next step"

    async def test_value_fallback(self) -> None:
        el = _control(None, {"value": "Submit"})
        assert await element_label(el) == "Submit"

    async def test_no_label(self) -> None:
        assert await element_label(_control("   ")) == ""


class TestClearAndType:
    async def test_selects_then_types(self) -> None:
        el = AsyncMock()
        await clear_and_type(el, "+91-9876543210")
        el.click.assert_awaited_once_with(click_count=3)
        el.type.assert_awaited_once_with("+91-9876543210")
