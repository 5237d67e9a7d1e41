"""Reusable browser actions: settle delays, fallback lookups, bounded waits.

Rules:
  - No asyncio.sleep() anywhere except via settle().
  - Every selector lookup takes a fallback tuple, tried in order.
  - Waits are bounded; a timeout is a local miss (None), never a hang.
"""

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


async def settle(seconds: float) -> float:
    """Give the page time to render after a mutating action.

    Returns the slept duration (useful for testing).
    """
    duration = max(seconds, 0.0)
    await asyncio.sleep(duration)
    return duration


async def find_first(root: Any, selectors: tuple[str, ...]) -> Any | None:
    """Return the first element matching any selector, in priority order.

    Args:
        root: A page or element handle exposing ``query_selector``.
        selectors: Selectors to try, most specific first.
    """
    for selector in selectors:
        try:
            el = await root.query_selector(selector)
        except Exception:
            logger.debug("Selector '%s' raised, trying next", selector, exc_info=True)
            continue
        if el is not None:
            return el
    return None


async def wait_for_any(page: Any, selectors: tuple[str, ...], timeout_ms: int) -> bool:
    """Wait up to ``timeout_ms`` in total for any of the CSS selectors to appear.

    Returns False on timeout or any wait error.
    """
    combined = ", ".join(selectors)
    try:
        el = await page.wait_for_selector(combined, timeout=timeout_ms)
    except Exception as e:
        logger.debug("Wait for '%s' gave up: %s", combined, e)
        return False
    return el is not None


async def query_all_first(page: Any, selectors: tuple[str, ...]) -> list[Any]:
    """Return all matches of the first selector that matches anything."""
    for selector in selectors:
        elements = await page.query_selector_all(selector)
        if elements:
            logger.debug("Found %d elements with selector '%s'", len(elements), selector)
            return list(elements)
    return []


async def element_label(el: Any) -> str:
    """Visible text of a control, falling back to aria-label, then value."""
    text = await el.text_content()
    if text and text.strip():
        return " ".join(text.split())
    for attr in ("aria-label", "value"):
        value = await el.get_attribute(attr)
        if value and value.strip():
            return value.strip()
    return ""


async def clear_and_type(el: Any, text: str) -> None:
    """Select the field's current content and replace it by typing."""
    await el.click(click_count=3)
    await el.type(text)
