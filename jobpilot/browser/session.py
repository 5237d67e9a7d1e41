"""Browser session management using patchright.

Each search or application attempt owns one session: one browser, one
context, one page. Nothing is shared between concurrent attempts, and the
whole stack is torn down on every exit path, including a failed launch.
"""

import logging
from types import TracebackType

from patchright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from jobpilot.core.config import BrowserConfig

logger = logging.getLogger(__name__)


class BrowserSession:
    """Async context manager that owns one patchright browser + context + page.

    Usage::

        async with BrowserSession(config) as page:
            await page.goto("https://...")
    """

    def __init__(self, config: BrowserConfig) -> None:
        self._config = config
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def __aenter__(self) -> Page:
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self._config.headless,
                args=["--no-sandbox", "--disable-setuid-sandbox", "--disable-dev-shm-usage"],
            )
            self._context = await self._browser.new_context(user_agent=self._config.user_agent)
            self._context.set_default_timeout(self._config.timeout_ms)
            self._page = await self._context.new_page()
        except BaseException:
            # __aexit__ is not called when __aenter__ raises.
            await self.close()
            raise
        logger.debug("Browser session opened (headless=%s)", self._config.headless)
        return self._page

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Release page, context, browser and driver; safe to call twice."""
        page, context, browser, pw = self._page, self._context, self._browser, self._playwright
        self._page = self._context = self._browser = self._playwright = None

        for name, closer in (
            ("page", page.close if page is not None else None),
            ("context", context.close if context is not None else None),
            ("browser", browser.close if browser is not None else None),
            ("playwright", pw.stop if pw is not None else None),
        ):
            if closer is None:
                continue
            try:
                await closer()
            except Exception:
                logger.warning("Failed to close browser %s", name, exc_info=True)
        logger.debug("Browser session closed")
