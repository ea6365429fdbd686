"""Playwright browser session scoped to a single analysis request."""

from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    async_playwright,
)

from ..constants import DEFAULT_NAVIGATION_TIMEOUT
from .browser_constants import LAUNCH_ARGS, NO_SANDBOX_ARGS, VIEWPORT

logger = logging.getLogger(__name__)


class BrowserSession:
    """An isolated headless Chromium instance with one tab.

    Every request gets its own session; nothing (cookies, tabs, cache) is
    shared between callers. ``close()`` may be called any number of times but
    releases the browser only once.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_NAVIGATION_TIMEOUT,
        headless: bool = True,
        chromium_sandbox: bool = False,
    ):
        self.timeout = timeout * 1000  # Convert to ms
        self.headless = headless
        self.chromium_sandbox = chromium_sandbox
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._started = False
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    async def __aenter__(self) -> "BrowserSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Launch the browser instance."""
        if self._released:
            raise RuntimeError("Browser session already released")
        self._started = True
        self._playwright = await async_playwright().start()
        args = list(LAUNCH_ARGS)
        if not self.chromium_sandbox:
            args.extend(NO_SANDBOX_ARGS)
        self._browser = await self._playwright.chromium.launch(
            headless=self.headless,
            chromium_sandbox=self.chromium_sandbox,
            args=args,
        )
        self._context = await self._browser.new_context(viewport=VIEWPORT)
        self._page = await self._context.new_page()
        logger.debug("Browser session started")

    async def open(self, url: str) -> Page:
        """Navigate to ``url`` and wait for the network to go idle."""
        if self._page is None:
            await self.start()
        logger.info("Navigating to %s", url)
        await self._page.goto(url, wait_until="networkidle", timeout=self.timeout)
        return self._page

    async def close(self) -> None:
        """Release page, context, browser and driver."""
        if self._released:
            return
        self._released = True
        if not self._started:
            return

        try:
            if self._context:
                await self._context.close()
        except PlaywrightError as exc:
            logger.warning("Browser context close failed: %s", exc)
        finally:
            self._context = None
            self._page = None

        try:
            if self._browser:
                await self._browser.close()
        except PlaywrightError as exc:
            logger.warning("Browser close failed: %s", exc)
        finally:
            self._browser = None

        try:
            if self._playwright:
                await self._playwright.stop()
        except Exception as exc:  # pragma: no cover - driver already gone
            logger.warning("Playwright stop error: %s", exc)
        finally:
            self._playwright = None

        logger.debug("Browser session released")
