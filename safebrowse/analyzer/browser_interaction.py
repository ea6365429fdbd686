"""Checkout interaction helpers."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from playwright.async_api import ElementHandle, Page

from ..constants import CHECKOUT_QUERY_KEYWORDS
from .browser_constants import CHECKOUT_SIGNALS_SCRIPT
from .browser_models import CheckoutAttempt, CheckoutSignals, ElementMatcher

logger = logging.getLogger(__name__)


def wants_checkout(user_query: str | None) -> bool:
    """Return True when the caller asked about checkout or payment."""
    query = (user_query or "").lower()
    return any(keyword in query for keyword in CHECKOUT_QUERY_KEYWORDS)


class BrowserInteractionMixin:
    """Locate and click a checkout-like control."""

    checkout_matchers: tuple[ElementMatcher, ...]
    checkout_settle_seconds: float

    async def _find_checkout_element(
        self, page: Page
    ) -> tuple[Optional[ElementMatcher], Optional[ElementHandle]]:
        """Try each matcher in order and return the first hit."""
        for matcher in self.checkout_matchers:
            try:
                element = await page.query_selector(matcher.selector)
            except Exception as exc:
                logger.debug("Matcher '%s' failed: %s", matcher.label, exc)
                continue
            if element is not None:
                logger.info("Checkout control found via %s", matcher.label)
                return matcher, element
        return None, None

    async def investigate_checkout(self, page: Page) -> CheckoutAttempt:
        """Click one checkout control and read the resulting page.

        Never raises: failures are recorded on the returned attempt.
        """
        attempt = CheckoutAttempt()
        try:
            matcher, element = await self._find_checkout_element(page)
            if element is None:
                logger.info("No checkout control on %s", page.url)
                return attempt

            attempt.found = True
            attempt.matched_by = matcher.label
            await element.click()
            await asyncio.sleep(self.checkout_settle_seconds)

            data = await page.evaluate(CHECKOUT_SIGNALS_SCRIPT)
            attempt.signals = CheckoutSignals.from_evaluation(data or {})
            logger.info(
                "Checkout page %s (payment form: %s)",
                attempt.signals.url,
                attempt.signals.has_payment_form,
            )
        except Exception as exc:
            attempt.error = str(exc)
            logger.warning("Checkout investigation failed (non-fatal): %s", exc)
        return attempt
