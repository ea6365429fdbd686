"""Signal extraction from a loaded page."""

from __future__ import annotations

import logging

from playwright.async_api import Page

from .browser_constants import PAGE_SIGNALS_SCRIPT
from .browser_models import PageSignals

logger = logging.getLogger(__name__)


class BrowserFormsMixin:
    """Form and field signal helpers."""

    async def extract_signals(self, page: Page) -> PageSignals:
        """Run the fixed extraction query against the current document.

        Evaluation errors propagate; a page we cannot read cannot be
        classified.
        """
        data = await page.evaluate(PAGE_SIGNALS_SCRIPT)
        signals = PageSignals.from_evaluation(data or {})
        logger.info(
            "Signals for %s: https=%s password=%s payment=%s suspicious=%s forms=%s",
            signals.domain or signals.final_url,
            signals.is_https,
            signals.has_password_field,
            signals.has_payment_fields,
            signals.has_suspicious_fields,
            signals.form_count,
        )
        return signals
