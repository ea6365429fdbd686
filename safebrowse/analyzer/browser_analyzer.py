"""Page analyzer composed from the form and interaction helpers."""

from __future__ import annotations

from typing import Iterable, Optional

from ..constants import DEFAULT_CHECKOUT_SETTLE_SECONDS
from .browser_constants import DEFAULT_CHECKOUT_MATCHERS
from .browser_forms import BrowserFormsMixin
from .browser_interaction import BrowserInteractionMixin
from .browser_models import ElementMatcher


class PageAnalyzer(BrowserFormsMixin, BrowserInteractionMixin):
    """Reads signals from a loaded page and runs the checkout probe."""

    def __init__(
        self,
        checkout_matchers: Optional[Iterable[ElementMatcher]] = None,
        checkout_settle_seconds: float = DEFAULT_CHECKOUT_SETTLE_SECONDS,
    ):
        self.checkout_matchers = tuple(checkout_matchers or DEFAULT_CHECKOUT_MATCHERS)
        self.checkout_settle_seconds = checkout_settle_seconds
