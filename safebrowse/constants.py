"""Centralized constants for SafeBrowse.

Limits and enums shared by the analyzer, the report builder and the
HTTP server.
"""

from enum import Enum

# Visible text kept from a loaded page
TEXT_EXCERPT_LIMIT = 1500

# Seconds
DEFAULT_NAVIGATION_TIMEOUT = 30
DEFAULT_CHECKOUT_SETTLE_SECONDS = 3.0

DEFAULT_PORT = 3000

# Substrings (lower-cased query) that trigger the checkout interaction
CHECKOUT_QUERY_KEYWORDS = ("checkout", "payment")

FAILURE_REPORT = "❌ Could not analyze this website"
STATUS_MESSAGE = "Browser agent is running!"


class SafetyLevel(str, Enum):
    """Coarse safety verdict for a page."""

    SAFE = "SAFE"
    CAUTION = "CAUTION"
    DANGEROUS = "DANGEROUS"

    @property
    def emoji(self) -> str:
        return _SAFETY_EMOJI[self]

    def __str__(self) -> str:
        return self.value


_SAFETY_EMOJI = {
    SafetyLevel.SAFE: "✅",
    SafetyLevel.CAUTION: "⚠️",
    SafetyLevel.DANGEROUS: "🚨",
}
