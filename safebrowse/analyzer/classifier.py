"""Safety classification rules."""

from __future__ import annotations

from ..constants import SafetyLevel
from .browser_models import PageSignals


def classify(signals: PageSignals) -> SafetyLevel:
    """Map page signals to a safety level.

    Rules are evaluated in priority order and the first match wins, so a
    plain-HTTP page with card fields is DANGEROUS rather than CAUTION.
    """
    if signals.has_suspicious_fields or not signals.is_https:
        return SafetyLevel.DANGEROUS
    if signals.has_payment_fields:
        return SafetyLevel.CAUTION
    return SafetyLevel.SAFE
