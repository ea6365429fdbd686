"""Plain-text safety report."""

from __future__ import annotations

from typing import Optional

from ..constants import SafetyLevel
from .browser_models import CheckoutAttempt, PageSignals


def _checkout_lines(attempt: CheckoutAttempt) -> list[str]:
    lines: list[str] = []
    if attempt.found:
        lines.append("🛒 Found checkout button, investigating...")
    if attempt.signals is not None:
        lines.append(f"📍 Checkout page: {attempt.signals.title}")
        if attempt.signals.has_payment_form:
            lines.append("💳 Payment form found on checkout")
    if attempt.error:
        lines.append("❌ Couldn't access checkout page")
    return lines


def build_report(
    url: str,
    signals: PageSignals,
    level: SafetyLevel,
    checkout: Optional[CheckoutAttempt] = None,
) -> str:
    """Render the report shown to the caller."""
    lines = [
        "🔍 Browser agent starting analysis...",
        "",
        f"📍 Navigating to: {url}",
        f'📄 Page Title: "{signals.title}"',
        f"🌐 Domain: {signals.domain}",
        f"🔒 HTTPS: {'✅ Secure' if signals.is_https else '❌ Not Secure'}",
    ]

    if signals.has_payment_fields:
        lines.append("🚨 WARNING: Credit card fields detected")
    if signals.has_suspicious_fields:
        lines.append("🚨 DANGER: Asking for SSN/Social Security number")
    if not signals.is_https:
        lines.append("🚨 WARNING: Site is not using HTTPS encryption")

    if checkout is not None:
        lines.extend(_checkout_lines(checkout))

    lines.append("")
    lines.append(f"{level.emoji} SAFETY ASSESSMENT: {level.value}")
    return "\n".join(lines) + "\n"
