"""Browser analyzer data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..constants import TEXT_EXCERPT_LIMIT


@dataclass(frozen=True)
class PageSignals:
    """Snapshot of the signals read from a loaded page."""

    title: str
    final_url: str
    has_password_field: bool
    has_payment_fields: bool
    has_suspicious_fields: bool
    form_count: int
    text_excerpt: str
    is_https: bool
    domain: str

    @classmethod
    def from_evaluation(cls, data: dict) -> "PageSignals":
        """Build signals from the in-page evaluation result."""
        text = str(data.get("textContent") or "")
        return cls(
            title=str(data.get("title") or ""),
            final_url=str(data.get("finalUrl") or ""),
            has_password_field=bool(data.get("hasPasswordField")),
            has_payment_fields=bool(data.get("hasPaymentFields")),
            has_suspicious_fields=bool(data.get("hasSuspiciousFields")),
            form_count=int(data.get("formCount") or 0),
            text_excerpt=text[:TEXT_EXCERPT_LIMIT],
            is_https=bool(data.get("hasHttps")),
            domain=str(data.get("domain") or ""),
        )


@dataclass(frozen=True)
class CheckoutSignals:
    """Reduced signal set read after clicking a checkout control."""

    url: str
    title: str
    has_payment_form: bool

    @classmethod
    def from_evaluation(cls, data: dict) -> "CheckoutSignals":
        return cls(
            url=str(data.get("url") or ""),
            title=str(data.get("title") or ""),
            has_payment_form=bool(data.get("hasPaymentForm")),
        )


@dataclass
class CheckoutAttempt:
    """Outcome of the optional checkout interaction."""

    found: bool = False
    matched_by: Optional[str] = None
    signals: Optional[CheckoutSignals] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ElementMatcher:
    """One strategy for locating a clickable element."""

    label: str
    selector: str
