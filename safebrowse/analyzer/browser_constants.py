"""Browser analyzer constants and in-page scripts."""

from __future__ import annotations

from .browser_models import ElementMatcher

LAUNCH_ARGS = [
    "--disable-dev-shm-usage",
    "--disable-gpu",
]
NO_SANDBOX_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

VIEWPORT = {"width": 1280, "height": 800}

# Attribute substring selectors are case-sensitive.
PAGE_SIGNALS_SCRIPT = """
() => ({
    title: document.title,
    finalUrl: location.href,
    hasPasswordField: !!document.querySelector('input[type="password"]'),
    hasPaymentFields: !!document.querySelector(
        'input[name*="card"], input[name*="credit"], input[name*="cvv"]'
    ),
    hasSuspiciousFields: !!document.querySelector(
        'input[name*="ssn"], input[name*="social"], input[placeholder*="ssn"], input[placeholder*="social"]'
    ),
    formCount: document.forms.length,
    textContent: document.body ? document.body.innerText.slice(0, 1500) : '',
    hasHttps: location.protocol === 'https:',
    domain: location.hostname,
})
"""

CHECKOUT_SIGNALS_SCRIPT = """
() => ({
    url: location.href,
    title: document.title,
    hasPaymentForm: !!document.querySelector('input[name*="card"]'),
})
"""

# Tried in order; the first matcher with a hit wins.
DEFAULT_CHECKOUT_MATCHERS: tuple[ElementMatcher, ...] = (
    ElementMatcher("checkout link", 'a[href*="checkout"]'),
    ElementMatcher("checkout button", 'button:has-text("checkout")'),
    ElementMatcher("checkout class", '[class*="checkout"]'),
)
