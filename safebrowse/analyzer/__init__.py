"""Analyzer modules for SafeBrowse."""

from .browser import BrowserSession
from .browser_analyzer import PageAnalyzer
from .browser_interaction import wants_checkout
from .browser_models import CheckoutAttempt, CheckoutSignals, ElementMatcher, PageSignals
from .classifier import classify
from .report import build_report

__all__ = [
    "BrowserSession",
    "PageAnalyzer",
    "wants_checkout",
    "CheckoutAttempt",
    "CheckoutSignals",
    "ElementMatcher",
    "PageSignals",
    "classify",
    "build_report",
]
