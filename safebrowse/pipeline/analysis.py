"""Analysis engine for SafeBrowse."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..analyzer.browser import BrowserSession
from ..analyzer.browser_analyzer import PageAnalyzer
from ..analyzer.browser_interaction import wants_checkout
from ..analyzer.classifier import classify
from ..analyzer.report import build_report
from ..constants import DEFAULT_NAVIGATION_TIMEOUT, FAILURE_REPORT, SafetyLevel

logger = logging.getLogger(__name__)


@dataclass
class AnalysisRequest:
    """A page to analyze and the caller's free-text question about it."""

    url: str
    user_query: str = ""

    @classmethod
    def from_payload(cls, payload: dict) -> "AnalysisRequest":
        url = payload.get("url")
        query = payload.get("userQuery")
        return cls(
            url=str(url).strip() if url is not None else "",
            user_query=str(query) if query is not None else "",
        )


@dataclass
class AnalysisResult:
    """Outcome of one analysis request."""

    success: bool
    report: str
    safety_level: Optional[SafetyLevel] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, message: str) -> "AnalysisResult":
        return cls(
            success=False,
            report=FAILURE_REPORT,
            error=f"Analysis failed: {message}",
        )

    def to_payload(self) -> dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error, "report": self.report}
        return {
            "success": True,
            "report": self.report,
            "safetyLevel": self.safety_level.value if self.safety_level else None,
        }


def _error_message(exc: Exception) -> str:
    # Playwright errors carry a multi-line call log after the message.
    message = getattr(exc, "message", None) or str(exc)
    lines = message.strip().splitlines()
    return lines[0] if lines else exc.__class__.__name__


class AnalysisEngine:
    """Runs navigate -> extract -> (checkout) -> classify for one request."""

    def __init__(
        self,
        *,
        page_analyzer: Optional[PageAnalyzer] = None,
        session_factory: Optional[Callable[[], Any]] = None,
        navigation_timeout: int = DEFAULT_NAVIGATION_TIMEOUT,
        headless: bool = True,
        chromium_sandbox: bool = False,
    ):
        self.page_analyzer = page_analyzer or PageAnalyzer()
        self.navigation_timeout = navigation_timeout
        self.headless = headless
        self.chromium_sandbox = chromium_sandbox
        self._session_factory = session_factory or self._new_browser_session

    def _new_browser_session(self) -> BrowserSession:
        return BrowserSession(
            timeout=self.navigation_timeout,
            headless=self.headless,
            chromium_sandbox=self.chromium_sandbox,
        )

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze one page. Never raises; failures become failed results."""
        if not request.url:
            return AnalysisResult.failed("url is required")

        logger.info("Analyzing %s", request.url)
        checkout = None
        try:
            async with self._session_factory() as session:
                page = await session.open(request.url)
                signals = await self.page_analyzer.extract_signals(page)
                if wants_checkout(request.user_query):
                    checkout = await self.page_analyzer.investigate_checkout(page)
        except Exception as exc:
            logger.error("Error analyzing %s: %s", request.url, exc)
            return AnalysisResult.failed(_error_message(exc))

        level = classify(signals)
        report = build_report(request.url, signals, level, checkout)
        logger.info("Analysis of %s complete: %s", request.url, level.value)
        return AnalysisResult(success=True, report=report, safety_level=level)
