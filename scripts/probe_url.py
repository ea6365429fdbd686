#!/usr/bin/env python3
"""Run one analysis against a live URL and print the report."""

import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from safebrowse.analyzer.browser_analyzer import PageAnalyzer
from safebrowse.config import load_config
from safebrowse.main import configure_logging
from safebrowse.pipeline.analysis import AnalysisEngine, AnalysisRequest


async def main():
    if len(sys.argv) < 2:
        print("Usage: probe_url.py <url> [query]")
        sys.exit(2)

    url = sys.argv[1]
    query = " ".join(sys.argv[2:])

    configure_logging()
    config = load_config()
    logging.getLogger().setLevel(config.log_level)
    engine = AnalysisEngine(
        page_analyzer=PageAnalyzer(
            checkout_matchers=config.checkout_matchers,
            checkout_settle_seconds=config.checkout_settle_seconds,
        ),
        navigation_timeout=config.navigation_timeout,
        headless=config.headless,
        chromium_sandbox=config.chromium_sandbox,
    )

    print(f"Probing: {url}")
    print("=" * 60)
    result = await engine.analyze(AnalysisRequest(url=url, user_query=query))
    print(result.report)
    if result.success:
        print(f"Safety level: {result.safety_level.value}")
    else:
        print(f"Error: {result.error}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
