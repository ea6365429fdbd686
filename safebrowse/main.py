"""Main entry point for the SafeBrowse browser agent."""

import asyncio
import logging
import signal
import sys

from .analyzer.browser_analyzer import PageAnalyzer
from .config import Config, load_config, validate_config
from .pipeline.analysis import AnalysisEngine
from .server import AgentServer

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_server(config: Config) -> AgentServer:
    """Wire the analysis engine into the HTTP server."""
    engine = AnalysisEngine(
        page_analyzer=PageAnalyzer(
            checkout_matchers=config.checkout_matchers,
            checkout_settle_seconds=config.checkout_settle_seconds,
        ),
        navigation_timeout=config.navigation_timeout,
        headless=config.headless,
        chromium_sandbox=config.chromium_sandbox,
    )
    return AgentServer(engine, host=config.host, port=config.port)


async def run_server():
    """Run the browser agent until interrupted."""
    configure_logging()
    config = load_config()

    validation_errors = validate_config(config)
    if validation_errors:
        for err in validation_errors:
            logger.error(err)
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    server = build_server(config)

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    await server.start()
    try:
        await stop_event.wait()
    finally:
        await server.stop()
        logger.info("Browser agent stopped")


def main():
    """Entry point."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
