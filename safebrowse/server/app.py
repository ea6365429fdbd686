"""HTTP front end for the browser agent."""

from __future__ import annotations

import logging

from aiohttp import web

from ..constants import DEFAULT_PORT, STATUS_MESSAGE
from ..pipeline.analysis import AnalysisEngine, AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)


class AgentServer:
    """Serves the liveness probe and the analyze endpoint."""

    def __init__(self, engine: AnalysisEngine, host: str = "0.0.0.0", port: int = DEFAULT_PORT):
        self.engine = engine
        self.host = host
        self.port = port
        self._app = web.Application()
        self._register_routes()
        self._runner: web.AppRunner | None = None
        self._site: web.TCPSite | None = None

    @property
    def app(self) -> web.Application:
        return self._app

    def _register_routes(self) -> None:
        self._app.router.add_get("/", self._handle_status)
        self._app.router.add_post("/analyze", self._handle_analyze)

    async def start(self) -> None:
        """Start listening."""
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        self._site = web.TCPSite(self._runner, self.host, self.port)
        await self._site.start()
        logger.info("Browser agent running on %s:%s", self.host, self.port)

    async def stop(self) -> None:
        """Stop the server."""
        if self._site:
            await self._site.stop()
        if self._runner:
            await self._runner.cleanup()
        self._runner = None
        self._site = None

    async def _handle_status(self, request: web.Request) -> web.Response:
        return web.json_response({"status": STATUS_MESSAGE})

    async def _handle_analyze(self, request: web.Request) -> web.Response:
        # Failures are reported in the body; the status code is always 200.
        try:
            payload = await request.json()
        except (ValueError, LookupError) as exc:
            # Covers bad JSON, undecodable bytes and unknown charsets.
            logger.warning("Rejected analyze request with invalid JSON: %s", exc)
            payload = None

        if not isinstance(payload, dict):
            result = AnalysisResult.failed("request body must be a JSON object")
        else:
            result = await self.engine.analyze(AnalysisRequest.from_payload(payload))
        return web.json_response(result.to_payload())
