"""Tests for the HTTP endpoints."""

import pytest
from aiohttp.test_utils import TestClient, TestServer

from safebrowse.constants import SafetyLevel
from safebrowse.pipeline.analysis import AnalysisResult
from safebrowse.server import AgentServer


class DummyEngine:
    def __init__(self, result: AnalysisResult):
        self.result = result
        self.requests = []

    async def analyze(self, request):
        self.requests.append(request)
        return self.result


@pytest.fixture
def safe_engine():
    return DummyEngine(AnalysisResult(success=True, report="report text\n", safety_level=SafetyLevel.SAFE))


@pytest.mark.asyncio
async def test_status_endpoint(safe_engine):
    server = AgentServer(safe_engine)
    async with TestClient(TestServer(server.app)) as client:
        resp = await client.get("/")
        assert resp.status == 200
        assert await resp.json() == {"status": "Browser agent is running!"}


@pytest.mark.asyncio
async def test_analyze_success(safe_engine):
    server = AgentServer(safe_engine)
    async with TestClient(TestServer(server.app)) as client:
        resp = await client.post(
            "/analyze", json={"url": "https://shop.example.com", "userQuery": "checkout"}
        )
        assert resp.status == 200
        assert await resp.json() == {
            "success": True,
            "report": "report text\n",
            "safetyLevel": "SAFE",
        }

    request = safe_engine.requests[0]
    assert request.url == "https://shop.example.com"
    assert request.user_query == "checkout"


@pytest.mark.asyncio
async def test_analyze_failure_still_returns_200():
    engine = DummyEngine(AnalysisResult.failed("net::ERR_NAME_NOT_RESOLVED"))
    server = AgentServer(engine)
    async with TestClient(TestServer(server.app)) as client:
        resp = await client.post("/analyze", json={"url": "https://nope.invalid"})
        assert resp.status == 200
        assert await resp.json() == {
            "success": False,
            "error": "Analysis failed: net::ERR_NAME_NOT_RESOLVED",
            "report": "❌ Could not analyze this website",
        }
    assert engine.requests[0].user_query == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("body", ["not json", "[1, 2]", '"https://x.example"'])
async def test_analyze_rejects_non_object_bodies(safe_engine, body):
    server = AgentServer(safe_engine)
    async with TestClient(TestServer(server.app)) as client:
        resp = await client.post(
            "/analyze", data=body, headers={"Content-Type": "application/json"}
        )
        assert resp.status == 200
        data = await resp.json()
        assert data["success"] is False
        assert data["error"] == "Analysis failed: request body must be a JSON object"
    assert safe_engine.requests == []


@pytest.mark.asyncio
async def test_analyze_unknown_charset_is_failure_shaped(safe_engine):
    server = AgentServer(safe_engine)
    async with TestClient(TestServer(server.app)) as client:
        resp = await client.post(
            "/analyze",
            data=b'{"url": "https://shop.example.com"}',
            headers={"Content-Type": "application/json; charset=nope"},
        )
        assert resp.status == 200
        data = await resp.json()
        assert data["success"] is False
        assert data["error"] == "Analysis failed: request body must be a JSON object"
    assert safe_engine.requests == []
