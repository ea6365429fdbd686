"""Global pytest configuration."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncGenerator

import pytest

from safebrowse.analyzer.browser_models import PageSignals


@pytest.fixture(scope="session")
def event_loop() -> AsyncGenerator[asyncio.AbstractEventLoop, None]:
    """Provide a shared event loop for async tests and fixtures."""

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        yield loop
    finally:
        loop.close()


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem):  # type: ignore[override]
    if inspect.iscoroutinefunction(pyfuncitem.obj):
        testargs = {
            name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
        }
        loop = testargs.get("event_loop") or asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        loop.run_until_complete(pyfuncitem.obj(**testargs))
        return True
    return None


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "asyncio: mark test as requiring asyncio support")


@pytest.fixture
def make_signals():
    """Factory for PageSignals with safe defaults."""

    def _make(**overrides) -> PageSignals:
        values = {
            "title": "Example Store",
            "final_url": "https://shop.example.com/",
            "has_password_field": False,
            "has_payment_fields": False,
            "has_suspicious_fields": False,
            "form_count": 0,
            "text_excerpt": "Welcome",
            "is_https": True,
            "domain": "shop.example.com",
        }
        values.update(overrides)
        return PageSignals(**values)

    return _make
