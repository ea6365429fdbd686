"""Configuration management for SafeBrowse."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .analyzer.browser_constants import DEFAULT_CHECKOUT_MATCHERS
from .analyzer.browser_models import ElementMatcher
from .constants import (
    DEFAULT_CHECKOUT_SETTLE_SECONDS,
    DEFAULT_NAVIGATION_TIMEOUT,
    DEFAULT_PORT,
)

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Application configuration loaded from environment."""

    # HTTP server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    # Browser
    navigation_timeout: int = DEFAULT_NAVIGATION_TIMEOUT
    checkout_settle_seconds: float = DEFAULT_CHECKOUT_SETTLE_SECONDS
    headless: bool = True
    chromium_sandbox: bool = False  # Off by default for containers without user namespaces

    config_dir: Path = field(default_factory=lambda: Path("./config"))

    # Checkout lookup strategies (override via config/heuristics.yaml)
    checkout_matchers: tuple[ElementMatcher, ...] = field(
        default_factory=lambda: tuple(DEFAULT_CHECKOUT_MATCHERS)
    )

    # Env values that could not be parsed; reported by validate_config
    load_errors: list[str] = field(default_factory=list)


def _env_number(name: str, default, cast, errors: list[str]):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        errors.append(f"{name} must be a number (got {raw!r})")
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _load_heuristics(config_dir: Path) -> dict:
    """Load heuristic overrides from config/heuristics.yaml (optional)."""
    path = Path(config_dir or ".") / "heuristics.yaml"
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except Exception as exc:
        logger.warning("Failed to parse heuristics.yaml: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring heuristics.yaml: expected a mapping at top level")
        return {}
    return data


def _coerce_matchers(raw) -> tuple[ElementMatcher, ...]:
    matchers: list[ElementMatcher] = []
    for entry in raw or []:
        if not isinstance(entry, dict):
            continue
        selector = str(entry.get("selector") or "").strip()
        if not selector:
            continue
        label = str(entry.get("label") or selector).strip()
        matchers.append(ElementMatcher(label=label, selector=selector))
    return tuple(matchers)


def load_config() -> Config:
    """Load configuration from environment variables."""
    load_dotenv()

    config_dir = Path(os.getenv("CONFIG_DIR", "./config"))
    heuristics = _load_heuristics(config_dir)

    checkout_matchers = _coerce_matchers(heuristics.get("checkout_matchers"))
    if heuristics.get("checkout_matchers") is not None and not checkout_matchers:
        logger.warning("No usable checkout_matchers in heuristics.yaml, using defaults")

    load_errors: list[str] = []
    port = _env_number("PORT", DEFAULT_PORT, int, load_errors)
    navigation_timeout = _env_number(
        "NAVIGATION_TIMEOUT", DEFAULT_NAVIGATION_TIMEOUT, int, load_errors
    )
    checkout_settle_seconds = _env_number(
        "CHECKOUT_SETTLE_SECONDS", DEFAULT_CHECKOUT_SETTLE_SECONDS, float, load_errors
    )

    return Config(
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        navigation_timeout=navigation_timeout,
        checkout_settle_seconds=checkout_settle_seconds,
        headless=_env_bool("BROWSER_HEADLESS", True),
        chromium_sandbox=_env_bool("CHROMIUM_SANDBOX", False),
        config_dir=config_dir,
        checkout_matchers=checkout_matchers or tuple(DEFAULT_CHECKOUT_MATCHERS),
        load_errors=load_errors,
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of errors."""
    errors = list(config.load_errors)

    if not 0 < config.port < 65536:
        errors.append(f"PORT must be between 1 and 65535 (got {config.port})")

    if config.navigation_timeout <= 0:
        errors.append("NAVIGATION_TIMEOUT must be a positive number of seconds")

    if config.checkout_settle_seconds < 0:
        errors.append("CHECKOUT_SETTLE_SECONDS cannot be negative")

    if config.log_level not in logging.getLevelNamesMapping():
        errors.append(f"Unknown LOG_LEVEL: {config.log_level}")

    return errors
