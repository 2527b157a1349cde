# scraper/config.py
# Runtime settings for the scrape service, read once at startup.

import os
from dataclasses import dataclass

DEFAULT_LAUNCH_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
)


@dataclass(frozen=True)
class ScrapeConfig:
    host: str = "0.0.0.0"
    port: int = 3000
    navigation_timeout_ms: int = 30000
    headless: bool = True
    launch_args: tuple = DEFAULT_LAUNCH_ARGS


def _int_setting(environ, key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}")


def load_config(environ=None) -> ScrapeConfig:
    """
    Build a ScrapeConfig from environment variables (HOST, PORT,
    NAVIGATION_TIMEOUT_MS, HEADLESS). Missing values fall back to the defaults.
    Raises ValueError for malformed numbers or a non-positive timeout.
    """
    if environ is None:
        environ = os.environ

    timeout_ms = _int_setting(environ, "NAVIGATION_TIMEOUT_MS", ScrapeConfig.navigation_timeout_ms)
    if timeout_ms <= 0:
        raise ValueError(f"NAVIGATION_TIMEOUT_MS must be positive, got {timeout_ms}")

    headless = environ.get("HEADLESS", "true").strip().lower() not in ("false", "0", "no")

    return ScrapeConfig(
        host=environ.get("HOST", ScrapeConfig.host),
        port=_int_setting(environ, "PORT", ScrapeConfig.port),
        navigation_timeout_ms=timeout_ms,
        headless=headless,
    )
