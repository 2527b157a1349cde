# scraper/browser.py
# Async Playwright task runner: render a page in its own headless Chromium and
# return the visible text of <body>.

import logging

from playwright.async_api import async_playwright

from scraper.config import ScrapeConfig
from scraper.errors import ScrapeFailed

logger = logging.getLogger(__name__)

# innerText, not textContent: only what the browser actually renders
BODY_TEXT_SCRIPT = "() => document.body ? document.body.innerText : ''"


async def fetch_rendered_text(url: str, config: ScrapeConfig = None) -> str:
    """
    Launch a fresh headless chromium, visit `url`, wait for network idle
    (bounded by config.navigation_timeout_ms) and return document.body.innerText.
    A page without a body yields "".

    The browser is closed on every exit path. Any failure (launch, navigation
    timeout, evaluation) is logged and re-raised as ScrapeFailed. No retries.
    """
    if config is None:
        config = ScrapeConfig()

    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=config.headless, args=list(config.launch_args))
            try:
                page = await browser.new_page()
                # networkidle: no connections for 500ms, so SPA content has loaded
                await page.goto(url, wait_until="networkidle", timeout=config.navigation_timeout_ms)
                text = await page.evaluate(BODY_TEXT_SCRIPT)
            finally:
                await browser.close()
    except Exception as e:
        logger.error("[Playwright Error] URL: %s -> %s", url, e)
        raise ScrapeFailed(f"Scrape failed: {e}") from e

    return text or ""
