# tests/conftest.py
# In-memory stand-ins for playwright's async API so nothing launches a real browser.
import asyncio

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

import scraper.browser


class FakePage:
    def __init__(self, browser):
        self.browser = browser

    async def goto(self, url, wait_until=None, timeout=None):
        self.browser.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.browser.hang_navigation:
            # behave like playwright: give up once the navigation timeout elapses
            await asyncio.sleep(timeout / 1000)
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        if self.browser.goto_error is not None:
            raise self.browser.goto_error

    async def evaluate(self, script):
        self.browser.evaluate_calls.append(script)
        if self.browser.evaluate_error is not None:
            raise self.browser.evaluate_error
        return self.browser.body_text


class FakeBrowser:
    def __init__(self):
        self.body_text = "Hello"
        self.goto_error = None
        self.evaluate_error = None
        self.hang_navigation = False
        self.launch_calls = []
        self.goto_calls = []
        self.evaluate_calls = []
        self.close_count = 0

    async def new_page(self):
        return FakePage(self)

    async def close(self):
        self.close_count += 1


class FakeChromium:
    def __init__(self, browser):
        self.browser = browser
        self.launch_error = None

    async def launch(self, **kwargs):
        self.browser.launch_calls.append(kwargs)
        if self.launch_error is not None:
            raise self.launch_error
        return self.browser


class FakePlaywright:
    def __init__(self, browser):
        self.chromium = FakeChromium(browser)
        self.started = 0
        self.stopped = 0

    async def __aenter__(self):
        self.started += 1
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.stopped += 1


@pytest.fixture
def fake_browser(monkeypatch):
    """Patch async_playwright in scraper.browser; returns the shared FakeBrowser."""
    browser = FakeBrowser()
    playwright = FakePlaywright(browser)
    browser.playwright = playwright
    monkeypatch.setattr(scraper.browser, "async_playwright", lambda: playwright)
    return browser
