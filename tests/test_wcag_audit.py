from contextlib import contextmanager

import pytest

from wcag_analysis import wcag_audit
from wcag_analysis.config import settings


class FakePage:
    def __init__(self, result=None, error=None, goto_error=None):
        self.result = result
        self.error = error
        self.goto_error = goto_error
        self.visited = []
        self.scripts = []
        self.timeout = None

    def set_default_timeout(self, timeout):
        self.timeout = timeout

    def goto(self, url, wait_until=None):
        self.visited.append((url, wait_until))
        if self.goto_error is not None:
            raise self.goto_error

    def add_script_tag(self, **kwargs):
        self.scripts.append(kwargs)

    def evaluate(self, script):
        if self.error is not None:
            raise self.error
        return self.result


class FakeBrowser:
    def __init__(self, page, close_error=None):
        self.page = page
        self.close_error = close_error
        self.closed = False

    def new_page(self):
        return self.page

    def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def fake_browser(monkeypatch):
    def install(page, close_error=None):
        browser = FakeBrowser(page, close_error=close_error)

        class Chromium:
            def launch(self, headless=True):
                return browser

        class Playwright:
            chromium = Chromium()

        @contextmanager
        def fake_sync_playwright():
            yield Playwright()

        monkeypatch.setattr(wcag_audit, "sync_playwright", fake_sync_playwright)
        return browser

    return install


def test_run_axe_audit_returns_violations(fake_browser, monkeypatch):
    monkeypatch.setattr(settings, "AXE_SCRIPT_PATH", None)
    page = FakePage(result={"violations": [{"description": "d1"}], "passes": []})
    browser = fake_browser(page)

    violations = wcag_audit.run_axe_audit("https://example.com")

    assert violations == [{"description": "d1"}]
    assert page.visited == [("https://example.com", "networkidle")]
    assert page.scripts == [{"url": settings.AXE_SCRIPT_URL}]
    assert page.timeout is None
    assert browser.closed


def test_run_axe_audit_uses_local_script_and_timeout(fake_browser, monkeypatch):
    monkeypatch.setattr(settings, "AXE_SCRIPT_PATH", "/opt/axe/axe.min.js")
    monkeypatch.setattr(settings, "NAVIGATION_TIMEOUT_MS", 5000)
    page = FakePage(result={"violations": []})
    fake_browser(page)

    assert wcag_audit.run_axe_audit("https://example.com") == []
    assert page.scripts == [{"path": "/opt/axe/axe.min.js"}]
    assert page.timeout == 5000


def test_run_axe_audit_closes_browser_on_failure(fake_browser):
    page = FakePage(error=RuntimeError("axe is not defined"))
    browser = fake_browser(page)

    with pytest.raises(RuntimeError, match="axe is not defined"):
        wcag_audit.run_axe_audit("https://example.com")
    assert browser.closed


def test_summarize_violations_positive():
    result = wcag_audit.summarize_violations("https://example.com", [])
    assert result.status == "positive"
    assert result.message == "WCAG analysis of the URL (https://example.com) is positive! No major issues found."


def test_run_axe_audit_closes_browser_when_navigation_fails(fake_browser):
    page = FakePage(goto_error=TimeoutError("Timeout 30000ms exceeded."))
    browser = fake_browser(page)

    with pytest.raises(TimeoutError, match="Timeout 30000ms exceeded."):
        wcag_audit.run_axe_audit("https://slow.example.com")
    assert browser.closed
    assert page.scripts == []


def test_close_error_does_not_hide_audit_error(fake_browser):
    page = FakePage(goto_error=RuntimeError("net::ERR_CONNECTION_REFUSED"))
    browser = fake_browser(page, close_error=RuntimeError("Target closed"))

    with pytest.raises(RuntimeError, match="net::ERR_CONNECTION_REFUSED"):
        wcag_audit.run_axe_audit("https://example.com")
    assert browser.closed
