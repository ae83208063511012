# wcag_analysis/wcag_audit.py
from typing import Any, Dict, List

from playwright.sync_api import sync_playwright

from wcag_analysis.config import settings
from wcag_analysis.logger_config import logger
from wcag_analysis.schemas import AnalysisResult, POSITIVE, NEGATIVE
from wcag_analysis.utils import measure_execution_time

AXE_RUN_SCRIPT = """
async () => {
    return await axe.run();
}
"""


def _inject_axe(page) -> None:
    if settings.AXE_SCRIPT_PATH:
        logger.info(f"Injecting axe-core from {settings.AXE_SCRIPT_PATH}")
        page.add_script_tag(path=settings.AXE_SCRIPT_PATH)
    else:
        logger.info(f"Injecting axe-core from {settings.AXE_SCRIPT_URL}")
        page.add_script_tag(url=settings.AXE_SCRIPT_URL)


def _close_after_failure(browser) -> None:
    # a close error must not replace the navigation or evaluation error
    try:
        browser.close()
    except Exception as e:
        logger.error(f"Error closing browser after failed audit: {e}")


@measure_execution_time
def run_axe_audit(url: str) -> List[Dict[str, Any]]:
    """
    Loads `url` in a fresh headless Chromium, runs axe-core in the page and
    returns its violations. One browser per call, closed before returning.
    Any Playwright or in-page error propagates to the caller.
    """
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=settings.BROWSER_HEADLESS)
        try:
            page = browser.new_page()
            if settings.NAVIGATION_TIMEOUT_MS is not None:
                page.set_default_timeout(settings.NAVIGATION_TIMEOUT_MS)

            logger.info(f"Navigating to {url}")
            page.goto(url, wait_until="networkidle")

            _inject_axe(page)

            logger.info("Running axe-core audit")
            result = page.evaluate(AXE_RUN_SCRIPT)
        except Exception:
            _close_after_failure(browser)
            raise
        browser.close()

    violations = (result or {}).get("violations", [])
    logger.info(f"axe-core reported {len(violations)} violation(s) for {url}")
    return violations


def summarize_violations(url: str, violations: List[Dict[str, Any]]) -> AnalysisResult:
    if violations:
        violation_messages = "\n".join(v.get("description", "") for v in violations)
        return AnalysisResult(
            message=f"WCAG analysis of the URL ({url}) found issues:\n{violation_messages}",
            status=NEGATIVE,
        )

    return AnalysisResult(
        message=f"WCAG analysis of the URL ({url}) is positive! No major issues found.",
        status=POSITIVE,
    )
