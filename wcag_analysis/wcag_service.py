# wcag_analysis/wcag_service.py
from typing import Any, Optional

from wcag_analysis.exceptions import AuditError, InvalidURLError
from wcag_analysis.logger_config import logger
from wcag_analysis.schemas import AnalysisResult, NEGATIVE
from wcag_analysis.wcag_audit import run_axe_audit, summarize_violations
from wcag_analysis.wcag_rules import analyze_code_snippet_for_wcag

NO_INPUT_MESSAGE = "No URL or code snippet provided."


class WCAGService:
    def __init__(self):
        pass

    def validate_url(self, url: Any) -> bool:
        """Only an `http` prefix is required; the browser rejects anything else."""
        return isinstance(url, str) and url.startswith("http")

    def analyze_url(self, url: Any) -> AnalysisResult:
        logger.info(f"Received WCAG analysis request for URL: {url}")
        if not self.validate_url(url):
            logger.warning(f"Invalid URL provided: {url!r}")
            raise InvalidURLError()

        try:
            violations = run_axe_audit(url)
        except Exception as e:
            error_text = str(e) or "An unknown error occurred"
            logger.error(f"Error during WCAG analysis of {url}: {error_text}")
            raise AuditError(error_text) from e

        return summarize_violations(url, violations)

    def analyze_code_snippet(self, code: str) -> AnalysisResult:
        return analyze_code_snippet_for_wcag(code)

    def perform_wcag_analysis(self, url: Optional[str] = None, code: Optional[str] = None) -> AnalysisResult:
        """
        Picks the analysis path from whichever input is non-empty.
        A URL wins over a snippet; with neither, the result is negative.
        """
        if url:
            return self.analyze_url(url)
        if code:
            return self.analyze_code_snippet(code)

        logger.warning("WCAG analysis requested without URL or code snippet")
        return AnalysisResult(message=NO_INPUT_MESSAGE, status=NEGATIVE)
