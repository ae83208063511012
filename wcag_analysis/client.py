# wcag_analysis/client.py
from typing import Optional

import requests

from wcag_analysis.config import settings
from wcag_analysis.logger_config import logger
from wcag_analysis.schemas import AnalysisResult, NEGATIVE
from wcag_analysis.wcag_rules import analyze_code_snippet_for_wcag
from wcag_analysis.wcag_service import NO_INPUT_MESSAGE


class WCAGClient:
    """
    Caller side of the service: sends URLs to the running API and checks
    snippets locally, so a snippet never needs a round trip.
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8000", api_prefix: str = settings.API_PREFIX, timeout: float = 60):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        self.timeout = timeout

    def analyze_url_for_wcag(self, url: str) -> AnalysisResult:
        endpoint = f"{self.base_url}{self.api_prefix}/wcag-analysis"
        logger.info(f"Requesting WCAG analysis of {url} from {endpoint}")
        try:
            # 400 and 500 bodies carry the same result shape, so the status code is not checked
            response = requests.post(endpoint, json={"url": url}, timeout=self.timeout)
            return AnalysisResult(**response.json())
        except Exception as e:
            error_text = str(e) or "An unknown error occurred"
            logger.error(f"WCAG analysis request failed for {url}: {error_text}")
            return AnalysisResult(message=f"Error during WCAG analysis: {error_text}", status=NEGATIVE)

    def perform_wcag_analysis(self, url: Optional[str] = None, code: Optional[str] = None) -> AnalysisResult:
        if url:
            return self.analyze_url_for_wcag(url)
        if code:
            return analyze_code_snippet_for_wcag(code)
        return AnalysisResult(message=NO_INPUT_MESSAGE, status=NEGATIVE)
