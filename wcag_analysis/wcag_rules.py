import re
from typing import List

from wcag_analysis.logger_config import logger
from wcag_analysis.schemas import AnalysisResult, POSITIVE, NEGATIVE

IMG_TAG_REGEX = re.compile(r"<img[^>]*>")
BUTTON_TAG_REGEX = re.compile(r"<button[^>]*>")

IMG_MISSING_ALT = "Image tag missing `alt` attribute."
BUTTON_MISSING_ARIA = "Button tag missing `aria-label` or `aria-labelledby`."


# Images
def check_img_alt(code: str, issues: List[str]) -> None:
    """
    Appends one issue per <img> tag that carries no alt= attribute.

    Plain substring test on the opening tag, so an alt= inside another
    attribute's value counts as present.
    """
    for tag in IMG_TAG_REGEX.findall(code):
        if "alt=" not in tag:
            issues.append(IMG_MISSING_ALT)


# Interactive elements
def check_button_aria(code: str, issues: List[str]) -> None:
    """Appends one issue per <button> tag without aria-label or aria-labelledby."""
    for tag in BUTTON_TAG_REGEX.findall(code):
        if "aria-label" not in tag and "aria-labelledby" not in tag:
            issues.append(BUTTON_MISSING_ARIA)


def analyze_code_snippet_for_wcag(code: str) -> AnalysisResult:
    logger.info("Running WCAG checks on code snippet")
    issues: List[str] = []

    check_img_alt(code, issues)
    check_button_aria(code, issues)

    if issues:
        logger.info(f"Code snippet analysis found {len(issues)} issue(s)")
        return AnalysisResult(
            message="WCAG analysis of the code snippet found issues:\n" + "\n".join(issues),
            status=NEGATIVE,
        )

    return AnalysisResult(
        message="WCAG analysis of the code snippet is positive! No major issues found.",
        status=POSITIVE,
    )
