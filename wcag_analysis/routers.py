from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wcag_analysis.exceptions import WCAGAnalysisError
from wcag_analysis.logger_config import logger
from wcag_analysis.schemas import (
    AnalysisRequest,
    AnalysisResult,
    CodeAnalysisRequest,
    CombinedAnalysisRequest,
    NEGATIVE,
)
from wcag_analysis.wcag_service import WCAGService

router = APIRouter()
service = WCAGService()


def _error_response(exc: WCAGAnalysisError) -> JSONResponse:
    # failures keep the AnalysisResult shape so the caller renders them the same way
    body = AnalysisResult(message=str(exc), status=NEGATIVE)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@router.post("/wcag-analysis", response_model=AnalysisResult)  # Browser audit of a live page
def wcag_analysis(request: AnalysisRequest):
    try:
        return service.analyze_url(request.url)
    except WCAGAnalysisError as e:
        return _error_response(e)


@router.post("/code-analysis", response_model=AnalysisResult)
def code_analysis(request: CodeAnalysisRequest):
    logger.info(f"Received code snippet of {len(request.code)} chars")
    return service.analyze_code_snippet(request.code)


@router.post("/analyze", response_model=AnalysisResult)  # URL first, then snippet
def analyze(request: CombinedAnalysisRequest):
    try:
        return service.perform_wcag_analysis(url=request.url, code=request.code)
    except WCAGAnalysisError as e:
        return _error_response(e)
