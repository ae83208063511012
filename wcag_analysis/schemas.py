from pydantic import BaseModel
from typing import Any, Literal, Optional

POSITIVE = "positive"
NEGATIVE = "negative"


class AnalysisRequest(BaseModel):
    # any JSON value is accepted here; WCAGService.validate_url turns a bad one into a 400
    url: Optional[Any] = None


class CodeAnalysisRequest(BaseModel):
    code: str = ""


class CombinedAnalysisRequest(BaseModel):
    url: Optional[Any] = None
    code: Optional[str] = None


class AnalysisResult(BaseModel):
    message: str
    status: Literal["positive", "negative"]
