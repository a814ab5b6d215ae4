# burnout_detector/client.py
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

from .server.schemas import AnalysisResult, AnalyzeIn

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")  # loads BURNOUT_API_URL if present

DEFAULT_API_URL = "http://localhost:8000"
ANALYZE_PATH = "/api/analyze"

# What the caller sees when the backend cannot be reached at all.
CLIENT_FALLBACK_RESULT: Dict[str, Any] = {
    "burnoutLevel": "low",
    "sentiment": "neutral",
    "stressIndicators": [],
    "recommendations": ["Try again later", "Take a break", "Practice self-care"],
    "confidence": 0,
    "moodState": "content",
    "keyTopics": [],
}


class AnalysisRequestError(Exception):
    """Raised when the analyze route answers with an error."""


def _get_base_url() -> str:
    return (os.getenv("BURNOUT_API_URL") or DEFAULT_API_URL).rstrip("/")


def request_analysis(
    text: str,
    *,
    base_url: Optional[str] = None,
    timeout: float = 30.0,
    http_client: Optional[httpx.Client] = None,
) -> Dict[str, Any]:
    """
    POST {text} to /api/analyze and return the camelCase result dict.
    Raises AnalysisRequestError on non-2xx or a non-JSON body, and
    pydantic.ValidationError when the body has the wrong shape.
    """
    url = (base_url.rstrip("/") if base_url else _get_base_url()) + ANALYZE_PATH
    payload = AnalyzeIn(text=text).model_dump(by_alias=True)

    if http_client is not None:
        resp = http_client.post(url, json=payload)
    else:
        with httpx.Client(timeout=timeout) as client:
            resp = client.post(url, json=payload)

    if not resp.is_success:
        raise AnalysisRequestError(
            f"Analysis request failed: status={resp.status_code}, body={resp.text}"
        )

    try:
        data = resp.json()
    except json.JSONDecodeError as e:
        raise AnalysisRequestError(f"Analysis response was not JSON: {e}") from e

    return AnalysisResult.model_validate(data).model_dump(by_alias=True)


def analyze_sentiment(text: str, **kwargs: Any) -> Dict[str, Any]:
    """Like request_analysis(), but any failure yields CLIENT_FALLBACK_RESULT."""
    try:
        return request_analysis(text, **kwargs)
    except Exception as e:
        logger.error("Sentiment analysis error: %r", e)
        return json.loads(json.dumps(CLIENT_FALLBACK_RESULT))
