# server/app.py
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .schemas import (  # type: ignore
    AnalysisResult,
    BreathingPatternOut,
    BreathingPhase,
    DetoxScheduleOut,
    ErrorOut,
    PrivacyOut,
    PrivacySection,
    ScheduleItem,
)
from .helpers import setup_logging  # type: ignore
from .llm import analyze_text, error_fallback_result  # type: ignore
from .wellness import (  # type: ignore
    BREATHING_478,
    BREATHING_CYCLES,
    BREATHING_NAME,
    MEDICAL_NOTICE,
    PRIVACY_COMMITMENTS,
    PRIVACY_SECTIONS,
    detox_schedule,
    resolve_detox_level,
    session_length,
)

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Burnout Detector Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

INVALID_TEXT_ERROR = "Valid text input is required"


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True, "ts": datetime.now(timezone.utc).isoformat()}


# ---------------------------------------------------------------------------
# /api/analyze – journal entry -> burnout assessment
# ---------------------------------------------------------------------------


def _extract_text(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    text = body.get("text")
    if not isinstance(text, str) or not text:
        return None
    return text


@app.post(
    "/api/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorOut}},
)
async def analyze(request: Request):
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        # Unreadable body: answer with the static fallback, never a 5xx.
        logger.error(
            "Sentiment analysis error: could not read request body (%s)",
            type(exc).__name__,
        )
        return AnalysisResult(**error_fallback_result())

    text = _extract_text(body)
    if text is None:
        return JSONResponse({"error": INVALID_TEXT_ERROR}, status_code=400)

    result = await run_in_threadpool(analyze_text, text)
    return AnalysisResult(**result)


# ---------------------------------------------------------------------------
# Wellness content
# ---------------------------------------------------------------------------


@app.get("/api/wellness/detox", response_model=DetoxScheduleOut)
def detox(level: Optional[str] = None) -> DetoxScheduleOut:
    return DetoxScheduleOut(
        burnout_level=resolve_detox_level(level),
        items=[ScheduleItem(**item) for item in detox_schedule(level)],
    )


@app.get("/api/wellness/breathing", response_model=BreathingPatternOut)
def breathing() -> BreathingPatternOut:
    return BreathingPatternOut(
        name=BREATHING_NAME,
        phases=[BreathingPhase(phase=p, seconds=s) for p, s in BREATHING_478],
        cycles=BREATHING_CYCLES,
        total_seconds=session_length(BREATHING_478, BREATHING_CYCLES),
    )


@app.get("/api/privacy", response_model=PrivacyOut)
def privacy() -> PrivacyOut:
    return PrivacyOut(
        sections=[PrivacySection(**s) for s in PRIVACY_SECTIONS],
        commitments=list(PRIVACY_COMMITMENTS),
        notice=MEDICAL_NOTICE,
    )
