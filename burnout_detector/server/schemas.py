# server/schemas.py
"""
Pydantic schemas for the Burnout Detector backend.

This file defines the structured payloads used by:
- /api/analyze            (AnalyzeIn, AnalysisResult)
- /api/wellness/detox     (ScheduleItem, DetoxScheduleOut)
- /api/wellness/breathing (BreathingPhase, BreathingPatternOut)
- /api/privacy            (PrivacySection, PrivacyOut)

Wire keys are camelCase to match the web front end.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BurnoutLevel = Literal["none", "low", "medium", "high"]
Sentiment = Literal["positive", "neutral", "negative"]
MoodState = Literal["happy", "content", "stressed", "anxious", "exhausted", "overwhelmed"]
BreathPhase = Literal["inhale", "hold", "exhale"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# /api/analyze
# ---------------------------------------------------------------------------

class AnalyzeIn(CamelModel):
    text: str


class AnalysisResult(CamelModel):
    burnout_level: BurnoutLevel = "low"
    sentiment: Sentiment = "neutral"
    stress_indicators: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    # 0..100
    confidence: int = Field(default=75, ge=0, le=100)
    mood_state: Optional[MoodState] = None
    key_topics: List[str] = Field(default_factory=list)


class ErrorOut(BaseModel):
    error: str


# ---------------------------------------------------------------------------
# /api/wellness/detox
# ---------------------------------------------------------------------------

class ScheduleItem(CamelModel):
    # e.g. "Morning", "Weekend"
    time: str
    # e.g. "2 hours"
    duration: str
    activity: str


class DetoxScheduleOut(CamelModel):
    burnout_level: BurnoutLevel
    items: List[ScheduleItem]


# ---------------------------------------------------------------------------
# /api/wellness/breathing
# ---------------------------------------------------------------------------

class BreathingPhase(CamelModel):
    phase: BreathPhase
    seconds: int


class BreathingPatternOut(CamelModel):
    name: str
    phases: List[BreathingPhase]
    cycles: int
    total_seconds: int


# ---------------------------------------------------------------------------
# /api/privacy
# ---------------------------------------------------------------------------

class PrivacySection(CamelModel):
    title: str
    body: str


class PrivacyOut(CamelModel):
    sections: List[PrivacySection]
    commitments: List[str] = Field(default_factory=list)
    notice: str
