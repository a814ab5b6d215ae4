# server/llm.py
# ---------------------------------------------------------
# LLM module for the Burnout Detector backend.
#
# One completion call per journal entry, with a single
# catch-and-fallback:
#   - no client / unparseable reply -> keyword rules (rules.classify)
#   - empty reply / API failure      -> static ERROR_FALLBACK_RESULT
#
# Public helpers used by routes:
#   - analyze_text(text) -> dict shaped like AnalysisResult
# ---------------------------------------------------------

import json
import logging
import math
import os
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from anthropic import Anthropic
from dotenv import load_dotenv

from .helpers import setup_logging
from .rules import STRESS_INDICATORS, classify, recommend

setup_logging()
logger = logging.getLogger(__name__)

# .../burnout_detector/server
BASE_DIR = Path(__file__).resolve().parent
# repo root
ROOT_DIR = BASE_DIR.parent.parent

load_dotenv(ROOT_DIR / ".env")
load_dotenv()

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
MODEL = os.getenv("ANTHROPIC_MODEL") or "claude-sonnet-4-5-20250929"
MAX_TEXT_LENGTH = int(os.getenv("BURNOUT_MAX_TEXT_LENGTH") or 5000)

TEMPERATURE = 0.3
MAX_TOKENS = 500

client: Optional[Anthropic] = None
if ANTHROPIC_API_KEY:
    client = Anthropic(api_key=ANTHROPIC_API_KEY)
    prefix = (
        ANTHROPIC_API_KEY[:8] + "..."
        if len(ANTHROPIC_API_KEY) >= 8
        else "(short key)"
    )
    logger.info("Anthropic client initialized; key prefix: %s", prefix)
    logger.info("Using Anthropic model: %s", MODEL)
else:
    logger.warning("No ANTHROPIC_API_KEY found. Using keyword fallbacks.")


class LLMUnavailableError(Exception):
    """Raised when no completion client is configured."""


class EmptyCompletionError(RuntimeError):
    """Raised when the model returns no content."""


BURNOUT_LEVELS = ("none", "low", "medium", "high")
SENTIMENTS = ("positive", "neutral", "negative")
MOOD_STATES = ("happy", "content", "stressed", "anxious", "exhausted", "overwhelmed")

DEFAULT_CONFIDENCE = 75

# Returned when the provider call itself fails.
ERROR_FALLBACK_RESULT: Dict[str, Any] = {
    "burnoutLevel": "low",
    "sentiment": "neutral",
    "stressIndicators": [],
    "recommendations": [
        "Consider taking regular breaks",
        "Practice mindfulness",
        "Maintain work-life balance",
    ],
    "confidence": 50,
    "moodState": "content",
    "keyTopics": [],
}


# -------------------------------------------------------------------
# Prompts
# -------------------------------------------------------------------

SYSTEM_PROMPT = (
    "You are a professional mental health AI assistant. Provide accurate, "
    "compassionate analysis while maintaining appropriate boundaries. "
    "Always prioritize user wellbeing."
)

SCHEMA = (
    "Respond in JSON format:\n"
    "{\n"
    '  "burnoutLevel": "none|low|medium|high",\n'
    '  "sentiment": "positive|neutral|negative",\n'
    '  "moodState": "happy|content|stressed|anxious|exhausted|overwhelmed",\n'
    '  "keyTopics": ["work", "sleep", "relationships"],\n'
    '  "stressIndicators": ["indicator1", "indicator2"],\n'
    '  "confidence": 85,\n'
    '  "reasoning": "brief explanation"\n'
    "}\n"
)


def build_analysis_prompt(text: str) -> str:
    entry = text[:MAX_TEXT_LENGTH]
    return (
        "You are a mental health AI assistant specializing in emotional state analysis "
        "and burnout detection. Analyze the following text for emotional state, burnout "
        "symptoms, and specific wellness needs.\n\n"
        f'Text to analyze: "{entry}"\n\n'
        "Provide a comprehensive analysis including:\n"
        "1. Overall burnout risk level (none, low, medium, high) - use \"none\" for happy/positive states\n"
        "2. Sentiment analysis (positive, neutral, negative)\n"
        "3. Specific mood state (happy, content, stressed, anxious, exhausted, overwhelmed)\n"
        "4. Key topics mentioned (work, sleep, relationships, exercise, diet, etc.)\n"
        "5. Specific stress indicators present\n"
        "6. Confidence level in your analysis (0-100)\n"
        "7. Brief explanation of your reasoning\n\n"
        "IMPORTANT:\n"
        '- If the user expresses happiness, joy, excitement, or general positivity, set burnoutLevel to "none"\n'
        '- For "none" burnout level, focus on maintaining wellbeing and preventive care\n'
        "- For other levels, provide targeted interventions\n\n"
        f"{SCHEMA}\n"
        "Analysis guidelines:\n"
        '- Happy/Positive: "amazing", "great", "happy", "excited", "love", "wonderful" -> burnoutLevel: "none"\n'
        '- Content/Balanced: "good", "fine", "okay", "managing" -> burnoutLevel: "low"\n'
        '- Stressed: "stressed", "tired", "overworked" -> burnoutLevel: "medium"\n'
        '- Critical: "exhausted", "overwhelmed", "burnout" -> burnoutLevel: "high"\n\n'
        f"Typical stress indicators: {', '.join(STRESS_INDICATORS)}\n\n"
        "Consider these wellness indicators:\n"
        "- Physical energy and sleep quality\n"
        "- Emotional balance and mood\n"
        "- Work satisfaction and boundaries\n"
        "- Social connections and relationships\n"
        "- Physical activity and nutrition\n"
        "- Stress management techniques\n"
    )


# -------------------------------------------------------------------
# Completion call
# -------------------------------------------------------------------

def _coerce_json(raw: str) -> Any:
    """
    Models often wrap JSON in ```json fences or add extra prose.
    Strip fences and grab the first {...} block.
    """
    s = raw.strip()

    if s.startswith("```"):
        lines = s.splitlines()
        if lines and lines[0].strip().startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip().startswith("```"):
            lines = lines[:-1]
        s = "\n".join(lines).strip()

    if not s.startswith("{"):
        m = re.search(r"\{.*\}", s, flags=re.S)
        if m:
            s = m.group(0)

    return json.loads(s)


def call_llm(text: str) -> Dict[str, Any]:
    """
    Ask the model for a structured assessment of `text`.

    Raises LLMUnavailableError without a client, EmptyCompletionError on an
    empty reply, and ValueError when the reply is not a JSON object.
    Transport and API errors from the SDK propagate unchanged.
    """
    if client is None:
        raise LLMUnavailableError("no Anthropic client configured")

    message = client.messages.create(
        model=MODEL,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
        system=SYSTEM_PROMPT,
        messages=[{"role": "user", "content": build_analysis_prompt(text)}],
    )
    content = message.content[0].text if message.content else ""
    if not content or not content.strip():
        raise EmptyCompletionError("No response from AI model")

    data = _coerce_json(content)
    if not isinstance(data, dict):
        raise ValueError("model reply is not a JSON object")
    return data


# -------------------------------------------------------------------
# Result assembly
# -------------------------------------------------------------------

def _pick(value: Any, allowed: tuple, default: Any) -> Any:
    return value if value in allowed else default


def normalize_confidence(value: Any) -> int:
    """Missing, zero or non-numeric -> 75; everything else clamped to 0..100."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return DEFAULT_CONFIDENCE
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return DEFAULT_CONFIDENCE
    if math.isnan(number) or number == 0:
        return DEFAULT_CONFIDENCE
    return int(round(min(100.0, max(0.0, number))))


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def build_result(analysis: Dict[str, Any], text: str) -> Dict[str, Any]:
    """Merge an LLM reply (or classify() output) into an AnalysisResult dict."""
    return {
        "burnoutLevel": _pick(analysis.get("burnoutLevel"), BURNOUT_LEVELS, "low"),
        "sentiment": _pick(analysis.get("sentiment"), SENTIMENTS, "neutral"),
        "stressIndicators": _string_list(analysis.get("stressIndicators")),
        "recommendations": recommend(analysis, text),
        "confidence": normalize_confidence(analysis.get("confidence")),
        "moodState": _pick(analysis.get("moodState"), MOOD_STATES, None),
        "keyTopics": _string_list(analysis.get("keyTopics")),
    }


def error_fallback_result() -> Dict[str, Any]:
    return json.loads(json.dumps(ERROR_FALLBACK_RESULT))


def analyze_text(text: str) -> Dict[str, Any]:
    """
    Full analysis for one journal entry. Never raises; provider problems
    degrade to keyword rules or the static error fallback.
    """
    try:
        try:
            ai_analysis = call_llm(text)
        except LLMUnavailableError:
            ai_analysis = classify(text)
        except ValueError as e:
            logger.warning("Model reply was not valid JSON, using keyword rules: %s", type(e).__name__)
            ai_analysis = classify(text)

        result = build_result(ai_analysis, text)
    except Exception as e:
        logger.error("Sentiment analysis error: %s", type(e).__name__)
        return error_fallback_result()

    # no journal text in logs
    logger.info(
        "Burnout analysis completed: level=%s sentiment=%s confidence=%s timestamp=%s",
        result["burnoutLevel"],
        result["sentiment"],
        result["confidence"],
        datetime.now(timezone.utc).isoformat(),
    )
    return result
