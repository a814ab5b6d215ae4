# server/rules.py
# ---------------------------------------------------------
# Deterministic keyword rules for the burnout detector.
#
# Used when the LLM is unavailable or its reply is not JSON,
# and (for recommendations) on every analysis.
#
# Public helpers:
#   - classify(text)                  -> dict shaped like an LLM reply
#   - recommend(analysis, user_text)  -> list[str]
# ---------------------------------------------------------

from typing import Any, Dict, List, Mapping, Optional, Tuple

BURNOUT_KEYWORDS: Dict[str, List[str]] = {
    "none": [
        "happy", "joyful", "excited", "thrilled", "amazing", "wonderful", "fantastic",
        "great", "excellent", "perfect", "love", "energetic", "motivated", "inspired",
        "fulfilled", "satisfied", "content", "peaceful", "calm", "relaxed", "balanced",
    ],
    "high": [
        "exhausted", "overwhelmed", "burnout", "completely drained", "cannot cope",
        "mental breakdown", "extreme stress", "constantly tired", "losing motivation",
        "depressed", "anxious", "panic attacks", "insomnia", "chronic fatigue",
    ],
    "medium": [
        "stressed", "tired", "overworked", "losing interest", "difficulty concentrating",
        "irritable", "sleep problems", "lack of energy", "feeling detached",
        "procrastinating", "cynical", "reduced productivity",
    ],
    "low": [
        "managing", "coping", "okay", "fine", "good", "energetic", "motivated",
        "balanced", "handling stress", "sleeping well", "focused",
    ],
}

# Catalogue offered to the LLM as examples of indicator wording.
STRESS_INDICATORS: List[str] = [
    "Work-related stress",
    "Sleep disruption",
    "Emotional exhaustion",
    "Cognitive fatigue",
    "Social withdrawal",
    "Physical symptoms",
    "Decreased motivation",
    "Irritability",
    "Anxiety patterns",
    "Burnout risk",
]

# (level, sentiment, mood, stress indicator) in precedence order
_LEVEL_RULES: List[Tuple[str, str, str, Optional[str]]] = [
    ("none", "positive", "happy", None),
    ("high", "negative", "exhausted", "Severe stress indicators detected"),
    ("medium", "negative", "stressed", "Moderate stress indicators detected"),
    ("low", "positive", "content", None),
]

TOPIC_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("work", ("work", "job", "career")),
    ("sleep", ("sleep", "tired", "rest")),
    ("relationships", ("relationship", "family", "friends")),
    ("exercise", ("exercise", "gym", "fitness")),
]

FALLBACK_CONFIDENCE = 60
FALLBACK_REASONING = "Fallback keyword-based analysis"


# -------------------------------------------------------------------
# Classification
# -------------------------------------------------------------------

def extract_topics(text: str) -> List[str]:
    lower = text.lower()
    return [
        topic
        for topic, words in TOPIC_KEYWORDS
        if any(w in lower for w in words)
    ]


def classify(text: str) -> Dict[str, Any]:
    """
    Keyword-based stand-in for the LLM assessment.

    The first tier with a matching keyword wins (none, high, medium, low).
    Text matching no tier is read as low / neutral / content.
    """
    lower = text.lower()

    burnout_level, sentiment, mood_state = "low", "neutral", "content"
    stress_indicators: List[str] = []

    for level, level_sentiment, mood, indicator in _LEVEL_RULES:
        if any(kw in lower for kw in BURNOUT_KEYWORDS[level]):
            burnout_level, sentiment, mood_state = level, level_sentiment, mood
            if indicator:
                stress_indicators.append(indicator)
            break

    return {
        "burnoutLevel": burnout_level,
        "sentiment": sentiment,
        "moodState": mood_state,
        "keyTopics": extract_topics(text),
        "stressIndicators": stress_indicators,
        "confidence": FALLBACK_CONFIDENCE,
        "reasoning": FALLBACK_REASONING,
    }


# -------------------------------------------------------------------
# Recommendations
# -------------------------------------------------------------------

BASE_RECOMMENDATIONS: List[str] = [
    "Practice mindfulness for 5 minutes daily",
    "Stay hydrated throughout the day",
    "Take regular movement breaks",
]

_LEVEL_RECOMMENDATIONS: Dict[str, List[str]] = {
    "none": [
        "Continue your positive habits and routines",
        "Share your positive energy with others",
        "Consider mentoring or helping someone who might be struggling",
        "Keep a gratitude journal to maintain your positive outlook",
        "Set new goals to channel your positive energy",
    ],
    "low": [
        "Maintain your current work-life balance",
        "Continue regular exercise and healthy sleep habits",
        "Practice stress management techniques proactively",
    ],
    "medium": [
        "Reduce workload and delegate tasks when possible",
        "Practice the 4-7-8 breathing technique when stressed",
        "Take short walks during breaks to clear your mind",
        "Consider talking to a trusted friend or colleague",
    ],
    "high": [
        "Consider taking time off work to recover",
        "Seek professional support from a mental health provider",
        "Practice progressive muscle relaxation daily",
        "Limit screen time, especially before bed",
        "Focus on basic needs: sleep, nutrition, and gentle movement",
    ],
}

_TOPIC_RECOMMENDATIONS: Dict[str, Dict[str, str]] = {
    "none": {
        "work": "Leverage your current motivation to take on inspiring projects",
        "relationships": "Nurture your positive social connections",
    },
    "low": {
        "work": "Set clear boundaries around work hours",
        "sleep": "Maintain consistent sleep schedule",
    },
    "medium": {
        "work": "Speak with your manager about workload concerns",
        "sleep": "Establish a relaxing bedtime routine",
        "relationships": "Don't isolate yourself - reach out to loved ones",
    },
    "high": {
        "work": "Immediate reduction of work responsibilities is crucial",
        "sleep": "Prioritize sleep - consider sleep hygiene consultation",
    },
}

_TEXT_RECOMMENDATIONS: List[Tuple[Tuple[str, ...], str]] = [
    (("deadline", "pressure"), "Break large tasks into smaller, manageable steps"),
    (("team", "colleagues"), "Communicate openly with your team about capacity"),
    (("energy", "fatigue"), "Consider a energy audit of your daily activities"),
]

_HIGH_RISK_MOODS = ("exhausted", "overwhelmed", "anxious")


def _select_branch(burnout_level: Any, mood_state: Any) -> Optional[str]:
    """Pick the single recommendation branch; level and mood are OR-ed per tier."""
    if burnout_level == "none" or mood_state == "happy":
        return "none"
    if burnout_level == "low" or mood_state == "content":
        return "low"
    if burnout_level == "medium" or mood_state == "stressed":
        return "medium"
    if burnout_level == "high" or mood_state in _HIGH_RISK_MOODS:
        return "high"
    return None


def _dedupe(items: List[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def recommend(analysis: Mapping[str, Any], user_text: str) -> List[str]:
    """
    Build personalised recommendations from an analysis and the raw entry.

    `analysis` is either a classify() result or a raw LLM reply, so any
    field may be missing or null. Output order: base lines, the level
    branch (plus its topic lines), then text-triggered lines; first
    occurrence wins on duplicates.
    """
    lower = user_text.lower()
    key_topics = analysis.get("keyTopics") or []
    if isinstance(key_topics, str):
        key_topics = [key_topics]
    elif not isinstance(key_topics, (list, tuple)):
        key_topics = []

    recommendations: List[str] = []

    branch = _select_branch(analysis.get("burnoutLevel"), analysis.get("moodState"))
    if branch is not None:
        recommendations.extend(_LEVEL_RECOMMENDATIONS[branch])
        for topic, line in _TOPIC_RECOMMENDATIONS[branch].items():
            if topic in key_topics:
                recommendations.append(line)

    for triggers, line in _TEXT_RECOMMENDATIONS:
        if any(t in lower for t in triggers):
            recommendations.append(line)

    return _dedupe(BASE_RECOMMENDATIONS + recommendations)
