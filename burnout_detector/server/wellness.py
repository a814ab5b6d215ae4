# server/wellness.py
# ---------------------------------------------------------
# Static wellness content served next to the analysis:
#   - digital-detox schedules keyed on burnout level
#   - the 4-7-8 breathing pattern (data + phase sequence)
#   - privacy notes shown in the front end
# ---------------------------------------------------------

from typing import Dict, Iterator, List, Optional, Tuple

DETOX_SCHEDULES: Dict[str, List[Dict[str, str]]] = {
    "none": [
        {"time": "Morning", "duration": "15 min", "activity": "Gratitude journaling"},
        {"time": "Midday", "duration": "10 min", "activity": "Mindful walk or stretch"},
        {"time": "Evening", "duration": "20 min", "activity": "Digital sunset - screen-free wind down"},
        {"time": "Weekly", "duration": "2 hours", "activity": "Nature time or hobby immersion"},
    ],
    "high": [
        {"time": "Morning", "duration": "2 hours", "activity": "No screens before 10 AM"},
        {"time": "Lunch", "duration": "1 hour", "activity": "Device-free meals"},
        {"time": "Evening", "duration": "3 hours", "activity": "Digital sunset after 8 PM"},
        {"time": "Weekend", "duration": "4 hours", "activity": "Screen-free Saturday morning"},
    ],
    "medium": [
        {"time": "Morning", "duration": "1 hour", "activity": "No screens during breakfast"},
        {"time": "Lunch", "duration": "30 min", "activity": "Device-free lunch break"},
        {"time": "Evening", "duration": "2 hours", "activity": "No screens 1 hour before bed"},
        {"time": "Weekend", "duration": "2 hours", "activity": "Sunday digital detox"},
    ],
    "low": [
        {"time": "Morning", "duration": "30 min", "activity": "Mindful morning routine"},
        {"time": "Lunch", "duration": "15 min", "activity": "Screen-free lunch"},
        {"time": "Evening", "duration": "1 hour", "activity": "Wind down without screens"},
        {"time": "Weekly", "duration": "3 hours", "activity": "Weekly digital reset"},
    ],
}

DEFAULT_DETOX_LEVEL = "low"


def resolve_detox_level(level: Optional[str]) -> str:
    """Unknown or missing levels get the default schedule."""
    key = (level or "").strip().lower()
    return key if key in DETOX_SCHEDULES else DEFAULT_DETOX_LEVEL


def detox_schedule(level: Optional[str]) -> List[Dict[str, str]]:
    return [dict(item) for item in DETOX_SCHEDULES[resolve_detox_level(level)]]


# -------------------------------------------------------------------
# Breathing exercise
# -------------------------------------------------------------------

BREATHING_NAME = "4-7-8 breathing"
BREATHING_478: List[Tuple[str, int]] = [("inhale", 4), ("hold", 7), ("exhale", 8)]
BREATHING_CYCLES = 5


def breathing_phases(
    pattern: List[Tuple[str, int]] = BREATHING_478,
    cycles: int = BREATHING_CYCLES,
) -> Iterator[Tuple[int, str, int]]:
    """
    Yield (cycle, phase, seconds) for a whole session, cycle starting at 1.

    A front-end timer counts each phase down from `seconds` to 1 before
    moving on; the session stops after the last exhale.
    """
    for cycle in range(1, cycles + 1):
        for phase, seconds in pattern:
            yield cycle, phase, seconds


def session_length(
    pattern: List[Tuple[str, int]] = BREATHING_478,
    cycles: int = BREATHING_CYCLES,
) -> int:
    return sum(seconds for _, _, seconds in breathing_phases(pattern, cycles))


# -------------------------------------------------------------------
# Privacy notes
# -------------------------------------------------------------------

PRIVACY_SECTIONS: List[Dict[str, str]] = [
    {
        "title": "No Data Storage",
        "body": "Your text is processed in real-time and never stored on our servers.",
    },
    {
        "title": "Local Processing",
        "body": "Analysis happens instantly without persistent data retention.",
    },
    {
        "title": "Encrypted Communication",
        "body": "All data transmission uses secure HTTPS encryption.",
    },
    {
        "title": "Anonymous Analytics",
        "body": "Only anonymized usage metrics are collected for improvement.",
    },
]

PRIVACY_COMMITMENTS: List[str] = [
    "No personal identifiers collected or stored",
    "Right to data deletion (no data to delete)",
    "Transparent processing practices",
    "No third-party data sharing",
]

MEDICAL_NOTICE = (
    "This tool is designed for educational and self-awareness purposes only. "
    "It is not a substitute for professional medical advice, diagnosis, or treatment."
)
