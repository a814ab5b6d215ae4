"""
Burnout Detector
================
Mood-journal burnout assessment: one LLM completion per entry with a
keyword-rule fallback, plus static wellness content (digital-detox
schedules, 4-7-8 breathing, privacy notes).
"""

__version__ = "0.1.0"
