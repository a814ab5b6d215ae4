from burnout_detector.server.wellness import (
    BREATHING_478,
    DETOX_SCHEDULES,
    breathing_phases,
    detox_schedule,
    resolve_detox_level,
    session_length,
)


def test_every_level_has_four_slots():
    for level in ("none", "low", "medium", "high"):
        assert len(detox_schedule(level)) == 4


def test_level_lookup_is_lenient():
    assert resolve_detox_level(" HIGH ") == "high"
    assert resolve_detox_level(None) == "low"
    assert resolve_detox_level("unknown") == "low"


def test_detox_schedule_returns_copies():
    items = detox_schedule("none")
    items[0]["activity"] = "changed"
    assert DETOX_SCHEDULES["none"][0]["activity"] == "Gratitude journaling"


def test_breathing_phases_run_in_order():
    phases = list(breathing_phases(BREATHING_478, 2))
    assert phases == [
        (1, "inhale", 4),
        (1, "hold", 7),
        (1, "exhale", 8),
        (2, "inhale", 4),
        (2, "hold", 7),
        (2, "exhale", 8),
    ]


def test_default_session_is_five_cycles():
    phases = list(breathing_phases())
    assert len(phases) == 15
    assert phases[-1] == (5, "exhale", 8)
    assert session_length() == 95


def test_zero_cycles_is_empty():
    assert list(breathing_phases(BREATHING_478, 0)) == []
    assert session_length(BREATHING_478, 0) == 0
