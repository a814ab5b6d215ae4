import logging
import threading
import time

import pytest
from fastapi.testclient import TestClient

from burnout_detector.server.app import app


def test_health(api):
    resp = api.get("/health")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True


# ---------------------------------------------------------------------------
# /api/analyze
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "body",
    [{}, {"text": ""}, {"text": 42}, {"text": None}, ["I feel tired"], "I feel tired"],
)
def test_analyze_rejects_invalid_text(api, no_llm, body):
    resp = api.post("/api/analyze", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Valid text input is required"}


def test_analyze_unreadable_body_returns_static_fallback(api, no_llm):
    resp = api.post(
        "/api/analyze",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["confidence"] == 50
    assert data["burnoutLevel"] == "low"
    assert data["moodState"] == "content"


def test_analyze_undecodable_body_is_not_logged(api, no_llm, caplog):
    caplog.set_level(logging.INFO)
    resp = api.post(
        "/api/analyze",
        content=b'{"text": "my secret diary about my boss \xff"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 200
    assert resp.json()["confidence"] == 50
    assert "could not read request body (UnicodeDecodeError)" in caplog.text
    assert "secret diary" not in caplog.text


def test_analyze_uses_camel_case_keys(api, no_llm):
    resp = api.post("/api/analyze", json={"text": "Burnout at my job, constantly tired"})
    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == {
        "burnoutLevel",
        "sentiment",
        "stressIndicators",
        "recommendations",
        "confidence",
        "moodState",
        "keyTopics",
    }
    assert data["burnoutLevel"] == "high"
    assert data["keyTopics"] == ["work", "sleep"]
    assert "Immediate reduction of work responsibilities is crucial" in data["recommendations"]


def test_analyze_provider_failure_is_not_a_server_error(api, fake_llm):
    fake_llm(RuntimeError("upstream 503"))
    resp = api.post("/api/analyze", json={"text": "I'm fine"})
    assert resp.status_code == 200
    assert resp.json()["recommendations"] == [
        "Consider taking regular breaks",
        "Practice mindfulness",
        "Maintain work-life balance",
    ]


def test_analyze_with_model_reply(api, fake_llm):
    fake_llm(
        '{"burnoutLevel": "none", "sentiment": "positive", "moodState": "happy", '
        '"keyTopics": ["relationships"], "stressIndicators": [], "confidence": 91}'
    )
    data = api.post("/api/analyze", json={"text": "Lovely dinner with family"}).json()
    assert data["burnoutLevel"] == "none"
    assert data["confidence"] == 91
    assert "Nurture your positive social connections" in data["recommendations"]


# ---------------------------------------------------------------------------
# Wellness content
# ---------------------------------------------------------------------------


def test_detox_schedule_for_level(api):
    data = api.get("/api/wellness/detox", params={"level": "high"}).json()
    assert data["burnoutLevel"] == "high"
    assert len(data["items"]) == 4
    assert data["items"][0] == {
        "time": "Morning",
        "duration": "2 hours",
        "activity": "No screens before 10 AM",
    }


@pytest.mark.parametrize("params", [{}, {"level": "extreme"}])
def test_detox_schedule_defaults_to_low(api, params):
    data = api.get("/api/wellness/detox", params=params).json()
    assert data["burnoutLevel"] == "low"
    assert data["items"][0]["activity"] == "Mindful morning routine"


def test_breathing_pattern(api):
    data = api.get("/api/wellness/breathing").json()
    assert data["phases"] == [
        {"phase": "inhale", "seconds": 4},
        {"phase": "hold", "seconds": 7},
        {"phase": "exhale", "seconds": 8},
    ]
    assert data["cycles"] == 5
    assert data["totalSeconds"] == 95


def test_privacy_notes(api):
    data = api.get("/api/privacy").json()
    assert [s["title"] for s in data["sections"]] == [
        "No Data Storage",
        "Local Processing",
        "Encrypted Communication",
        "Anonymous Analytics",
    ]
    assert "No third-party data sharing" in data["commitments"]
    assert "not a substitute for professional medical advice" in data["notice"]


def test_slow_model_call_does_not_block_other_requests(fake_llm):
    fake_llm('{"burnoutLevel": "low"}', delay=1.0)

    with TestClient(app) as client:
        worker = threading.Thread(
            target=client.post, args=("/api/analyze",), kwargs={"json": {"text": "tired"}}
        )
        worker.start()
        time.sleep(0.05)

        started = time.monotonic()
        resp = client.get("/health")
        elapsed = time.monotonic() - started
        worker.join()

    assert resp.status_code == 200
    assert elapsed < 0.5
