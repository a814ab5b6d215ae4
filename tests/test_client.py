import json

import httpx
import pytest

from burnout_detector.client import (
    CLIENT_FALLBACK_RESULT,
    AnalysisRequestError,
    analyze_sentiment,
    request_analysis,
)


def _mock_client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_round_trip_through_the_app(api, no_llm):
    result = analyze_sentiment(
        "So stressed about my job",
        base_url="http://testserver",
        http_client=api,
    )
    assert result["burnoutLevel"] == "medium"
    assert result["keyTopics"] == ["work"]


def test_posts_text_to_analyze_route():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = request.content
        return httpx.Response(200, json={"burnoutLevel": "none", "confidence": 90})

    result = request_analysis(
        "hello", base_url="http://api.example/", http_client=_mock_client(handler)
    )
    assert seen["url"] == "http://api.example/api/analyze"
    assert json.loads(seen["body"]) == {"text": "hello"}
    assert result["burnoutLevel"] == "none"
    assert result["confidence"] == 90


def test_error_status_raises():
    client = _mock_client(lambda request: httpx.Response(400, json={"error": "bad"}))
    with pytest.raises(AnalysisRequestError):
        request_analysis("hi", base_url="http://api.example", http_client=client)


def test_server_error_returns_client_fallback():
    client = _mock_client(lambda request: httpx.Response(500, text="boom"))
    result = analyze_sentiment("hi", base_url="http://api.example", http_client=client)
    assert result == CLIENT_FALLBACK_RESULT
    assert result["confidence"] == 0


def test_connection_error_returns_client_fallback():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    result = analyze_sentiment("hi", base_url="http://api.example", http_client=_mock_client(handler))
    assert result["recommendations"] == ["Try again later", "Take a break", "Practice self-care"]


def test_non_json_body_returns_client_fallback():
    client = _mock_client(lambda request: httpx.Response(200, text="<html>"))
    result = analyze_sentiment("hi", base_url="http://api.example", http_client=client)
    assert result == CLIENT_FALLBACK_RESULT
