import time
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from burnout_detector.server import llm
from burnout_detector.server.app import app


class FakeMessages:
    def __init__(self, reply, delay=0.0):
        self.reply = reply
        self.delay = delay
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            time.sleep(self.delay)
        if isinstance(self.reply, Exception):
            raise self.reply
        if self.reply is None:
            return SimpleNamespace(content=[])
        return SimpleNamespace(content=[SimpleNamespace(text=self.reply)])


class FakeAnthropic:
    """Stands in for anthropic.Anthropic; only messages.create is used."""

    def __init__(self, reply, delay=0.0):
        self.messages = FakeMessages(reply, delay)


@pytest.fixture
def no_llm(monkeypatch):
    monkeypatch.setattr(llm, "client", None)


@pytest.fixture
def fake_llm(monkeypatch):
    def install(reply, delay=0.0):
        fake = FakeAnthropic(reply, delay)
        monkeypatch.setattr(llm, "client", fake)
        return fake

    return install


@pytest.fixture
def api():
    return TestClient(app)
