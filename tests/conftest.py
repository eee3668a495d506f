import pytest

import gemini_classifier


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModel:
    """Stands in for genai.GenerativeModel and records every prompt it receives."""

    def __init__(self, name, reply="", error=None):
        self.name = name
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_content(self, content, generation_config=None):
        self.calls.append(content)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.reply)


class FakeGenAI:
    def __init__(self, unavailable=()):
        self.api_key = None
        self.unavailable = set(unavailable)
        self.models = []
        self.reply = ""
        self.error = None

    def configure(self, api_key=None):
        self.api_key = api_key

    def GenerativeModel(self, name):
        if name in self.unavailable:
            raise ValueError(f"model {name} not found")
        model = FakeModel(name, reply=self.reply, error=self.error)
        self.models.append(model)
        return model


@pytest.fixture
def fake_genai(monkeypatch):
    fake = FakeGenAI()
    monkeypatch.setattr(gemini_classifier, "genai", fake)
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    return fake


@pytest.fixture
def classifier(fake_genai):
    return gemini_classifier.WasteClassifier(api_key="test-key")
