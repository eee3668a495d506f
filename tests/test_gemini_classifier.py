import pytest
from PIL import Image

import gemini_classifier
from fallback_classifier import classify_offline
from knowledge_base import lookup
from waste_types import WasteCategory


class TestWasteClassifierInit:

    def test_missing_api_key_raises(self, fake_genai, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        with pytest.raises(ValueError):
            gemini_classifier.WasteClassifier()

    def test_picks_first_available_model(self, fake_genai):
        fake_genai.unavailable = {"gemini-2.0-flash"}

        classifier = gemini_classifier.WasteClassifier(api_key="k")

        assert fake_genai.api_key == "k"
        assert classifier.model_name == "gemini-2.5-flash"
        assert classifier.supports_vision is True

    def test_preferred_model_from_environment(self, fake_genai, monkeypatch):
        monkeypatch.setenv("GEMINI_MODEL", "gemini-custom")

        classifier = gemini_classifier.WasteClassifier(api_key="k")

        assert classifier.model_name == "gemini-custom"

    def test_text_only_model_has_no_vision(self, fake_genai):
        fake_genai.unavailable = {"gemini-2.0-flash", "gemini-2.5-flash", "gemini-1.5-flash", "gemini-1.5-pro"}

        classifier = gemini_classifier.WasteClassifier(api_key="k")

        assert classifier.model_name == "gemini-pro"
        assert classifier.supports_vision is False

    def test_no_model_available_raises(self, fake_genai):
        fake_genai.unavailable = {"gemini-2.0-flash", "gemini-2.5-flash", "gemini-1.5-flash", "gemini-1.5-pro", "gemini-pro"}

        with pytest.raises(ValueError):
            gemini_classifier.WasteClassifier(api_key="k")


class TestClassifyImage:

    def test_normalizes_gemini_analysis(self, classifier):
        classifier.model.reply = "This is a plastic bottle, recyclable, rinse before recycling."

        result = classifier.classify_image(Image.new("RGB", (64, 64)))

        assert result.waste_type is WasteCategory.PLASTIC
        assert result.object_name == "Plastic Bottle"
        assert result.source == "gemini"
        assert classifier.last_raw_response == "This is a plastic bottle, recyclable, rinse before recycling."

    def test_sends_prompt_and_downscaled_image(self, classifier):
        classifier.model.reply = "glass jar"

        classifier.classify_image(Image.new("RGB", (4000, 2000)))

        prompt, image = classifier.model.calls[0]
        assert prompt == gemini_classifier.IMAGE_PROMPT
        assert image.size == (1024, 512)

    def test_remote_error_uses_offline_result(self, classifier):
        classifier.model.error = RuntimeError("quota exceeded")

        result = classifier.classify_image(Image.new("RGB", (8, 8)), hint="old battery")

        assert result == classify_offline("old battery")
        assert result.confidence == 0.7

    def test_empty_analysis_uses_offline_result(self, classifier):
        classifier.model.reply = "   "

        result = classifier.classify_image(Image.new("RGB", (8, 8)))

        assert result.source == "offline"
        assert result.waste_type is WasteCategory.GENERAL

    def test_unsupported_image_type_uses_offline_result(self, classifier):
        result = classifier.classify_image("not an image", hint="glass")

        assert result.source == "offline"
        assert result.waste_type is WasteCategory.GLASS
        assert classifier.model.calls == []


class TestClassifyText:

    def test_normalizes_answer(self, classifier):
        classifier.model.reply = "An aluminum can. Disposal: rinse and recycle."

        result = classifier.classify_text("soda can")

        assert result.waste_type is WasteCategory.METAL
        assert result.details.disposal_method == "Disposal: rinse and recycle."
        assert "soda can" in classifier.model.calls[0]

    def test_remote_error_falls_back(self, classifier):
        classifier.model.error = ConnectionError("offline")

        assert classifier.classify_text("newspaper").waste_type is WasteCategory.PAPER


class TestAskAboutWaste:

    def test_gemini_answer(self, classifier):
        classifier.model.reply = "  Take batteries to a collection point.  "

        answer = classifier.ask_about_waste("Where do I recycle a battery?")

        assert answer.answer == "Take batteries to a collection point."
        assert answer.waste_type is WasteCategory.ELECTRONICS
        assert answer.source == "gemini"
        assert len(answer.suggestions) == 3

    def test_remote_error_answers_locally(self, classifier):
        classifier.model.error = TimeoutError()

        answer = classifier.ask_about_waste("How do I throw away a battery?")

        assert answer.source == "offline"
        assert answer.answer == lookup("battery")
