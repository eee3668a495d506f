import pytest

from response_normalizer import (
    CATEGORY_MARKERS,
    OBJECT_MARKERS,
    TOPIC_DEFAULTS,
    extract_relevant_info,
    normalize,
)
from waste_types import WasteCategory


SAMPLE_ANALYSIS = (
    "This is a clear plastic bottle made of PET. "
    "Recyclability: PET bottles are widely accepted in curbside programs. "
    "Disposal: empty and rinse the bottle, then place it in the recycling bin! "
    "The environmental impact of plastic that is not recycled is severe. "
    "Tips: remove the cap and crush the bottle to save space? "
    "Local guidelines may differ."
)


class TestNormalize:

    def test_plastic_bottle_scenario(self):
        result = normalize("This is a plastic bottle, recyclable, rinse before recycling.")

        assert result.waste_type is WasteCategory.PLASTIC
        assert result.object_name == "Plastic Bottle"
        assert result.confidence == pytest.approx(0.8)
        assert result.source == "gemini"

    def test_empty_text_uses_defaults(self):
        result = normalize("")

        assert result.waste_type is WasteCategory.UNKNOWN
        assert result.object_name == "Unknown Object"
        assert result.confidence == 0.5
        assert result.details.recyclability == TOPIC_DEFAULTS["recyclability"]
        assert result.details.disposal_method == TOPIC_DEFAULTS["disposal"]
        assert result.details.environmental_impact == TOPIC_DEFAULTS["environmental impact"]
        assert result.details.tips == TOPIC_DEFAULTS["tips"]
        assert result.details.specific_guidelines == TOPIC_DEFAULTS["guidelines"]

    def test_whitespace_only_text_uses_defaults(self):
        result = normalize("   \n\t ")

        assert result.waste_type is WasteCategory.UNKNOWN
        assert result.confidence == 0.5
        assert result.raw_analysis == "   \n\t "

    def test_plastic_checked_before_glass(self):
        result = normalize("A glass-look plastic bottle")

        assert result.waste_type is WasteCategory.PLASTIC
        assert result.object_name == "Plastic Bottle"

    def test_glass_bottle(self):
        result = normalize("An empty glass bottle of sparkling water")

        assert result.waste_type is WasteCategory.GLASS
        assert result.object_name == "Glass Bottle"
        assert result.confidence == pytest.approx(0.8)

    def test_bottle_without_material(self):
        result = normalize("A bottle lying on the street")

        assert result.waste_type is WasteCategory.UNKNOWN
        assert result.object_name == "Bottle"
        assert result.confidence == pytest.approx(0.6)

    def test_can_is_named_metal_can(self):
        result = normalize("An aluminum soda can")

        assert result.waste_type is WasteCategory.METAL
        assert result.object_name == "Metal Can"

    def test_cardboard_forces_paper(self):
        result = normalize("A plastic-lined cardboard box")

        assert result.waste_type is WasteCategory.PAPER
        assert result.object_name == "Cardboard"
        assert result.confidence == pytest.approx(0.8)

    def test_container_only_named_under_plastic(self):
        plastic = normalize("A plastic container")
        glass = normalize("A glass container")

        assert plastic.object_name == "Plastic Container"
        assert glass.object_name == "Glass Item"
        assert glass.confidence == pytest.approx(0.7)

    def test_category_without_object_uses_generic_name(self):
        result = normalize("Some electronic waste")

        assert result.waste_type is WasteCategory.ELECTRONICS
        assert result.object_name == "Electronic Device"
        assert result.confidence == pytest.approx(0.7)

    def test_e_waste_marker(self):
        assert normalize("This is e-waste").waste_type is WasteCategory.ELECTRONICS

    def test_substring_matches_are_kept(self):
        # "tin" inside "distinct" still counts as Metal
        assert normalize("A distinct item").waste_type is WasteCategory.METAL

    def test_confidence_never_exceeds_cap(self):
        texts = [SAMPLE_ANALYSIS, "plastic bottle can cardboard food paper container", "x" * 10]
        for text in texts:
            assert 0.0 <= normalize(text).confidence <= 0.95

    def test_guidance_fields_extracted_from_sentences(self):
        result = normalize(SAMPLE_ANALYSIS)

        assert result.details.recyclability == "Recyclability: PET bottles are widely accepted in curbside programs."
        assert result.details.disposal_method == "Disposal: empty and rinse the bottle, then place it in the recycling bin."
        assert result.details.environmental_impact == "The environmental impact of plastic that is not recycled is severe."
        assert result.details.tips == "Tips: remove the cap and crush the bottle to save space."
        assert result.details.specific_guidelines == "Local guidelines may differ."

    def test_raw_analysis_is_kept(self):
        assert normalize(SAMPLE_ANALYSIS).raw_analysis == SAMPLE_ANALYSIS

    def test_repeated_calls_are_identical(self):
        assert normalize(SAMPLE_ANALYSIS) == normalize(SAMPLE_ANALYSIS)
        assert normalize(SAMPLE_ANALYSIS).to_dict() == normalize(SAMPLE_ANALYSIS).to_dict()

    def test_every_field_populated_for_nonsense(self):
        for text in ["", "???", "qwerty asdf", "...!!!", SAMPLE_ANALYSIS]:
            result = normalize(text)
            assert result.waste_type in WasteCategory
            assert result.object_name
            details = result.details.to_dict()
            assert all(details.values())

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError):
            normalize(None)


class TestExtractRelevantInfo:

    def test_joins_multiple_sentences(self):
        text = "Disposal is simple. Nothing else here. Another disposal note!"

        assert extract_relevant_info(text, "disposal") == "Disposal is simple. Another disposal note."

    def test_topic_match_is_case_insensitive(self):
        assert extract_relevant_info("TIPS: reuse it.", "Tips") == "TIPS: reuse it."

    def test_unknown_topic_default(self):
        assert extract_relevant_info("", "weight") == "Information not available."


class TestMarkerOrder:

    def test_category_marker_order(self):
        assert [category for category, _ in CATEGORY_MARKERS] == [
            WasteCategory.PLASTIC,
            WasteCategory.PAPER,
            WasteCategory.GLASS,
            WasteCategory.METAL,
            WasteCategory.ORGANIC,
            WasteCategory.ELECTRONICS,
        ]

    def test_object_marker_order(self):
        assert OBJECT_MARKERS == ("bottle", "can", "cardboard", "food", "paper", "container")
