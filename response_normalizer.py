"""
Turns the free-text analysis returned by Gemini into a ClassificationResult
Never fails on bad text: anything it cannot read falls back to default strings
"""

import logging
import re

from waste_types import (
    CONFIDENCE_BASE,
    CONFIDENCE_CAP,
    DEFAULT_OBJECT_NAMES,
    SOURCE_GEMINI,
    ClassificationResult,
    GuidanceBundle,
    WasteCategory,
)

logger = logging.getLogger(__name__)

CATEGORY_BONUS = 0.2
OBJECT_BONUS = 0.1

# Checked in order, first hit sets the category
CATEGORY_MARKERS = (
    (WasteCategory.PLASTIC, ("plastic",)),
    (WasteCategory.PAPER, ("paper", "cardboard")),
    (WasteCategory.GLASS, ("glass",)),
    (WasteCategory.METAL, ("metal", "aluminum", "tin")),
    (WasteCategory.ORGANIC, ("organic", "food")),
    (WasteCategory.ELECTRONICS, ("electronic", "e-waste")),
)

# Checked in order after the category, first hit names the object
OBJECT_MARKERS = ("bottle", "can", "cardboard", "food", "paper", "container")

TOPIC_DEFAULTS = {
    "recyclability": "Please check local recycling guidelines for this item.",
    "disposal": "Check with your local waste management authority for proper disposal methods.",
    "environmental impact": "Improper disposal can harm the environment.",
    "tips": "Consider reducing consumption and reusing items when possible.",
    "guidelines": "Follow local waste sorting guidelines for proper disposal.",
}
FALLBACK_INFO = "Information not available."

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def _detect_category(lowered):
    for category, markers in CATEGORY_MARKERS:
        if any(marker in lowered for marker in markers):
            return category
    return None


def _detect_object(lowered, category):
    """
    Name the object from the first object marker in the text.

    Returns (object_name, category); "cardboard" moves the result to Paper.
    object_name is None when no marker applies.
    """
    for marker in OBJECT_MARKERS:
        if marker not in lowered:
            continue

        if marker == "bottle":
            if category is WasteCategory.PLASTIC:
                return "Plastic Bottle", category
            if category is WasteCategory.GLASS:
                return "Glass Bottle", category
            return "Bottle", category
        if marker == "can":
            return "Metal Can", category
        if marker == "cardboard":
            return "Cardboard", WasteCategory.PAPER
        if marker == "food":
            return "Food Waste", category
        if marker == "paper":
            return "Paper", category
        if marker == "container" and category is WasteCategory.PLASTIC:
            return "Plastic Container", category
    return None, category


def extract_relevant_info(text, topic):
    """
    Collect the sentences of text that mention topic.

    Args:
        text: Full analysis text
        topic: Topic word or phrase, matched case-insensitively

    Returns:
        Matching sentences joined with ". " and closed with a period, or the
        default message for the topic when no sentence mentions it
    """
    topic_lower = topic.lower()
    sentences = [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]
    relevant = [s for s in sentences if topic_lower in s.lower()]

    if relevant:
        return ". ".join(relevant) + "."
    return TOPIC_DEFAULTS.get(topic_lower, FALLBACK_INFO)


def normalize(raw_text) -> ClassificationResult:
    """
    Build a structured classification from Gemini's raw analysis text.

    Confidence starts at 0.5, gains 0.2 for a category hit and 0.1 for an
    object hit, and is capped at 0.95.
    """
    if not isinstance(raw_text, str):
        raise TypeError(f"raw_text must be a str, got {type(raw_text).__name__}")

    lowered = raw_text.lower()
    confidence = CONFIDENCE_BASE

    category = _detect_category(lowered)
    if category is None:
        category = WasteCategory.UNKNOWN
    else:
        confidence += CATEGORY_BONUS

    object_name, category = _detect_object(lowered, category)
    if object_name is None:
        object_name = DEFAULT_OBJECT_NAMES[category]
    else:
        confidence += OBJECT_BONUS

    confidence = round(min(confidence, CONFIDENCE_CAP), 2)
    logger.debug("Normalized analysis: %s / %s (%.2f)", category.value, object_name, confidence)

    details = GuidanceBundle(
        recyclability=extract_relevant_info(raw_text, "recyclability"),
        disposal_method=extract_relevant_info(raw_text, "disposal"),
        environmental_impact=extract_relevant_info(raw_text, "environmental impact"),
        tips=extract_relevant_info(raw_text, "tips"),
        specific_guidelines=extract_relevant_info(raw_text, "guidelines"),
    )

    return ClassificationResult(
        waste_type=category,
        object_name=object_name,
        confidence=confidence,
        details=details,
        raw_analysis=raw_text,
        source=SOURCE_GEMINI,
    )
