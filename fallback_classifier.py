"""
Offline classification used when Gemini is unreachable or returns nothing usable
Produces the same result shape as the normalizer, at a lower confidence
"""

import logging

import knowledge_base
from guidance_tables import OVERVIEWS, guidance_for, suggestions_for
from type_inference import infer_type
from waste_types import (
    OFFLINE_CONFIDENCE,
    SOURCE_OFFLINE,
    ClassificationResult,
    WasteAnswer,
)

logger = logging.getLogger(__name__)


def classify_offline(input_text) -> ClassificationResult:
    """
    Classify from the user's own text with the local rules only.

    The four guidance fields come verbatim from the per-category tables; the
    specific guideline prefers a knowledge-base entry for the text and falls
    back to the category overview.
    """
    category = infer_type(input_text)
    specific = knowledge_base.lookup(input_text) or OVERVIEWS[category]
    logger.debug("Offline classification: %s", category.value)

    return ClassificationResult(
        waste_type=category,
        object_name=f"{category.value} Guidance",
        confidence=OFFLINE_CONFIDENCE,
        details=guidance_for(category, specific_guidelines=specific),
        source=SOURCE_OFFLINE,
    )


def answer_offline(question) -> WasteAnswer:
    """Answer a disposal question from the local knowledge base."""
    category = infer_type(question)
    return WasteAnswer(
        answer=knowledge_base.answer_question(question),
        waste_type=category,
        suggestions=tuple(suggestions_for(category)),
        source=SOURCE_OFFLINE,
    )
