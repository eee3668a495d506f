"""
Builds a classification from a category the user picked by hand
No inference and no remote call: the user's choice is taken as certain
"""

from guidance_tables import GENERIC_GUIDELINE, guidance_for, refined_guideline
from waste_types import (
    DEFAULT_OBJECT_NAMES,
    MANUAL_CONFIDENCE,
    SOURCE_MANUAL,
    ClassificationResult,
    WasteCategory,
)


def build_from_manual_input(category, description="") -> ClassificationResult:
    """
    Build a classification for a manually selected category.

    Args:
        category: WasteCategory or a label such as "plastic" or "other"
        description: Optional free-text description of the item

    Returns:
        ClassificationResult with confidence 1.0
    """
    if not isinstance(description, str):
        raise TypeError(f"description must be a str, got {type(description).__name__}")

    waste_type = WasteCategory.parse(category)
    if waste_type is WasteCategory.UNKNOWN:
        waste_type = WasteCategory.GENERAL

    description = description.strip()
    if description:
        guideline = refined_guideline(waste_type, description) or GENERIC_GUIDELINE
        specific = f"Specific item: {description}. {guideline}"
        object_name = description
    else:
        specific = GENERIC_GUIDELINE
        object_name = DEFAULT_OBJECT_NAMES[waste_type]

    return ClassificationResult(
        waste_type=waste_type,
        object_name=object_name,
        confidence=MANUAL_CONFIDENCE,
        details=guidance_for(waste_type, specific_guidelines=specific),
        source=SOURCE_MANUAL,
    )
