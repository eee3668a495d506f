"""
Waste-type inference from free text
"""

from waste_types import WasteCategory


# First group with any contained keyword wins. "bottle" is listed for both
# Plastic and Glass; Plastic is checked first so Glass never claims it.
INFERENCE_KEYWORDS = (
    (WasteCategory.PLASTIC, ("plastic", "bottle", "container")),
    (WasteCategory.PAPER, ("paper", "cardboard", "newspaper")),
    (WasteCategory.GLASS, ("glass", "bottle")),
    (WasteCategory.METAL, ("metal", "aluminum", "can")),
    (WasteCategory.ORGANIC, ("food", "organic", "compost")),
    (WasteCategory.ELECTRONICS, ("electronic", "device", "battery")),
    (WasteCategory.HAZARDOUS, ("hazardous", "chemical", "toxic")),
)


def infer_type(text) -> WasteCategory:
    """
    Infer the single best-fit category for a question or description.

    Plain substring containment on the lowercased text, so "glass" inside
    "fiberglass" counts as Glass. Returns GENERAL when nothing matches.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    lowered = text.lower()
    for category, keywords in INFERENCE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return WasteCategory.GENERAL
