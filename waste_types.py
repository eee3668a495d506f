"""
Waste taxonomy and the classification result shape
Every classification path (Gemini, offline, manual) returns a ClassificationResult
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


CONFIDENCE_BASE = 0.5
CONFIDENCE_CAP = 0.95
OFFLINE_CONFIDENCE = 0.7
MANUAL_CONFIDENCE = 1.0

SOURCE_GEMINI = "gemini"
SOURCE_OFFLINE = "offline"
SOURCE_MANUAL = "manual"


class WasteCategory(Enum):
    # Declaration order is the matching priority used across the project
    PLASTIC = "Plastic"
    PAPER = "Paper"
    GLASS = "Glass"
    METAL = "Metal"
    ORGANIC = "Organic"
    ELECTRONICS = "Electronics"
    HAZARDOUS = "Hazardous"
    GENERAL = "General Waste"
    # Only produced by the normalizer when the model text names no material
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value):
        """
        Map a free-form label ("plastic", "E-Waste", "other", ...) to a category.

        Unrecognised labels fall back to GENERAL. Anything that is neither a
        string nor a WasteCategory is a caller bug and raises TypeError.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"waste category must be a str or WasteCategory, got {type(value).__name__}")

        label = value.strip().lower()
        for category in cls:
            if category.value.lower() == label or category.name.lower() == label:
                return category
        return _ALIASES.get(label, cls.GENERAL)


_ALIASES = {
    "e-waste": WasteCategory.ELECTRONICS,
    "ewaste": WasteCategory.ELECTRONICS,
    "electronic": WasteCategory.ELECTRONICS,
    "other": WasteCategory.GENERAL,
    "general": WasteCategory.GENERAL,
}

POINTS_BY_CATEGORY = {
    WasteCategory.PLASTIC: 10,
    WasteCategory.PAPER: 8,
    WasteCategory.GLASS: 12,
    WasteCategory.METAL: 15,
    WasteCategory.ORGANIC: 5,
    WasteCategory.ELECTRONICS: 20,
    WasteCategory.HAZARDOUS: 25,
}
DEFAULT_POINTS = 5

# Generic object names used when the item itself cannot be named
DEFAULT_OBJECT_NAMES = {
    WasteCategory.PLASTIC: "Plastic Item",
    WasteCategory.PAPER: "Paper Item",
    WasteCategory.GLASS: "Glass Item",
    WasteCategory.METAL: "Metal Item",
    WasteCategory.ORGANIC: "Organic Waste",
    WasteCategory.ELECTRONICS: "Electronic Device",
    WasteCategory.HAZARDOUS: "Hazardous Material",
    WasteCategory.GENERAL: "Miscellaneous Item",
    WasteCategory.UNKNOWN: "Unknown Object",
}


def calculate_points(waste_type) -> int:
    """Eco-points awarded for a scan of the given category (member or label)."""
    return POINTS_BY_CATEGORY.get(WasteCategory.parse(waste_type), DEFAULT_POINTS)


@dataclass(frozen=True)
class GuidanceBundle:
    recyclability: str
    disposal_method: str
    environmental_impact: str
    tips: str
    specific_guidelines: str

    def to_dict(self):
        return {
            "recyclability": self.recyclability,
            "disposalMethod": self.disposal_method,
            "environmentalImpact": self.environmental_impact,
            "tips": self.tips,
            "specificGuidelines": self.specific_guidelines,
        }


@dataclass(frozen=True)
class ClassificationResult:
    waste_type: WasteCategory
    object_name: str
    confidence: float
    details: GuidanceBundle
    raw_analysis: Optional[str] = None
    source: str = SOURCE_GEMINI

    def to_dict(self):
        """
        Convert to the JSON shape the results UI and scan recorder read
        """
        data = {
            "wasteType": self.waste_type.value,
            "objectName": self.object_name,
            "confidence": self.confidence,
            "details": self.details.to_dict(),
            "source": self.source,
        }
        if self.raw_analysis is not None:
            data["rawAnalysis"] = self.raw_analysis
        return data


@dataclass(frozen=True)
class WasteAnswer:
    """Answer to a free-text disposal question."""

    answer: str
    waste_type: WasteCategory
    suggestions: tuple
    source: str = SOURCE_GEMINI

    def to_dict(self):
        return {
            "answer": self.answer,
            "wasteType": self.waste_type.value,
            "suggestions": list(self.suggestions),
            "source": self.source,
        }
