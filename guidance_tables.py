"""
Static per-category disposal guidance
Shared by the offline fallback and the manual classification builder
"""

from waste_types import GuidanceBundle, WasteCategory


GENERIC_RECYCLABILITY = "Check with your local recycling facility for specific guidelines"
GENERIC_DISPOSAL = "If unsure, check with your local waste management authority for proper disposal"
GENERIC_IMPACT = "Improper disposal can harm ecosystems and wildlife"
GENERIC_TIPS = "When in doubt, check with your local waste management authority before disposal."
GENERIC_OVERVIEW = "Check with your local waste management authority for proper disposal guidelines for this type of waste."
GENERIC_SUGGESTIONS = "Reduce consumption when possible | Reuse items where practical | Recycle according to local guidelines"
GENERIC_GUIDELINE = "Follow the general guidelines for this waste type. When in doubt, contact your local recycling facility."


RECYCLABILITY = {
    WasteCategory.PLASTIC: "Most plastics are recyclable, check for the recycling symbol and number",
    WasteCategory.PAPER: "Highly recyclable when clean and dry",
    WasteCategory.GLASS: "100% recyclable and can be recycled indefinitely",
    WasteCategory.METAL: "100% recyclable and highly valuable in the recycling stream",
    WasteCategory.ORGANIC: "Compostable - can be converted into nutrient-rich soil",
    WasteCategory.ELECTRONICS: "Contains valuable materials that can be recovered, but requires special handling",
    WasteCategory.HAZARDOUS: "Not recyclable in regular streams - requires special handling",
    WasteCategory.GENERAL: GENERIC_RECYCLABILITY,
    WasteCategory.UNKNOWN: GENERIC_RECYCLABILITY,
}

DISPOSAL_METHODS = {
    WasteCategory.PLASTIC: "Rinse container, remove caps/lids (if different material), place in plastics recycling",
    WasteCategory.PAPER: "Keep dry and clean, remove any plastic or metal attachments, place in paper recycling",
    WasteCategory.GLASS: "Rinse containers, remove caps/lids, place in glass recycling bin",
    WasteCategory.METAL: "Rinse containers, remove food residue, crush if possible to save space, place in metal recycling",
    WasteCategory.ORGANIC: "Place in home compost bin or municipal green waste collection",
    WasteCategory.ELECTRONICS: "Take to an e-waste collection point, electronics retailer, or schedule special pickup",
    WasteCategory.HAZARDOUS: "Take to a hazardous waste collection facility, never place in regular trash or recycling",
    WasteCategory.GENERAL: GENERIC_DISPOSAL,
    WasteCategory.UNKNOWN: GENERIC_DISPOSAL,
}

ENVIRONMENTAL_IMPACT = {
    WasteCategory.PLASTIC: "Takes hundreds of years to break down, pollutes oceans and harms wildlife if not properly recycled",
    WasteCategory.PAPER: "Biodegradable but contributes to deforestation if not sustainably sourced and recycled",
    WasteCategory.GLASS: "Inert material that doesn't degrade, but production is energy-intensive so recycling is beneficial",
    WasteCategory.METAL: "Mining for metals is environmentally damaging, but metals can be recycled indefinitely",
    WasteCategory.ORGANIC: "Produces methane (a potent greenhouse gas) in landfills, but beneficial when composted properly",
    WasteCategory.ELECTRONICS: "Contains toxic materials that can leach into soil and water, recycling reduces need for mining",
    WasteCategory.HAZARDOUS: "Can contaminate soil, water, and air if not disposed of properly",
    WasteCategory.GENERAL: GENERIC_IMPACT,
    WasteCategory.UNKNOWN: GENERIC_IMPACT,
}

TIPS = {
    WasteCategory.PLASTIC: "Check the recycling number (1-7) to ensure your facility accepts it. Avoid single-use plastics when possible.",
    WasteCategory.PAPER: "Shredded paper can usually be recycled but should be kept separate. Remove sticky notes before recycling.",
    WasteCategory.GLASS: "Different colors of glass should be separated if your facility requires it. Broken glass should be wrapped and labeled.",
    WasteCategory.METAL: "Even small metal items like bottle caps can be recycled. Aluminum foil should be clean and balled up.",
    WasteCategory.ORGANIC: "Avoid putting meat, dairy, and oils in home compost bins. Turn compost regularly for faster breakdown.",
    WasteCategory.ELECTRONICS: "Wipe personal data before recycling devices. Many manufacturers have take-back programs.",
    WasteCategory.HAZARDOUS: "Store hazardous waste in original containers when possible. Never mix different hazardous products.",
    WasteCategory.GENERAL: GENERIC_TIPS,
    WasteCategory.UNKNOWN: GENERIC_TIPS,
}

# Category overview, used as the generic "specific guideline" for a category
OVERVIEWS = {
    WasteCategory.PLASTIC: "Plastic waste should be cleaned and sorted by type (PET, HDPE, etc.) before recycling. Not all plastics are recyclable in all areas. Check with your local recycling center for specific guidelines.",
    WasteCategory.PAPER: "Paper and cardboard should be clean and dry before recycling. Remove any plastic film, tape, or non-paper materials. Shredded paper may need special handling.",
    WasteCategory.GLASS: "Glass is 100% recyclable and can be recycled endlessly without loss in quality. Different colors of glass may need to be separated. Always rinse glass containers before recycling.",
    WasteCategory.METAL: "Most metal items like aluminum cans and steel containers are highly recyclable. Clean and empty containers before recycling. Some specialty metals may require special handling.",
    WasteCategory.ORGANIC: "Organic waste like food scraps and yard waste can be composted. Composting reduces methane emissions from landfills and creates nutrient-rich soil for gardening.",
    WasteCategory.ELECTRONICS: "Electronic waste contains valuable materials that can be recovered, as well as potentially harmful substances. Many communities have special e-waste collection programs or events.",
    WasteCategory.HAZARDOUS: "Hazardous waste requires special handling and should never be thrown in regular trash. This includes batteries, paints, chemicals, and certain cleaning products. Look for hazardous waste collection in your area.",
    WasteCategory.GENERAL: GENERIC_OVERVIEW,
    WasteCategory.UNKNOWN: GENERIC_OVERVIEW,
}

SUGGESTIONS = {
    WasteCategory.PLASTIC: "Reduce plastic use by choosing reusable items | Rinse containers before recycling | Check the recycling number on the bottom",
    WasteCategory.PAPER: "Use both sides of paper before recycling | Keep paper dry and clean | Remove plastic windows from envelopes",
    WasteCategory.GLASS: "Rinse thoroughly | Remove lids and caps (recycle separately) | Don't break glass before recycling",
    WasteCategory.METAL: "Rinse food residue | Crush cans to save space | Keep metal items separate from other recyclables",
    WasteCategory.ORGANIC: "Compost food scraps when possible | Avoid putting meat or dairy in home compost | Use yard waste for mulch",
    WasteCategory.ELECTRONICS: "Donate working electronics | Remove batteries before disposal | Look for e-waste recycling events",
    WasteCategory.HAZARDOUS: "Never pour chemicals down drains | Store in original containers | Use up products completely when possible",
    WasteCategory.GENERAL: GENERIC_SUGGESTIONS,
    WasteCategory.UNKNOWN: GENERIC_SUGGESTIONS,
}

# Description refinements per category, first match wins. A tuple inside the
# alternatives means every word in it must appear.
REFINEMENTS = {
    WasteCategory.PLASTIC: (
        (("bottle",), "Empty and rinse the bottle. Remove cap and label if required by your local facility. Check the recycling number at the bottom."),
        (("bag",), "Many grocery stores collect plastic bags for recycling. Note that many municipal programs don't accept them in regular recycling."),
        (("container", "tupperware"), "Rinse food containers thoroughly. Remove any food residue. Some facilities may not accept all plastic containers, check the recycling number."),
    ),
    WasteCategory.PAPER: (
        (("cardboard", "box"), "Flatten cardboard boxes to save space. Remove any tape or plastic elements. Keep dry and clean."),
        (("magazine", "catalog"), "Most magazines can be recycled as-is. Some facilities request removing staples, but this isn't always necessary."),
        (("newspaper",), "Newspapers are highly recyclable. Bundle them separately if your facility requires it."),
        (("office", "printer", ("white", "paper"), "stack"), "Office paper is highly recyclable. Keep it clean and dry. Paper clips and staples can typically stay attached as they're removed during processing. Shredded paper should be kept in a paper bag before recycling."),
        (("receipt",), "Thermal receipts (shiny, slick paper) often contain BPA and should go in general waste. Standard paper receipts can be recycled with regular paper."),
    ),
}

_TABLES = (RECYCLABILITY, DISPOSAL_METHODS, ENVIRONMENTAL_IMPACT, TIPS, OVERVIEWS, SUGGESTIONS)

for _table in _TABLES:
    _missing = set(WasteCategory) - set(_table)
    if _missing:
        raise RuntimeError(f"guidance table is missing categories: {sorted(c.name for c in _missing)}")


def guidance_for(category, specific_guidelines=None):
    """
    Build the guidance bundle for a category from the static tables.

    Args:
        category: WasteCategory to look up
        specific_guidelines: Optional override for the specific guideline text;
            defaults to the category overview

    Returns:
        GuidanceBundle with every field populated
    """
    return GuidanceBundle(
        recyclability=RECYCLABILITY[category],
        disposal_method=DISPOSAL_METHODS[category],
        environmental_impact=ENVIRONMENTAL_IMPACT[category],
        tips=TIPS[category],
        specific_guidelines=specific_guidelines or OVERVIEWS[category],
    )


def suggestions_for(category):
    return [tip.strip() for tip in SUGGESTIONS[category].split("|")]


def _alternative_matches(alternative, text):
    if isinstance(alternative, tuple):
        return all(word in text for word in alternative)
    return alternative in text


def refined_guideline(category, description):
    """Description-specific guideline for a category, or None when none applies."""
    text = description.lower()
    for alternatives, guideline in REFINEMENTS.get(category, ()):
        if any(_alternative_matches(alt, text) for alt in alternatives):
            return guideline
    return None
