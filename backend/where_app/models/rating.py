"""Rating axes shared by locations and rating submissions."""

# Higher is better
POSITIVE_AXES = ("security", "welcoming", "street_food", "restaurants", "quality_of_life")

# Higher is worse
NEGATIVE_AXES = ("violence", "pickpocketing", "solicitation")

# Canonical axis order used for storage and display
RATING_AXES = (
    "security",
    "violence",
    "welcoming",
    "street_food",
    "restaurants",
    "pickpocketing",
    "quality_of_life",
    "solicitation",
)


def empty_ratings() -> dict[str, float]:
    """Zero vector over every known axis."""
    return {axis: 0.0 for axis in RATING_AXES}
