"""Calorie density resolution and item annotations."""

from nutritrack.domain.entries import WeightSource
from nutritrack.domain.tables import FoodTables
from nutritrack.services.lookup import lookup, round_half_up

VERY_HIGH_CAL_DENSITY = 350
FRIED_DENSITY = 300

WARNING_VERY_HIGH_CAL = "Very high cal"
WARNING_FRIED = "Fried/oily"

DEFAULT_EMOJI = "🍽️"
WATER_EMOJI = "💧"

_WEIGHT_BADGES: dict[str, str] = {
    "standard": "STD SERVING",
    "counted-standard": "STD SERVING",
    "liquid-default": "STD 200ml",
    "default": "EST",
    "counted-default": "EST",
}


def find_density(name: str, tables: FoodTables) -> float | None:
    """Return kcal per 100 g/ml for a food name, or None when unknown."""
    return lookup(tables.densities, name)


def calories_for(density: float, grams: float) -> int:
    """Scale a per-100 density to a portion, rounded to whole kcal."""
    return round_half_up(density * grams / 100)


def estimate_calories(name: str, grams: float, tables: FoodTables) -> int | None:
    """Estimate calories from the density table, or None on a table miss."""
    density = find_density(name, tables)
    if density is None:
        return None
    return calories_for(density, grams)


def food_warning(name: str, density: float | None, tables: FoodTables) -> str | None:
    """Return a single dietary warning for a food, high calorie first."""
    lowered = name.lower()
    is_fried = any(keyword in lowered for keyword in tables.fried_keywords)
    if density is not None and density > VERY_HIGH_CAL_DENSITY:
        return WARNING_VERY_HIGH_CAL
    if (density is not None and density > FRIED_DENSITY) or is_fried:
        return WARNING_FRIED
    return None


def food_emoji(name: str, tables: FoodTables) -> str:
    """Pick a display emoji for a food name."""
    lowered = name.lower()
    for rule in tables.emoji_rules:
        if any(keyword in lowered for keyword in rule.keywords):
            return rule.emoji
    return DEFAULT_EMOJI


def weight_badge(source: WeightSource) -> str | None:
    """Short label shown when an item's weight was not typed by the user."""
    return _WEIGHT_BADGES.get(source)
