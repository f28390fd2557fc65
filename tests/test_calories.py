"""Tests for calorie density lookup and item annotations."""

from nutritrack.services.calories import (
    DEFAULT_EMOJI,
    WARNING_FRIED,
    WARNING_VERY_HIGH_CAL,
    estimate_calories,
    find_density,
    food_emoji,
    food_warning,
    weight_badge,
)
from nutritrack.services.lookup import find_fuzzy, round_half_up


def test_find_density_exact_and_fuzzy(tables) -> None:
    assert find_density("roti", tables) == 297
    assert find_density("Rotis", tables) == 297
    assert find_density("xyzzy", tables) is None


def test_compound_dishes_are_reachable_after_splitting(tables) -> None:
    assert find_density("dal tadka", tables) == 145
    assert find_density("poha in oil", tables) == 160
    assert find_density("sabudana khichdi in oil", tables) == 220


def test_fuzzy_match_uses_table_order(tables) -> None:
    # "paneer" is defined before "paneer curry", so it shadows the longer key.
    assert find_density("paneer curry special", tables) == 265
    assert find_density("paneer curry", tables) == 290


def test_find_fuzzy_is_deterministic() -> None:
    table = {"curry": 120.0, "chicken curry": 180.0}

    first = find_fuzzy(table, "spicy chicken curry")
    second = find_fuzzy(table, "spicy chicken curry")

    assert first == second == 120.0
    assert find_fuzzy(table, "") is None


def test_estimate_calories_scales_density(tables) -> None:
    assert estimate_calories("banana", 120, tables) == 107
    assert estimate_calories("roti", 80, tables) == 238
    assert estimate_calories("dal", 150, tables) == 174
    assert estimate_calories("xyzzy", 100, tables) is None


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(237.6) == 238
    assert round_half_up(106.8) == 107


def test_food_warning_levels(tables) -> None:
    assert food_warning("ghee", 900, tables) == WARNING_VERY_HIGH_CAL
    assert food_warning("kachori", 350, tables) == WARNING_FRIED
    assert food_warning("halwa", 320, tables) == WARNING_FRIED
    assert food_warning("samosa", 262, tables) == WARNING_FRIED
    assert food_warning("gulab jamun", None, tables) == WARNING_FRIED
    assert food_warning("rice", 130, tables) is None
    assert food_warning("mystery", None, tables) is None


def test_high_calorie_takes_precedence_over_fried(tables) -> None:
    assert food_warning("fried kachori", 370, tables) == WARNING_VERY_HIGH_CAL


def test_food_emoji(tables) -> None:
    assert food_emoji("orange juice", tables) == "🧃"
    assert food_emoji("coconut water", tables) == "🥥"
    assert food_emoji("Chicken Biryani", tables) == "🍗"
    assert food_emoji("xyzzy", tables) == DEFAULT_EMOJI


def test_weight_badge() -> None:
    assert weight_badge("specified") is None
    assert weight_badge("standard") == "STD SERVING"
    assert weight_badge("counted-standard") == "STD SERVING"
    assert weight_badge("liquid-default") == "STD 200ml"
    assert weight_badge("default") == "EST"
    assert weight_badge("counted-default") == "EST"
