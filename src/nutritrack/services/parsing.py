"""Free-text entry parsing into quantified food items."""

import re

from nutritrack.domain.entries import ParsedItem, StandardWeight, WeightSource
from nutritrack.domain.tables import FoodTables
from nutritrack.services.lookup import lookup, round_half_up

DEFAULT_WATER_ML = 250
LIQUID_DEFAULT_GRAMS = 200
DEFAULT_GRAMS = 100
FALLBACK_NAME = "Food"

_SPLIT_RE = re.compile(r"\bwith\b|\band\b|\+|&")
_WATER_ML_RE = re.compile(r"(\d+\.?\d*)\s*ml")
_ML_RE = re.compile(r"(\d+\.?\d*)\s*ml\b")
_GRAMS_RE = re.compile(r"(\d+\.?\d*)\s*g(?:ram|rams)?\b")
_UNIT_RE = re.compile(r"^(\d+\.?\d*)\s+(\w+)\s+(.*)$")
_COUNT_RE = re.compile(r"^(\d+\.?\d*)\s+(.+)$")
_FILLER_RE = re.compile(r"^(?:(?:of|with|the|a|an)\s+)+", re.IGNORECASE)


def split_entry(raw: str) -> list[str]:
    """Split an entry into lower-cased segments on with/and/+/&."""
    parts = _SPLIT_RE.split(raw.strip().lower())
    return [" ".join(part.split()) for part in parts if part.strip()]


def is_water(segment: str, tables: FoodTables) -> bool:
    """Return True when a segment denotes plain, zero-calorie water."""
    if not any(keyword in segment for keyword in tables.water_keywords):
        return False
    return not any(keyword in segment for keyword in tables.water_exclusions)


def parse_water(segment: str) -> ParsedItem:
    """Build a water item, reading ``<n> ml`` when present."""
    match = _WATER_ML_RE.search(segment)
    ml = _whole_units(float(match.group(1))) if match else DEFAULT_WATER_ML
    return ParsedItem(
        name="Water", grams=ml, is_water=True, weight_source="specified", ml=ml
    )


def standard_weight(name: str, tables: FoodTables) -> StandardWeight:
    """Return a default serving weight for a food name.

    Falls back to a liquid default for drink-like names and a generic
    default otherwise, so unknown foods always receive a weight.
    """
    key = name.strip().lower()
    grams = lookup(tables.standard_weights, key)
    if grams is not None:
        return StandardWeight(grams=grams, source="standard")
    if any(keyword in key for keyword in tables.liquid_keywords):
        return StandardWeight(grams=LIQUID_DEFAULT_GRAMS, source="liquid-default")
    return StandardWeight(grams=DEFAULT_GRAMS, source="default")


def resolve_quantity(segment: str, tables: FoodTables) -> ParsedItem:
    """Resolve grams and a food name for a non-water segment.

    Strategies are tried in order: explicit ml, explicit grams, a count with a
    known unit, a bare count, then the standard weight of the whole segment.
    """
    grams, name, source = _match_quantity(segment, tables)
    return ParsedItem(
        name=_clean_name(name, segment, tables),
        grams=_whole_units(grams),
        is_water=False,
        weight_source=source,
    )


def parse_segment(segment: str, tables: FoodTables) -> ParsedItem:
    """Parse one segment as water or as a quantified food."""
    if is_water(segment, tables):
        return parse_water(segment)
    return resolve_quantity(segment, tables)


def parse_entry(raw: str, tables: FoodTables) -> list[ParsedItem]:
    """Parse a raw entry into ordered items; empty input yields no items."""
    trimmed = raw.strip()
    if not trimmed:
        return []
    items = [parse_segment(segment, tables) for segment in split_entry(trimmed)]
    if items:
        return items
    return [
        ParsedItem(
            name=trimmed, grams=DEFAULT_GRAMS, is_water=False, weight_source="default"
        )
    ]


def _match_quantity(
    segment: str, tables: FoodTables
) -> tuple[float, str, WeightSource]:
    ml_match = _ML_RE.search(segment)
    if ml_match:
        rest = segment[ml_match.end() :].strip()
        name = rest or segment[: ml_match.start()].strip()
        return float(ml_match.group(1)), name, "specified"

    grams_match = _GRAMS_RE.search(segment)
    if grams_match:
        name = _GRAMS_RE.sub("", segment, count=1).strip()
        return float(grams_match.group(1)), name, "specified"

    unit_match = _UNIT_RE.match(segment)
    if unit_match:
        quantity, unit, rest = unit_match.groups()
        unit_grams = tables.units.get(unit)
        if unit_grams:
            return float(quantity) * unit_grams, rest.strip(), "specified"

    count_match = _COUNT_RE.match(segment)
    if count_match:
        quantity = float(count_match.group(1))
        food = count_match.group(2).strip()
        unit_grams = tables.units.get(food) or tables.units.get(food + "s")
        if unit_grams:
            return quantity * unit_grams, food, "specified"
        weight = standard_weight(food, tables)
        source: WeightSource = (
            "counted-standard" if weight.source == "standard" else "counted-default"
        )
        return quantity * weight.grams, food, source

    weight = standard_weight(segment, tables)
    return weight.grams, segment, weight.source


def _unit_alternation(tables: FoodTables) -> str:
    words = sorted({"g", "gram", "grams", "ml", *tables.units}, key=len, reverse=True)
    return "|".join(re.escape(word) for word in words)


def _clean_name(name: str, segment: str, tables: FoodTables) -> str:
    units = _unit_alternation(tables)
    cleaned = re.sub(rf"\d+\.?\d*\s*(?:{units})\b", "", name, flags=re.IGNORECASE)
    cleaned = _FILLER_RE.sub("", " ".join(cleaned.split()))
    if cleaned:
        return cleaned
    stripped = re.sub(rf"\d+\.?\d*\s*(?:{units})?\b", "", segment)
    return " ".join(stripped.split()) or FALLBACK_NAME


def _whole_units(quantity: float) -> int:
    """Round a quantity to whole grams/ml, never below one."""
    return max(1, round_half_up(quantity))
