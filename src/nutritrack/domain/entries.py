"""Domain models for parsed and priced food entries."""

from dataclasses import dataclass
from typing import Literal

WeightSource = Literal[
    "specified",
    "standard",
    "counted-standard",
    "liquid-default",
    "default",
    "counted-default",
]
CalorieSource = Literal["water", "table", "estimate", "unknown"]
EntryStatus = Literal["ok", "partial", "unresolved", "empty"]


@dataclass(frozen=True)
class StandardWeight:
    """Default grams for a food and how they were found."""

    grams: float
    source: WeightSource


@dataclass(frozen=True)
class ParsedItem:
    """Single food or drink segment with its resolved quantity."""

    name: str
    grams: int
    is_water: bool
    weight_source: WeightSource
    ml: int | None = None


@dataclass(frozen=True)
class PricedItem:
    """Parsed item annotated with calories and display metadata."""

    name: str
    grams: int
    is_water: bool
    weight_source: WeightSource
    cal: int | None
    note: str
    calorie_source: CalorieSource
    emoji: str
    warning: str | None = None
    density: float | None = None
    ml: int | None = None


@dataclass(frozen=True)
class EntryBreakdown:
    """Ordered calorie breakdown for one free-text entry."""

    items: tuple[PricedItem, ...]
    status: EntryStatus
    error: str | None = None

    @property
    def total_calories(self) -> int:
        """Sum of known calories across non-water items."""
        return sum(
            item.cal for item in self.items if not item.is_water and item.cal is not None
        )

    @property
    def total_water_ml(self) -> int:
        """Sum of water volume across water items."""
        return sum(
            item.ml if item.ml is not None else item.grams
            for item in self.items
            if item.is_water
        )

    @property
    def loggable_items(self) -> tuple[PricedItem, ...]:
        """Non-water items with known calories."""
        return tuple(
            item for item in self.items if not item.is_water and item.cal is not None
        )
