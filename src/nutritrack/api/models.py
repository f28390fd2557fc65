"""Pydantic request and response models for the entries API."""

from pydantic import BaseModel

from nutritrack.domain.entries import (
    CalorieSource,
    EntryBreakdown,
    EntryStatus,
    PricedItem,
    WeightSource,
)
from nutritrack.services.calories import weight_badge


class EntryRequest(BaseModel):
    """Free-text food entry submitted by a user."""

    text: str


class PricedItemResponse(BaseModel):
    """Priced item as returned to API clients."""

    name: str
    grams: int
    ml: int | None
    is_water: bool
    weight_source: WeightSource
    weight_badge: str | None
    cal: int | None
    note: str
    warning: str | None
    density: float | None
    calorie_source: CalorieSource
    emoji: str

    @classmethod
    def from_item(cls, item: PricedItem) -> "PricedItemResponse":
        return cls(
            name=item.name,
            grams=item.grams,
            ml=item.ml,
            is_water=item.is_water,
            weight_source=item.weight_source,
            weight_badge=None if item.is_water else weight_badge(item.weight_source),
            cal=item.cal,
            note=item.note,
            warning=item.warning,
            density=item.density,
            calorie_source=item.calorie_source,
            emoji=item.emoji,
        )


class EntryBreakdownResponse(BaseModel):
    """Calorie breakdown for an entry with aggregate totals."""

    status: EntryStatus
    error: str | None
    items: list[PricedItemResponse]
    total_calories: int
    total_water_ml: int

    @classmethod
    def from_breakdown(cls, breakdown: EntryBreakdown) -> "EntryBreakdownResponse":
        return cls(
            status=breakdown.status,
            error=breakdown.error,
            items=[PricedItemResponse.from_item(item) for item in breakdown.items],
            total_calories=breakdown.total_calories,
            total_water_ml=breakdown.total_water_ml,
        )
