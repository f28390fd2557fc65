"""Entry pricing: parse a free-text entry and attach calories per item."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from nutritrack.domain.entries import EntryBreakdown, EntryStatus, ParsedItem, PricedItem
from nutritrack.domain.tables import FoodTables
from nutritrack.services.calories import (
    WATER_EMOJI,
    calories_for,
    find_density,
    food_emoji,
    food_warning,
)
from nutritrack.services.parsing import parse_entry

EMPTY_ENTRY_ERROR = "Please describe what you ate or drank."
UNRESOLVED_ENTRY_ERROR = (
    "Couldn't find calorie data. "
    "Try simpler names like 'protein shake', 'chicken', or 'rice'."
)
WATER_NOTE = "Pure water - 0 calories"
ESTIMATED_NOTE = "AI estimated"
UNKNOWN_NOTE = "Unknown food"

_logger = logging.getLogger(__name__)


class CalorieEstimator(Protocol):
    """Interface for external calorie estimation of unknown foods."""

    async def estimate(self, food_name: str, grams: int) -> int | None:
        """Return estimated calories for the portion, or None if unavailable."""


@dataclass(frozen=True)
class _TableLookup:
    item: ParsedItem
    density: float | None
    cal: int | None


@dataclass
class EntryPricingService:
    """Turns free-text entries into ordered calorie breakdowns."""

    tables: FoodTables
    estimator: CalorieEstimator
    parallel_fallback: bool = False
    debug: bool = False

    async def price_entry(self, raw: str) -> EntryBreakdown:
        """Parse an entry and price each item, falling back to the estimator."""
        if not raw.strip():
            return EntryBreakdown(items=(), status="empty", error=EMPTY_ENTRY_ERROR)

        lookups = [self._lookup(item) for item in parse_entry(raw, self.tables)]
        pending = [
            index
            for index, entry in enumerate(lookups)
            if not entry.item.is_water and entry.cal is None
        ]
        estimates = await self._estimate_all([lookups[index].item for index in pending])
        estimated = dict(zip(pending, estimates, strict=True))

        items = tuple(
            self._annotate(entry, estimated.get(index))
            for index, entry in enumerate(lookups)
        )
        status = _entry_status(items)
        error = UNRESOLVED_ENTRY_ERROR if status == "unresolved" else None
        return EntryBreakdown(items=items, status=status, error=error)

    def _lookup(self, item: ParsedItem) -> _TableLookup:
        if item.is_water:
            return _TableLookup(item=item, density=None, cal=0)
        density = find_density(item.name, self.tables)
        cal = calories_for(density, item.grams) if density is not None else None
        return _TableLookup(item=item, density=density, cal=cal)

    async def _estimate_all(self, items: list[ParsedItem]) -> list[int | None]:
        """Run fallback estimates in input order.

        Concurrent mode relies on ``asyncio.gather`` returning results in the
        order the awaitables were given.
        """
        if self.parallel_fallback:
            return list(await asyncio.gather(*(self._estimate(item) for item in items)))
        results: list[int | None] = []
        for item in items:
            results.append(await self._estimate(item))
        return results

    async def _estimate(self, item: ParsedItem) -> int | None:
        try:
            cal = await self.estimator.estimate(item.name, item.grams)
        except Exception as exc:
            _logger.warning(
                "Calorie estimate failed: name=%s grams=%s: %s",
                item.name,
                item.grams,
                exc,
            )
            return None
        if self.debug:
            _logger.info(
                "Calorie estimate: name=%s grams=%s cal=%s", item.name, item.grams, cal
            )
        return cal

    def _annotate(self, entry: _TableLookup, estimate: int | None) -> PricedItem:
        item = entry.item
        if item.is_water:
            return PricedItem(
                name=item.name,
                grams=item.grams,
                is_water=True,
                weight_source=item.weight_source,
                cal=0,
                note=WATER_NOTE,
                calorie_source="water",
                emoji=WATER_EMOJI,
                ml=item.ml,
            )

        emoji = food_emoji(item.name, self.tables)
        if entry.cal is not None:
            return PricedItem(
                name=item.name,
                grams=item.grams,
                is_water=False,
                weight_source=item.weight_source,
                cal=entry.cal,
                note=f"{entry.density:g} kcal/100g",
                calorie_source="table",
                emoji=emoji,
                warning=food_warning(item.name, entry.density, self.tables),
                density=entry.density,
            )
        if estimate is not None:
            return PricedItem(
                name=item.name,
                grams=item.grams,
                is_water=False,
                weight_source=item.weight_source,
                cal=estimate,
                note=ESTIMATED_NOTE,
                calorie_source="estimate",
                emoji=emoji,
                warning=food_warning(item.name, None, self.tables),
            )
        return PricedItem(
            name=item.name,
            grams=item.grams,
            is_water=False,
            weight_source=item.weight_source,
            cal=None,
            note=UNKNOWN_NOTE,
            calorie_source="unknown",
            emoji=emoji,
        )


def _entry_status(items: tuple[PricedItem, ...]) -> EntryStatus:
    """Classify an entry by how many of its items could be priced."""
    unresolved = sum(1 for item in items if item.cal is None)
    if unresolved == 0:
        return "ok"
    if unresolved == len(items):
        return "unresolved"
    return "partial"
