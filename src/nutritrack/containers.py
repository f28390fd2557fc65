"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutritrack.adapters.openai_calorie_client import OpenAICalorieEstimator
from nutritrack.config import Settings
from nutritrack.domain.tables import FoodTables
from nutritrack.services.pricing import CalorieEstimator, EntryPricingService
from nutritrack.services.tables import load_food_tables


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tables: FoodTables
    estimator: CalorieEstimator
    pricing_service: EntryPricingService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    tables = load_food_tables(resolved_settings.food_tables_path)
    estimator = OpenAICalorieEstimator.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    pricing_service = EntryPricingService(
        tables=tables,
        estimator=estimator,
        parallel_fallback=resolved_settings.parallel_fallback,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await estimator.close()

    return AppContainer(
        settings=resolved_settings,
        tables=tables,
        estimator=estimator,
        pricing_service=pricing_service,
        close_resources=close_resources,
    )
