"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutritrack.config import Settings
from nutritrack.containers import AppContainer
from nutritrack.domain.tables import FoodTables
from nutritrack.services.pricing import CalorieEstimator, EntryPricingService
from nutritrack.services.tables import load_food_tables


@dataclass
class FakeCalorieEstimator(CalorieEstimator):
    """Fake estimator returning fixed calories per food name."""

    calories: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[str, int]] = field(default_factory=list)

    async def estimate(self, food_name: str, grams: int) -> int | None:
        self.calls.append((food_name, grams))
        return self.calories.get(food_name)


@dataclass
class FailingCalorieEstimator(CalorieEstimator):
    """Estimator that always raises, like an unreachable provider."""

    calls: int = 0

    async def estimate(self, food_name: str, grams: int) -> int | None:
        self.calls += 1
        raise RuntimeError("estimation service unavailable")


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture(scope="session")
def tables() -> FoodTables:
    return load_food_tables()


@pytest.fixture
def estimator() -> FakeCalorieEstimator:
    return FakeCalorieEstimator()


@pytest.fixture
def pricing_service(
    tables: FoodTables, estimator: FakeCalorieEstimator
) -> EntryPricingService:
    return EntryPricingService(tables=tables, estimator=estimator)


@pytest.fixture
def container(
    settings: Settings,
    tables: FoodTables,
    estimator: FakeCalorieEstimator,
    pricing_service: EntryPricingService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        tables=tables,
        estimator=estimator,
        pricing_service=pricing_service,
        close_resources=close_resources,
    )
