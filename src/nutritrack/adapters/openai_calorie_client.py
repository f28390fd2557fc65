"""OpenAI Responses API client for calorie estimation."""

import logging
import re
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from nutritrack.services.pricing import CalorieEstimator

_INTEGER_RE = re.compile(r"^\s*(\d+)")

_logger = logging.getLogger(__name__)


@dataclass
class OpenAICalorieEstimator(CalorieEstimator):
    """Calorie estimator backed by a single-integer model reply."""

    client: AsyncOpenAI
    model: str
    reasoning_effort: str | None = None

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        reasoning_effort: str | None = None,
        timeout_seconds: float = 10.0,
    ) -> "OpenAICalorieEstimator":
        """Create an estimator with a bounded, non-retrying OpenAI client."""
        client = AsyncOpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)
        return cls(client=client, model=model, reasoning_effort=reasoning_effort)

    async def estimate(self, food_name: str, grams: int) -> int | None:
        """Ask the model for the calories in a portion; None on any failure."""
        request_payload: dict[str, object] = {
            "model": self.model,
            "input": (
                f'Calories in {grams}g of "{food_name}"? Reply with ONE integer only.'
            ),
            "store": False,
        }
        if self.reasoning_effort:
            request_payload["reasoning"] = {"effort": self.reasoning_effort}

        try:
            response = await self.client.responses.create(**request_payload)
        except OpenAIError as exc:
            _logger.warning("OpenAI calorie estimate failed for %s: %s", food_name, exc)
            return None
        return parse_calorie_reply(response.output_text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()


def parse_calorie_reply(text: str | None) -> int | None:
    """Read the leading integer of a model reply."""
    if not text:
        return None
    match = _INTEGER_RE.match(text)
    if not match:
        return None
    return int(match.group(1))
