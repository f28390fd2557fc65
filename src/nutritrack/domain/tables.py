"""Lookup tables driving entry parsing and calorie resolution."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmojiRule(BaseModel):
    """Display emoji used when any keyword appears in a food name."""

    model_config = ConfigDict(frozen=True)

    keywords: list[str]
    emoji: str


class FoodTables(BaseModel):
    """Static food data injected into the parser and resolvers.

    Dict insertion order matters: fuzzy lookups return the first entry in
    definition order whose key overlaps the queried name.
    """

    model_config = ConfigDict(frozen=True)

    densities: dict[str, float]
    standard_weights: dict[str, float]
    units: dict[str, float]
    water_keywords: list[str] = Field(min_length=1)
    water_exclusions: list[str] = Field(default_factory=list)
    liquid_keywords: list[str] = Field(default_factory=list)
    fried_keywords: list[str] = Field(default_factory=list)
    emoji_rules: list[EmojiRule] = Field(default_factory=list)

    @field_validator("densities", "standard_weights", "units")
    @classmethod
    def _positive_lowercase_keys(cls, value: dict[str, float]) -> dict[str, float]:
        cleaned: dict[str, float] = {}
        for key, amount in value.items():
            if amount <= 0:
                raise ValueError(f"value for {key!r} must be positive")
            cleaned[key.strip().lower()] = amount
        return cleaned

    @field_validator(
        "water_keywords", "water_exclusions", "liquid_keywords", "fried_keywords"
    )
    @classmethod
    def _lowercase_keywords(cls, value: list[str]) -> list[str]:
        return [keyword.strip().lower() for keyword in value if keyword.strip()]
