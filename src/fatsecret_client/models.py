"""
Pydantic models for signed requests and FatSecret API responses.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_list(value: Any) -> Any:
    """Wrap a bare item in a list.

    FatSecret returns a single object (or string) instead of a one-element
    list, and omits the list entirely when it is empty.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


# ============================================================================
# Request Models
# ============================================================================


class SignedRequest(BaseModel):
    """Model for a fully signed API request."""

    model_config = ConfigDict(frozen=True)

    method: str
    base_url: str
    query: str

    @property
    def url(self) -> str:
        """Full request URL with the signed query string."""
        return f"{self.base_url}?{self.query}"


# ============================================================================
# Error Models
# ============================================================================


class APIErrorKind(str, Enum):
    """Kinds of errors reported inside a FatSecret error envelope."""

    INVALID_CONSUMER_KEY = "invalid_consumer_key"
    INVALID_SIGNATURE = "invalid_signature"
    UNKNOWN = "unknown"


class APIFailure(BaseModel):
    """Model for an error envelope returned by the API."""

    model_config = ConfigDict(frozen=True)

    kind: APIErrorKind
    code: int | None = None
    message: str = "Unknown error"


# ============================================================================
# Food Models
# ============================================================================


class FoodServing(BaseModel):
    """Model for a food serving."""

    serving_id: str
    serving_description: str
    serving_url: str | None = None
    metric_serving_amount: float | None = None
    metric_serving_unit: str | None = None
    number_of_units: float | None = None
    measurement_description: str | None = None
    calories: float | None = None
    fat: float | None = None
    saturated_fat: float | None = None
    polyunsaturated_fat: float | None = None
    monounsaturated_fat: float | None = None
    trans_fat: float | None = None
    cholesterol: float | None = None
    sodium: float | None = None
    potassium: float | None = None
    carbohydrate: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    protein: float | None = None
    vitamin_a: float | None = None
    vitamin_c: float | None = None
    calcium: float | None = None
    iron: float | None = None


class Food(BaseModel):
    """Model for detailed food information (``food.get``)."""

    envelope_key: ClassVar[str] = "food"

    food_id: str
    food_name: str
    food_type: str
    brand_name: str | None = None
    food_url: str | None = None
    servings: list[FoodServing] = Field(default_factory=list)

    @field_validator("servings", mode="before")
    @classmethod
    def _unwrap_servings(cls, value: Any) -> Any:
        # API shape: {"servings": {"serving": [...] | {...}}}
        if isinstance(value, dict):
            value = value.get("serving")
        return _as_list(value)


class FoodSearchItem(BaseModel):
    """Model for a food item in search results."""

    food_id: str
    food_name: str
    food_type: str
    brand_name: str | None = None
    food_url: str | None = None
    food_description: str


class FoodSearchResult(BaseModel):
    """Model for food search results (``foods.search``)."""

    envelope_key: ClassVar[str] = "foods"

    model_config = ConfigDict(populate_by_name=True)

    foods: list[FoodSearchItem] = Field(default_factory=list, alias="food")
    max_results: int = 0
    total_results: int = 0
    page_number: int = 0

    @field_validator("foods", mode="before")
    @classmethod
    def _wrap_foods(cls, value: Any) -> Any:
        return _as_list(value)


# ============================================================================
# Autocomplete Models
# ============================================================================


class AutocompleteSuggestions(BaseModel):
    """Model for autocomplete suggestions (``foods.autocomplete``)."""

    envelope_key: ClassVar[str] = "suggestions"

    model_config = ConfigDict(populate_by_name=True)

    suggestions: list[str] = Field(default_factory=list, alias="suggestion")

    @field_validator("suggestions", mode="before")
    @classmethod
    def _wrap_suggestions(cls, value: Any) -> Any:
        return _as_list(value)
