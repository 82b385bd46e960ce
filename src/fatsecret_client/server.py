"""FatSecret tool server implementation using FastMCP."""

from contextlib import asynccontextmanager
from typing import Any

from mcp.server.fastmcp import FastMCP

from .api_client import FatSecretClient
from .app_logging import configure_logging
from .config import get_settings
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    FatSecretError,
    InvalidConsumerKeyError,
    InvalidSignatureError,
    TransportError,
)
from .models import Food, FoodSearchResult

# Module-level holder for lifespan management
_client: FatSecretClient | None = None


@asynccontextmanager
async def lifespan(app: Any):
    """Lifespan context manager for the tool server.

    Creates and manages the FatSecretClient lifecycle.
    """
    global _client

    try:
        settings = get_settings()
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load settings. Ensure FATSECRET_CONSUMER_KEY and "
            f"FATSECRET_CONSUMER_SECRET environment variables are set: {e}"
        ) from e

    configure_logging(settings.log_level)
    _client = FatSecretClient(settings)

    try:
        yield
    finally:
        if _client:
            await _client.close()
            _client = None


# Create FastMCP server with lifespan
mcp = FastMCP("fatsecret", lifespan=lifespan)


def _get_client() -> FatSecretClient:
    """Get the FatSecretClient from module state."""
    if _client is None:
        raise RuntimeError("FatSecretClient not initialized - server not running")
    return _client


def _format_error(action: str, error: FatSecretError) -> str:
    """Render a client failure as a tool response."""
    if isinstance(error, InvalidConsumerKeyError):
        return "Error: Invalid consumer key. Check FATSECRET_CONSUMER_KEY."
    if isinstance(error, InvalidSignatureError):
        return "Error: Invalid signature. Check FATSECRET_CONSUMER_SECRET."
    if isinstance(error, APIError):
        return f"Error {action}: {str(error)}"
    if isinstance(error, DecodeError):
        return f"Error {action}: unexpected response from FatSecret ({str(error)})"
    if isinstance(error, TransportError):
        return f"Error {action}: could not reach FatSecret ({str(error)})"
    return f"Error {action}: {str(error)}"


def format_search_result(query: str, result: FoodSearchResult) -> str:
    """Format food search results as text."""
    if not result.foods:
        return f"No foods found matching '{query}'."

    output = [
        f"Found {result.total_results} foods matching '{query}' "
        f"(showing page {result.page_number}, {len(result.foods)} results):\n"
    ]

    for i, food in enumerate(result.foods, 1):
        brand = f" - {food.brand_name}" if food.brand_name else ""
        output.append(
            f"{i}. {food.food_name}{brand}\n"
            f"   ID: {food.food_id} | Type: {food.food_type}\n"
            f"   {food.food_description}"
        )

    return "\n\n".join(output)


def format_food(food: Food) -> str:
    """Format a food record with its servings as text."""
    output = [f"Food: {food.food_name}"]

    if food.brand_name:
        output.append(f"Brand: {food.brand_name}")

    output.append(f"Type: {food.food_type}")

    if food.food_url:
        output.append(f"URL: {food.food_url}")

    output.append(f"\nAvailable Servings ({len(food.servings)}):")

    for i, serving in enumerate(food.servings, 1):
        output.append(f"\n{i}. {serving.serving_description}")

        if serving.metric_serving_amount and serving.metric_serving_unit:
            output.append(
                f"   Metric: {serving.metric_serving_amount} "
                f"{serving.metric_serving_unit}"
            )

        nutrients = []
        if serving.calories is not None:
            nutrients.append(f"Calories: {serving.calories}")
        if serving.protein is not None:
            nutrients.append(f"Protein: {serving.protein}g")
        if serving.carbohydrate is not None:
            nutrients.append(f"Carbs: {serving.carbohydrate}g")
        if serving.fat is not None:
            nutrients.append(f"Fat: {serving.fat}g")

        if nutrients:
            output.append(f"   {' | '.join(nutrients)}")

    return "\n".join(output)


# ============================================================================
# Food Tools
# ============================================================================


@mcp.tool()
async def search_foods(query: str, page: int = 0, max_results: int = 20) -> str:
    """Search for foods by keyword.

    Args:
        query: Search term (e.g., "apple", "chicken breast", "whole milk")
        page: Page number for pagination, starts at 0
        max_results: Maximum results per page (1-50, default 20)

    Returns:
        Formatted list of matching foods with basic information
    """
    try:
        result = await _get_client().search_foods(query, page, max_results)
        return format_search_result(query, result)
    except FatSecretError as e:
        return _format_error("searching foods", e)


@mcp.tool()
async def autocomplete_foods(expression: str, max_results: int = 4) -> str:
    """Suggest food names that complete a partial search term.

    Args:
        expression: Beginning of a food name (e.g., "chick")
        max_results: Maximum number of suggestions (1-10, default 4)

    Returns:
        One suggestion per line
    """
    try:
        result = await _get_client().autocomplete_foods(expression, max_results)
    except FatSecretError as e:
        return _format_error("autocompleting", e)

    if not result.suggestions:
        return f"No suggestions for '{expression}'."
    return "\n".join(f"- {s}" for s in result.suggestions)


@mcp.tool()
async def get_food(food_id: int) -> str:
    """Get detailed nutrition information for a specific food.

    Args:
        food_id: The FatSecret food ID (from search_foods)

    Returns:
        Detailed nutrition information with all serving sizes
    """
    try:
        food = await _get_client().get_food(food_id)
        return format_food(food)
    except FatSecretError as e:
        return _format_error("retrieving food", e)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Run the FatSecret tool server."""
    mcp.run()


if __name__ == "__main__":
    main()
