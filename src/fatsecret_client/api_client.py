"""FatSecret API client implementation."""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from .auth import OAuth1Signer
from .config import Settings
from .exceptions import DecodeError, TransportError
from .models import APIFailure, AutocompleteSuggestions, Food, FoodSearchResult
from .responses import classify, decode, to_exception

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


class FatSecretClient:
    """Client for interacting with the FatSecret API.

    Handles request signing, API requests, and response decoding.
    Supports async context manager protocol.
    """

    def __init__(
        self,
        settings: Settings,
        signer: OAuth1Signer | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the FatSecret API client.

        Args:
            settings: Application settings containing API configuration.
            signer: Optional signer; one is built from ``settings`` if omitted.
            http_client: Optional shared HTTP client. The client is only
                closed by ``close()`` when it was created here.
        """
        self._settings = settings
        self._signer = signer or OAuth1Signer(settings)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "FatSecretClient":
        """Enter the async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the async context manager."""
        await self.close()

    async def _make_request(
        self, method: str, params: dict[str, Any], result_type: type[ResultT]
    ) -> ResultT:
        """Make a request to the FatSecret API.

        Args:
            method: The API method to call.
            params: Additional parameters for the API call.
            result_type: The model to decode the response into.

        Returns:
            The decoded response.

        Raises:
            TransportError: If the request fails or returns a non-2xx status.
            APIError: If the API returns an error envelope.
            DecodeError: If the response cannot be decoded.
        """
        request_params = {"method": method}
        # Drop unset optional params; everything else is signed as a string
        for key, value in params.items():
            if value is not None:
                request_params[key] = str(value)

        signed = self._signer.sign_request(request_params)

        try:
            response = await self._client.request(
                signed.method,
                signed.url,
                timeout=self._settings.request_timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("%s failed with HTTP %s", method, e.response.status_code)
            raise TransportError(
                f"HTTP error {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.warning("%s failed: %s", method, e)
            raise TransportError(f"Request error: {str(e)}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("%s returned a non-JSON body", method)
            raise DecodeError(f"Response is not valid JSON: {str(e)}") from e

        # Check for API errors in the response
        result = classify(data)
        if isinstance(result, APIFailure):
            logger.warning(
                "%s rejected by API: code=%s message=%s",
                method,
                result.code,
                result.message,
            )
            raise to_exception(result)

        try:
            return decode(result, result_type)
        except DecodeError:
            logger.warning("%s returned an unexpected payload", method)
            raise

    async def search_foods(
        self, query: str, page_number: int = 0, max_results: int = 20
    ) -> FoodSearchResult:
        """Search for foods by keyword.

        Args:
            query: The search query.
            page_number: The page number for pagination (0-indexed).
            max_results: Maximum number of results per page.

        Returns:
            Search results containing matching foods.
        """
        params = {
            "search_expression": query,
            "page_number": page_number,
            "max_results": max_results,
        }

        return await self._make_request("foods.search", params, FoodSearchResult)

    async def autocomplete_foods(
        self, expression: str, max_results: int | None = None
    ) -> AutocompleteSuggestions:
        """Suggest food names for a partial expression.

        Args:
            expression: The partial food name (e.g. "chic").
            max_results: Optional cap on the number of suggestions.

        Returns:
            The suggested food names.
        """
        params = {"expression": expression, "max_results": max_results}

        return await self._make_request(
            "foods.autocomplete", params, AutocompleteSuggestions
        )

    async def get_food(self, food_id: int | str) -> Food:
        """Get detailed information about a specific food.

        Args:
            food_id: The FatSecret food ID.

        Returns:
            Detailed food information including servings.
        """
        return await self._make_request("food.get", {"food_id": food_id}, Food)
