"""Pytest fixtures for FatSecret client tests."""

import pytest

from fatsecret_client.auth import OAuth1Signer
from fatsecret_client.config import Settings

FIXED_NONCE = "abcdefg"
FIXED_TIMESTAMP = "1700000000"


@pytest.fixture
def settings() -> Settings:
    """Return a Settings object with test credentials.

    Returns:
        Settings object configured with test OAuth1 credentials.
    """
    return Settings(
        consumer_key="test_consumer_key",
        consumer_secret="test_consumer_secret",
        api_base_url="https://platform.fatsecret.com/rest/server.api",
    )


@pytest.fixture
def fixed_signer(settings: Settings) -> OAuth1Signer:
    """Return a signer with a pinned nonce and timestamp."""
    return OAuth1Signer(
        settings,
        nonce_factory=lambda: FIXED_NONCE,
        timestamp_factory=lambda: FIXED_TIMESTAMP,
    )


@pytest.fixture
def mock_food_response() -> dict:
    """Return a mock food.get API response.

    Returns:
        Dictionary representing a successful food.get response.
    """
    return {
        "food": {
            "food_id": "33691",
            "food_name": "Banana",
            "food_type": "Generic",
            "food_url": "https://www.fatsecret.com/calories-nutrition/generic/banana",
            "servings": {
                "serving": [
                    {
                        "serving_id": "27445",
                        "serving_description": '1 small (6" to 6-7/8" long)',
                        "metric_serving_amount": "101.000",
                        "metric_serving_unit": "g",
                        "number_of_units": "1.000",
                        "measurement_description": 'small (6" to 6-7/8" long)',
                        "calories": "90",
                        "fat": "0.33",
                        "saturated_fat": "0.112",
                        "cholesterol": "0",
                        "sodium": "1",
                        "potassium": "358",
                        "carbohydrate": "23.07",
                        "fiber": "2.6",
                        "sugar": "12.23",
                        "protein": "1.10",
                    },
                    {
                        "serving_id": "27446",
                        "serving_description": '1 medium (7" to 7-7/8" long)',
                        "metric_serving_amount": "118.000",
                        "metric_serving_unit": "g",
                        "number_of_units": "1.000",
                        "calories": "105",
                        "fat": "0.39",
                        "carbohydrate": "26.95",
                        "protein": "1.29",
                    },
                ]
            },
        }
    }


@pytest.fixture
def mock_search_response() -> dict:
    """Return a mock foods.search API response.

    Returns:
        Dictionary representing a successful foods.search response.
    """
    return {
        "foods": {
            "max_results": "50",
            "page_number": "0",
            "total_results": "3",
            "food": [
                {
                    "food_id": "33691",
                    "food_name": "Banana",
                    "food_type": "Generic",
                    "food_description": "Per 100g - Calories: 89kcal | Fat: 0.33g | Carbs: 22.84g | Protein: 1.09g",
                },
                {
                    "food_id": "424791",
                    "food_name": "Banana Bread",
                    "brand_name": "Generic",
                    "food_type": "Generic",
                    "food_description": "Per 1 slice - Calories: 196kcal | Fat: 6.14g | Carbs: 32.75g | Protein: 3.27g",
                },
                {
                    "food_id": "2183471",
                    "food_name": "Banana Chips",
                    "brand_name": "Generic",
                    "food_type": "Generic",
                    "food_description": "Per 1 oz - Calories: 147kcal | Fat: 9.52g | Carbs: 16.62g | Protein: 0.68g",
                },
            ],
        }
    }


@pytest.fixture
def mock_autocomplete_response() -> dict:
    """Return a mock foods.autocomplete API response."""
    return {"suggestions": {"suggestion": ["apple", "apple pie"]}}


@pytest.fixture
def mock_invalid_key_response() -> dict:
    """Return a mock API error response for an unknown consumer key.

    Returns:
        Dictionary representing a FatSecret API error 5.
    """
    return {
        "error": {
            "code": 5,
            "message": "Invalid consumer key: test_consumer_key",
        }
    }


@pytest.fixture
def mock_invalid_signature_response() -> dict:
    """Return a mock API error response for a rejected signature.

    Returns:
        Dictionary representing a FatSecret API error 8.
    """
    return {
        "error": {
            "code": 8,
            "message": "Invalid signature: oauth_signature 'abc' is invalid",
        }
    }
