"""Configuration management using pydantic-settings."""

import urllib.parse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """FatSecret client settings.

    Loaded once and frozen; every call reads from the same immutable instance.
    """

    model_config = SettingsConfigDict(
        env_prefix="FATSECRET_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    # OAuth1 credentials
    consumer_key: str
    consumer_secret: str

    # API endpoint
    api_base_url: str = "https://platform.fatsecret.com/rest/server.api"

    # Transport and logging
    request_timeout: float = 15.0
    log_level: str = "INFO"

    @field_validator("api_base_url")
    @classmethod
    def _reject_query_string(cls, value: str) -> str:
        """Ensure the base URL carries no query string or fragment."""
        parsed = urllib.parse.urlsplit(value)
        if parsed.query or parsed.fragment:
            raise ValueError("api_base_url must not contain a query string")
        return value

    def protocol_params(self) -> dict[str, str]:
        """Return the fixed parameters sent with every request.

        Returns:
            Response format and the static OAuth1 parameters.
        """
        return {
            "format": "json",
            "oauth_consumer_key": self.consumer_key,
            "oauth_signature_method": "HMAC-SHA1",
            "oauth_version": "1.0",
        }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
