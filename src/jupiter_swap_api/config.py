"""Client settings using pydantic-settings.

Only JupiterSwapApiClient.from_settings() reads these; the plain
constructors never touch the environment.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_PATH = "https://quote-api.jup.ag/v6"


class Settings(BaseSettings):
    """Client settings loaded from JUPITER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JUPITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_path: str = Field(default=DEFAULT_BASE_PATH, description="Versioned API root")
    api_key: Optional[str] = Field(default=None, description="Key sent as x-api-key")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    def get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
