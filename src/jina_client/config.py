"""
Client configuration using Pydantic Settings.

Why it's needed:
    The client needs an API key and endpoint URLs. Hardcoding them makes it
    impossible to point the same code at a staging host or a local mock
    server, and keeping the key in source is a leak waiting to happen.
    Pydantic Settings reads from environment variables and .env files.

What it does:
    - JinaSettings reads JINA_API_KEY, JINA_BASE_URL, JINA_READER_URL and
      JINA_TIMEOUT (env_prefix="JINA_")
    - The API key is a SecretStr so it never shows up in reprs or logs

How it helps:
    - Local development: export JINA_API_KEY or drop it in .env
    - Tests: pass JinaSettings(...) explicitly, nothing read from the env
    - Explicit JinaClient(api_key=...) arguments always win over settings
"""

from functools import lru_cache
from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.jina.ai"
DEFAULT_READER_URL = "https://r.jina.ai/"


class JinaSettings(BaseSettings):
    """Jina API settings.

    Used by: JinaClient when an argument is not given explicitly, and by
    make_jina_client().
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JINA_",
        extra="ignore",
    )

    api_key: Optional[SecretStr] = None
    base_url: str = DEFAULT_BASE_URL
    reader_url: str = DEFAULT_READER_URL
    timeout: float = 30.0  # seconds, applied to the httpx client we create


@lru_cache
def get_settings() -> JinaSettings:
    """Get the cached settings instance."""
    return JinaSettings()
