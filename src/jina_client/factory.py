"""
Factory function for creating JinaClient instances.

Why it's needed:
    Applications usually want "a client configured from the environment".
    The factory reads JinaSettings once and wires every value into the
    client, so the lifespan manager and tests build clients the same way.

How it helps:
    - Single place to change how clients are configured
    - Testing: pass a JinaSettings instance or an httpx.AsyncClient
      backed by httpx.MockTransport
"""

from typing import Optional

import httpx

from jina_client.client import JinaClient
from jina_client.config import JinaSettings, get_settings


def make_jina_client(
    settings: Optional[JinaSettings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> JinaClient:
    """Create a new JinaClient from settings.

    Args:
        settings: Optional JinaSettings instance. If None, loads from
                  environment variables via get_settings().
        http_client: Optional transport to share between clients.

    Returns:
        JinaClient configured with api key, URLs and timeout from settings.

    Raises:
        JinaConfigurationError: settings carry no API key.
    """
    if settings is None:
        settings = get_settings()

    return JinaClient(settings=settings, http_client=http_client)
