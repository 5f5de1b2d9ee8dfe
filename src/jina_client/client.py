"""
Jina AI API client: async embeddings, rerank and reader calls.

Why it's needed:
    All three Jina endpoints share the same mechanics: bearer auth, a JSON
    POST, and a response that is either a typed body or an error. The client
    centralizes those mechanics so each endpoint method is a single line.

What it does:
    - embeddings(): POST {base_url}/v1/embeddings
    - rerank(): POST {base_url}/v1/rerank
    - reader(): POST {reader_url} with the options sent as X-* headers
    - handle_response(): status check + typed decoding, shared by all three

How it helps:
    - One error contract: JinaTransportError, JinaHTTPError or
      JinaDeserializationError, never a raw httpx/pydantic exception
    - Async via httpx.AsyncClient, non-blocking inside an event loop
    - Stateless after construction, so one client can serve many
      concurrent tasks

Architecture:
    JinaClient wraps an httpx.AsyncClient (the transport). Pass your own to
    control pooling, proxies or timeouts; otherwise the client creates one
    and closes it in close() / on `async with` exit.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from jina_client.config import JinaSettings, get_settings
from jina_client.exceptions import (
    JinaConfigurationError,
    JinaDeserializationError,
    JinaHTTPError,
    JinaTransportError,
)
from jina_client.schemas.common import HttpErrorPayload, is_header_safe
from jina_client.schemas.embeddings import EmbeddingsRequest, EmbeddingsResponse
from jina_client.schemas.reader import ReaderRequest, ReaderResponse
from jina_client.schemas.rerank import RerankRequest, RerankResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

EMBEDDINGS_PATH = "/v1/embeddings"
RERANK_PATH = "/v1/rerank"


class JinaClient:
    """Async client for the Jina AI embeddings, rerank and reader APIs.

    Usage:
        # As async context manager (recommended)
        async with JinaClient(api_key="...") as client:
            response = await client.embeddings(
                EmbeddingsRequest(model=EmbeddingsModel.CLIP_V1, input="Hello")
            )

        # Or manually
        client = JinaClient()  # reads JINA_API_KEY
        ranked = await client.rerank(request)
        await client.close()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        reader_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[JinaSettings] = None,
    ):
        """Initialize the Jina client.

        Args:
            api_key: Jina API key. Falls back to settings.api_key
                     (JINA_API_KEY) when not given.
            base_url: Embeddings/rerank host. Defaults to https://api.jina.ai.
            reader_url: Reader endpoint. Defaults to https://r.jina.ai/.
            http_client: Transport to send requests through. When omitted a
                         new httpx.AsyncClient is created and owned by us.
            settings: Settings used for every argument left as None. Loaded
                      from the environment via get_settings() when omitted.

        Raises:
            JinaConfigurationError: No API key explicitly or in settings, or the
                key is not a legal header value.
        """
        if settings is None:
            settings = get_settings()

        if not api_key and settings.api_key is not None:
            api_key = settings.api_key.get_secret_value()
        if not api_key:
            raise JinaConfigurationError(
                "API key is required. Pass api_key explicitly or set the JINA_API_KEY environment variable"
            )
        if not is_header_safe(api_key):
            raise JinaConfigurationError("API key contains characters that are not allowed in an HTTP header")

        self._api_key = api_key
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.reader_url = reader_url or settings.reader_url

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=settings.timeout)

        logger.info(f"Jina client initialized (base_url={self.base_url})")

    def default_headers(self) -> Dict[str, str]:
        """Headers sent with every request: bearer auth and JSON content type."""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def embeddings(self, request: EmbeddingsRequest) -> EmbeddingsResponse:
        """Embed text or images.

        Args:
            request: Model, input and output options.

        Returns:
            EmbeddingsResponse with one Embedding per input item, passed
            through exactly as the server sent it.

        Raises:
            JinaTransportError: Request never got a response.
            JinaHTTPError: Non-2xx status (auth failure, rate limit...).
            JinaDeserializationError: 2xx body is not an embeddings response.
        """
        return await self._post(
            f"{self.base_url}{EMBEDDINGS_PATH}",
            request.model_dump(mode="json", exclude_none=True),
            EmbeddingsResponse,
        )

    async def rerank(self, request: RerankRequest) -> RerankResponse:
        """Rerank documents by relevance to a query.

        top_n and return_documents are only sent when set, leaving their
        defaults to the server.

        Raises:
            JinaTransportError, JinaHTTPError, JinaDeserializationError
        """
        return await self._post(
            f"{self.base_url}{RERANK_PATH}",
            request.model_dump(mode="json", exclude_none=True),
            RerankResponse,
        )

    async def reader(self, request: ReaderRequest) -> ReaderResponse:
        """Read a URL and return its extracted content.

        Only the url goes in the JSON body; the remaining options become
        X-* headers (see ReaderRequest.to_headers).

        Raises:
            InvalidHeaderValueError: An option is not a legal header value.
                Raised before anything is sent.
            JinaTransportError, JinaHTTPError, JinaDeserializationError
        """
        headers = {"Accept": "application/json"}
        headers.update(request.to_headers())

        return await self._post(self.reader_url, request.body(), ReaderResponse, extra_headers=headers)

    async def _post(
        self,
        url: str,
        payload: Dict[str, Any],
        response_model: Type[ResponseT],
        extra_headers: Optional[Dict[str, str]] = None,
    ) -> ResponseT:
        """POST a JSON payload and decode the response into response_model."""
        headers = self.default_headers()
        if extra_headers:
            headers.update(extra_headers)

        logger.debug(f"POST {url} -> {response_model.__name__}")
        try:
            response = await self._http_client.post(url, headers=headers, json=payload)
        except httpx.DecodingError as e:
            raise JinaDeserializationError(f"Could not decode response body from {url}: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error calling {url}: {e}")
            raise JinaTransportError(f"Request to {url} failed: {e}") from e

        return self.handle_response(response, response_model)

    @staticmethod
    def handle_response(response: httpx.Response, response_model: Type[ResponseT]) -> ResponseT:
        """Turn an httpx response into a typed model or a Jina exception.

        Args:
            response: A fully received httpx response.
            response_model: Pydantic model the 2xx body must match.

        Returns:
            The validated response model.

        Raises:
            JinaHTTPError: Status is not 2xx. The payload is the decoded
                error body, or None if it could not be decoded.
            JinaDeserializationError: Status is 2xx but the body is not
                valid JSON or does not match response_model.
        """
        if not response.is_success:
            payload = _decode_error_payload(response)
            logger.warning(f"Jina API returned status {response.status_code}")
            raise JinaHTTPError(response.status_code, payload)

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            raise JinaDeserializationError(
                f"Could not parse {response_model.__name__} from response: {e}"
            ) from e

    async def close(self):
        """Close the HTTP client if this instance created it.

        A transport passed in by the caller is left open; its owner
        closes it.
        """
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def _decode_error_payload(response: httpx.Response) -> Optional[HttpErrorPayload]:
    """Best-effort decode of a vendor error body; None if it is not a JSON object."""
    try:
        return HttpErrorPayload.model_validate_json(response.content)
    except ValidationError:
        return None
