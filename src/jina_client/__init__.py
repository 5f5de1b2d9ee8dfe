"""Async client for the Jina AI embeddings, rerank and reader APIs."""

from jina_client.exceptions import (
    InvalidHeaderValueError,
    JinaConfigurationError,
    JinaConstructionError,
    JinaDeserializationError,
    JinaException,
    JinaHTTPError,
    JinaTransportError,
)
from jina_client.config import JinaSettings, get_settings
from jina_client.client import JinaClient
from jina_client.factory import make_jina_client
from jina_client.schemas import (
    Embedding,
    EmbeddingsModel,
    EmbeddingsRequest,
    EmbeddingsResponse,
    EmbeddingType,
    HttpErrorPayload,
    ImageDoc,
    RankedDocument,
    RankedResult,
    ReaderData,
    ReaderRequest,
    ReaderResponse,
    ReaderReturnFormat,
    ReaderUsage,
    RerankerModel,
    RerankRequest,
    RerankResponse,
    TextDoc,
    Usage,
)

__all__ = [
    # Client
    "JinaClient",
    "make_jina_client",
    "JinaSettings",
    "get_settings",
    # Exceptions
    "JinaException",
    "JinaTransportError",
    "JinaHTTPError",
    "JinaDeserializationError",
    "JinaConstructionError",
    "JinaConfigurationError",
    "InvalidHeaderValueError",
    # Schemas
    "Usage",
    "HttpErrorPayload",
    "Embedding",
    "EmbeddingsModel",
    "EmbeddingsRequest",
    "EmbeddingsResponse",
    "EmbeddingType",
    "ImageDoc",
    "TextDoc",
    "RankedDocument",
    "RankedResult",
    "RerankerModel",
    "RerankRequest",
    "RerankResponse",
    "ReaderData",
    "ReaderRequest",
    "ReaderResponse",
    "ReaderReturnFormat",
    "ReaderUsage",
]
