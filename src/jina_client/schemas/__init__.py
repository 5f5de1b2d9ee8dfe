"""Pydantic schemas for the Jina embeddings, rerank and reader APIs."""

from jina_client.schemas.common import HttpErrorPayload, Usage
from jina_client.schemas.embeddings import (
    Doc,
    Embedding,
    EmbeddingsInput,
    EmbeddingsModel,
    EmbeddingsRequest,
    EmbeddingsResponse,
    EmbeddingType,
    ImageDoc,
    TextDoc,
)
from jina_client.schemas.reader import (
    ReaderData,
    ReaderRequest,
    ReaderResponse,
    ReaderReturnFormat,
    ReaderUsage,
)
from jina_client.schemas.rerank import (
    RankedDocument,
    RankedResult,
    RerankerModel,
    RerankRequest,
    RerankResponse,
)

__all__ = [
    "HttpErrorPayload",
    "Usage",
    # Embeddings
    "Doc",
    "Embedding",
    "EmbeddingsInput",
    "EmbeddingsModel",
    "EmbeddingsRequest",
    "EmbeddingsResponse",
    "EmbeddingType",
    "ImageDoc",
    "TextDoc",
    # Rerank
    "RankedDocument",
    "RankedResult",
    "RerankerModel",
    "RerankRequest",
    "RerankResponse",
    # Reader
    "ReaderData",
    "ReaderRequest",
    "ReaderResponse",
    "ReaderReturnFormat",
    "ReaderUsage",
]
