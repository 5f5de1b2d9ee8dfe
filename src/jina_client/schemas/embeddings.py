"""
Pydantic models for the Jina AI Embeddings API (POST /v1/embeddings).

Why it's needed:
    The embeddings endpoint accepts its `input` in four different shapes and
    returns vectors whose encoding depends on `embedding_type`. These models
    pin down each shape so a malformed request never leaves the process and
    an unexpected response fails loudly instead of producing wrong vectors.

What it does:
    - EmbeddingsModel / EmbeddingType: closed sets of identifiers, serialized
      to the exact lowercase strings the API expects
    - TextDoc / ImageDoc: the two document shapes (`{"text": ...}` or
      `{"image": ...}`)
    - EmbeddingsRequest: model + input + optional output controls
    - EmbeddingsResponse / Embedding: the parsed response

How it helps:
    `input` is a plain Union with no tag field. The JSON is told apart by
    structure alone (string, array, object, array of objects), which is
    exactly what the API documents:

        "input": "Hello"                         -> str
        "input": ["Hello", "World"]              -> List[str]
        "input": {"image": "https://..."}        -> Doc
        "input": [{"text": "a"}, {"image": "b"}] -> List[Doc]

Available models (params, dimension):
    - jina-clip-v1                 223M  768
    - jina-embeddings-v2-base-en   137M  768
    - jina-embeddings-v2-base-es   161M  768
    - jina-embeddings-v2-base-de   161M  768
    - jina-embeddings-v2-base-zh   161M  768
    - jina-embeddings-v2-base-code 137M  768

References: https://jina.ai/embeddings
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from jina_client.schemas.common import Usage


class EmbeddingsModel(str, Enum):
    """Identifiers of the embedding models served by the API."""

    CLIP_V1 = "jina-clip-v1"
    EMBEDDINGS_V2_BASE_EN = "jina-embeddings-v2-base-en"
    EMBEDDINGS_V2_BASE_ES = "jina-embeddings-v2-base-es"
    EMBEDDINGS_V2_BASE_DE = "jina-embeddings-v2-base-de"
    EMBEDDINGS_V2_BASE_ZH = "jina-embeddings-v2-base-zh"
    EMBEDDINGS_V2_BASE_CODE = "jina-embeddings-v2-base-code"


class EmbeddingType(str, Enum):
    """Encoding of the returned vectors."""

    FLOAT = "float"
    BASE64 = "base64"
    BINARY = "binary"
    UBINARY = "ubinary"


class TextDoc(BaseModel):
    """A text document: `{"text": ...}`."""

    model_config = ConfigDict(frozen=True)

    text: str


class ImageDoc(BaseModel):
    """An image document: `{"image": <url or base64>}`. Only clip models accept it."""

    model_config = ConfigDict(frozen=True)

    image: str


Doc = Union[TextDoc, ImageDoc]

EmbeddingsInput = Union[str, List[str], Doc, List[Doc]]


class EmbeddingsRequest(BaseModel):
    """
    Request payload sent to Jina's /v1/embeddings endpoint.

    Attributes:
        model: One of EmbeddingsModel.
        input: A string, a list of strings, a single document or a list
               of documents. See the module docstring for the wire shapes.
        embedding_type: `float`, `base64`, `binary`, `ubinary` or a list of
               them. Server default is `float`. Omitted from the body when None.
        normalized: Scale embeddings to unit L2 norm. Omitted when None.
    """

    model_config = ConfigDict(frozen=True)

    model: EmbeddingsModel
    input: EmbeddingsInput
    embedding_type: Optional[Union[EmbeddingType, List[EmbeddingType]]] = None
    normalized: Optional[bool] = None


class Embedding(BaseModel):
    """One entry of EmbeddingsResponse.data.

    Attributes:
        index: Position of the matching item in the request input (0-based).
        embedding: The vector. A list of floats for `float`/`binary`/`ubinary`,
                   a string for `base64`, and a mapping of type -> vector when
                   several embedding types were requested.
        object: Always "embedding".
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    embedding: Union[List[float], str, Dict[str, Union[List[float], str]]]
    object: str


class EmbeddingsResponse(BaseModel):
    """Response received from Jina's /v1/embeddings endpoint.

    `model` is whatever the server reports and is not checked against
    EmbeddingsModel.
    """

    model_config = ConfigDict(frozen=True)

    model: str
    data: List[Embedding]
    usage: Usage
