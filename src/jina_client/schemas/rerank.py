"""
Pydantic models for the Jina AI Reranker API (POST /v1/rerank).

A rerank call scores each candidate document against a query and returns
them ordered by relevance. `query` is a plain string or a TextDoc, and
`documents` is either a list of strings or a list of TextDocs (never mixed).

Available models (params):
    - jina-reranker-v2-base-multilingual 278M
    - jina-reranker-v1-base-en           137M
    - jina-reranker-v1-tiny-en            33M
    - jina-reranker-v1-turbo-en           38M
    - jina-colbert-v1-en                 137M
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from jina_client.schemas.common import Usage
from jina_client.schemas.embeddings import TextDoc


class RerankerModel(str, Enum):
    """Identifiers of the reranker models served by the API."""

    RERANKER_V2_BASE_MULTILINGUAL = "jina-reranker-v2-base-multilingual"
    RERANKER_V1_BASE_EN = "jina-reranker-v1-base-en"
    RERANKER_V1_TINY_EN = "jina-reranker-v1-tiny-en"
    RERANKER_V1_TURBO_EN = "jina-reranker-v1-turbo-en"
    COLBERT_V1_EN = "jina-colbert-v1-en"


class RerankRequest(BaseModel):
    """Request payload sent to Jina's /v1/rerank endpoint.

    Attributes:
        model: One of RerankerModel.
        query: The search query, as a string or a TextDoc.
        documents: Candidates to rerank, all strings or all TextDocs.
        top_n: Number of results to return. Omitted from the body when
               None, so the server default (len(documents)) applies.
        return_documents: If False the results carry only index and score.
               Omitted when None (server default is True).
    """

    model_config = ConfigDict(frozen=True)

    model: RerankerModel
    query: Union[str, TextDoc]
    documents: Union[List[str], List[TextDoc]]
    top_n: Optional[int] = Field(default=None, ge=1)
    return_documents: Optional[bool] = None


class RankedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class RankedResult(BaseModel):
    """One reranked candidate.

    `index` points into the request's `documents`. `document` is None when
    the request set return_documents=False.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    document: Optional[RankedDocument] = None
    relevance_score: float


class RerankResponse(BaseModel):
    """Response received from Jina's /v1/rerank endpoint, best match first."""

    model_config = ConfigDict(frozen=True)

    model: str
    results: List[RankedResult]
    usage: Usage
