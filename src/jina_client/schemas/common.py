"""Shared models used by every Jina endpoint."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Visible ASCII plus horizontal tab, the same set http header values allow
_HEADER_SAFE = re.compile(r"[\t\x20-\x7e]*")


def is_header_safe(value: str) -> bool:
    return _HEADER_SAFE.fullmatch(value) is not None


class Usage(BaseModel):
    """Token accounting attached to embeddings and rerank responses."""

    model_config = ConfigDict(frozen=True)

    prompt_tokens: int = Field(..., ge=0, description="Tokens in the input")
    total_tokens: int = Field(..., ge=0, description="Total tokens billed for the request")


class HttpErrorPayload(BaseModel):
    """Error body returned by the Jina API on a non-2xx status.

    The shape belongs to the server. `detail` is a message string for most
    errors and a list of validation errors for 422; any other keys are kept
    as extra fields.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    detail: Any = None
