"""
Pydantic models for the Jina AI Reader API (https://r.jina.ai).

Why it's needed:
    The reader fetches a URL and returns its content in LLM-friendly form.
    Unlike embeddings and rerank, only the target `url` travels in the JSON
    body; every extraction option is sent as an `X-*` request header.

What it does:
    - ReaderRequest: url + optional extraction controls
    - ReaderRequest.to_headers(): maps the options that are set to
      (header name, value) pairs, validating free-form strings first
    - ReaderResponse / ReaderData / ReaderUsage: the parsed response

Header mapping:
    return_format      -> X-Return-Format
    target_selector    -> X-Target-Selector
    locale             -> X-Locale
    proxy_url          -> X-Proxy-Url
    timeout            -> X-Timeout
    no_cache           -> X-No-Cache
    wait_for_selector  -> X-Wait-For-Selector
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from jina_client.exceptions import InvalidHeaderValueError
from jina_client.schemas.common import is_header_safe


class ReaderReturnFormat(str, Enum):
    """Content format the reader should return.

    Lookup is case-insensitive: ReaderReturnFormat("Markdown") is MARKDOWN.
    """

    DEFAULT = "default"
    MARKDOWN = "markdown"
    HTML = "html"
    TEXT = "text"
    SCREENSHOT = "screenshot"
    PAGESHOT = "pageshot"

    @classmethod
    def _missing_(cls, value: object) -> Optional["ReaderReturnFormat"]:
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


def _ensure_header_safe(field: str, value: str) -> str:
    if not is_header_safe(value):
        raise InvalidHeaderValueError(field, value)
    return value


class ReaderRequest(BaseModel):
    """Request for the reader endpoint.

    Attributes:
        url: Page to read. The only field sent in the JSON body.
        return_format: Output format (markdown, html, text, screenshot...).
        no_cache: Bypass the reader's cache.
        wait_for_selector: CSS selector to wait for before extracting.
        target_selector: CSS selector restricting extraction to a subtree.
        timeout: Seconds the reader may spend loading the page.
        proxy_url: Proxy the reader should fetch through.
        locale: Browser locale used to render the page.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    return_format: Optional[ReaderReturnFormat] = None
    no_cache: Optional[bool] = None
    wait_for_selector: Optional[str] = None
    target_selector: Optional[str] = None
    timeout: Optional[int] = Field(default=None, ge=0, le=65535)
    proxy_url: Optional[str] = None
    locale: Optional[str] = None

    def body(self) -> Dict[str, Any]:
        return {"url": self.url}

    def to_headers(self) -> List[Tuple[str, str]]:
        """Translate the options that are set into reader request headers.

        Returns:
            Ordered (name, value) pairs; options left as None are skipped.

        Raises:
            InvalidHeaderValueError: url, a selector, locale or proxy_url
                contains control characters or non-ASCII text.
        """
        _ensure_header_safe("url", self.url)

        headers: List[Tuple[str, str]] = []
        if self.return_format is not None:
            headers.append(("X-Return-Format", self.return_format.value))
        if self.target_selector is not None:
            headers.append(
                ("X-Target-Selector", _ensure_header_safe("target_selector", self.target_selector))
            )
        if self.locale is not None:
            headers.append(("X-Locale", _ensure_header_safe("locale", self.locale)))
        if self.proxy_url is not None:
            headers.append(("X-Proxy-Url", _ensure_header_safe("proxy_url", self.proxy_url)))
        if self.timeout is not None:
            headers.append(("X-Timeout", str(self.timeout)))
        if self.no_cache is not None:
            headers.append(("X-No-Cache", "true" if self.no_cache else "false"))
        if self.wait_for_selector is not None:
            headers.append(
                ("X-Wait-For-Selector", _ensure_header_safe("wait_for_selector", self.wait_for_selector))
            )
        return headers


class ReaderUsage(BaseModel):
    model_config = ConfigDict(frozen=True)

    tokens: int


class ReaderData(BaseModel):
    """Extracted page content."""

    model_config = ConfigDict(frozen=True)

    content: str
    description: str
    title: str
    url: str
    usage: ReaderUsage


class ReaderResponse(BaseModel):
    """Response received from the reader. `code` and `status` are server-defined."""

    model_config = ConfigDict(frozen=True)

    code: int
    status: int
    data: ReaderData
