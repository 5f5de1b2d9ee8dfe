"""
jina-client Exception Hierarchy.

Why it's needed:
    A failed call to the Jina API can fail in four very different places:
    before anything is sent (bad configuration, unsafe header value), on the
    wire (DNS, connect, timeout), at the server (non-2xx status), or when the
    server answers 2xx with a body we cannot read. Callers need to tell these
    apart to decide whether to fix their input, retry, or report a bug.

How it helps:
    - JinaHTTPError carries the numeric status and the decoded vendor payload
    - JinaTransportError means no status was ever received
    - JinaConstructionError subclasses are raised before any network I/O
    - Everything inherits from JinaException, so one except clause catches all

Hierarchy:
    Exception
    └── JinaException                  ─ base for all client errors
        ├── JinaTransportError         ─ no HTTP status obtained
        ├── JinaHTTPError              ─ non-2xx status, optional payload
        ├── JinaDeserializationError   ─ 2xx body does not fit the model
        └── JinaConstructionError      ─ raised before sending
            ├── JinaConfigurationError ─ missing API key
            └── InvalidHeaderValueError─ reader field not header-safe
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from jina_client.schemas.common import HttpErrorPayload


class JinaException(Exception):
    """Base exception for all Jina API client errors."""


# =============================================================
# Send-time Exceptions
# =============================================================

class JinaTransportError(JinaException):
    """Raised when the request fails before any HTTP status is received.

    Wraps httpx.RequestError (connection refused, DNS failure, timeout,
    too many redirects).
    The original httpx exception is available as __cause__.
    """


class JinaHTTPError(JinaException):
    """Raised when the Jina API answers with a non-2xx status.

    Attributes:
        status_code: Numeric HTTP status (e.g. 401, 422, 429).
        payload: Decoded vendor error body, or None when the body was
                 empty or not a JSON object.
    """

    def __init__(self, status_code: int, payload: Optional["HttpErrorPayload"] = None):
        self.status_code = status_code
        self.payload = payload
        message = f"Jina API returned status {status_code}"
        if payload is not None and payload.detail is not None:
            message = f"{message}: {payload.detail}"
        super().__init__(message)


class JinaDeserializationError(JinaException):
    """Raised when a 2xx response body does not match the expected model.

    Covers a body that cannot be content-decoded, invalid JSON, and valid
    JSON of the wrong shape. The httpx or pydantic error is available as
    __cause__.
    """


# =============================================================
# Construction-time Exceptions
# =============================================================
# Raised while building the client or a request, never after a
# request has been handed to the transport.

class JinaConstructionError(JinaException):
    """Base for errors raised before any request is sent."""


class JinaConfigurationError(JinaConstructionError):
    """Raised when the client cannot be configured.

    Example: no api_key passed and JINA_API_KEY not set.
    """


class InvalidHeaderValueError(JinaConstructionError):
    """Raised when a reader option cannot be sent as an HTTP header value.

    Header values must be visible ASCII or tab. Control characters
    (CR, LF, NUL...) and non-ASCII text are rejected.
    """

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid header value for '{field}': {value!r}")
