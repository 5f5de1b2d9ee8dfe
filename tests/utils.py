import json
from typing import Any, Dict, List, Optional

import httpx

from jina_client import JinaClient, JinaSettings

TEST_API_KEY = "test-key"
TEST_BASE_URL = "https://jina.test"
TEST_READER_URL = "https://reader.jina.test/"


class RecordingTransport:
    """Mock transport that answers every request with one canned response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Optional[Any] = None,
        content: Optional[bytes] = None,
        error: Optional[Exception] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.error = error
        self.headers = headers
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body, headers=self.headers)
        return httpx.Response(self.status_code, content=self.content or b"", headers=self.headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last_request.content)


def make_settings(**overrides) -> JinaSettings:
    return JinaSettings(_env_file=None, **overrides)


def make_client(transport: RecordingTransport) -> JinaClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport.handler))
    return JinaClient(
        api_key=TEST_API_KEY,
        base_url=TEST_BASE_URL,
        reader_url=TEST_READER_URL,
        http_client=http_client,
        settings=make_settings(),
    )
