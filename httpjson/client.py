"""
httpjson - JSON HTTP client

A thin client over httpx that sends charset-encoded JSON bodies and decodes
JSON responses in whatever charset the server declares. No retries: encoding
and decoding are deterministic, and transport errors propagate as httpx
raised them.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import httpx

from .charset import is_json_content_type as default_is_json_content_type
from .charset import parse_media_type, resolve
from .config import settings
from .errors import CharsetError
from .messages import marshal_request, unmarshal_response

logger = logging.getLogger(__name__)


class UnsupportedContentTypeError(ValueError):
    def __init__(self, content_type: str) -> None:
        super().__init__(f'unsupported Content-Type "{content_type}"')
        self.content_type = content_type


class ResponseError(Exception):
    """
    A valid HTTP response that was not a success.

    ``response`` keeps the status and headers; its body has already been
    read into ``body``.
    """

    def __init__(self, response: httpx.Response, body: bytes) -> None:
        super().__init__(response.status_code)
        self.response = response
        self.body = body

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        return self._text_body() or f"{self.response.status_code} {self.response.reason_phrase}"

    def _text_body(self) -> str:
        # A short text body is a better message than the status line.
        media_type, params = parse_media_type(self.response.headers.get("content-type", ""))
        if not media_type.startswith("text/"):
            return ""
        try:
            buf = resolve(params.get("charset", "")).new_decoder().convert(self.body)
        except (CharsetError, UnicodeError):
            # Undecodable bodies fall back to the status line.
            return ""
        if not 0 < len(buf) < 256:
            return ""
        return buf.decode("utf-8", errors="replace").strip()

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ResponseError":
        return cls(response, response.read())


class Client:
    """
    Client for JSON HTTP APIs.

    http_client: the httpx.Client to send with. When omitted one is created
        on first use with settings.CLIENT_TIMEOUT and closed by close().
    is_json_content_type: decides whether a response body is JSON. Defaults
        to httpjson.is_json_content_type.
    """

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        is_json_content_type: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self.is_json_content_type = is_json_content_type or default_is_json_content_type

    @property
    def http_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=settings.CLIENT_TIMEOUT)
        return self._http_client

    def close(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, url: str, model: Optional[Any] = None) -> Any:
        """GET a JSON document; non-2xx responses raise ResponseError."""
        return self.do("GET", url, model=model)

    def do(
        self,
        method: str,
        url: str,
        content_type: str = "",
        value: Any = None,
        model: Optional[Any] = None,
    ) -> Any:
        """
        Send value as the JSON request body and return the decoded response.

        content_type defaults to application/json;charset=utf-8. A value of
        None sends no body. Non-2xx responses raise ResponseError and 2xx
        responses that are not JSON raise UnsupportedContentTypeError.
        """
        request = marshal_request(method, url, content_type, value)
        logger.debug(f"{method} {url} ({len(request.content)} byte body)")

        response = self.http_client.send(request)
        try:
            if not response.is_success:
                raise ResponseError.from_response(response)

            response_type = response.headers.get("content-type", "")
            if not self.is_json_content_type(response_type):
                raise UnsupportedContentTypeError(response_type)
            return unmarshal_response(response, model)
        finally:
            response.close()


DEFAULT_CLIENT = Client()


def get(url: str, model: Optional[Any] = None) -> Any:
    """Retrieve a JSON document with DEFAULT_CLIENT."""
    return DEFAULT_CLIENT.get(url, model)


def do(
    method: str,
    url: str,
    content_type: str = "",
    value: Any = None,
    model: Optional[Any] = None,
) -> Any:
    """Send a request with DEFAULT_CLIENT; see Client.do."""
    return DEFAULT_CLIENT.do(method, url, content_type, value, model)
