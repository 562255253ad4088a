"""
HTTP message bodies carrying charset-encoded JSON.

Client side builds and reads httpx messages; server side reads Starlette
requests and writes CharsetJSONResponse. The charset always comes from the
Content-Type parameter and is handed to marshal/unmarshal unmodified.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx
from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import Response

from .charset import charset_param
from .codec import marshal, unmarshal
from .rules import DEFAULT_CONTENT_TYPE


def marshal_request(method: str, url: str, content_type: str = "", value: Any = None) -> httpx.Request:
    """
    Build an httpx.Request whose body is the JSON encoding of value.

    An empty content_type means application/json;charset=utf-8; a content
    type without a charset parameter encodes the body as us-ascii. A value
    of None gives a request with no body and no Content-Type.
    """
    if not content_type:
        content_type = DEFAULT_CONTENT_TYPE
    if value is None:
        return httpx.Request(method, url)
    body = marshal(value, charset_param(content_type))
    return httpx.Request(method, url, content=body, headers={"Content-Type": content_type})


def unmarshal_response(response: httpx.Response, model: Optional[Any] = None) -> Any:
    body = response.read()
    return unmarshal(body, charset_param(response.headers.get("content-type", "")), model)


async def unmarshal_request(request: Request, model: Optional[Any] = None) -> Any:
    body = await request.body()
    return unmarshal(body, charset_param(request.headers.get("content-type", "")), model)


class CharsetJSONResponse(Response):
    """
    JSON response encoded in the charset named by its media type.

    Without a media type the body is UTF-8 under
    application/json;charset=utf-8; a media type without a charset gets
    us-ascii. None gives an empty body and no Content-Type.
    """

    media_type = DEFAULT_CONTENT_TYPE

    def __init__(
        self,
        content: Any = None,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        media_type: Optional[str] = None,
        background: Optional[BackgroundTask] = None,
    ) -> None:
        if content is None:
            self.media_type = None
            media_type = None
        super().__init__(content, status_code, headers, media_type, background)

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        return marshal(content, charset_param(self.media_type or ""))
