"""Transport JSON values in HTTP message bodies, in any MIME charset."""

from .charset import Charset, charset_param, is_json_content_type, parse_media_type, resolve
from .client import (
    DEFAULT_CLIENT,
    Client,
    ResponseError,
    UnsupportedContentTypeError,
    do,
    get,
)
from .codec import dumps, marshal, unmarshal
from .errors import CharsetError, UnknownCharsetError, UnsupportedCharsetError
from .messages import CharsetJSONResponse, marshal_request, unmarshal_request, unmarshal_response
from .transcode import (
    EMPTY_STATE,
    Decoder,
    Encoder,
    JSONSafeEncoder,
    Passthrough,
    TransformState,
    Transformer,
)

__all__ = [
    "Charset",
    "CharsetError",
    "CharsetJSONResponse",
    "Client",
    "DEFAULT_CLIENT",
    "Decoder",
    "EMPTY_STATE",
    "Encoder",
    "JSONSafeEncoder",
    "Passthrough",
    "ResponseError",
    "TransformState",
    "Transformer",
    "UnknownCharsetError",
    "UnsupportedCharsetError",
    "UnsupportedContentTypeError",
    "charset_param",
    "do",
    "dumps",
    "get",
    "is_json_content_type",
    "marshal",
    "marshal_request",
    "parse_media_type",
    "resolve",
    "unmarshal",
    "unmarshal_request",
    "unmarshal_response",
]
