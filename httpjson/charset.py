from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from email.message import Message
from email.utils import collapse_rfc2231_value
from typing import Dict, Optional, Tuple

from .errors import UnknownCharsetError, UnsupportedCharsetError
from .rules import (
    IANA_ALIASES,
    JSON_MEDIA_TYPES,
    JSON_SUFFIX,
    NON_CHARSET_CODECS,
    UNIMPLEMENTED_CHARSETS,
    UTF8,
)
from .transcode import Decoder, Encoder, JSONSafeEncoder, Passthrough, Transformer

logger = logging.getLogger(__name__)


def parse_media_type(content_type: str) -> Tuple[str, Dict[str, str]]:
    """
    Split a Content-Type value into its media type and parameters.

    Both the media type and parameter names are lower-cased. Anything that
    does not look like type/subtype yields ("", {}) rather than an error.
    """
    if not content_type:
        return "", {}
    msg = Message()
    msg["content-type"] = content_type
    params = msg.get_params(header="content-type") or []
    if not params:
        return "", {}
    media_type = params[0][0].strip().lower()
    if media_type.count("/") != 1 or media_type.startswith("/") or media_type.endswith("/"):
        return "", {}
    return media_type, {
        name.lower(): collapse_rfc2231_value(value) for name, value in params[1:] if name
    }


def charset_param(content_type: str) -> str:
    _, params = parse_media_type(content_type)
    return params.get("charset", "")


def is_json_content_type(content_type: str) -> bool:
    """
    Whether the Content-Type names a JSON MIME type, as grouped by the WHATWG
    MIME Sniffing Standard: application/json, text/json or any +json type.
    """
    media_type, _ = parse_media_type(content_type)
    if not media_type:
        return False
    return media_type in JSON_MEDIA_TYPES or media_type.endswith(JSON_SUFFIX)


@dataclass(frozen=True)
class Charset:
    name: str
    codec: Optional[codecs.CodecInfo] = None

    @property
    def is_identity(self) -> bool:
        return self.codec is None

    def new_encoder(self, errors: str = "strict") -> Transformer:
        if self.codec is None:
            return Passthrough()
        return Encoder(self.codec, errors)

    def new_json_encoder(self) -> Transformer:
        if self.codec is None:
            return Passthrough()
        return JSONSafeEncoder(self.codec)

    def new_decoder(self) -> Transformer:
        if self.codec is None:
            return Passthrough()
        return Decoder(self.codec)


def resolve(name: str) -> Charset:
    """
    Look up a MIME charset name.

    Raises UnknownCharsetError if the name is not a charset at all and
    UnsupportedCharsetError if it is a registered charset without a codec.
    """
    if not name or name.lower() == UTF8:
        return Charset(UTF8)

    key = name.strip().lower()
    if key in UNIMPLEMENTED_CHARSETS:
        raise UnsupportedCharsetError(name)
    try:
        info = codecs.lookup(IANA_ALIASES.get(key, key))
    except LookupError:
        raise UnknownCharsetError(name) from None
    if info.name in NON_CHARSET_CODECS:
        raise UnknownCharsetError(name)

    logger.debug(f"Resolved charset {name!r} to codec {info.name!r}")
    return Charset(name, info)
