"""
Charset-aware JSON marshalling.

Responsibilities:
- JSON serialization with conventional field mapping (pydantic aliases, jsonable_encoder)
- transcoding UTF-8 JSON into the requested charset, escaping what it cannot hold
- decoding a charset back to UTF-8 before parsing

Errors from the serializer, the resolver and the codecs propagate unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import TypeAdapter

from .charset import resolve
from .rules import DEFAULT_CHARSET, JSON_ESCAPE_ERRORS, UTF8


def dumps(value: Any) -> bytes:
    payload = jsonable_encoder(value)
    # Lone surrogates only occur inside string literals; they become escapes.
    return json.dumps(
        payload,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    ).encode(UTF8, JSON_ESCAPE_ERRORS)


def marshal(value: Any, charset: str = "") -> bytes:
    """
    Serialize value as JSON encoded in the given charset.

    An empty charset means us-ascii. Characters the charset cannot represent
    are written as \\uXXXX escapes, so the output is always valid JSON.
    """
    if not charset:
        charset = DEFAULT_CHARSET
    buf = dumps(value)
    if charset.lower() == UTF8:
        # Already in the native format.
        return buf
    return resolve(charset).new_json_encoder().convert(buf)


def unmarshal(data: bytes, charset: str = "", model: Optional[Any] = None) -> Any:
    """
    Parse JSON encoded in the given charset; an empty charset means UTF-8.

    If model is given (a pydantic model or any type pydantic can validate)
    the parsed value is validated into it.
    """
    if charset and charset.lower() != UTF8:
        data = resolve(charset).new_decoder().convert(data)
    # Strict decode: no BOM or UTF-16/32 sniffing as json.loads(bytes) does.
    value = json.loads(data.decode(UTF8))
    if model is None:
        return value
    return TypeAdapter(model).validate_python(value)
