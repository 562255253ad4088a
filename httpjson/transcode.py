"""
Streaming charset transforms for JSON bodies.

Encoders take UTF-8 bytes and produce bytes in a target charset; decoders go
the other way. Both can be driven one chunk at a time: whatever a call could
not finish (a multi-byte sequence cut at the end of the chunk, a codec shift
or BOM state) is handed back as a TransformState for the next call.

JSONSafeEncoder never fails on a character the target charset lacks. JSON
only allows non-ASCII characters inside string literals, so such a character
is written as its \\uXXXX escape (a surrogate pair above U+FFFF), which
every ASCII-compatible charset can carry.
"""

from __future__ import annotations

import codecs
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple

from .rules import JSON_ESCAPE_ERRORS, UTF8

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformState:
    pending: bytes = b""
    # None until a codec has run; some codecs (utf-16) start in a non-zero state.
    codec_state: Any = None


EMPTY_STATE = TransformState()


def escape(ch: str) -> str:
    """Return the JSON escape for a single character."""
    code = ord(ch)
    if code < 0x10000:
        return "\\u%04x" % code
    code -= 0x10000
    return "\\u%04x\\u%04x" % (0xD800 | (code >> 10), 0xDC00 | (code & 0x3FF))


def json_escape_errors(exc: UnicodeError) -> Tuple[str, int]:
    """
    Codec error handler: replace unencodable characters with JSON escapes.

    The replacement is encoded by the same codec, so the escapes come out in
    the target charset's own bytes. Decode errors are not ours to fix.
    """
    if not isinstance(exc, UnicodeEncodeError):
        raise exc
    unencodable = exc.object[exc.start:exc.end]
    return "".join(escape(ch) for ch in unencodable), exc.end


codecs.register_error(JSON_ESCAPE_ERRORS, json_escape_errors)


class Transformer(ABC):
    @abstractmethod
    def transform(
        self, src: bytes, state: TransformState = EMPTY_STATE, final: bool = False
    ) -> Tuple[bytes, TransformState]:
        """
        Transform one chunk of input.

        With final=False an incomplete trailing sequence is carried in the
        returned state; with final=True it raises UnicodeDecodeError.
        """

    def convert(self, src: bytes) -> bytes:
        out, _ = self.transform(src, final=True)
        return out

    def chunks(self, chunks: Iterable[bytes]) -> Iterator[bytes]:
        state = EMPTY_STATE
        for chunk in chunks:
            out, state = self.transform(chunk, state)
            if out:
                yield out
        out, _ = self.transform(b"", state, final=True)
        if out:
            yield out


class Passthrough(Transformer):
    """UTF-8 in, UTF-8 out."""

    def transform(self, src, state=EMPTY_STATE, final=False):
        return state.pending + bytes(src), EMPTY_STATE


class Encoder(Transformer):
    """UTF-8 bytes to the codec's charset."""

    def __init__(self, codec: codecs.CodecInfo, errors: str = "strict") -> None:
        self.codec = codec
        self.errors = errors

    def transform(self, src, state=EMPTY_STATE, final=False):
        data = state.pending + bytes(src)
        text, consumed = codecs.utf_8_decode(data, "strict", final)

        encoder = self.codec.incrementalencoder(self.errors)
        if state.codec_state is not None:
            encoder.setstate(state.codec_state)
        out = encoder.encode(text, final)
        return out, TransformState(data[consumed:], encoder.getstate())


class JSONSafeEncoder(Encoder):
    def __init__(self, codec: codecs.CodecInfo) -> None:
        super().__init__(codec, errors=JSON_ESCAPE_ERRORS)

    def convert(self, src: bytes) -> bytes:
        out = super().convert(src)
        logger.debug(f"Encoded {len(src)} bytes of JSON as {self.codec.name}: {len(out)} bytes")
        return out


class Decoder(Transformer):
    """The codec's charset to UTF-8 bytes."""

    def __init__(self, codec: codecs.CodecInfo, errors: str = "strict") -> None:
        self.codec = codec
        self.errors = errors

    def transform(self, src, state=EMPTY_STATE, final=False):
        decoder = self.codec.incrementaldecoder(self.errors)
        if state.codec_state is not None:
            decoder.setstate((state.pending, state.codec_state))
        text = decoder.decode(bytes(src), final)
        pending, codec_state = decoder.getstate()
        return text.encode(UTF8), TransformState(pending, codec_state)
