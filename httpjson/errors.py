"""
Charset lookup errors.

Structural failures (truncated or invalid bytes, unencodable escapes) are
the codecs' own UnicodeDecodeError / UnicodeEncodeError and JSON failures
are whatever the serializer raises; neither is wrapped.
"""

from __future__ import annotations


class CharsetError(LookupError):
    """A charset name could not be turned into a working codec."""

    reason = "charset error"

    def __init__(self, charset: str) -> None:
        super().__init__(f"{self.reason}: {charset!r}")
        self.charset = charset


class UnknownCharsetError(CharsetError):
    """The name is not a recognized charset label."""

    reason = "invalid encoding name"


class UnsupportedCharsetError(CharsetError):
    """The name is a registered charset with no codec available."""

    reason = "unsupported encoding"
