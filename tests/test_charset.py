import pytest

from httpjson.charset import charset_param, is_json_content_type, parse_media_type, resolve
from httpjson.errors import UnknownCharsetError, UnsupportedCharsetError
from httpjson.transcode import Passthrough


@pytest.mark.parametrize(
    "content_type,is_json",
    [
        ("", False),
        ("application/json", True),
        ("application/something+json", True),
        ("text/json", True),
        ("text/plain", False),
        ('application/json;charset="ebcdic"', True),
        ("APPLICATION/JSON; charset=utf-8", True),
        ("json", False),
        ("/json", False),
    ],
)
def test_is_json_content_type(content_type, is_json):
    assert is_json_content_type(content_type) is is_json


def test_parse_media_type():
    assert parse_media_type('Application/JSON; Charset="ISO-8859-1"; q=1') == (
        "application/json",
        {"charset": "ISO-8859-1", "q": "1"},
    )
    assert parse_media_type("not a media type") == ("", {})
    assert parse_media_type("") == ("", {})


def test_charset_param():
    assert charset_param("application/json;charset=us-ascii") == "us-ascii"
    assert charset_param("application/json") == ""
    assert charset_param("") == ""


@pytest.mark.parametrize("name", ["", "utf-8", "UTF-8", "Utf-8"])
def test_resolve_utf8_is_identity(name):
    cs = resolve(name)
    assert cs.is_identity
    assert cs.codec is None
    assert isinstance(cs.new_json_encoder(), Passthrough)
    assert isinstance(cs.new_decoder(), Passthrough)


@pytest.mark.parametrize(
    "name,codec",
    [
        ("us-ascii", "ascii"),
        ("ISO-8859-1", "iso8859-1"),
        ("windows-1252", "cp1252"),
        ("Shift_JIS", "shift_jis"),
        ("IBM037", "cp037"),
        ("csISOLatin1", "iso8859-1"),
        ("csWindows1252", "cp1252"),
        ("Windows-31J", "cp932"),
        ("csEUCPkdFmtJapanese", "euc_jp"),
        ("csMacintosh", "mac-roman"),
        ("IBM00858", "cp858"),
    ],
)
def test_resolve_known(name, codec):
    cs = resolve(name)
    assert not cs.is_identity
    assert cs.name == name
    assert cs.codec.name == codec


@pytest.mark.parametrize(
    "name", ["no-such", "not-known", "made-up", "base64", "rot13", "unicode_escape", "utf-8-sig", "UTF_8_SIG"]
)
def test_resolve_unknown(name):
    with pytest.raises(UnknownCharsetError, match="invalid encoding name") as exc_info:
        resolve(name)
    assert not isinstance(exc_info.value, UnsupportedCharsetError)
    assert exc_info.value.charset == name


@pytest.mark.parametrize("name", ["OSD_EBCDIC_DF03_IRV", "EBCDIC-FR", "ibm1047", "ISO-2022-CN"])
def test_resolve_unsupported(name):
    with pytest.raises(UnsupportedCharsetError, match="unsupported encoding") as exc_info:
        resolve(name)
    assert not isinstance(exc_info.value, UnknownCharsetError)
    assert exc_info.value.charset == name
