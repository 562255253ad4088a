"""
Charset defaults and registry rules.

This file exists to make the defaulting and lookup rules explicit and enforceable.
"""

UTF8 = "utf-8"

# Content type given without a charset parameter.
DEFAULT_CHARSET = "us-ascii"

# No content type given at all.
DEFAULT_CONTENT_TYPE = "application/json;charset=utf-8"

JSON_MEDIA_TYPES = ("application/json", "text/json")
JSON_SUFFIX = "+json"

# Codec error handler registered by httpjson.transcode.
JSON_ESCAPE_ERRORS = "jsonescape"

# IANA charset names (and aliases) that are registered but have no codec
# in the Python registry. Lookups for these are "unsupported", not "unknown".
UNIMPLEMENTED_CHARSETS = frozenset({
    "osd_ebcdic_df03_irv",
    "osd_ebcdic_df04_1",
    "osd_ebcdic_df04_15",
    "ebcdic-at-de",
    "ebcdic-at-de-a",
    "ebcdic-ca-fr",
    "ebcdic-dk-no",
    "ebcdic-dk-no-a",
    "ebcdic-es",
    "ebcdic-es-a",
    "ebcdic-es-s",
    "ebcdic-fi-se",
    "ebcdic-fi-se-a",
    "ebcdic-fr",
    "ebcdic-it",
    "ebcdic-pt",
    "ebcdic-uk",
    "ebcdic-us",
    "ibm038",
    "ibm274",
    "ibm275",
    "ibm277",
    "ibm278",
    "ibm280",
    "ibm281",
    "ibm284",
    "ibm285",
    "ibm290",
    "ibm297",
    "ibm420",
    "ibm423",
    "ibm851",
    "ibm868",
    "ibm870",
    "ibm871",
    "ibm880",
    "ibm891",
    "ibm903",
    "ibm904",
    "ibm905",
    "ibm918",
    "ibm1047",
    "iso-2022-cn",
    "iso-2022-cn-ext",
    "iso-10646-ucs-2",
    "iso-10646-ucs-4",
    "iso-10646-ucs-basic",
    "iso-10646-unicode-latin1",
    "iso-10646-j-1",
    "iso-unicode-ibm-1261",
    "unicode-1-1",
    "utf-7-imap",
    "scsu",
    "bocu-1",
    "cesu-8",
    "bs_4730",
    "din_66003",
    "nf_z_62-010",
    "jis_x0201",
    "jis_encoding",
    "ansi_x3.110-1983",
    "t.61-8bit",
    "iso_6937-2-add",
    "videotex-suppl",
    "adobe-standard-encoding",
    "adobe-symbol-encoding",
    "ventura-us",
    "ventura-international",
    "dec-mcs",
})

# IANA charset aliases the Python registry does not know, mapped to the
# codec that implements them.
IANA_ALIASES = {
    "csutf8": "utf-8",
    "csutf16": "utf-16",
    "csutf16be": "utf-16-be",
    "csutf16le": "utf-16-le",
    "csutf32": "utf-32",
    "csutf32be": "utf-32-be",
    "csutf32le": "utf-32-le",
    "csutf7": "utf-7",
    "cswindows1250": "cp1250",
    "cswindows1251": "cp1251",
    "cswindows1252": "cp1252",
    "cswindows1253": "cp1253",
    "cswindows1254": "cp1254",
    "cswindows1255": "cp1255",
    "cswindows1256": "cp1256",
    "cswindows1257": "cp1257",
    "cswindows1258": "cp1258",
    "windows-31j": "cp932",
    "cswindows31j": "cp932",
    "cseucpkdfmtjapanese": "euc_jp",
    "extended_unix_code_packed_format_for_japanese": "euc_jp",
    "cseuckr": "euc_kr",
    "csksc56011987": "cp949",
    "csgb2312": "gb2312",
    "csgbk": "gbk",
    "csgb18030": "gb18030",
    "cshz": "hz",
    "csbig5hkscs": "big5hkscs",
    "csiso2022jp2": "iso2022_jp_2",
    "csisolatin9": "iso8859-15",
    "csiso885913": "iso8859-13",
    "csiso885914": "iso8859-14",
    "csiso885915": "iso8859-15",
    "csiso885916": "iso8859-16",
    "cskoi8u": "koi8-u",
    "csmacintosh": "mac-roman",
    "cstis620": "tis-620",
    "ibm00858": "cp858",
    "csibm00858": "cp858",
    "ibm01140": "cp1140",
    "csibm01140": "cp1140",
}

# Python codecs that resolve by name but are not MIME charsets; utf-8-sig
# is among them because it writes a BOM.
NON_CHARSET_CODECS = frozenset({
    "base64",
    "bz2",
    "hex",
    "quopri",
    "rot-13",
    "uu",
    "zlib",
    "idna",
    "punycode",
    "raw-unicode-escape",
    "unicode-escape",
    "undefined",
    "utf-8-sig",
})
