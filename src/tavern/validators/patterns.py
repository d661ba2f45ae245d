"""Compiled patterns used by the format validators."""

import re

_BYTE = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_PERCENT = r"(?:100|[1-9]?\d)%"
_HUE = r"(?:360|3[0-5]\d|[12]\d\d|[1-9]?\d)"
_ALPHA = r"(?:0(?:\.\d+)?|1(?:\.0+)?|\.\d+)"
_SEP = r"\s*,\s*"
_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"

EMAIL = re.compile(rf"^[a-zA-Z0-9.!#$%&'*+/=?^_`{{|}}~-]+@{_LABEL}(?:\.{_LABEL})+$")

ALPHA = re.compile(r"^[a-zA-Z]+$")
ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]+$")
ALPHA_UNICODE = re.compile(r"^[^\W\d_]+$")
ALPHANUMERIC_UNICODE = re.compile(r"^[^\W_]+$")
NUMERIC = re.compile(r"^[-+]?[0-9]+(?:\.[0-9]+)?$")

RGB = re.compile(
    rf"^rgb\(\s*(?:{_BYTE}{_SEP}{_BYTE}{_SEP}{_BYTE}"
    rf"|{_PERCENT}{_SEP}{_PERCENT}{_SEP}{_PERCENT})\s*\)$"
)
RGBA = re.compile(
    rf"^rgba\(\s*(?:{_BYTE}{_SEP}{_BYTE}{_SEP}{_BYTE}"
    rf"|{_PERCENT}{_SEP}{_PERCENT}{_SEP}{_PERCENT}){_SEP}{_ALPHA}\s*\)$"
)
HSL = re.compile(rf"^hsl\(\s*{_HUE}{_SEP}{_PERCENT}{_SEP}{_PERCENT}\s*\)$")
HSLA = re.compile(rf"^hsla\(\s*{_HUE}{_SEP}{_PERCENT}{_SEP}{_PERCENT}{_SEP}{_ALPHA}\s*\)$")

BASE64 = re.compile(
    r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})$"
)
BASE64_URL = re.compile(
    r"^(?:[A-Za-z0-9_-]{4})*(?:[A-Za-z0-9_-]{2}==|[A-Za-z0-9_-]{3}=|[A-Za-z0-9_-]{4})$"
)

BITCOIN_ADDRESS = re.compile(r"^[13][a-km-zA-HJ-NP-Z1-9]{25,34}$")

ISBN10 = re.compile(r"^(?:[0-9]{9}X|[0-9]{10})$")
ISBN13 = re.compile(r"^97[89][0-9]{10}$")

UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")
UUID3 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$")
UUID4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")
UUID5 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")

ASCII = re.compile(r"^[\x00-\x7f]*$")
PRINTABLE_ASCII = re.compile(r"^[\x20-\x7e]*$")
MULTIBYTE = re.compile(r"[^\x00-\x7f]")

DATA_URI = re.compile(
    r"^data:(?:[\w-]+/[\w.+-]+)?(?:;[\w-]+=[\w.+-]+)*(?:;base64)?,.*$",
    re.DOTALL,
)

LATITUDE = re.compile(r"^[-+]?(?:[1-8]?\d(?:\.\d+)?|90(?:\.0+)?)$")
LONGITUDE = re.compile(r"^[-+]?(?:180(?:\.0+)?|(?:1[0-7]\d|[1-9]?\d)(?:\.\d+)?)$")

HTML = re.compile(r"<[/]?([a-zA-Z]+).*?>", re.DOTALL)
