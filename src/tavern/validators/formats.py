"""String format validators.

Each validator here accepts strings only (``JSON`` also accepts bytes) and
raises ``WrongTypeError`` for anything else. Like every validator besides
``Required``, they let empty values through unless ``Required`` ran earlier in
the chain.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from datetime import datetime
from re import Pattern as RegexPattern
from typing import Any
from urllib.parse import urlsplit

from ..exceptions import (
    ERR_DATETIME,
    ERR_FORMAT,
    ERR_HTML,
    ERR_JSON,
    ValidationError,
    WrongTypeError,
)
from . import patterns
from .base import OptionalValidator


def _require_str(value: Any, operation: str) -> str:
    if not isinstance(value, str):
        raise WrongTypeError(value, operation)
    return value


def _check_str_arg(name: str, arg: Any) -> None:
    if not isinstance(arg, str):
        raise TypeError(f"{name} must be a str, got {type(arg).__name__}")


class PatternValidator(OptionalValidator):
    """String value must match a compiled pattern.

    Subclasses set ``pattern``; ``error`` defaults to ``ERR_FORMAT``.
    The pattern must match the whole string; a trailing newline is not
    tolerated.
    """

    pattern: RegexPattern[str]
    error: Exception = ERR_FORMAT

    def inspect(self, value: Any) -> Exception | None:
        text = _require_str(value, type(self).__name__)
        if not self.pattern.fullmatch(text):
            return self.error
        return None


class Email(PatternValidator):
    pattern = patterns.EMAIL


class Alpha(PatternValidator):
    """ASCII letters only."""

    pattern = patterns.ALPHA


class Alphanumeric(PatternValidator):
    """ASCII letters and digits only."""

    pattern = patterns.ALPHANUMERIC


class AlphaUnicode(PatternValidator):
    """Unicode letters only."""

    pattern = patterns.ALPHA_UNICODE


class AlphanumericUnicode(PatternValidator):
    """Unicode letters and digits only."""

    pattern = patterns.ALPHANUMERIC_UNICODE


class Numeric(PatternValidator):
    """A signed integer or decimal number written as a string."""

    pattern = patterns.NUMERIC


class RGB(PatternValidator):
    pattern = patterns.RGB


class RGBA(PatternValidator):
    pattern = patterns.RGBA


class HSL(PatternValidator):
    pattern = patterns.HSL


class HSLA(PatternValidator):
    pattern = patterns.HSLA


class Base64(PatternValidator):
    pattern = patterns.BASE64


class Base64URL(PatternValidator):
    """Base64 with the URL-safe alphabet."""

    pattern = patterns.BASE64_URL


class BitcoinAddress(PatternValidator):
    """Legacy (P2PKH/P2SH) Bitcoin address."""

    pattern = patterns.BITCOIN_ADDRESS


class ISBN10(PatternValidator):
    pattern = patterns.ISBN10


class ISBN13(PatternValidator):
    pattern = patterns.ISBN13


class UUID(PatternValidator):
    """Lowercase UUID of any version."""

    pattern = patterns.UUID


class UUID3(PatternValidator):
    pattern = patterns.UUID3


class UUID4(PatternValidator):
    pattern = patterns.UUID4


class UUID5(PatternValidator):
    pattern = patterns.UUID5


class ASCII(PatternValidator):
    pattern = patterns.ASCII


class PrintableASCII(PatternValidator):
    pattern = patterns.PRINTABLE_ASCII


class MultiByte(OptionalValidator):
    """String must contain at least one non-ASCII character."""

    def inspect(self, value: Any) -> Exception | None:
        text = _require_str(value, "MultiByte")
        if not patterns.MULTIBYTE.search(text):
            return ERR_FORMAT
        return None


class DataURI(PatternValidator):
    pattern = patterns.DATA_URI


class Latitude(PatternValidator):
    pattern = patterns.LATITUDE


class Longitude(PatternValidator):
    pattern = patterns.LONGITUDE


class Regex(PatternValidator):
    """String value must match a caller-supplied regular expression."""

    def __init__(self, pattern: str | RegexPattern[str]):
        """Initialize the validator.

        Args:
            pattern: Regex pattern (string or compiled pattern). It is searched
                anywhere in the value; anchor it to match the whole value.
        """
        if not isinstance(pattern, RegexPattern):
            _check_str_arg("pattern", pattern)
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid pattern {pattern!r}: {e}") from e
        self.pattern = pattern

    def inspect(self, value: Any) -> Exception | None:
        text = _require_str(value, "Regex")
        if not self.pattern.search(text):
            return ERR_FORMAT
        return None

    def __repr__(self) -> str:
        return f"Regex({self.pattern.pattern!r})"


class Prefix(OptionalValidator):
    def __init__(self, prefix: str):
        _check_str_arg("prefix", prefix)
        self.prefix = prefix

    def inspect(self, value: Any) -> Exception | None:
        if not _require_str(value, "Prefix").startswith(self.prefix):
            return ERR_FORMAT
        return None

    def __repr__(self) -> str:
        return f"Prefix({self.prefix!r})"


class Suffix(OptionalValidator):
    def __init__(self, suffix: str):
        _check_str_arg("suffix", suffix)
        self.suffix = suffix

    def inspect(self, value: Any) -> Exception | None:
        if not _require_str(value, "Suffix").endswith(self.suffix):
            return ERR_FORMAT
        return None

    def __repr__(self) -> str:
        return f"Suffix({self.suffix!r})"


class URL(OptionalValidator):
    """Absolute URL with a scheme and a host.

    Args:
        *schemes: Allowed schemes such as ``"http"`` or ``"ftp"``. A trailing
            ``"://"`` is ignored. Any scheme is allowed when none are given.
    """

    def __init__(self, *schemes: str):
        for scheme in schemes:
            _check_str_arg("scheme", scheme)
        self.schemes = {s.lower().removesuffix("://") for s in schemes}

    def inspect(self, value: Any) -> Exception | None:
        text = _require_str(value, "URL")
        try:
            parts = urlsplit(text)
        except ValueError:
            return ERR_FORMAT
        if not parts.scheme or not parts.netloc:
            return ERR_FORMAT
        if self.schemes and parts.scheme.lower() not in self.schemes:
            return ERR_FORMAT
        return None

    def __repr__(self) -> str:
        return f"URL({', '.join(repr(s) for s in sorted(self.schemes))})"


class JSON(OptionalValidator):
    """String or bytes must be a valid JSON document."""

    def inspect(self, value: Any) -> Exception | None:
        if not isinstance(value, (str, bytes, bytearray)):
            raise WrongTypeError(value, "JSON")
        try:
            json.loads(value)
        except ValueError:
            return ERR_JSON
        return None


class HTML(OptionalValidator):
    """String must contain at least one HTML tag."""

    def inspect(self, value: Any) -> Exception | None:
        if not patterns.HTML.search(_require_str(value, "HTML")):
            return ERR_HTML
        return None


class Datetime(OptionalValidator):
    """String must be a datetime written exactly in ``layout``.

    ``layout`` is a ``strptime`` format. The value must parse, and formatting
    the parsed datetime with the same layout must give back the value
    unchanged, so ``"1998-7-3"`` fails ``"%Y-%m-%d"`` even though ``strptime``
    accepts it.
    """

    def __init__(self, layout: str):
        _check_str_arg("layout", layout)
        self.layout = layout

    def inspect(self, value: Any) -> Exception | None:
        text = _require_str(value, "Datetime")
        try:
            parsed = datetime.strptime(text, self.layout)
        except ValueError:
            return ERR_DATETIME
        if parsed.strftime(self.layout) != text:
            return ERR_DATETIME
        return None

    def __repr__(self) -> str:
        return f"Datetime({self.layout!r})"


class OneOf(OptionalValidator):
    """Value must equal one of the allowed values."""

    def __init__(self, *values: Any):
        if not values:
            raise ValueError("OneOf requires at least one allowed value")
        self.values = values

    def inspect(self, value: Any) -> Exception | None:
        if value not in self.values:
            return ERR_FORMAT
        return None

    def __repr__(self) -> str:
        return f"OneOf({', '.join(repr(v) for v in self.values)})"


class Equal(OptionalValidator):
    """Value must equal ``expected`` and be of the same type."""

    def __init__(self, expected: Any):
        self.expected = expected

    def inspect(self, value: Any) -> Exception | None:
        if type(value) is not type(self.expected) or value != self.expected:
            return ERR_FORMAT
        return None

    def __repr__(self) -> str:
        return f"Equal({self.expected!r})"


class Custom(OptionalValidator):
    """Custom validator using a predicate."""

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        error: Exception | str = ERR_FORMAT,
    ):
        """Initialize the validator.

        Args:
            predicate: Callable returning True when the value is valid
            error: Error to report on failure. A string is wrapped once in a
                ``ValidationError``.
        """
        self.predicate = predicate
        self.error = ValidationError(error) if isinstance(error, str) else error

    def inspect(self, value: Any) -> Exception | None:
        if not self.predicate(value):
            return self.error
        return None
