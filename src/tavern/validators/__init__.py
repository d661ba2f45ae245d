"""Validators: the contract, the core combinators and the format catalogue."""

from .base import All, OptionalValidator, Validator
from .combinators import (
    FixedLength,
    Length,
    MaxLength,
    MaxRange,
    Maximum,
    MinLength,
    MinRange,
    Minimum,
    Range,
    Required,
    WithCustomError,
)
from .formats import (
    ASCII,
    HSL,
    HSLA,
    HTML,
    ISBN10,
    ISBN13,
    JSON,
    RGB,
    RGBA,
    URL,
    UUID,
    UUID3,
    UUID4,
    UUID5,
    Alpha,
    AlphaUnicode,
    Alphanumeric,
    AlphanumericUnicode,
    Base64,
    Base64URL,
    BitcoinAddress,
    Custom,
    DataURI,
    Datetime,
    Email,
    Equal,
    Latitude,
    Longitude,
    MultiByte,
    Numeric,
    OneOf,
    PatternValidator,
    Prefix,
    PrintableASCII,
    Regex,
    Suffix,
)
from .network import (
    IPAddress,
    IPv4Address,
    IPv6Address,
    SocketAddress,
    TCPAddress,
    TCPv4Address,
    TCPv6Address,
    UDPAddress,
    UDPv4Address,
    UDPv6Address,
    UnixAddress,
)

__all__ = [
    # Contract
    "Validator",
    "OptionalValidator",
    "All",
    # Combinators
    "Required",
    "Length",
    "MinLength",
    "MaxLength",
    "FixedLength",
    "Range",
    "MinRange",
    "MaxRange",
    "Minimum",
    "Maximum",
    "WithCustomError",
    # Formats
    "PatternValidator",
    "Email",
    "Regex",
    "Prefix",
    "Suffix",
    "Alpha",
    "Alphanumeric",
    "AlphaUnicode",
    "AlphanumericUnicode",
    "Numeric",
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "JSON",
    "HTML",
    "Base64",
    "Base64URL",
    "BitcoinAddress",
    "ISBN10",
    "ISBN13",
    "UUID",
    "UUID3",
    "UUID4",
    "UUID5",
    "ASCII",
    "PrintableASCII",
    "MultiByte",
    "DataURI",
    "Latitude",
    "Longitude",
    "Datetime",
    "URL",
    "OneOf",
    "Equal",
    "Custom",
    # Network
    "SocketAddress",
    "TCPAddress",
    "TCPv4Address",
    "TCPv6Address",
    "UDPAddress",
    "UDPv4Address",
    "UDPv6Address",
    "IPAddress",
    "IPv4Address",
    "IPv6Address",
    "UnixAddress",
]
