"""Composable value validation.

Pair a value with an ordered chain of validators and ask whether the value
satisfies all of them:

- **Rules**: a value plus its validators (``Rule``, ``rule``)
- **Driver**: ``validate``, ``validate_all``, ``validate_all_collect``,
  ``check_rules``
- **Validators**: ``Required``, size and range bounds, ``WithCustomError`` and a
  catalogue of format and network address checks
- **Errors**: validation failures are returned as ``ValidationError``
  singletons; misuse raises ``UsageError``
- **Configuration**: build chains from dictionaries or YAML files

Example:
    ```python
    from tavern import Length, Range, Required, rule, validate_all_collect

    errors = validate_all_collect([
        rule(form.get("username", ""), Required(), Length(3, 20), name="username"),
        rule(form.get("age", 0), Range(13, 120), name="age"),
    ])
    ```
"""

from tavern.config import load_chains, substitute_env_vars
from tavern.context import ChainState
from tavern.engine import check_rules, validate, validate_all, validate_all_collect
from tavern.exceptions import (
    ERR_ADDRESS,
    ERR_DATETIME,
    ERR_FORMAT,
    ERR_HTML,
    ERR_JSON,
    ERR_LENGTH,
    ERR_RANGE,
    ERR_REQUIRED,
    AddressError,
    ConfigurationError,
    DatetimeError,
    FormatError,
    HTMLFormatError,
    JSONFormatError,
    LengthError,
    RangeError,
    RequiredError,
    TavernError,
    UsageError,
    ValidationError,
    WrongTypeError,
)
from tavern.factory import ValidatorFactory, build_validators, validator_factory
from tavern.result import RuleFailure, ValidationResult
from tavern.rules import Rule, rule, rules_for
from tavern.validators import (
    All,
    Alpha,
    Alphanumeric,
    AlphanumericUnicode,
    AlphaUnicode,
    ASCII,
    Base64,
    Base64URL,
    BitcoinAddress,
    Custom,
    DataURI,
    Datetime,
    Email,
    Equal,
    FixedLength,
    HSL,
    HSLA,
    HTML,
    IPAddress,
    IPv4Address,
    IPv6Address,
    ISBN10,
    ISBN13,
    JSON,
    Latitude,
    Length,
    Longitude,
    Maximum,
    MaxLength,
    MaxRange,
    Minimum,
    MinLength,
    MinRange,
    MultiByte,
    Numeric,
    OneOf,
    OptionalValidator,
    PatternValidator,
    Prefix,
    PrintableASCII,
    Range,
    Regex,
    Required,
    RGB,
    RGBA,
    SocketAddress,
    Suffix,
    TCPAddress,
    TCPv4Address,
    TCPv6Address,
    UDPAddress,
    UDPv4Address,
    UDPv6Address,
    UnixAddress,
    URL,
    UUID,
    UUID3,
    UUID4,
    UUID5,
    Validator,
    WithCustomError,
)
from tavern.values import ValueKind, classify, format_general, is_zero, numeric, size

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Rules and driver
    "Rule",
    "rule",
    "rules_for",
    "validate",
    "validate_all",
    "validate_all_collect",
    "check_rules",
    "ValidationResult",
    "RuleFailure",
    "ChainState",
    # Values
    "ValueKind",
    "classify",
    "is_zero",
    "size",
    "numeric",
    "format_general",
    # Exceptions
    "TavernError",
    "ValidationError",
    "RequiredError",
    "LengthError",
    "RangeError",
    "DatetimeError",
    "FormatError",
    "AddressError",
    "JSONFormatError",
    "HTMLFormatError",
    "UsageError",
    "WrongTypeError",
    "ConfigurationError",
    "ERR_REQUIRED",
    "ERR_LENGTH",
    "ERR_RANGE",
    "ERR_DATETIME",
    "ERR_FORMAT",
    "ERR_ADDRESS",
    "ERR_JSON",
    "ERR_HTML",
    # Configuration
    "ValidatorFactory",
    "validator_factory",
    "build_validators",
    "load_chains",
    "substitute_env_vars",
    # Validators
    "All",
    "Alpha",
    "Alphanumeric",
    "AlphanumericUnicode",
    "AlphaUnicode",
    "ASCII",
    "Base64",
    "Base64URL",
    "BitcoinAddress",
    "Custom",
    "DataURI",
    "Datetime",
    "Email",
    "Equal",
    "FixedLength",
    "HSL",
    "HSLA",
    "HTML",
    "IPAddress",
    "IPv4Address",
    "IPv6Address",
    "ISBN10",
    "ISBN13",
    "JSON",
    "Latitude",
    "Length",
    "Longitude",
    "Maximum",
    "MaxLength",
    "MaxRange",
    "Minimum",
    "MinLength",
    "MinRange",
    "MultiByte",
    "Numeric",
    "OneOf",
    "OptionalValidator",
    "PatternValidator",
    "Prefix",
    "PrintableASCII",
    "Range",
    "Regex",
    "Required",
    "RGB",
    "RGBA",
    "SocketAddress",
    "Suffix",
    "TCPAddress",
    "TCPv4Address",
    "TCPv6Address",
    "UDPAddress",
    "UDPv4Address",
    "UDPv6Address",
    "UnixAddress",
    "URL",
    "UUID",
    "UUID3",
    "UUID4",
    "UUID5",
    "Validator",
    "WithCustomError",
]
