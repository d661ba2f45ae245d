"""Factory for building validators from configuration.

Example configuration (one entry per validator, in chain order):

    - type: required
    - type: length
      min: 3
      max: 20
    - type: regex
      pattern: "^[a-z0-9_]+$"
      error: "username may only contain a-z, 0-9 and _"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .exceptions import ConfigurationError
from .validators import (
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
    All,
    Alpha,
    AlphaUnicode,
    Alphanumeric,
    AlphanumericUnicode,
    Base64,
    Base64URL,
    BitcoinAddress,
    DataURI,
    Datetime,
    Email,
    Equal,
    FixedLength,
    IPAddress,
    IPv4Address,
    IPv6Address,
    Latitude,
    Length,
    Longitude,
    MaxLength,
    MaxRange,
    Maximum,
    MinLength,
    MinRange,
    Minimum,
    MultiByte,
    Numeric,
    OneOf,
    Prefix,
    PrintableASCII,
    Range,
    Regex,
    Required,
    Suffix,
    TCPAddress,
    TCPv4Address,
    TCPv6Address,
    UDPAddress,
    UDPv4Address,
    UDPv6Address,
    UnixAddress,
    Validator,
    WithCustomError,
)

logger = logging.getLogger(__name__)

# type name -> (validator class, keyword arguments passed positionally)
_PARAMETERIZED: dict[str, tuple[type[Validator], tuple[str, ...]]] = {
    "length": (Length, ("min", "max")),
    "min_length": (MinLength, ("min",)),
    "max_length": (MaxLength, ("max",)),
    "fixed_length": (FixedLength, ("length",)),
    "range": (Range, ("min", "max")),
    "min_range": (MinRange, ("min",)),
    "max_range": (MaxRange, ("max",)),
    "minimum": (Minimum, ("min",)),
    "maximum": (Maximum, ("max",)),
    "regex": (Regex, ("pattern",)),
    "prefix": (Prefix, ("prefix",)),
    "suffix": (Suffix, ("suffix",)),
    "datetime": (Datetime, ("layout",)),
    "equal": (Equal, ("value",)),
}

# Bound arguments; strings (e.g. from environment substitution) are converted
_NUMERIC_PARAMS = frozenset({"min", "max", "length"})

# type name -> (validator class, keyword holding a list of positional arguments)
_VARIADIC: dict[str, tuple[type[Validator], str]] = {
    "url": (URL, "schemes"),
    "one_of": (OneOf, "values"),
}

_PLAIN: dict[str, type[Validator]] = {
    "required": Required,
    "email": Email,
    "alpha": Alpha,
    "alphanumeric": Alphanumeric,
    "alpha_unicode": AlphaUnicode,
    "alphanumeric_unicode": AlphanumericUnicode,
    "numeric": Numeric,
    "rgb": RGB,
    "rgba": RGBA,
    "hsl": HSL,
    "hsla": HSLA,
    "json": JSON,
    "html": HTML,
    "base64": Base64,
    "base64_url": Base64URL,
    "bitcoin_address": BitcoinAddress,
    "isbn10": ISBN10,
    "isbn13": ISBN13,
    "uuid": UUID,
    "uuid3": UUID3,
    "uuid4": UUID4,
    "uuid5": UUID5,
    "ascii": ASCII,
    "printable_ascii": PrintableASCII,
    "multibyte": MultiByte,
    "data_uri": DataURI,
    "latitude": Latitude,
    "longitude": Longitude,
    "tcp_address": TCPAddress,
    "tcp4_address": TCPv4Address,
    "tcp6_address": TCPv6Address,
    "udp_address": UDPAddress,
    "udp4_address": UDPv4Address,
    "udp6_address": UDPv6Address,
    "ip_address": IPAddress,
    "ip4_address": IPv4Address,
    "ip6_address": IPv6Address,
    "unix_address": UnixAddress,
}


class ValidatorFactory:
    """Factory for creating validators from configuration.

    Configuration Options:
        type (str): Validator type, e.g. ``required``, ``length``, ``email``
        error (str): Optional message replacing the validator's own error
        validators (list): Nested validator configs, for ``type: all``
        ...: Remaining keys are the validator's arguments (``min``, ``max``,
            ``pattern``, ``layout``, ``schemes``, ``values``, ...)
    """

    @property
    def types(self) -> list[str]:
        """All supported validator type names."""
        return sorted({"all", *_PLAIN, *_PARAMETERIZED, *_VARIADIC})

    def create(self, **config: Any) -> Validator:
        """Create a validator from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If the type is unknown or the arguments are invalid
        """
        config = dict(config)
        validator_type = str(config.pop("type", "")).lower()
        error = config.pop("error", None)

        try:
            validator = self._build(validator_type, config)
        except (TypeError, ValueError, KeyError) as e:
            raise ConfigurationError(
                f"Invalid configuration for validator '{validator_type}': {e}",
                context={"type": validator_type, "config": config},
            ) from e

        if error is not None:
            validator = WithCustomError(validator, str(error))
        return validator

    def _build(self, validator_type: str, config: dict[str, Any]) -> Validator:
        if validator_type == "all":
            return All(self.create_all(config.pop("validators", [])))

        if validator_type in _PLAIN:
            cls = _PLAIN[validator_type]
            self._reject_unknown(config, ())
            return cls()

        if validator_type in _PARAMETERIZED:
            cls, params = _PARAMETERIZED[validator_type]
            self._reject_unknown(config, params)
            missing = [p for p in params if p not in config]
            if missing:
                raise KeyError(f"missing argument(s): {', '.join(missing)}")
            args = [self._convert(p, config[p]) for p in params]
            return cls(*args)  # type: ignore[call-arg]

        if validator_type in _VARIADIC:
            cls, param = _VARIADIC[validator_type]
            self._reject_unknown(config, (param,))
            args = config.get(param, [])
            if isinstance(args, (str, bytes)) or not isinstance(args, Iterable):
                args = [args]
            return cls(*args)

        logger.warning(f"Unknown validator type: {validator_type}")
        raise ConfigurationError(
            f"Unknown validator type: '{validator_type}'",
            context={"type": validator_type, "available": self.types},
        )

    def _convert(self, param: str, value: Any) -> Any:
        if param not in _NUMERIC_PARAMS or not isinstance(value, str):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"{param} must be a number, got {value!r}") from None

    def _reject_unknown(self, config: Mapping[str, Any], params: tuple[str, ...]) -> None:
        unknown = sorted(set(config) - set(params))
        if unknown:
            raise TypeError(f"unexpected argument(s): {', '.join(unknown)}")

    def create_all(self, configs: Iterable[Mapping[str, Any]]) -> list[Validator]:
        """Create a validator chain from a list of configurations."""
        validators = []
        for index, config in enumerate(configs):
            if not isinstance(config, Mapping):
                raise ConfigurationError(
                    f"Validator configuration #{index} must be a mapping, "
                    f"got {type(config).__name__}",
                    context={"index": index},
                )
            validators.append(self.create(**config))
        return validators


def build_validators(configs: Iterable[Mapping[str, Any]]) -> list[Validator]:
    """Build a validator chain from configuration.

    Args:
        configs: One mapping per validator, in chain order

    Returns:
        List of validators
    """
    return validator_factory.create_all(configs)


# Shared default factory used by build_validators and load_chains
validator_factory = ValidatorFactory()
