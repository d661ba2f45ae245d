"""Value classification, zero values and quantities.

Every validator that looks at the *shape* of a value goes through this module.
A value is classified once into one of the ``ValueKind`` members and all
further questions (is it empty? how big is it? how large is it?) are answered
per kind. Values outside these kinds raise ``WrongTypeError``.

Two notions of quantity are kept apart:

- ``size`` is a count: characters, elements, or the digits of a number as it
  is written in base 10 (``size(1000) == 4``).
- ``numeric`` is a magnitude and only exists for numbers
  (``numeric(1000) == 1000``).

Length checks use ``size`` and range checks use ``numeric``.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Collection
from decimal import Decimal
from enum import Enum
from typing import Any

from .exceptions import WrongTypeError


class ValueKind(Enum):
    """Enumeration of the value kinds validators understand.

    Attributes:
        NONE: ``None``
        BOOLEAN: ``True``/``False``
        STRING: ``str``, ``bytes`` and ``bytearray``
        INTEGER: Integral numbers other than ``bool``
        FLOAT: Real numbers and ``Decimal``
        COLLECTION: Any other sized container (list, tuple, dict, set, ...)
    """

    NONE = "none"
    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    COLLECTION = "collection"

    @property
    def is_numeric(self) -> bool:
        return self in (ValueKind.INTEGER, ValueKind.FLOAT)

    @property
    def is_sized(self) -> bool:
        return self in (ValueKind.STRING, ValueKind.COLLECTION)


def classify(value: Any) -> ValueKind:
    """Classify a value into its ``ValueKind``.

    Args:
        value: Any runtime value

    Returns:
        The kind of the value

    Raises:
        WrongTypeError: If the value is not of a supported kind
    """
    if value is None:
        return ValueKind.NONE
    # bool is an Integral, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.STRING
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, Collection):
        return ValueKind.COLLECTION
    raise WrongTypeError(value, "classify")


def is_zero(value: Any) -> bool:
    """Check whether a value is the zero value of its kind.

    ``None``, ``False``, ``0``, ``0.0``, empty strings and empty collections are
    zero values.

    Raises:
        WrongTypeError: If the value is not of a supported kind
    """
    kind = classify(value)
    if kind is ValueKind.NONE:
        return True
    if kind is ValueKind.BOOLEAN:
        return value is False
    if kind.is_numeric:
        return value == 0
    return len(value) == 0


def size(value: Any) -> int:
    """Return the size of a value.

    Strings and collections are measured by ``len``. Integers are measured by
    the length of their base 10 representation (sign included) and floats by
    the length of their shortest general representation, see
    ``format_general``.

    Raises:
        WrongTypeError: If the value has no size (``None``, booleans, ...)
    """
    kind = classify(value)
    if kind.is_sized:
        return len(value)
    if kind is ValueKind.INTEGER:
        return len(str(int(value)))
    if kind is ValueKind.FLOAT:
        return len(format_general(value))
    raise WrongTypeError(value, "size")


def numeric(value: Any) -> int | float | Decimal:
    """Return the magnitude of a numeric value.

    Raises:
        WrongTypeError: If the value is not a number
    """
    kind = classify(value)
    if kind is ValueKind.INTEGER:
        return int(value)
    if kind is ValueKind.FLOAT:
        return value
    raise WrongTypeError(value, "numeric")


def format_general(value: Any) -> str:
    """Format a float in the shortest general notation.

    Uses the fewest digits that round-trip the value, and switches to
    exponent notation when the decimal exponent is below -4 or at least 6.
    Exponents carry a sign and at least two digits.

        >>> format_general(100.0)
        '100'
        >>> format_general(0.3)
        '0.3'
        >>> format_general(1234567.0)
        '1.234567e+06'
        >>> format_general(0.00001)
        '1e-05'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    prefix = "-" if sign else ""
    point = len(digits) + exponent  # position of the decimal point in digits
    decimal_exponent = point - 1

    if decimal_exponent < -4 or decimal_exponent >= 6:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        exp_sign = "+" if decimal_exponent >= 0 else "-"
        return f"{prefix}{mantissa}e{exp_sign}{abs(decimal_exponent):02d}"

    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"
