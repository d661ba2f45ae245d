"""Presence, size and range validators.

All bounds are inclusive. Size bounds apply to the number of characters or
elements of strings and collections and to the number of digits of numbers;
range bounds apply to the magnitude of numbers only (see ``tavern.values``).
"""

from __future__ import annotations

from numbers import Real
from typing import Any

from ..context import ChainState
from ..exceptions import ERR_LENGTH, ERR_RANGE, ERR_REQUIRED, ValidationError, WrongTypeError
from ..values import classify, is_zero, numeric, size
from .base import All, OptionalValidator, Validator


def _check_length_bound(name: str, bound: int) -> None:
    if not isinstance(bound, int) or isinstance(bound, bool):
        raise TypeError(f"{name} must be an int, got {type(bound).__name__}")
    if bound < 0:
        raise ValueError(f"{name} cannot be negative: {bound}")


def _check_range_bound(name: str, bound: Real) -> None:
    if not isinstance(bound, Real) or isinstance(bound, bool):
        raise TypeError(f"{name} must be a number, got {type(bound).__name__}")


class Required(Validator):
    """Value must not be the zero value of its kind.

    Also marks the chain as required, so every validator after it checks
    zero values instead of skipping them.
    """

    def check(self, value: Any, state: ChainState) -> Exception | None:
        state.mark_required()
        if is_zero(value):
            return ERR_REQUIRED
        return None


class MinLength(OptionalValidator):
    """Size of the value must be at least ``min``."""

    def __init__(self, min: int):
        _check_length_bound("min length", min)
        self.min = min

    def inspect(self, value: Any) -> Exception | None:
        if size(value) < self.min:
            return ERR_LENGTH
        return None

    def __repr__(self) -> str:
        return f"MinLength({self.min})"


class MaxLength(OptionalValidator):
    """Size of the value must be at most ``max``."""

    def __init__(self, max: int):
        _check_length_bound("max length", max)
        self.max = max

    def inspect(self, value: Any) -> Exception | None:
        if size(value) > self.max:
            return ERR_LENGTH
        return None

    def __repr__(self) -> str:
        return f"MaxLength({self.max})"


class Length(Validator):
    """Size of the value must be within ``[min, max]``.

    Equivalent to ``MinLength(min) & MaxLength(max)``.
    """

    def __init__(self, min: int, max: int):
        _check_length_bound("min length", min)
        _check_length_bound("max length", max)
        if min > max:
            raise ValueError(f"min length ({min}) cannot be greater than max ({max})")
        self.min = min
        self.max = max
        self._chain = All([MinLength(min), MaxLength(max)])

    def check(self, value: Any, state: ChainState) -> Exception | None:
        return self._chain.check(value, state)

    def __repr__(self) -> str:
        return f"Length({self.min}, {self.max})"


class FixedLength(Length):
    """Size of the value must be exactly ``length``."""

    def __init__(self, length: int):
        super().__init__(length, length)

    def __repr__(self) -> str:
        return f"FixedLength({self.min})"


class MinRange(OptionalValidator):
    """Numeric value must be at least ``min``."""

    def __init__(self, min: Real):
        _check_range_bound("min", min)
        self.min = min

    def inspect(self, value: Any) -> Exception | None:
        if numeric(value) < self.min:
            return ERR_RANGE
        return None

    def __repr__(self) -> str:
        return f"MinRange({self.min})"


class MaxRange(OptionalValidator):
    """Numeric value must be at most ``max``."""

    def __init__(self, max: Real):
        _check_range_bound("max", max)
        self.max = max

    def inspect(self, value: Any) -> Exception | None:
        if numeric(value) > self.max:
            return ERR_RANGE
        return None

    def __repr__(self) -> str:
        return f"MaxRange({self.max})"


class Range(Validator):
    """Numeric value must be within ``[min, max]``.

    Equivalent to ``MinRange(min) & MaxRange(max)``.
    """

    def __init__(self, min: Real, max: Real):
        _check_range_bound("min", min)
        _check_range_bound("max", max)
        if min > max:
            raise ValueError(f"min ({min}) cannot be greater than max ({max})")
        self.min = min
        self.max = max
        self._chain = All([MinRange(min), MaxRange(max)])

    def check(self, value: Any, state: ChainState) -> Exception | None:
        return self._chain.check(value, state)

    def __repr__(self) -> str:
        return f"Range({self.min}, {self.max})"


class Maximum(OptionalValidator):
    """Value must be at most ``max`` characters, elements or units.

    Strings and collections are bounded by their size and fail with a
    ``LengthError``; numbers are bounded by their magnitude and fail with a
    ``RangeError``. The choice is made for each value at check time.
    """

    def __init__(self, max: Real):
        _check_range_bound("max", max)
        self.max = max

    def inspect(self, value: Any) -> Exception | None:
        kind = classify(value)
        if kind.is_sized:
            return ERR_LENGTH if size(value) > self.max else None
        if kind.is_numeric:
            return ERR_RANGE if numeric(value) > self.max else None
        raise WrongTypeError(value, "Maximum")

    def __repr__(self) -> str:
        return f"Maximum({self.max})"


class Minimum(OptionalValidator):
    """Value must be at least ``min`` characters, elements or units.

    See ``Maximum`` for how the bound is applied.
    """

    def __init__(self, min: Real):
        _check_range_bound("min", min)
        self.min = min

    def inspect(self, value: Any) -> Exception | None:
        kind = classify(value)
        if kind.is_sized:
            return ERR_LENGTH if size(value) < self.min else None
        if kind.is_numeric:
            return ERR_RANGE if numeric(value) < self.min else None
        raise WrongTypeError(value, "Minimum")

    def __repr__(self) -> str:
        return f"Minimum({self.min})"


class WithCustomError(Validator):
    """Replace the error of a validator with a caller-chosen one.

    The wrapped validator runs against the same chain state, so its side
    effects are kept: a wrapped ``Required`` still marks the chain as required.
    """

    def __init__(self, validator: Validator, error: Exception | str):
        """Initialize the wrapper.

        Args:
            validator: Validator whose failures are remapped
            error: Error to report instead. A string is wrapped once in a
                ``ValidationError``.
        """
        self.validator = validator
        self.error = ValidationError(error) if isinstance(error, str) else error

    def check(self, value: Any, state: ChainState) -> Exception | None:
        if self.validator.check(value, state) is not None:
            return self.error
        return None

    def __repr__(self) -> str:
        return f"WithCustomError({self.validator!r}, {self.error!r})"
