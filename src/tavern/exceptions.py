"""Exception hierarchy for tavern.

Two families hang off the package root:

- ``ValidationError`` and its subclasses describe *bad input*. Validators
  return them (they are never raised by the engine) and callers show them to
  whoever supplied the value.
- ``UsageError`` and its subclasses describe *misuse of the API*, such as
  applying a length check to a value that has no length. These are raised and
  should not be caught alongside validation failures.

Validation failures are module-level singletons, so a caller can test either
the kind or the identity of what came back:

    ```python
    from tavern import ERR_LENGTH, LengthError, Length, rule, validate

    err = validate(rule("too long", Length(1, 3)))
    isinstance(err, LengthError)  # True
    err is ERR_LENGTH             # True
    ```
"""

from typing import Any, Dict


class TavernError(Exception):
    """Base exception for the tavern package.

    Supports optional context data for rich error information.

    Attributes:
        context: Dictionary containing contextual information about the error

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = context or {}


class ValidationError(TavernError):
    """A value did not satisfy a validator.

    Instances are returned by validators rather than raised. Callers may use
    this class directly for their own messages, e.g. as the replacement error
    of ``WithCustomError``.
    """

    pass


class RequiredError(ValidationError):
    """The value is the zero value of its kind but was required."""

    pass


class LengthError(ValidationError):
    """The size of the value is outside the allowed bounds."""

    pass


class RangeError(ValidationError):
    """The magnitude of a numeric value is outside the allowed bounds."""

    pass


class DatetimeError(ValidationError):
    """The value is not a datetime in the expected layout."""

    pass


class FormatError(ValidationError):
    """The value does not match the expected pattern or format."""

    pass


class AddressError(ValidationError):
    """The value cannot be resolved as a network address."""

    pass


class JSONFormatError(ValidationError):
    """The value is not valid JSON."""

    pass


class HTMLFormatError(ValidationError):
    """The value does not contain HTML markup."""

    pass


class UsageError(TavernError):
    """The API was used incorrectly.

    Raised, never returned. A ``UsageError`` points at the code that built the
    rule, not at the value being validated.
    """

    pass


class WrongTypeError(UsageError, TypeError):
    """A validator was applied to a value of a kind it does not support."""

    def __init__(self, value: Any, operation: str):
        self.value = value
        self.operation = operation
        super().__init__(
            f"tavern: passed wrong type to validator: {operation} does not "
            f"support {type(value).__name__}",
            context={"operation": operation, "type": type(value).__name__},
        )


class ConfigurationError(TavernError):
    """Validator configuration is invalid or cannot be loaded."""

    pass


ERR_REQUIRED = RequiredError("tavern: missing required value")
ERR_LENGTH = LengthError("tavern: out of the length")
ERR_RANGE = RangeError("tavern: out of the range")
ERR_DATETIME = DatetimeError("tavern: invalid datetime")
ERR_FORMAT = FormatError("tavern: invalid format")
ERR_ADDRESS = AddressError("tavern: unresolvable address")
ERR_JSON = JSONFormatError("tavern: invalid json")
ERR_HTML = HTMLFormatError("tavern: invalid html")


__all__ = [
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
]
