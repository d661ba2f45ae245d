"""Validator contract and composition.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from ..context import ChainState
from ..values import is_zero


class Validator(ABC):
    """Base class for all validators.

    A validator inspects a value and reports a failure by *returning* an
    exception; it returns None when the value passes. It may update the
    ``ChainState`` it is handed, which is how later validators in the same
    rule learn about earlier ones.

    Validators compose left to right with ``&``:

        ```python
        chain = Required() & Length(1, 10)
        ```
    """

    @abstractmethod
    def check(self, value: Any, state: ChainState) -> Exception | None:
        """Validate a value.

        Args:
            value: Value to validate
            state: State of the chain this validator runs in

        Returns:
            None if the value passes, otherwise the error describing the failure

        Raises:
            WrongTypeError: If the validator does not support the value's kind
        """
        pass

    def __call__(self, value: Any, state: ChainState | None = None) -> Exception | None:
        return self.check(value, state if state is not None else ChainState())

    def __and__(self, other: Validator) -> All:
        """Combine with AND: both validators run in order against one state."""
        if isinstance(self, All):
            return All(self.validators + [other])
        elif isinstance(other, All):
            return All([self] + other.validators)
        return All([self, other])

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class OptionalValidator(Validator):
    """Validator that lets zero values through unless the chain requires them.

    Subclasses implement ``inspect``, which only ever sees values that must be
    checked: either non-zero values, or any value once ``Required`` has run
    earlier in the chain.
    """

    def check(self, value: Any, state: ChainState) -> Exception | None:
        if state.skips(is_zero(value)):
            return None
        return self.inspect(value)

    @abstractmethod
    def inspect(self, value: Any) -> Exception | None:
        """Check a value that was not skipped.

        Returns:
            None if the value passes, otherwise the error to report
        """
        pass


class All(Validator):
    """Run validators in sequence, stopping at the first failure."""

    def __init__(self, validators: Iterable[Validator]):
        """Initialize with the validators to run.

        Args:
            validators: Validators that must all pass, in order
        """
        self.validators = list(validators)

    def check(self, value: Any, state: ChainState) -> Exception | None:
        for validator in self.validators:
            error = validator.check(value, state)
            if error is not None:
                return error
        return None

    def __repr__(self) -> str:
        return " & ".join(repr(v) for v in self.validators)
