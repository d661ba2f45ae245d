"""Rules: a value paired with the validators it must pass.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .validators.base import Validator


@dataclass(frozen=True)
class Rule:
    """A value and the ordered chain of validators it must satisfy.

    Attributes:
        value: Value to validate
        validators: Validators applied in order; stored as a tuple
        name: Optional name, reported with failures by ``check_rules``
    """

    value: Any
    validators: tuple[Validator, ...] = field(default_factory=tuple)
    name: str | None = None

    def __post_init__(self) -> None:
        validators = tuple(self.validators)
        for validator in validators:
            if not isinstance(validator, Validator):
                raise TypeError(
                    f"Rule validators must be Validator instances, got {type(validator).__name__}"
                )
        object.__setattr__(self, "validators", validators)


def rule(value: Any, *validators: Validator, name: str | None = None) -> Rule:
    """Build a rule.

    Example:
        ```python
        from tavern import Length, Required, rule, validate

        err = validate(rule(form["username"], Required(), Length(3, 20), name="username"))
        ```
    """
    return Rule(value, validators, name)


def rules_for(values: dict[str, Any], chains: dict[str, Iterable[Validator]]) -> list[Rule]:
    """Build one named rule per chain from a mapping of values.

    Args:
        values: Values by name, e.g. parsed request fields. Missing names
            validate as None.
        chains: Validator chains by name

    Returns:
        Rules in the order of ``chains``
    """
    return [Rule(values.get(name), tuple(chain), name) for name, chain in chains.items()]
