"""Evaluation driver: runs rules and reports their errors.

Within a rule, validators run in order against one fresh ``ChainState`` and
the first error ends the rule. Across rules, ``validate_all`` stops at the
first failing rule while ``validate_all_collect`` keeps going and reports one
error per failing rule.

Validation failures are returned. ``UsageError`` (e.g. ``WrongTypeError``)
is raised and propagates out of every function here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .context import ChainState
from .result import ValidationResult
from .rules import Rule

logger = logging.getLogger(__name__)


def validate(rule: Rule) -> Exception | None:
    """Validate a single rule.

    Args:
        rule: Rule to validate

    Returns:
        None if every validator passes, otherwise the first error
    """
    state = ChainState()
    for validator in rule.validators:
        error = validator.check(rule.value, state)
        if error is not None:
            logger.debug(f"Rule {rule.name or '<unnamed>'} failed {validator!r}: {error}")
            return error
    return None


def check_rules(rules: Iterable[Rule], stop_on_first: bool = False) -> ValidationResult:
    """Validate rules and report which ones failed.

    Args:
        rules: Rules to validate, in order
        stop_on_first: Stop after the first failing rule

    Returns:
        ValidationResult with one failure per failing rule, in rule order
    """
    result = ValidationResult()
    for index, rule in enumerate(rules):
        error = validate(rule)
        if error is None:
            continue
        result.add_failure(index, rule.name, error)
        if stop_on_first:
            break
    return result


def validate_all(rules: Iterable[Rule]) -> Exception | None:
    """Validate rules, stopping at the first failing rule.

    Returns:
        None if all rules pass, otherwise the error of the first failing rule
    """
    return check_rules(rules, stop_on_first=True).first_error()


def validate_all_collect(rules: Iterable[Rule]) -> list[Exception]:
    """Validate every rule and collect one error per failing rule.

    Returns:
        Errors in rule order; empty if all rules pass
    """
    return check_rules(rules).errors
