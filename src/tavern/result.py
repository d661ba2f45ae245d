"""Validation reports for batches of rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RuleFailure:
    """A rule that failed, and the error its chain reported.

    Attributes:
        index: Position of the rule in the batch
        name: Name of the rule, if it has one
        error: First error reported by the rule's chain
    """

    index: int
    name: str | None
    error: Exception

    def __str__(self) -> str:
        label = self.name if self.name is not None else f"rule #{self.index}"
        return f"{label}: {self.error}"


@dataclass
class ValidationResult:
    """Outcome of validating a batch of rules.

    Holds at most one failure per rule, in rule order.
    """

    failures: list[RuleFailure] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.failures

    @property
    def errors(self) -> list[Exception]:
        """The reported errors, in rule order."""
        return [failure.error for failure in self.failures]

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def first_error(self) -> Exception | None:
        """Return the error of the first failing rule, if any."""
        return self.failures[0].error if self.failures else None

    def by_name(self) -> dict[str, Exception]:
        """Map the names of failing named rules to their errors.

        Unnamed rules are left out.
        """
        return {f.name: f.error for f in self.failures if f.name is not None}

    def add_failure(self, index: int, name: str | None, error: Exception) -> ValidationResult:
        """Record a failing rule (fluent API).

        Returns:
            Self for chaining
        """
        self.failures.append(RuleFailure(index, name, error))
        return self
