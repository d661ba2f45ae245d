"""Per-rule state shared by the validators of one chain.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ChainState:
    """State threaded through the validators of a single rule.

    The driver creates one instance per rule and passes it, by reference, to
    every validator of that rule in order. Validators may only move state
    forward; nothing outlives the rule.

    Attributes:
        required: True once a ``Required`` validator has run earlier in the
            chain. While it is False, validators skip zero values.
    """

    required: bool = False

    def mark_required(self) -> None:
        """Record that the chain asserted the value is required."""
        self.required = True

    def skips(self, zero: bool) -> bool:
        """Whether a validator should skip a value.

        Args:
            zero: Whether the value is the zero value of its kind

        Returns:
            True if the value is zero and no ``Required`` has been seen
        """
        return zero and not self.required
