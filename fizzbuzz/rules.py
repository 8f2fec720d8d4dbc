"""Marker rules for FizzBuzz classification."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BOUND = 100

FIZZ_DIVISOR = 3
BUZZ_DIVISOR = 5


@dataclass(frozen=True)
class Rule:
    """A divisor and the marker emitted for its multiples."""

    divisor: int
    marker: str

    def applies(self, value: int) -> bool:
        """Check if the rule fires for value."""
        return value % self.divisor == 0


@dataclass(frozen=True)
class RuleSet:
    """The three-marker and five-marker pair.

    Divisors are fixed at 3 and 5; only the markers vary. Rules are applied
    in order, so the three-marker always comes first in a concatenation.
    """

    fizz: str = "Fizz"
    buzz: str = "Buzz"

    @property
    def rules(self) -> tuple[Rule, ...]:
        return (Rule(FIZZ_DIVISOR, self.fizz), Rule(BUZZ_DIVISOR, self.buzz))


DEFAULT_RULES = RuleSet()
