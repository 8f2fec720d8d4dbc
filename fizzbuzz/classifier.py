"""Sequence classifier producing FizzBuzz labels for the integers 1..bound."""

from __future__ import annotations

import logging
from collections import Counter

from pydantic import ValidationError

from fizzbuzz.rules import BUZZ_DIVISOR, DEFAULT_BOUND, DEFAULT_RULES, FIZZ_DIVISOR, RuleSet
from fizzbuzz.schemas import ClassifiedItem, ClassifyRequest, ClassifyResponse, LabelKind

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a bound or marker is rejected."""


def _describe(exc: ValidationError) -> str:
    """Render the first pydantic error as 'field: message'."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}"


def validate_bound(bound: object) -> int:
    """Check that bound is a positive integer.

    Booleans, floats and numeric strings are rejected rather than coerced.

    Args:
        bound: Candidate upper limit

    Returns:
        The bound, unchanged

    Raises:
        InvalidArgumentError: If bound is not a positive integer
    """
    try:
        request = ClassifyRequest(bound=bound)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid bound {bound!r}: {_describe(e)}") from e
    return request.bound


def validate_rules(rules: RuleSet) -> RuleSet:
    """Check that both markers of a rule set are non-empty strings.

    Raises:
        InvalidArgumentError: If a marker is empty or not a string
    """
    try:
        ClassifyRequest(fizz=rules.fizz, buzz=rules.buzz)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid marker: {_describe(e)}") from e
    return rules


def make_rules(fizz: str | None = None, buzz: str | None = None) -> RuleSet:
    """Build a rule set, overriding the default markers where given.

    Raises:
        InvalidArgumentError: If a marker is empty
    """
    return validate_rules(
        RuleSet(
            fizz=DEFAULT_RULES.fizz if fizz is None else fizz,
            buzz=DEFAULT_RULES.buzz if buzz is None else buzz,
        )
    )


def kind_for(value: int) -> LabelKind:
    """Get the label variant for a single integer."""
    by_three = value % FIZZ_DIVISOR == 0
    by_five = value % BUZZ_DIVISOR == 0
    if by_three and by_five:
        return LabelKind.FIZZBUZZ
    if by_three:
        return LabelKind.FIZZ
    if by_five:
        return LabelKind.BUZZ
    return LabelKind.NUMBER


def label_for(value: int, rules: RuleSet = DEFAULT_RULES) -> str:
    """Get the label for a single positive integer."""
    word = "".join(rule.marker for rule in rules.rules if rule.applies(value))
    return word or str(value)


def classify(bound: int = DEFAULT_BOUND, rules: RuleSet = DEFAULT_RULES) -> list[str]:
    """Classify the integers 1..bound.

    Multiples of 15 get the three-marker followed by the five-marker,
    multiples of 3 the three-marker, multiples of 5 the five-marker, and
    everything else its decimal form.

    Args:
        bound: Inclusive upper limit, defaults to 100
        rules: Markers to emit

    Returns:
        Exactly bound labels, index-aligned to 1..bound

    Raises:
        InvalidArgumentError: If bound is not a positive integer or a
            marker is empty
    """
    bound = validate_bound(bound)
    rules = validate_rules(rules)
    labels = [label_for(value, rules) for value in range(1, bound + 1)]
    logger.debug(f"Classified 1..{bound} with markers {rules.fizz!r}/{rules.buzz!r}")
    return labels


def classify_items(
    bound: int = DEFAULT_BOUND,
    rules: RuleSet = DEFAULT_RULES,
) -> list[ClassifiedItem]:
    """Classify 1..bound, keeping each value and its label kind."""
    labels = classify(bound, rules)
    return [
        ClassifiedItem(value=value, label=label, kind=kind_for(value))
        for value, label in enumerate(labels, start=1)
    ]


def summarize(bound: int = DEFAULT_BOUND, rules: RuleSet = DEFAULT_RULES) -> ClassifyResponse:
    """Classify 1..bound and count how many labels of each kind were produced.

    Args:
        bound: Inclusive upper limit, defaults to 100
        rules: Markers to emit

    Returns:
        ClassifyResponse with labels and per-kind counts
    """
    items = classify_items(bound, rules)
    tally = Counter(item.kind for item in items)
    counts = {kind.value: tally.get(kind, 0) for kind in LabelKind}

    return ClassifyResponse(
        bound=len(items),
        labels=[item.label for item in items],
        counts=counts,
    )
