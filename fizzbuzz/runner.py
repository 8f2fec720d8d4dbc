"""Print a FizzBuzz run: one banner line, then one label per line."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from fizzbuzz.classifier import classify, validate_bound, validate_rules
from fizzbuzz.rules import DEFAULT_BOUND, DEFAULT_RULES, RuleSet

logger = logging.getLogger(__name__)

BANNER = "Running FizzBuzz:"


def format_lines(bound: int = DEFAULT_BOUND, rules: RuleSet = DEFAULT_RULES) -> list[str]:
    """Build the lines of a run without writing them."""
    return [BANNER, *classify(bound, rules)]


def run_fizzbuzz(
    bound: int = DEFAULT_BOUND,
    stream: TextIO | None = None,
    rules: RuleSet = DEFAULT_RULES,
) -> None:
    """Write the banner and the labels for 1..bound to stream.

    The bound and markers are validated before anything is written, so a
    rejected input leaves the stream untouched. Write errors propagate.

    Args:
        bound: Inclusive upper limit, defaults to 100
        stream: Output stream, defaults to standard output
        rules: Markers to emit

    Raises:
        InvalidArgumentError: If bound is not a positive integer or a
            marker is empty
    """
    bound = validate_bound(bound)
    rules = validate_rules(rules)
    out = sys.stdout if stream is None else stream

    logger.info(f"Running FizzBuzz for 1..{bound}")
    for line in format_lines(bound, rules):
        out.write(line + "\n")
    out.flush()
