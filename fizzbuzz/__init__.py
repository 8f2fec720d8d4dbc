"""FizzBuzz sequence classifier.

Classifies the integers 1..N into Fizz/Buzz/FizzBuzz/number labels, with
the pure computation kept apart from the step that prints the sequence.
"""

from fizzbuzz.classifier import InvalidArgumentError, classify
from fizzbuzz.runner import run_fizzbuzz

__version__ = "0.1.0"

__all__ = ["InvalidArgumentError", "classify", "run_fizzbuzz"]
