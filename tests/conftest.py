"""Pytest configuration and fixtures for FizzBuzz tests."""

import io

import pytest


@pytest.fixture
def fifteen_labels() -> list[str]:
    """Expected labels for 1..15."""
    return [
        "1", "2", "Fizz", "4", "Buzz",
        "Fizz", "7", "8", "Fizz", "Buzz",
        "11", "Fizz", "13", "14", "FizzBuzz",
    ]


@pytest.fixture
def output_stream() -> io.StringIO:
    """In-memory stream to capture a run."""
    return io.StringIO()


@pytest.fixture
def broken_stream():
    """Stream whose writes always fail."""

    class BrokenStream:
        def write(self, text: str) -> int:
            raise OSError("stream closed")

        def flush(self) -> None:
            pass

    return BrokenStream()
