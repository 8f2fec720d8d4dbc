"""Pydantic schemas for FizzBuzz request/response contracts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, StrictInt

from fizzbuzz.rules import DEFAULT_BOUND


class LabelKind(str, Enum):
    """Which label variant an integer receives."""

    FIZZ = "fizz"
    BUZZ = "buzz"
    FIZZBUZZ = "fizzbuzz"
    NUMBER = "number"


# --- Request Schemas ---


class ClassifyRequest(BaseModel):
    """Request to classify the integers 1..bound."""

    bound: StrictInt = Field(
        default=DEFAULT_BOUND,
        ge=1,
        description="Inclusive upper limit of the sequence",
    )
    fizz: str = Field(
        default="Fizz",
        min_length=1,
        description="Marker for multiples of 3",
    )
    buzz: str = Field(
        default="Buzz",
        min_length=1,
        description="Marker for multiples of 5",
    )


# --- Response Schemas ---


class ClassifiedItem(BaseModel):
    """One classified integer."""

    value: int = Field(..., ge=1)
    label: str
    kind: LabelKind


class ClassifyResponse(BaseModel):
    """Labels for 1..bound with per-kind counts."""

    bound: int = Field(..., ge=1)
    labels: list[str] = Field(default_factory=list)
    counts: dict[str, int] = Field(
        default_factory=dict,
        description="Number of labels of each kind, keyed by LabelKind value",
    )


class ErrorResponse(BaseModel):
    """Error response for rejected requests."""

    detail: str
    error_code: str | None = None
