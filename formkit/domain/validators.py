"""
Reusable validators.

Factories return plain validators (value -> ValidationResult) or
transforming validators (value -> Validated[converted]). chain() glues a
transforming validator to a downstream validator.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

from formkit.domain.validation import (
    AbsentPolicy,
    TransformingValidator,
    Validated,
    ValidationResult,
    Validator,
    transform_raw,
)

INVALID_STRING_LENGTH = "Invalid string length"
CANNOT_CONVERT_TO_INT = "Cannot convert String to Int"
CANNOT_CONVERT_TO_FLOAT = "Cannot convert String to Float"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def string_length(min_length: int, max_length: int) -> Validator[str]:
    """
    Character count must fall within [min_length, max_length].

    Text is NFC-normalised before counting, so a letter typed as base plus
    combining accent counts once. Clusters with no precomposed form still
    count per code point.
    """

    def validate(value: str) -> ValidationResult:
        if min_length <= len(unicodedata.normalize("NFC", value)) <= max_length:
            return ValidationResult.valid()
        return ValidationResult.not_valid(INVALID_STRING_LENGTH)

    return validate


def string_to_int() -> TransformingValidator[str, int]:
    """Parse an optionally signed run of ASCII digits."""

    def transform(value: str) -> Validated[int]:
        if _INT_PATTERN.fullmatch(value):
            try:
                return Validated.valid(int(value))
            except ValueError:
                # more digits than the interpreter will convert
                return Validated.not_valid(CANNOT_CONVERT_TO_INT)
        return Validated.not_valid(CANNOT_CONVERT_TO_INT)

    return transform


def string_to_float() -> TransformingValidator[str, float]:
    def transform(value: str) -> Validated[float]:
        if _FLOAT_PATTERN.fullmatch(value):
            return Validated.valid(float(value))
        return Validated.not_valid(CANNOT_CONVERT_TO_FLOAT)

    return transform


def int_range(minimum: int, maximum: int, message: str | None = None) -> Validator[int]:
    reason = message or f"Value should be from {minimum} to {maximum}"

    def validate(value: int) -> ValidationResult:
        if minimum <= value <= maximum:
            return ValidationResult.valid()
        return ValidationResult.not_valid(reason)

    return validate


def float_range(minimum: float, maximum: float, message: str | None = None) -> Validator[float]:
    reason = message or f"Value should be from {minimum} to {maximum}"

    def validate(value: float) -> ValidationResult:
        if minimum <= value <= maximum:
            return ValidationResult.valid()
        return ValidationResult.not_valid(reason)

    return validate


def one_of_indices(count: int) -> Validator[int]:
    """Selected index must point into an option list of the given size."""

    def validate(value: int) -> ValidationResult:
        if 0 <= value < count:
            return ValidationResult.valid()
        return ValidationResult.not_valid("Invalid selection")

    return validate


def always_valid(value: Any) -> ValidationResult:
    return ValidationResult.valid()


def chain(
    transforming: TransformingValidator[Any, Any],
    validator: Validator[Any],
    *,
    expected_type: type = str,
    absent: AbsentPolicy = AbsentPolicy.VALID,
) -> Validator[Any]:
    """
    Build a raw-value validator: convert first, then validate the result.

    Conversion failure short-circuits to not valid. A raw value that is
    absent or not of expected_type falls back to the absent policy.
    """

    def validate(raw: Any) -> ValidationResult:
        converted = transform_raw(raw, transforming, expected_type)
        if converted is None:
            return absent.result()
        result = converted.validate_with(validator)
        if result is None:
            return absent.result()
        return result

    return validate
