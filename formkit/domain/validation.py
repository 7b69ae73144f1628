"""
Validation results and validator types.

Validation failures are ordinary values, not exceptions:
- ValidationResult is either valid or not valid with ordered reasons
- Validated[T] additionally carries a converted value so transforming
  validators can feed a downstream validator
- Results combine by concatenating reasons (valid only if both are valid)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value (or a whole model)."""

    is_valid: bool
    reasons: tuple[str, ...] = ()

    @classmethod
    def valid(cls) -> ValidationResult:
        return _VALID

    @classmethod
    def not_valid(cls, *reasons: str) -> ValidationResult:
        return cls(is_valid=False, reasons=tuple(reasons))

    def and_(self, other: ValidationResult) -> ValidationResult:
        """Combine with another result, keeping reasons in order."""
        if self.is_valid and other.is_valid:
            return _VALID
        return ValidationResult(is_valid=False, reasons=self.reasons + other.reasons)

    def __and__(self, other: ValidationResult) -> ValidationResult:
        return self.and_(other)

    def with_suffix(self, suffix: str) -> ValidationResult:
        """Append suffix to the last reason; valid results pass through."""
        if self.is_valid or not self.reasons:
            return self
        *head, last = self.reasons
        return ValidationResult(is_valid=False, reasons=(*head, f"{last}{suffix}"))


_VALID = ValidationResult(is_valid=True)


def combine(lhs: ValidationResult, rhs: ValidationResult) -> ValidationResult:
    return lhs.and_(rhs)


def combine_all(results: Iterable[ValidationResult]) -> ValidationResult:
    """Fold results from valid, left to right, without short-circuiting."""
    combined = ValidationResult.valid()
    for result in results:
        combined = combine(combined, result)
    return combined


class AbsentPolicy(Enum):
    """How a validator treats a missing or wrongly typed raw value."""

    VALID = "valid"
    INVALID = "invalid"

    def result(self, reason: str = "Value is required") -> ValidationResult:
        if self is AbsentPolicy.VALID:
            return ValidationResult.valid()
        return ValidationResult.not_valid(reason)


@dataclass(frozen=True)
class Validated(Generic[T]):
    """
    Result of a transforming validator.

    A valid Validated may still hold no value (value is None); downstream
    steps are skipped in that case.
    """

    is_valid: bool
    value: T | None = None
    reasons: tuple[str, ...] = ()

    @classmethod
    def valid(cls, value: T | None = None) -> Validated[T]:
        return cls(is_valid=True, value=value)

    @classmethod
    def not_valid(cls, *reasons: str) -> Validated[T]:
        return cls(is_valid=False, reasons=tuple(reasons))

    def then(self, transform: Callable[[T], Validated[V]]) -> Validated[V]:
        """Feed the converted value into the next transforming step."""
        if not self.is_valid:
            return Validated(is_valid=False, reasons=self.reasons)
        if self.value is None:
            return Validated(is_valid=True)
        return transform(self.value)

    def validate_with(self, validator: Validator[T]) -> ValidationResult | None:
        """
        Run a plain validator on the converted value.

        Returns None when there is no value to validate.
        """
        if not self.is_valid:
            return ValidationResult(is_valid=False, reasons=self.reasons)
        if self.value is None:
            return None
        return validator(self.value)

    def finalize(self) -> ValidationResult:
        if self.is_valid:
            return ValidationResult.valid()
        return ValidationResult(is_valid=False, reasons=self.reasons)


Validator = Callable[[T], ValidationResult]
TransformingValidator = Callable[[T], Validated[V]]


def validate_raw(
    raw: Any,
    validator: Validator[T],
    expected_type: type[T],
    *,
    absent: AbsentPolicy = AbsentPolicy.VALID,
) -> ValidationResult:
    """Apply validator to a loosely typed value, using the absent policy otherwise."""
    if isinstance(raw, expected_type):
        return validator(raw)
    return absent.result()


def transform_raw(
    raw: Any,
    transforming: TransformingValidator[T, V],
    expected_type: type[T],
) -> Validated[V] | None:
    """Apply a transforming validator, or return None when raw has the wrong type."""
    if isinstance(raw, expected_type):
        return transforming(raw)
    return None
