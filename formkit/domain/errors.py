"""
Form error types.

Only shape mismatches and aggregate validation failures are errors.
A field that fails validation is a normal not-valid result.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class FormError(Exception):
    """Base form error."""

    pass


class WrongValueTypeError(FormError):
    """Value shape does not match the field kind."""

    def __init__(self, field_kind: str, value: Any) -> None:
        self.field_kind = field_kind
        self.value = value
        super().__init__(
            f"Wrong value type for {field_kind} field: {type(value).__name__} {value!r}"
        )


class ValidationResultError(FormError):
    """Model is not valid; carries every accumulated reason."""

    def __init__(self, reasons: Sequence[str]) -> None:
        self.reasons = tuple(reasons)
        super().__init__("; ".join(self.reasons))

    @classmethod
    def from_reasons(cls, reasons: Sequence[str]) -> ValidationResultError | None:
        """Build an error, or None when there is nothing to report."""
        if not reasons:
            return None
        return cls(reasons)

    @classmethod
    def from_result(cls, result: Any) -> ValidationResultError | None:
        return cls.from_reasons(result.reasons)
