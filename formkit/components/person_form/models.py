"""
Person form keys, output value and component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from formkit.domain.fields import FieldValue
from formkit.domain.validation import ValidationResult


class PersonKey(str, Enum):
    """Fields of the person form, declared in display order."""

    NAME = "name"
    AGE = "age"
    GENDER = "gender"


@dataclass(frozen=True)
class PersonOutput:
    """Plain value produced from a valid person form."""

    name: str | None
    age: int | None
    gender_id: int | None


# --- Input Models ---


@dataclass(frozen=True)
class SetValueInput:
    """Input for storing a raw value at a key."""

    key: PersonKey
    value: Any


@dataclass(frozen=True)
class ValidateInput:
    """Input for validating one field, or the whole model when key is None."""

    key: PersonKey | None = None


@dataclass(frozen=True)
class BuildOutputInput:
    """Input for producing the person output."""

    pass


# --- Output Models ---


@dataclass(frozen=True)
class SetValueOutput:
    """Output from storing a value."""

    key: PersonKey
    value: FieldValue | None = None
    error: str | None = None
    success: bool = True


@dataclass(frozen=True)
class ValidateOutput:
    """Output from validation."""

    result: ValidationResult
    key: PersonKey | None = None

    @property
    def success(self) -> bool:
        return self.result.is_valid


@dataclass(frozen=True)
class BuildOutputOutput:
    """Output from building the person output."""

    output: PersonOutput | None
    reasons: tuple[str, ...] = field(default_factory=tuple)
    success: bool = True
