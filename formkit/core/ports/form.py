"""
Form model capability interfaces.

Small Protocols that a concrete form model composes:
- FormModel: keyed get/set of raw values
- OrderedKeysFormModel: deterministic key order
- ValidatingValuesFormModel: per-field validation with labels
- ValidatingModelFormModel: whole-model validation
- DictionaryBackedFormModel: values stored as a Key -> FieldValue mapping
- OutputtableFormModel: conversion into a plain output value

Shared behaviour for these capabilities lives in formkit.domain.form.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any, Protocol, TypeVar

from formkit.domain.fields import FieldValue
from formkit.domain.validation import ValidationResult

K = TypeVar("K", bound=Hashable)
OutputT = TypeVar("OutputT", covariant=True)


class FormModel(Protocol[K]):
    """Keyed collection of raw field values."""

    def set_value(self, value: Any, key: K) -> None:
        """
        Store a raw value for key.

        Raises WrongValueTypeError when the value shape does not match the field.
        """
        ...

    def get_value(self, key: K) -> Any:
        """Get the stored raw value, or None."""
        ...


class OrderedKeysFormModel(FormModel[K], Protocol[K]):
    @property
    def ordered_keys(self) -> Sequence[K]:
        """Keys in display order."""
        ...


class ValidatingValuesFormModel(FormModel[K], Protocol[K]):
    def validate(self, key: K) -> ValidationResult:
        """Validate the value stored at key."""
        ...

    def label_for(self, key: K) -> str:
        """Human-readable field label."""
        ...


class ValidatingModelFormModel(FormModel[K], Protocol[K]):
    def validate_model(self) -> ValidationResult:
        """Validate every field and combine the results."""
        ...


class DictionaryBackedFormModel(FormModel[K], Protocol[K]):
    @property
    def fields(self) -> Mapping[K, FieldValue]:
        """Field values keyed by field key."""
        ...


class OutputtableFormModel(Protocol[OutputT]):
    def output(self) -> OutputT:
        """Convert stored values into a plain output value."""
        ...


class OrderedValidatingFormModel(
    OrderedKeysFormModel[K], ValidatingValuesFormModel[K], Protocol[K]
):
    """Ordered keys plus per-field validation."""

    ...


class OrderedDictionaryFormModel(
    OrderedKeysFormModel[K], DictionaryBackedFormModel[K], Protocol[K]
):
    """Ordered keys plus mapping-backed storage."""

    ...


class ValidOutputFormModel(Protocol[OutputT]):
    """Whole-model validation plus output conversion."""

    def validate_model(self) -> ValidationResult: ...

    def output(self) -> OutputT: ...
