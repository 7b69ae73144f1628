"""
Behaviour shared by form models.

Free functions over the capability Protocols in formkit.core.ports.form,
so concrete models compose capabilities instead of inheriting them.
"""

from __future__ import annotations

from collections.abc import Hashable, MutableMapping
from typing import Any, TypeVar

from formkit.core.ports.form import (
    FormModel,
    OrderedDictionaryFormModel,
    OrderedValidatingFormModel,
    ValidOutputFormModel,
)
from formkit.domain.errors import ValidationResultError
from formkit.domain.fields import FieldValue
from formkit.domain.validation import ValidationResult, combine_all

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
OutputT = TypeVar("OutputT")


def default_label(key: Any) -> str:
    """Capitalised key name, e.g. PersonKey.NAME -> 'Name'."""
    name = getattr(key, "value", key)
    return str(name).replace("_", " ").capitalize()


def set_field(fields: MutableMapping[K, FieldValue], key: K, raw: Any) -> FieldValue:
    """
    Replace the value stored at key, keeping the field's kind and metadata.

    The mapping is only written after the shape check passes.
    """
    updated = fields[key].with_raw(raw)
    fields[key] = updated
    return updated


def specific_value(model: FormModel[K], key: K, expected_type: type[T]) -> T | None:
    """Stored value for key if it is an instance of expected_type."""
    value = model.get_value(key)
    if isinstance(value, expected_type):
        return value
    return None


def ordered_values(model: OrderedDictionaryFormModel[K]) -> list[FieldValue]:
    fields = model.fields
    return [fields[key] for key in model.ordered_keys if key in fields]


def validate_with_description(model: OrderedValidatingFormModel[K], key: K) -> ValidationResult:
    """Validate one field and tag its last reason with the field label."""
    return model.validate(key).with_suffix(f" ({model.label_for(key)})")


def validate_model_by_combining(model: OrderedValidatingFormModel[K]) -> ValidationResult:
    """Combine described per-field results over every key, in order."""
    return combine_all(validate_with_description(model, key) for key in model.ordered_keys)


def valid_output(model: ValidOutputFormModel[OutputT]) -> OutputT:
    """
    Produce the model's output only when the whole model is valid.

    Raises:
        ValidationResultError: with every accumulated reason.
    """
    error = ValidationResultError.from_result(model.validate_model())
    if error is not None:
        raise error
    return model.output()
