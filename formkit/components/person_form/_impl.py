"""
PersonFormModel - dictionary-backed form with ordered, validated fields.

Fields:
- name: free text, length bounded by rules
- age: integer text, must parse and fall within the rules range
- gender: single selection from the configured options

Absent values are valid; validation only inspects what was entered.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from formkit.domain import form
from formkit.domain.fields import FieldValue, Selection, TextInput
from formkit.domain.validation import ValidationResult, validate_raw
from formkit.domain.validators import (
    always_valid,
    chain,
    int_range,
    string_length,
    string_to_int,
)
from formkit.rules.models import PersonFormRules

from .models import PersonKey, PersonOutput

logger = logging.getLogger(__name__)

ORDERED_KEYS: tuple[PersonKey, ...] = (PersonKey.NAME, PersonKey.AGE, PersonKey.GENDER)


def as_person_key(key: Any) -> PersonKey:
    """Coerce a key or its plain-string name; unknown names raise KeyError."""
    try:
        return PersonKey(key)
    except ValueError:
        raise KeyError(key) from None


def build_fields(rules: PersonFormRules) -> dict[PersonKey, FieldValue]:
    """Empty field values for a fresh form."""
    return {
        PersonKey.NAME: TextInput(input_kind=rules.name.input_kind),
        PersonKey.AGE: TextInput(input_kind=rules.age.input_kind),
        PersonKey.GENDER: Selection(
            options=tuple(rules.gender.options),
            placeholder=rules.gender.placeholder,
        ),
    }


def build_validators(rules: PersonFormRules) -> dict[PersonKey, Callable[[Any], ValidationResult]]:
    name_length = string_length(rules.name.length.min, rules.name.length.max)
    age_range = int_range(
        rules.age.range.min,
        rules.age.range.max,
        rules.age.range_message.format(min=rules.age.range.min, max=rules.age.range.max),
    )
    return {
        PersonKey.NAME: lambda raw: validate_raw(raw, name_length, str),
        PersonKey.AGE: chain(string_to_int(), age_range),
        PersonKey.GENDER: always_valid,
    }


class PersonFormModel:
    """
    Person form model.

    Composes the ordered-keys, dictionary-backed, validating and
    outputtable capabilities from formkit.core.ports.form.
    """

    def __init__(self, rules: PersonFormRules | None = None) -> None:
        self._rules = rules or PersonFormRules()
        self._fields = build_fields(self._rules)
        self._validators = build_validators(self._rules)
        self._ordered_keys = ORDERED_KEYS

        missing = [key for key in self._ordered_keys if key not in self._fields]
        if missing:
            raise ValueError(f"Ordered keys without a field: {missing}")

    @property
    def rules(self) -> PersonFormRules:
        return self._rules

    @property
    def ordered_keys(self) -> tuple[PersonKey, ...]:
        return self._ordered_keys

    @property
    def fields(self) -> Mapping[PersonKey, FieldValue]:
        return MappingProxyType(self._fields)

    def set_value(self, value: Any, key: PersonKey) -> None:
        key = as_person_key(key)
        updated = form.set_field(self._fields, key, value)
        logger.debug("Set %s to %r", key.value, updated.value)

    def get_value(self, key: PersonKey) -> Any:
        field_value = self._fields.get(key)
        if field_value is None:
            return None
        return field_value.value

    def label_for(self, key: PersonKey) -> str:
        key = as_person_key(key)
        label = getattr(self._rules, key.value).label
        return label or form.default_label(key)

    def validate(self, key: PersonKey) -> ValidationResult:
        return self._validators[as_person_key(key)](self.get_value(key))

    def validate_model(self) -> ValidationResult:
        return form.validate_model_by_combining(self)

    def output(self) -> PersonOutput:
        age_text = form.specific_value(self, PersonKey.AGE, str)
        age = string_to_int()(age_text).value if age_text is not None else None
        return PersonOutput(
            name=form.specific_value(self, PersonKey.NAME, str),
            age=age,
            gender_id=form.specific_value(self, PersonKey.GENDER, int),
        )

    def valid_output(self) -> PersonOutput:
        """Output of a fully valid model; raises ValidationResultError otherwise."""
        return form.valid_output(self)

    def reset(self) -> PersonFormModel:
        """Fresh model with the same rules."""
        return PersonFormModel(self._rules)
