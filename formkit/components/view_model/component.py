"""
View-model component - project a form model into presentation rows.

Walks the model's ordered keys and builds one row per field:
- TextInput -> TextFieldRow carrying the latest described validation result
- Selection -> SelectionRow carrying options and the selected index

Validation is recomputed on every generate() call and can be switched off
with needs_validation=False (rows then report valid).
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Any

from formkit.domain.fields import InputKind, Selection, TextInput
from formkit.domain.form import default_label, validate_with_description
from formkit.domain.validation import ValidationResult
from formkit.rules.models import Rules

from .models import (
    KEYBOARD_BY_INPUT_KIND,
    FormViewModel,
    KeyboardType,
    Row,
    SelectionRow,
    TextFieldRow,
)

logger = logging.getLogger(__name__)


def keyboard_type_for(input_kind: InputKind) -> KeyboardType:
    return KEYBOARD_BY_INPUT_KIND[input_kind]


@dataclass(frozen=True)
class FormViewModelGenerator:
    """
    Generator for any ordered, dictionary-backed, validating form model.

    labels overrides the model's own labels per key.
    """

    needs_validation: bool = True
    labels: Mapping[Hashable, str] = field(default_factory=dict)

    @classmethod
    def from_rules(cls, rules: Rules) -> FormViewModelGenerator:
        return cls(needs_validation=rules.view.needs_validation)

    def generate(self, model: Any) -> FormViewModel[Any]:
        rows = self.generate_rows(model)
        logger.debug("Generated %d rows (validation=%s)", len(rows), self.needs_validation)
        return FormViewModel(rows)

    def generate_rows(self, model: Any) -> list[Row[Any]]:
        fields = model.fields
        rows: list[Row[Any]] = []
        for key in model.ordered_keys:
            value = fields[key]
            if isinstance(value, TextInput):
                content: TextFieldRow | SelectionRow = TextFieldRow(
                    text=value.text,
                    label=self.label_for(model, key),
                    keyboard_type=keyboard_type_for(value.input_kind),
                    validation_state=self.validate_value(model, key),
                )
            elif isinstance(value, Selection):
                content = SelectionRow(
                    label=self.label_for(model, key),
                    options=value.options,
                    placeholder=value.placeholder,
                    selected_index=value.selected,
                )
            else:
                raise TypeError(f"Unsupported field value for {key!r}: {value!r}")
            rows.append(Row(identifier=key, content=content))
        return rows

    def validate_value(self, model: Any, key: Hashable) -> ValidationResult:
        if not self.needs_validation:
            return ValidationResult.valid()
        return validate_with_description(model, key)

    def label_for(self, model: Any, key: Hashable) -> str:
        if key in self.labels:
            return self.labels[key]
        label_for = getattr(model, "label_for", None)
        if label_for is not None:
            return label_for(key)
        return default_label(key)
