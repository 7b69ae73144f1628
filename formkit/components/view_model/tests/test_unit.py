"""
View-model component unit tests.

Tests for row generation, keyboard hints and snapshot behaviour.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

import pytest

from formkit.components.person_form import PersonFormModel, PersonKey
from formkit.components.view_model import (
    FormViewModel,
    FormViewModelGenerator,
    KeyboardType,
    Row,
    SelectionRow,
    TextFieldRow,
    keyboard_type_for,
)
from formkit.domain.fields import FieldValue, InputKind, Selection, TextInput
from formkit.domain.validation import ValidationResult
from formkit.rules.models import Rules, ViewRules

# --- Mock Model ---


class MeasureKey(Enum):
    HEIGHT = "height"
    UNIT = "unit"


class MockMeasureModel:
    """Minimal ordered, dictionary-backed model without labels."""

    def __init__(self) -> None:
        self._fields: dict[MeasureKey, FieldValue] = {
            MeasureKey.HEIGHT: TextInput(input_kind=InputKind.FLOATING, text="1.8"),
            MeasureKey.UNIT: Selection(options=("m", "ft"), selected=0),
        }

    @property
    def ordered_keys(self) -> tuple[MeasureKey, ...]:
        return (MeasureKey.HEIGHT, MeasureKey.UNIT)

    @property
    def fields(self) -> Mapping[MeasureKey, FieldValue]:
        return self._fields

    def get_value(self, key: MeasureKey) -> object:
        return self._fields[key].value

    def validate(self, key: MeasureKey) -> ValidationResult:
        return ValidationResult.not_valid("Too tall")

    def label_for(self, key: MeasureKey) -> str:
        return key.value.upper()


# --- Fixtures ---


@pytest.fixture
def model() -> PersonFormModel:
    return PersonFormModel()


@pytest.fixture
def generator() -> FormViewModelGenerator:
    return FormViewModelGenerator()


# --- Generation Tests ---


class TestGenerate:
    """Test FormViewModelGenerator.generate."""

    def test_one_row_per_key_in_order(
        self, model: PersonFormModel, generator: FormViewModelGenerator
    ) -> None:
        view_model = generator.generate(model)

        assert view_model.rows_count == 3
        assert [row.identifier for row in view_model] == [
            PersonKey.NAME,
            PersonKey.AGE,
            PersonKey.GENDER,
        ]

    def test_row_kinds_match_field_kinds(
        self, model: PersonFormModel, generator: FormViewModelGenerator
    ) -> None:
        view_model = generator.generate(model)

        assert isinstance(view_model.row_at(0).content, TextFieldRow)
        assert isinstance(view_model.row_at(1).content, TextFieldRow)
        assert isinstance(view_model.row_at(2).content, SelectionRow)

    def test_text_row_content(
        self, model: PersonFormModel, generator: FormViewModelGenerator
    ) -> None:
        model.set_value("15a", PersonKey.AGE)

        content = generator.generate(model).row_at(1).content

        assert content == TextFieldRow(
            text="15a",
            label="Age",
            keyboard_type=KeyboardType.NUMBER_PAD,
            validation_state=ValidationResult.not_valid("Cannot convert String to Int (Age)"),
        )

    def test_selection_row_content(
        self, model: PersonFormModel, generator: FormViewModelGenerator
    ) -> None:
        model.set_value(1, PersonKey.GENDER)

        content = generator.generate(model).row_at(2).content

        assert content == SelectionRow(
            label="Gender",
            options=("Male", "Female"),
            placeholder="Select Gender",
            selected_index=1,
        )

    def test_validation_suppressed(self, model: PersonFormModel) -> None:
        model.set_value("121", PersonKey.AGE)
        generator = FormViewModelGenerator(needs_validation=False)

        content = generator.generate(model).row_at(1).content

        assert isinstance(content, TextFieldRow)
        assert content.validation_state.is_valid is True

    def test_validation_recomputed_per_call(
        self, model: PersonFormModel, generator: FormViewModelGenerator
    ) -> None:
        model.set_value("121", PersonKey.AGE)
        first = generator.generate(model)
        model.set_value("15", PersonKey.AGE)
        second = generator.generate(model)

        assert first.row_at(1).content.validation_state.is_valid is False  # type: ignore[union-attr]
        assert second.row_at(1).content.validation_state.is_valid is True  # type: ignore[union-attr]

    def test_unconvertible_age_is_a_reason(
        self, model: PersonFormModel, generator: FormViewModelGenerator
    ) -> None:
        model.set_value("9" * 5000, PersonKey.AGE)

        state = generator.generate(model).row_at(1).content.validation_state  # type: ignore[union-attr]

        assert state.reasons == ("Cannot convert String to Int (Age)",)

    def test_snapshot_is_not_live(
        self, model: PersonFormModel, generator: FormViewModelGenerator
    ) -> None:
        view_model = generator.generate(model)
        model.set_value("Alba", PersonKey.NAME)

        assert view_model.row_at(0).content.text is None  # type: ignore[union-attr]

    def test_label_overrides(self, model: PersonFormModel) -> None:
        generator = FormViewModelGenerator(labels={PersonKey.NAME: "Full name"})

        view_model = generator.generate(model)

        assert view_model.row_at(0).content.label == "Full name"
        assert view_model.row_at(1).content.label == "Age"

    def test_from_rules(self) -> None:
        rules = Rules(view=ViewRules(needs_validation=False))
        assert FormViewModelGenerator.from_rules(rules).needs_validation is False

    def test_generic_model(self, generator: FormViewModelGenerator) -> None:
        view_model = generator.generate(MockMeasureModel())

        height, unit = view_model
        assert height.content == TextFieldRow(
            text="1.8",
            label="HEIGHT",
            keyboard_type=KeyboardType.DECIMAL_PAD,
            validation_state=ValidationResult.not_valid("Too tall (HEIGHT)"),
        )
        assert isinstance(unit.content, SelectionRow)
        assert unit.content.selected_index == 0


# --- Keyboard Hint Tests ---


class TestKeyboardType:
    @pytest.mark.parametrize(
        ("input_kind", "expected"),
        [
            (InputKind.STRING, KeyboardType.DEFAULT),
            (InputKind.INTEGER, KeyboardType.NUMBER_PAD),
            (InputKind.FLOATING, KeyboardType.DECIMAL_PAD),
        ],
    )
    def test_mapping(self, input_kind: InputKind, expected: KeyboardType) -> None:
        assert keyboard_type_for(input_kind) == expected


# --- View-Model Tests ---


class TestFormViewModel:
    def test_sequence_behaviour(self) -> None:
        rows = [
            Row(identifier="a", content=SelectionRow("A", ("x",), None, None)),
            Row(identifier="b", content=SelectionRow("B", ("y",), None, 0)),
        ]
        view_model = FormViewModel(rows)

        assert len(view_model) == 2
        assert view_model[1] is rows[1]
        assert view_model.row_at(0) is rows[0]
        assert list(view_model) == rows
        assert view_model == FormViewModel(list(rows))

    def test_out_of_range_index(self) -> None:
        with pytest.raises(IndexError):
            FormViewModel().row_at(0)
