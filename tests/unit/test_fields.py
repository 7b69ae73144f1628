"""
Tests for field values and their shape checks.
"""

import pytest

from formkit.domain.errors import FormError, WrongValueTypeError
from formkit.domain.fields import InputKind, Selection, TextInput


class TestTextInput:
    def test_defaults(self):
        field_value = TextInput()
        assert field_value.input_kind == InputKind.STRING
        assert field_value.value is None
        assert field_value.kind == "text"

    def test_with_raw_keeps_input_kind(self):
        updated = TextInput(input_kind=InputKind.FLOATING).with_raw("1.5")
        assert updated == TextInput(input_kind=InputKind.FLOATING, text="1.5")

    def test_with_raw_returns_new_value(self):
        original = TextInput()
        updated = original.with_raw("x")
        assert original.text is None
        assert updated.text == "x"

    @pytest.mark.parametrize("raw", [1, 1.5, None, b"bytes", ["a"]])
    def test_rejects_non_string(self, raw):
        with pytest.raises(WrongValueTypeError) as exc_info:
            TextInput().with_raw(raw)
        assert exc_info.value.field_kind == "text"
        assert exc_info.value.value == raw


class TestSelection:
    @pytest.fixture
    def selection(self):
        return Selection(options=("Male", "Female"), placeholder="Select Gender")

    def test_with_raw_keeps_metadata(self, selection):
        updated = selection.with_raw(1)
        assert updated.options == ("Male", "Female")
        assert updated.placeholder == "Select Gender"
        assert updated.value == 1
        assert updated.selected_option == "Female"

    def test_none_clears(self, selection):
        assert selection.with_raw(0).with_raw(None).selected is None

    @pytest.mark.parametrize("raw", ["1", 1.0, True, False])
    def test_rejects_non_int(self, selection, raw):
        with pytest.raises(WrongValueTypeError):
            selection.with_raw(raw)

    def test_selected_option_out_of_range(self, selection):
        assert selection.with_raw(7).selected_option is None
        assert selection.selected_option is None

    def test_error_is_form_error(self, selection):
        with pytest.raises(FormError):
            selection.with_raw("Male")
