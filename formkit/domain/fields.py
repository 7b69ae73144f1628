"""
Field values held by a form model.

A field value is a closed union of two variants:
- TextInput: free text tagged with the kind of input it expects
- Selection: one pick from a fixed list of options

Shape checks happen once, in with_raw(). A mismatch raises
WrongValueTypeError and leaves the original value untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from formkit.domain.errors import WrongValueTypeError


class InputKind(str, Enum):
    """Kind of text a text input expects."""

    STRING = "string"
    INTEGER = "integer"
    FLOATING = "floating"


@dataclass(frozen=True)
class TextInput:
    input_kind: InputKind = InputKind.STRING
    text: str | None = None

    @property
    def kind(self) -> str:
        return "text"

    @property
    def value(self) -> str | None:
        return self.text

    def with_raw(self, raw: Any) -> TextInput:
        if not isinstance(raw, str):
            raise WrongValueTypeError(self.kind, raw)
        return replace(self, text=raw)


@dataclass(frozen=True)
class Selection:
    options: tuple[str, ...] = ()
    selected: int | None = None
    placeholder: str | None = None

    @property
    def kind(self) -> str:
        return "selection"

    @property
    def value(self) -> int | None:
        return self.selected

    def with_raw(self, raw: Any) -> Selection:
        # bool is an int subclass but never a valid index
        if raw is not None and (isinstance(raw, bool) or not isinstance(raw, int)):
            raise WrongValueTypeError(self.kind, raw)
        return replace(self, selected=raw)

    @property
    def selected_option(self) -> str | None:
        if self.selected is None or not 0 <= self.selected < len(self.options):
            return None
        return self.options[self.selected]


FieldValue = TextInput | Selection
