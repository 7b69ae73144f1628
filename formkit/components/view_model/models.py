"""
View-model rows and the immutable view-model snapshot.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from formkit.domain.fields import InputKind
from formkit.domain.validation import ValidationResult

RowId = TypeVar("RowId", bound=Hashable)


class KeyboardType(str, Enum):
    """Keyboard hint for a text row."""

    DEFAULT = "default"
    NUMBER_PAD = "number_pad"
    DECIMAL_PAD = "decimal_pad"


KEYBOARD_BY_INPUT_KIND: dict[InputKind, KeyboardType] = {
    InputKind.STRING: KeyboardType.DEFAULT,
    InputKind.INTEGER: KeyboardType.NUMBER_PAD,
    InputKind.FLOATING: KeyboardType.DECIMAL_PAD,
}


@dataclass(frozen=True)
class TextFieldRow:
    text: str | None
    label: str | None
    keyboard_type: KeyboardType
    validation_state: ValidationResult

    @property
    def kind(self) -> str:
        return "text_field"


@dataclass(frozen=True)
class SelectionRow:
    label: str | None
    options: tuple[str, ...]
    placeholder: str | None
    selected_index: int | None

    @property
    def kind(self) -> str:
        return "selection"


RowContent = TextFieldRow | SelectionRow


@dataclass(frozen=True)
class Row(Generic[RowId]):
    """One presentation row derived from one field."""

    identifier: RowId
    content: RowContent


class FormViewModel(Generic[RowId]):
    """
    Ordered, immutable snapshot of rows.

    Built once per generation; later model changes do not affect it.
    """

    def __init__(self, rows: Sequence[Row[RowId]] = ()) -> None:
        self._rows: tuple[Row[RowId], ...] = tuple(rows)

    @property
    def rows(self) -> tuple[Row[RowId], ...]:
        return self._rows

    @property
    def rows_count(self) -> int:
        return len(self._rows)

    def row_at(self, index: int) -> Row[RowId]:
        return self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> Row[RowId]:
        return self._rows[index]

    def __iter__(self) -> Iterator[Row[RowId]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormViewModel):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"FormViewModel(rows={list(self._rows)!r})"
