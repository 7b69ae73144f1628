"""
Console View Adapter (FormViewPort implementation).

Writes a readable dump of each displayed view-model to a text stream.

Key behaviors:
- One line per row, in row order
- Text rows show text, keyboard hint and validation state
- Selection rows show options and the selected option (or placeholder)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

from formkit.components.view_model import FormViewModel, Row, SelectionRow, TextFieldRow

logger = logging.getLogger(__name__)


def _identifier(row: Row[Any]) -> str:
    return str(getattr(row.identifier, "value", row.identifier))


def format_row(row: Row[Any]) -> str:
    content = row.content
    if isinstance(content, TextFieldRow):
        state = content.validation_state
        status = "valid" if state.is_valid else "not valid: " + "; ".join(state.reasons)
        text = "" if content.text is None else content.text
        return (
            f"[{_identifier(row)}] {content.label}: {text!r} "
            f"({content.keyboard_type.value}) {status}"
        )
    if isinstance(content, SelectionRow):
        if content.selected_index is not None and 0 <= content.selected_index < len(
            content.options
        ):
            chosen = content.options[content.selected_index]
        else:
            chosen = content.placeholder or "-"
        options = ", ".join(content.options)
        return f"[{_identifier(row)}] {content.label}: {chosen} [{options}]"
    raise TypeError(f"Unsupported row content: {content!r}")


def format_view_model(view_model: FormViewModel[Any]) -> str:
    return "\n".join(format_row(row) for row in view_model)


@dataclass
class ConsoleView:
    """
    Console view that dumps every view-model it is given.

    Implements FormViewPort protocol.
    """

    stream: TextIO = field(default_factory=lambda: sys.stdout)
    separator: str = "-" * 40

    def display(self, view_model: FormViewModel[Any]) -> None:
        logger.debug("Displaying view-model with %d rows", view_model.rows_count)
        self.stream.write(format_view_model(view_model) + "\n")
        if self.separator:
            self.stream.write(self.separator + "\n")
