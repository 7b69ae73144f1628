"""
View-model component - ordered presentation rows generated from a form model.
"""

from .component import FormViewModelGenerator, keyboard_type_for
from .models import (
    KEYBOARD_BY_INPUT_KIND,
    FormViewModel,
    KeyboardType,
    Row,
    RowContent,
    SelectionRow,
    TextFieldRow,
)
from .ports import FormViewModelGeneratorPort, FormViewPort

__all__ = [
    # Generator
    "FormViewModelGenerator",
    "keyboard_type_for",
    # Models
    "KEYBOARD_BY_INPUT_KIND",
    "FormViewModel",
    "KeyboardType",
    "Row",
    "RowContent",
    "SelectionRow",
    "TextFieldRow",
    # Ports
    "FormViewModelGeneratorPort",
    "FormViewPort",
]
