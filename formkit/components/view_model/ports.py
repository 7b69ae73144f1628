"""
View-model component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol

from .models import FormViewModel


class FormViewModelGeneratorPort(Protocol):
    """Projects a form model into a view-model."""

    def generate(self, model: Any) -> FormViewModel[Any]:
        """Build a fresh view-model snapshot from the model."""
        ...


class FormViewPort(Protocol):
    """Display sink for generated view-models."""

    def display(self, view_model: FormViewModel[Any]) -> None:
        """Show the view-model (console dump, UI list, ...)."""
        ...
