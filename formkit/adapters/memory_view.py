"""
In-memory view adapter.

Keeps every displayed view-model instead of rendering it.
Used by tests and by callers that want the latest snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from formkit.components.view_model import FormViewModel


@dataclass
class RecordingView:
    """Implements FormViewPort by recording displays."""

    displayed: list[FormViewModel[Any]] = field(default_factory=list)

    def display(self, view_model: FormViewModel[Any]) -> None:
        self.displayed.append(view_model)

    @property
    def latest(self) -> FormViewModel[Any] | None:
        if not self.displayed:
            return None
        return self.displayed[-1]

    def clear(self) -> None:
        self.displayed.clear()
