"""
Binding component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DidSetValueInput:
    """A value entered by the user for a key."""

    key: Hashable
    value: Any


@dataclass(frozen=True)
class DidSetValueOutput:
    """Outcome of applying an entered value to the model."""

    key: Hashable
    error: str | None = None
    success: bool = True


ModelChangedCallback = Callable[[Any], None]
ValueEnteredCallback = Callable[[DidSetValueInput], DidSetValueOutput]
