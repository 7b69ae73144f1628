"""
Binding component - Interactor/Presenter chain feeding a view sink.
"""

from .component import Interactor, Presenter, bind
from .models import (
    DidSetValueInput,
    DidSetValueOutput,
    ModelChangedCallback,
    ValueEnteredCallback,
)

__all__ = [
    # Entry points
    "bind",
    "Interactor",
    "Presenter",
    # Models
    "DidSetValueInput",
    "DidSetValueOutput",
    "ModelChangedCallback",
    "ValueEnteredCallback",
]
