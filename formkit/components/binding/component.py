"""
Binding component - Interactor/Presenter/View chain.

Flow:
- the view reports an entered value to the presenter
- the presenter forwards it to the registered value callback (the interactor)
- the interactor updates the model and notifies its model callback
- the presenter regenerates the view-model and hands it to the view

Links are explicit callback registrations; nothing holds a back-reference.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from formkit.components.view_model import FormViewModelGeneratorPort, FormViewPort
from formkit.domain.errors import WrongValueTypeError

from .models import (
    DidSetValueInput,
    DidSetValueOutput,
    ModelChangedCallback,
    ValueEnteredCallback,
)

logger = logging.getLogger(__name__)


class Interactor:
    """Owns the model; applies entered values and publishes changes."""

    def __init__(self, model: Any, on_model_changed: ModelChangedCallback | None = None) -> None:
        self._model = model
        self._on_model_changed = on_model_changed

    @property
    def model(self) -> Any:
        return self._model

    def register(self, on_model_changed: ModelChangedCallback) -> None:
        self._on_model_changed = on_model_changed

    def start(self) -> None:
        """Publish the initial model."""
        self._notify()

    def did_set_value(self, inp: DidSetValueInput) -> DidSetValueOutput:
        try:
            self._model.set_value(inp.value, inp.key)
        except WrongValueTypeError as e:
            logger.warning("Ignoring value for %s: %s", _key_name(inp.key), e)
            return DidSetValueOutput(key=inp.key, error=str(e), success=False)

        self._notify()
        return DidSetValueOutput(key=inp.key)

    def _notify(self) -> None:
        if self._on_model_changed is not None:
            self._on_model_changed(self._model)


class Presenter:
    """Turns model changes into view-models for the view."""

    def __init__(
        self,
        generator: FormViewModelGeneratorPort,
        view: FormViewPort,
        on_value_entered: ValueEnteredCallback | None = None,
    ) -> None:
        self._generator = generator
        self._view = view
        self._on_value_entered = on_value_entered

    @property
    def view(self) -> FormViewPort:
        return self._view

    def register(self, on_value_entered: ValueEnteredCallback) -> None:
        self._on_value_entered = on_value_entered

    def update_view_model(self, model: Any) -> None:
        self._view.display(self._generator.generate(model))

    def did_set_value(self, value: Any, key: Hashable) -> DidSetValueOutput:
        if self._on_value_entered is None:
            raise RuntimeError("Presenter has no value callback registered")
        return self._on_value_entered(DidSetValueInput(key=key, value=value))


def bind(
    model: Any,
    view: FormViewPort,
    generator: FormViewModelGeneratorPort,
    *,
    start: bool = True,
) -> tuple[Interactor, Presenter]:
    """
    Wire model, presenter and view together.

    With start=True the initial view-model is displayed immediately.
    """
    presenter = Presenter(generator, view)
    interactor = Interactor(model, on_model_changed=presenter.update_view_model)
    presenter.register(interactor.did_set_value)
    if start:
        interactor.start()
    return interactor, presenter


def _key_name(key: Hashable) -> str:
    return str(getattr(key, "value", key))
