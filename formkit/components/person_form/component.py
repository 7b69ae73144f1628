"""
Person form component - set, validate and output person form values.

Shape mismatches are reported in the output rather than raised;
validation failures are reported as not-valid results.
"""

from __future__ import annotations

import logging

from formkit.domain.errors import ValidationResultError, WrongValueTypeError
from formkit.domain.form import validate_with_description

from ._impl import PersonFormModel, as_person_key
from .models import (
    BuildOutputInput,
    BuildOutputOutput,
    SetValueInput,
    SetValueOutput,
    ValidateInput,
    ValidateOutput,
)

logger = logging.getLogger(__name__)


def run_set_value(inp: SetValueInput, *, model: PersonFormModel) -> SetValueOutput:
    """
    Store a raw value in the model.

    Args:
        inp: Key and raw value.
        model: Model mutated in place.

    Returns:
        SetValueOutput with the new field value, or the shape error.
    """
    key = as_person_key(inp.key)
    try:
        model.set_value(inp.value, key)
    except WrongValueTypeError as e:
        logger.warning("Rejected value for %s: %s", key.value, e)
        return SetValueOutput(key=key, error=str(e), success=False)

    return SetValueOutput(key=key, value=model.fields[key])


def run_validate(inp: ValidateInput, *, model: PersonFormModel) -> ValidateOutput:
    """Validate one field (labelled) or the whole model."""
    if inp.key is None:
        return ValidateOutput(result=model.validate_model())
    return ValidateOutput(result=validate_with_description(model, inp.key), key=inp.key)


def run_output(inp: BuildOutputInput, *, model: PersonFormModel) -> BuildOutputOutput:
    """
    Build the person output.

    Fails with every accumulated reason when any field is not valid.
    """
    try:
        output = model.valid_output()
    except ValidationResultError as e:
        return BuildOutputOutput(output=None, reasons=e.reasons, success=False)
    return BuildOutputOutput(output=output)


def run(
    inp: SetValueInput | ValidateInput | BuildOutputInput,
    *,
    model: PersonFormModel,
) -> SetValueOutput | ValidateOutput | BuildOutputOutput:
    """
    Main entry point for the person form component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SetValueInput):
        return run_set_value(inp, model=model)
    elif isinstance(inp, ValidateInput):
        return run_validate(inp, model=model)
    elif isinstance(inp, BuildOutputInput):
        return run_output(inp, model=model)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
