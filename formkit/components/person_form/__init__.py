"""
Person form component - name, age and gender with validation and output.
"""

from ._impl import ORDERED_KEYS, PersonFormModel
from .component import (
    run,
    run_output,
    run_set_value,
    run_validate,
)
from .models import (
    BuildOutputInput,
    BuildOutputOutput,
    PersonKey,
    PersonOutput,
    SetValueInput,
    SetValueOutput,
    ValidateInput,
    ValidateOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_output",
    "run_set_value",
    "run_validate",
    # Model
    "ORDERED_KEYS",
    "PersonFormModel",
    "PersonKey",
    "PersonOutput",
    # Input models
    "BuildOutputInput",
    "SetValueInput",
    "ValidateInput",
    # Output models
    "BuildOutputOutput",
    "SetValueOutput",
    "ValidateOutput",
]
