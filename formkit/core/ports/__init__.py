# Ports (Protocol Interfaces)
# Capability interfaces for form models; no implementations here

from formkit.core.ports.form import (
    DictionaryBackedFormModel,
    FormModel,
    OrderedDictionaryFormModel,
    OrderedKeysFormModel,
    OrderedValidatingFormModel,
    OutputtableFormModel,
    ValidatingModelFormModel,
    ValidatingValuesFormModel,
    ValidOutputFormModel,
)

__all__ = [
    "DictionaryBackedFormModel",
    "FormModel",
    "OrderedDictionaryFormModel",
    "OrderedKeysFormModel",
    "OrderedValidatingFormModel",
    "OutputtableFormModel",
    "ValidatingModelFormModel",
    "ValidatingValuesFormModel",
    "ValidOutputFormModel",
]
