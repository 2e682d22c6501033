"""Patch options: the option entity, its registry and typed constructors.

Exports the ``Option`` types, ``OptionRegistry``, the ``ValueType`` tag,
all typed constructors and the error taxonomy.
"""
from __future__ import annotations

from patchopts.options.constructors import (
    boolean_array_option,
    boolean_option,
    float_array_option,
    float_option,
    int_array_option,
    int_option,
    long_array_option,
    long_option,
    register_new_option,
    string_array_option,
    string_option,
)
from patchopts.options.errors import (
    DuplicateKeyError,
    OptionError,
    OptionNotFoundError,
    ValueRequiredError,
    ValueValidationError,
)
from patchopts.options.option import (
    ArrayOption,
    Option,
    OptionDescriptor,
    Validator,
    always_valid,
    in_allowed_values,
)
from patchopts.options.registry import OptionRegistry
from patchopts.options.types import ValueType, parse_value

__all__ = [
    "ArrayOption",
    "Option",
    "OptionDescriptor",
    "OptionRegistry",
    "Validator",
    "ValueType",
    "always_valid",
    "in_allowed_values",
    "parse_value",
    "register_new_option",
    "string_option",
    "int_option",
    "boolean_option",
    "float_option",
    "long_option",
    "string_array_option",
    "int_array_option",
    "boolean_array_option",
    "float_array_option",
    "long_array_option",
    "OptionError",
    "ValueRequiredError",
    "ValueValidationError",
    "DuplicateKeyError",
    "OptionNotFoundError",
]
