"""patch-options: typed, validated options for patches.

Public API
----------
The stable public surface is everything exported from this module and
from ``patchopts.options``.  Anything else inside submodules is private
and may change without notice.

Example
-------
::

    from patchopts import Patch, int_option, string_option

    class RenamePatch(Patch):
        def __init__(self) -> None:
            super().__init__("rename")
            self.app_name = string_option(self, "app-name", required=True)
            self.retries = int_option(
                self,
                "retries",
                default=3,
                validator=lambda value, option: value is None or 0 <= value <= 10,
            )

    patch = RenamePatch()
    patch.options.set("app-name", "Renamed")
    patch.resolve_options()   # {"app-name": "Renamed", "retries": 3}
"""
from __future__ import annotations

__version__: str = "0.1.0"

from patchopts.options import (
    ArrayOption,
    DuplicateKeyError,
    Option,
    OptionDescriptor,
    OptionError,
    OptionNotFoundError,
    OptionRegistry,
    ValueRequiredError,
    ValueType,
    ValueValidationError,
    boolean_array_option,
    boolean_option,
    float_array_option,
    float_option,
    in_allowed_values,
    int_array_option,
    int_option,
    long_array_option,
    long_option,
    parse_value,
    register_new_option,
    string_array_option,
    string_option,
)
from patchopts.patch import Patch, SupportsOptions

__all__ = [
    "__version__",
    "Patch",
    "SupportsOptions",
    "ArrayOption",
    "Option",
    "OptionDescriptor",
    "OptionRegistry",
    "ValueType",
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
