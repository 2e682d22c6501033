"""Typed option constructors.

Each constructor builds an option stamped with a fixed ``ValueType`` and
registers it into the target's registry in the same call, then returns
it so the caller can keep a typed reference.  The target is either an
``OptionRegistry`` or anything exposing one as ``options`` (a ``Patch``).

Example
-------
::

    from patchopts import Patch
    from patchopts.options.constructors import int_option, string_array_option

    class ThemePatch(Patch):
        def __init__(self) -> None:
            super().__init__("theme")
            self.accent = int_option(self, "accent", default=0xFF0000)
            self.packages = string_array_option(self, "packages", default=[])
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Union

from patchopts.options.option import ArrayOption, Option, Validator, always_valid
from patchopts.options.registry import OptionRegistry
from patchopts.options.types import ValueType

if TYPE_CHECKING:
    from patchopts.patch import SupportsOptions

Target = Union[OptionRegistry, "SupportsOptions"]


def _registry_of(target: Target) -> OptionRegistry:
    if isinstance(target, OptionRegistry):
        return target
    registry = getattr(target, "options", None)
    if not isinstance(registry, OptionRegistry):
        raise TypeError(
            f"Cannot register an option into {target!r}: "
            "expected an OptionRegistry or an object with an 'options' registry."
        )
    return registry


def register_new_option(
    target: Target,
    key: str,
    *,
    value_type: ValueType,
    default: Any = None,
    values: Mapping[str, Any] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[Any]:
    """Create an option of ``value_type`` and register it into ``target``.

    Array value types produce an ``ArrayOption``.

    Parameters
    ----------
    target:
        An ``OptionRegistry`` or an object exposing one as ``options``.
    key:
        The option key, unique within the target registry.
    value_type:
        The value shape tag stamped on the option.
    default, values, title, description, required, validator:
        Passed through to ``Option``.

    Returns
    -------
    Option
        The registered option.

    Raises
    ------
    DuplicateKeyError
        If ``key`` is already registered in the target.
    TypeError
        If ``target`` has no option registry.
    """
    registry = _registry_of(target)
    option_class = ArrayOption if value_type.is_array else Option
    option = option_class(
        key,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        value_type=value_type,
        validator=validator,
    )
    return registry.register(option)


# ---------------------------------------------------------------------------
# Scalar constructors
# ---------------------------------------------------------------------------


def string_option(
    target: Target,
    key: str,
    *,
    default: str | None = None,
    values: Mapping[str, str | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[str]:
    """Create and register a ``String`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.STRING,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def int_option(
    target: Target,
    key: str,
    *,
    default: int | None = None,
    values: Mapping[str, int | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[int]:
    """Create and register an ``Int`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.INT,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def boolean_option(
    target: Target,
    key: str,
    *,
    default: bool | None = None,
    values: Mapping[str, bool | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[bool]:
    """Create and register a ``Boolean`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.BOOLEAN,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def float_option(
    target: Target,
    key: str,
    *,
    default: float | None = None,
    values: Mapping[str, float | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[float]:
    """Create and register a ``Float`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.FLOAT,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def long_option(
    target: Target,
    key: str,
    *,
    default: int | None = None,
    values: Mapping[str, int | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[int]:
    """Create and register a ``Long`` option.

    Python has a single integer type; the tag only tells hosts to accept
    the 64-bit range when coercing input.
    """
    return register_new_option(
        target,
        key,
        value_type=ValueType.LONG,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


# ---------------------------------------------------------------------------
# Array constructors
# ---------------------------------------------------------------------------


def string_array_option(
    target: Target,
    key: str,
    *,
    default: list[str] | None = None,
    values: Mapping[str, list[str] | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[list[str]]:
    """Create and register a ``StringArray`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.STRING_ARRAY,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def int_array_option(
    target: Target,
    key: str,
    *,
    default: list[int] | None = None,
    values: Mapping[str, list[int] | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[list[int]]:
    """Create and register an ``IntArray`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.INT_ARRAY,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def boolean_array_option(
    target: Target,
    key: str,
    *,
    default: list[bool] | None = None,
    values: Mapping[str, list[bool] | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[list[bool]]:
    """Create and register a ``BooleanArray`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.BOOLEAN_ARRAY,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def float_array_option(
    target: Target,
    key: str,
    *,
    default: list[float] | None = None,
    values: Mapping[str, list[float] | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[list[float]]:
    """Create and register a ``FloatArray`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.FLOAT_ARRAY,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )


def long_array_option(
    target: Target,
    key: str,
    *,
    default: list[int] | None = None,
    values: Mapping[str, list[int] | None] | None = None,
    title: str | None = None,
    description: str | None = None,
    required: bool = False,
    validator: Validator = always_valid,
) -> Option[list[int]]:
    """Create and register a ``LongArray`` option."""
    return register_new_option(
        target,
        key,
        value_type=ValueType.LONG_ARRAY,
        default=default,
        values=values,
        title=title,
        description=description,
        required=required,
        validator=validator,
    )
