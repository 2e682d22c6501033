"""The ``Option`` entity: a named, typed, validated configuration cell.

An option holds a default, an optional mapping of labelled allowed
values, display metadata, a required flag, a ``ValueType`` tag and a
validator.  Both ``get`` and ``set`` check the value under consideration
before acting, so a value read by a patch is always one the option
accepts *now* (validators may depend on external state).

Usage
-----
::

    from patchopts.options.option import Option
    from patchopts.options.types import ValueType

    retries = Option(
        "retries",
        default=3,
        value_type=ValueType.INT,
        validator=lambda value, option: value is None or 0 <= value <= 10,
    )
    retries.set(5)
    retries.get()    # 5
    retries.reset()  # back to 3
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from patchopts.options.errors import ValueRequiredError, ValueValidationError
from patchopts.options.types import ValueType

logger = logging.getLogger(__name__)

T = TypeVar("T")

Validator = Callable[[Any, "Option[Any]"], bool]


def always_valid(value: Any, option: "Option[Any]") -> bool:
    """Default validator: accept every value."""
    return True


def in_allowed_values(value: Any, option: "Option[Any]") -> bool:
    """Opt-in validator that accepts ``None`` or one of ``option.values``.

    Allowed values are not enforced automatically; pass this (or compose
    it into your own validator) to make them binding.  An option without
    ``values`` accepts everything.
    """
    if value is None or option.values is None:
        return True
    return value in option.values.values()


@dataclass(frozen=True)
class OptionDescriptor:
    """Read-only metadata snapshot of an option, for rendering.

    Parameters
    ----------
    key:
        The option key.
    title:
        Display title, if any.
    description:
        Display description, if any.
    required:
        Whether a value must be present.
    value_type:
        The option's value shape.
    default:
        The declared default.
    values:
        Allowed values keyed by display label, if declared.
    """

    key: str
    title: str | None
    description: str | None
    required: bool
    value_type: ValueType
    default: Any = None
    values: dict[str, Any] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON/YAML-friendly dict with the type as its tag string."""
        return {
            "key": self.key,
            "title": self.title,
            "description": self.description,
            "required": self.required,
            "type": self.value_type.tag,
            "default": self.default,
            "values": dict(self.values) if self.values is not None else None,
        }


class Option(Generic[T]):
    """A patch option.

    Parameters
    ----------
    key:
        Identifier, unique within the owning registry.
    default:
        Default value.  Not validated; ``reset`` trusts it.
    values:
        Allowed values keyed by their display label.  Informational only.
    title:
        Display title.
    description:
        Display description.
    required:
        If True, the value may never be ``None`` when read or written.
    value_type:
        Runtime tag describing the value shape.
    validator:
        ``(value, option) -> bool`` predicate run on every ``get`` and
        ``set``.  Defaults to accepting everything.
    """

    def __init__(
        self,
        key: str,
        default: T | None = None,
        values: Mapping[str, T | None] | None = None,
        title: str | None = None,
        description: str | None = None,
        required: bool = False,
        value_type: ValueType = ValueType.STRING,
        validator: Validator = always_valid,
    ) -> None:
        self._key = key
        self.default = default
        self.values = values
        self.title = title
        self.description = description
        self.required = required
        self.value_type = value_type
        self.validator = validator
        self._value: T | None = self._initial_value()

    @property
    def key(self) -> str:
        """The option key.  Fixed at construction."""
        return self._key

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def get(self) -> T | None:
        """Return the current value after re-checking it.

        Raises
        ------
        ValueRequiredError
            If the option is required and the value is ``None``.
        ValueValidationError
            If the validator rejects the current value.
        """
        self._check(self._value)
        return self._value

    def set(self, value: T | None) -> None:
        """Replace the current value with ``value`` if it passes the checks.

        The current value is left untouched when a check fails.

        Raises
        ------
        ValueRequiredError
            If the option is required and ``value`` is ``None``.
        ValueValidationError
            If the validator rejects ``value``.
        """
        self._check(value)
        self._value = value
        logger.debug("Set option %r to %r", self._key, value)

    def reset(self) -> None:
        """Restore the default value without validating it.

        Override this if the value needs to be mutated instead of replaced.
        """
        self._value = self._initial_value()
        logger.debug("Reset option %r to its default", self._key)

    @property
    def value(self) -> T | None:
        """Checked value; equivalent to ``get()`` / ``set()``."""
        return self.get()

    @value.setter
    def value(self, value: T | None) -> None:
        self.set(value)

    def _initial_value(self) -> T | None:
        return self.default

    def _check(self, value: T | None) -> None:
        if self.required and value is None:
            raise ValueRequiredError(self)
        if not self.validator(value, self):
            raise ValueValidationError(value, self)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def describe(self) -> OptionDescriptor:
        """Return a metadata snapshot of this option."""
        return OptionDescriptor(
            key=self._key,
            title=self.title,
            description=self.description,
            required=self.required,
            value_type=self.value_type,
            default=self.default,
            values=dict(self.values) if self.values is not None else None,
        )

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(key={self._key!r}, "
            f"type={self.value_type.tag}, required={self.required}, "
            f"value={self._value!r})"
        )


class ArrayOption(Option[list[Any]]):
    """Option whose value is a list.

    The current value starts as, and resets to, a fresh copy of the
    default, so in-place edits of the current list never alter the
    default.  An empty list is a present value and satisfies ``required``.
    """

    def _initial_value(self) -> list[Any] | None:
        if self.default is None:
            return None
        return list(self.default)
