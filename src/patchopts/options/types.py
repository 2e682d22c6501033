"""Value-type tags and text coercion for options.

``ValueType`` is the runtime discriminator stored on every option.  Hosts
that only see options generically (a CLI, a settings UI) branch on it to
decide how to prompt for and parse user input.

Usage
-----
::

    from patchopts.options.types import ValueType, parse_value

    ValueType.INT_ARRAY.tag                  # "IntArray"
    ValueType.from_tag("Boolean")            # ValueType.BOOLEAN
    parse_value(ValueType.INT_ARRAY, "1, 2") # [1, 2]
"""
from __future__ import annotations

from enum import Enum
from typing import Any

INT_MIN: int = -(2**31)
INT_MAX: int = 2**31 - 1
LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1

ARRAY_SEPARATOR: str = ","

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


class ValueType(Enum):
    """Supported option value shapes.  The member value is the tag string."""

    STRING = "String"
    INT = "Int"
    BOOLEAN = "Boolean"
    FLOAT = "Float"
    LONG = "Long"
    STRING_ARRAY = "StringArray"
    INT_ARRAY = "IntArray"
    BOOLEAN_ARRAY = "BooleanArray"
    FLOAT_ARRAY = "FloatArray"
    LONG_ARRAY = "LongArray"

    @property
    def tag(self) -> str:
        """Return the tag string, e.g. ``"StringArray"``."""
        return self.value

    @property
    def is_array(self) -> bool:
        """Return True for the array shapes."""
        return self in _ELEMENT_TYPES

    @property
    def element_type(self) -> "ValueType":
        """Return the item shape of an array type, or ``self`` for scalars."""
        return _ELEMENT_TYPES.get(self, self)

    @classmethod
    def from_tag(cls, tag: str) -> "ValueType":
        """Resolve a tag string to its ``ValueType``.

        Raises
        ------
        ValueError
            If ``tag`` names no known value type.
        """
        try:
            return cls(tag)
        except ValueError:
            known = ", ".join(member.tag for member in cls)
            raise ValueError(
                f"Unknown value type tag {tag!r}. Known tags: {known}"
            ) from None


_ELEMENT_TYPES: dict[ValueType, ValueType] = {
    ValueType.STRING_ARRAY: ValueType.STRING,
    ValueType.INT_ARRAY: ValueType.INT,
    ValueType.BOOLEAN_ARRAY: ValueType.BOOLEAN,
    ValueType.FLOAT_ARRAY: ValueType.FLOAT,
    ValueType.LONG_ARRAY: ValueType.LONG,
}


def _parse_integer(text: str, low: int, high: int, label: str) -> int:
    try:
        number = int(text.strip())
    except ValueError:
        raise ValueError(f"{text!r} is not a valid {label}") from None
    if not low <= number <= high:
        raise ValueError(f"{number} is out of range for {label} ({low}..{high})")
    return number


def _parse_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ValueError(f"{text!r} is not a valid Float") from None


def _parse_boolean(text: str) -> bool:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"{text!r} is not a valid Boolean (use true/false)")


def _parse_scalar(value_type: ValueType, text: str) -> Any:
    if value_type is ValueType.STRING:
        return text
    if value_type is ValueType.INT:
        return _parse_integer(text, INT_MIN, INT_MAX, "Int")
    if value_type is ValueType.LONG:
        return _parse_integer(text, LONG_MIN, LONG_MAX, "Long")
    if value_type is ValueType.FLOAT:
        return _parse_float(text)
    if value_type is ValueType.BOOLEAN:
        return _parse_boolean(text)
    raise AssertionError(f"Unhandled scalar value type: {value_type!r}")


def parse_value(value_type: ValueType, text: str) -> Any:
    """Coerce user-supplied ``text`` into a value of ``value_type``.

    Array types split ``text`` on commas, strip whitespace and skip empty
    items; blank text yields an empty list.  Coercion does not validate:
    pass the result to ``Option.set`` for the required/validator checks.

    Parameters
    ----------
    value_type:
        The target shape.
    text:
        Raw input, typically from a command line or form field.

    Returns
    -------
    Any
        ``str``, ``int``, ``float``, ``bool`` or a ``list`` of those.

    Raises
    ------
    ValueError
        If ``text`` (or any array item) cannot be converted.
    """
    if value_type.is_array:
        item_type = value_type.element_type
        items = (item.strip() for item in text.split(ARRAY_SEPARATOR))
        return [_parse_scalar(item_type, item) for item in items if item]
    return _parse_scalar(value_type, text)
