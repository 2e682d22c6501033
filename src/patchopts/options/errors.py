"""Error types raised by options and option registries.

Every error carries the objects involved so that a host (CLI, UI, the
patch runner) can render an actionable message.  None of them are
retried or recovered from inside this package.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from patchopts.options.option import Option


class OptionError(Exception):
    """Base class for all option errors."""


class ValueRequiredError(OptionError, ValueError):
    """Raised when a required option would hold ``None``."""

    def __init__(self, option: "Option[Any]") -> None:
        self.option = option
        super().__init__(f"The option value for {option.key!r} is required.")


class ValueValidationError(OptionError, ValueError):
    """Raised when an option's validator rejects a candidate value."""

    def __init__(self, value: Any, option: "Option[Any]") -> None:
        self.value = value
        self.option = option
        super().__init__(
            f"The option value {value!r} is invalid for option {option.key!r}."
        )


class DuplicateKeyError(OptionError, ValueError):
    """Raised when registering a key that is already in use."""

    def __init__(self, key: str, existing: "Option[Any]") -> None:
        self.key = key
        self.existing = existing
        super().__init__(
            f"An option with key {key!r} is already registered. "
            "Option keys must be unique within a patch."
        )


class OptionNotFoundError(OptionError, KeyError):
    """Raised when a requested key is not in the registry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No option with key {key!r} is registered.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
