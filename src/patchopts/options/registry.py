"""Option registry owned by a patch.

An ``OptionRegistry`` is an insertion-ordered, key-unique collection of
``Option`` objects.  Hosts enumerate it to discover metadata and then
read or write individual options by key.

Example
-------
::

    from patchopts.options.registry import OptionRegistry
    from patchopts.options.option import Option

    registry = OptionRegistry()
    registry.register(Option("name", default="World"))

    registry.set("name", "Patch")
    registry.get("name").get()        # "Patch"
    [o.key for o in registry.all()]   # ["name"]
    registry.reset_all()
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar

from patchopts.options.errors import DuplicateKeyError, OptionNotFoundError
from patchopts.options.option import Option, OptionDescriptor
from patchopts.options.types import parse_value

logger = logging.getLogger(__name__)

OptionT = TypeVar("OptionT", bound=Option[Any])


class OptionRegistry:
    """Ordered, key-unique collection of options.

    Not thread-safe; hosts sharing a registry across threads must
    synchronise access themselves.
    """

    def __init__(self) -> None:
        self._options: dict[str, Option[Any]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, option: OptionT) -> OptionT:
        """Add ``option`` to the registry and return it.

        Parameters
        ----------
        option:
            The option to add.  Its key must not be registered yet.

        Returns
        -------
        Option
            ``option`` itself, so construction and registration can be
            chained in one expression.

        Raises
        ------
        DuplicateKeyError
            If an option with the same key is already registered.  The
            registry is left unchanged.
        """
        existing = self._options.get(option.key)
        if existing is not None:
            raise DuplicateKeyError(option.key, existing)
        self._options[option.key] = option
        logger.debug(
            "Registered option %r (%s)", option.key, option.value_type.tag
        )
        return option

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, key: str) -> Option[Any]:
        """Return the option registered under ``key``.

        Raises
        ------
        OptionNotFoundError
            If no option is registered under ``key``.
        """
        try:
            return self._options[key]
        except KeyError:
            raise OptionNotFoundError(key) from None

    def all(self) -> tuple[Option[Any], ...]:
        """Return all options in registration order."""
        return tuple(self._options.values())

    def keys(self) -> list[str]:
        """Return all option keys in registration order."""
        return list(self._options)

    def describe(self) -> list[OptionDescriptor]:
        """Return metadata for every option, in registration order."""
        return [option.describe() for option in self._options.values()]

    # ------------------------------------------------------------------
    # Bulk and by-key value access
    # ------------------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Set the value of the option registered under ``key``.

        Raises
        ------
        OptionNotFoundError
            If ``key`` is not registered.
        ValueRequiredError, ValueValidationError
            If the option rejects ``value``.
        """
        self.get(key).set(value)

    def set_from_str(self, key: str, text: str) -> None:
        """Coerce ``text`` by the option's value type, then set it.

        Raises
        ------
        ValueError
            If ``text`` cannot be coerced.
        OptionNotFoundError, ValueRequiredError, ValueValidationError
            As for ``set``.
        """
        option = self.get(key)
        option.set(parse_value(option.value_type, text))

    def resolve(self) -> dict[str, Any]:
        """Return ``{key: option.get()}`` for every option, in order.

        The first option that fails its checks raises; nothing is
        collected past it.
        """
        return {key: option.get() for key, option in self._options.items()}

    def reset_all(self) -> None:
        """Reset every option to its default, in registration order."""
        for option in self._options.values():
            option.reset()
        logger.debug("Reset %d option(s) to their defaults", len(self._options))

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> Option[Any]:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        """Support ``"key" in registry`` membership test."""
        return key in self._options

    def __iter__(self) -> Iterator[Option[Any]]:
        return iter(self.all())

    def __len__(self) -> int:
        """Return the number of registered options."""
        return len(self._options)

    def __repr__(self) -> str:
        return f"OptionRegistry(options={self.keys()})"
