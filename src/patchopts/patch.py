"""Minimal patch owner for option registries.

The patch-application framework supplies the real ``Patch`` type; this
module defines the slice of it that options depend on: an ``options``
registry that typed constructors register into.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from patchopts.options.registry import OptionRegistry


@runtime_checkable
class SupportsOptions(Protocol):
    """Anything that owns an option registry as ``options``."""

    options: OptionRegistry


class Patch:
    """A unit of modification that owns an ``OptionRegistry``.

    Subclasses declare their options in ``__init__`` with the typed
    constructors, passing ``self`` as the target.

    Parameters
    ----------
    name:
        Display name of the patch.
    description:
        Optional longer description.
    """

    def __init__(self, name: str | None = None, description: str | None = None) -> None:
        self.name: str = name if name is not None else type(self).__name__
        self.description = description
        self.options = OptionRegistry()

    def resolve_options(self) -> dict[str, Any]:
        """Return the checked value of every option, keyed by option key.

        Call this right before applying the patch.  Any option error is
        fatal for the run and propagates unchanged.
        """
        return self.options.resolve()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, options={self.options.keys()})"
