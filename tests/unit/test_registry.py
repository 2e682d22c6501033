"""Unit tests for patchopts.options.registry: registration, lookup,
by-key access, bulk reset and the container protocol.
"""
from __future__ import annotations

import logging

import pytest

from patchopts.options.errors import (
    DuplicateKeyError,
    OptionNotFoundError,
    ValueRequiredError,
    ValueValidationError,
)
from patchopts.options.option import ArrayOption, Option
from patchopts.options.registry import OptionRegistry
from patchopts.options.types import ValueType

# ===========================================================================
# Construction
# ===========================================================================


class TestOptionRegistryConstruction:
    def test_empty_registry_has_zero_length(self, registry: OptionRegistry) -> None:
        assert len(registry) == 0

    def test_empty_registry_all_is_empty(self, registry: OptionRegistry) -> None:
        assert registry.all() == ()

    def test_repr_lists_keys(self, registry: OptionRegistry) -> None:
        registry.register(Option("a"))
        assert repr(registry) == "OptionRegistry(options=['a'])"


# ===========================================================================
# register
# ===========================================================================


class TestOptionRegistryRegister:
    def test_register_returns_option(self, registry: OptionRegistry) -> None:
        option = Option("a")
        assert registry.register(option) is option

    def test_register_increments_length(self, registry: OptionRegistry) -> None:
        registry.register(Option("a"))
        registry.register(Option("b"))
        assert len(registry) == 2

    def test_duplicate_key_raises(self, registry: OptionRegistry) -> None:
        first = registry.register(Option("a", default=1))
        with pytest.raises(DuplicateKeyError) as excinfo:
            registry.register(Option("a", default=2))
        assert excinfo.value.key == "a"
        assert excinfo.value.existing is first

    def test_duplicate_key_keeps_first_option(self, registry: OptionRegistry) -> None:
        first = registry.register(Option("a", default=1))
        with pytest.raises(DuplicateKeyError):
            registry.register(Option("a", default=2))
        assert registry.get("a") is first
        assert len(registry) == 1

    def test_register_logs_debug(
        self, registry: OptionRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="patchopts.options.registry"):
            registry.register(Option("a", value_type=ValueType.LONG))
        assert "Registered option 'a' (Long)" in caplog.text


# ===========================================================================
# Lookup
# ===========================================================================


class TestOptionRegistryLookup:
    def test_get_returns_registered_option(self, registry: OptionRegistry) -> None:
        option = registry.register(Option("a"))
        assert registry.get("a") is option

    def test_get_missing_raises_not_found(self, registry: OptionRegistry) -> None:
        with pytest.raises(OptionNotFoundError) as excinfo:
            registry.get("missing")
        assert excinfo.value.key == "missing"

    def test_get_missing_is_key_error(self, registry: OptionRegistry) -> None:
        with pytest.raises(KeyError):
            registry.get("missing")

    def test_getitem(self, registry: OptionRegistry) -> None:
        option = registry.register(Option("a"))
        assert registry["a"] is option

    def test_contains(self, registry: OptionRegistry) -> None:
        registry.register(Option("a"))
        assert "a" in registry
        assert "b" not in registry

    def test_all_preserves_insertion_order(self, registry: OptionRegistry) -> None:
        for key in ("zeta", "alpha", "mid"):
            registry.register(Option(key))
        assert [o.key for o in registry.all()] == ["zeta", "alpha", "mid"]
        assert registry.keys() == ["zeta", "alpha", "mid"]

    def test_all_is_a_snapshot(self, registry: OptionRegistry) -> None:
        registry.register(Option("a"))
        snapshot = registry.all()
        registry.register(Option("b"))
        assert len(snapshot) == 1

    def test_iter_yields_options_in_order(self, registry: OptionRegistry) -> None:
        a = registry.register(Option("a"))
        b = registry.register(Option("b"))
        assert list(registry) == [a, b]

    def test_describe(self, registry: OptionRegistry) -> None:
        registry.register(Option("a", title="A"))
        registry.register(Option("b", value_type=ValueType.INT))
        descriptors = registry.describe()
        assert [d.key for d in descriptors] == ["a", "b"]
        assert descriptors[0].title == "A"
        assert descriptors[1].value_type is ValueType.INT


# ===========================================================================
# By-key value access
# ===========================================================================


class TestOptionRegistrySet:
    def test_set_by_key(self, registry: OptionRegistry) -> None:
        registry.register(Option("a", default="x"))
        registry.set("a", "y")
        assert registry.get("a").get() == "y"

    def test_set_missing_key_raises(self, registry: OptionRegistry) -> None:
        with pytest.raises(OptionNotFoundError):
            registry.set("missing", 1)

    def test_set_propagates_validation_error(self, registry: OptionRegistry) -> None:
        registry.register(
            Option("n", default=1, validator=lambda value, option: value > 0)
        )
        with pytest.raises(ValueValidationError):
            registry.set("n", 0)
        assert registry.get("n").get() == 1

    def test_set_from_str_coerces_by_type(self, registry: OptionRegistry) -> None:
        registry.register(Option("n", value_type=ValueType.INT))
        registry.register(ArrayOption("items", value_type=ValueType.BOOLEAN_ARRAY))
        registry.set_from_str("n", "12")
        registry.set_from_str("items", "yes,no")
        assert registry.get("n").get() == 12
        assert registry.get("items").get() == [True, False]

    def test_set_from_str_bad_text_keeps_value(self, registry: OptionRegistry) -> None:
        registry.register(Option("n", default=1, value_type=ValueType.INT))
        with pytest.raises(ValueError):
            registry.set_from_str("n", "one")
        assert registry.get("n").get() == 1


# ===========================================================================
# resolve / reset_all
# ===========================================================================


class TestOptionRegistryBulk:
    def test_resolve_returns_values_in_order(self, registry: OptionRegistry) -> None:
        registry.register(Option("b", default=2))
        registry.register(Option("a", default=1))
        assert list(registry.resolve().items()) == [("b", 2), ("a", 1)]

    def test_resolve_raises_on_missing_required(self, registry: OptionRegistry) -> None:
        registry.register(Option("a", default=1))
        registry.register(Option("token", required=True))
        with pytest.raises(ValueRequiredError):
            registry.resolve()

    def test_reset_all_restores_defaults(self, registry: OptionRegistry) -> None:
        registry.register(Option("a", default="x"))
        registry.register(ArrayOption("b", default=[1], value_type=ValueType.INT_ARRAY))
        registry.set("a", "changed")
        registry.set("b", [9, 9])
        registry.reset_all()
        assert registry.get("a").get() == "x"
        assert registry.get("b").get() == [1]

    def test_reset_all_runs_in_insertion_order(self, registry: OptionRegistry) -> None:
        order: list[str] = []

        class RecordingOption(Option[int]):
            def reset(self) -> None:
                order.append(self.key)
                super().reset()

        for key in ("c", "a", "b"):
            registry.register(RecordingOption(key))
        registry.reset_all()
        assert order == ["c", "a", "b"]

    def test_reset_all_on_empty_registry(self, registry: OptionRegistry) -> None:
        registry.reset_all()
        assert len(registry) == 0
