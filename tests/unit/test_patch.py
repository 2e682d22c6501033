"""Unit tests for patchopts.patch: the option-owning patch and the
three behavioural scenarios the option system must support end to end.
"""
from __future__ import annotations

import pytest

from patchopts.options.constructors import int_option, string_option
from patchopts.options.errors import ValueRequiredError, ValueValidationError
from patchopts.options.registry import OptionRegistry
from patchopts.patch import Patch, SupportsOptions


class RetryPatch(Patch):
    def __init__(self) -> None:
        super().__init__(description="Retries things")
        self.retries = int_option(
            self,
            "retries",
            default=3,
            validator=lambda value, option: value is None or 0 <= value <= 10,
        )
        self.token = string_option(self, "token", required=True)


class TestPatch:
    def test_name_defaults_to_class_name(self) -> None:
        assert RetryPatch().name == "RetryPatch"

    def test_explicit_name(self) -> None:
        assert Patch("custom").name == "custom"

    def test_each_patch_owns_its_registry(self) -> None:
        first, second = RetryPatch(), RetryPatch()
        assert first.options is not second.options
        first.retries.set(5)
        assert second.retries.get() == 3

    def test_satisfies_supports_options(self) -> None:
        patch = RetryPatch()
        assert isinstance(patch, SupportsOptions)
        assert isinstance(patch.options, OptionRegistry)

    def test_repr(self) -> None:
        assert repr(RetryPatch()) == "RetryPatch(name='RetryPatch', options=['retries', 'token'])"


class TestResolveOptions:
    def test_missing_required_value_is_fatal(self) -> None:
        with pytest.raises(ValueRequiredError) as excinfo:
            RetryPatch().resolve_options()
        assert excinfo.value.option.key == "token"

    def test_resolves_all_values(self) -> None:
        patch = RetryPatch()
        patch.options.set("token", "secret")
        assert patch.resolve_options() == {"retries": 3, "token": "secret"}


class TestScenarios:
    def test_retries_keeps_last_valid_value(self) -> None:
        patch = RetryPatch()
        patch.retries.set(5)
        assert patch.retries.get() == 5
        with pytest.raises(ValueValidationError):
            patch.retries.set(20)
        assert patch.retries.get() == 5

    def test_required_token_without_default(self) -> None:
        with pytest.raises(ValueRequiredError):
            RetryPatch().token.get()

    def test_reset_all_restores_declared_defaults(self) -> None:
        patch = Patch()
        a = string_option(patch, "a", default="alpha")
        b = int_option(patch, "b", default=2)
        a.set("changed")
        b.set(99)
        patch.options.reset_all()
        assert a.get() == "alpha"
        assert b.get() == 2
