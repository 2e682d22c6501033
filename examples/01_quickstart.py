#!/usr/bin/env python3
"""Example: quickstart for patch-options

Declare a patch with typed options, set values, handle errors and read
the resolved values the way a patch runner would.

Usage:
    python examples/01_quickstart.py
    patch-options describe 01_quickstart:RenamePatch --app-dir examples

Requirements:
    pip install patch-options
"""
from __future__ import annotations

import patchopts
from patchopts import (
    OptionError,
    Patch,
    int_option,
    string_array_option,
    string_option,
)


class RenamePatch(Patch):
    def __init__(self) -> None:
        super().__init__("rename", description="Renames the app")
        self.app_name = string_option(
            self, "app-name", required=True, title="App name"
        )
        self.retries = int_option(
            self,
            "retries",
            default=3,
            validator=lambda value, option: value is None or 0 <= value <= 10,
        )
        self.locales = string_array_option(self, "locales", default=[])


def main() -> None:
    print(f"patch-options version: {patchopts.__version__}")

    patch = RenamePatch()

    # Step 1: Discover metadata
    for descriptor in patch.options.describe():
        flag = " (required)" if descriptor.required else ""
        print(f"  {descriptor.key}: {descriptor.value_type.tag}{flag}")

    # Step 2: A missing required value is fatal at resolve time
    try:
        patch.resolve_options()
    except OptionError as exc:
        print(f"Not ready: {exc}")

    # Step 3: Set values, from Python objects or from text
    patch.options.set("app-name", "Renamed")
    patch.options.set_from_str("locales", "en, de")
    try:
        patch.retries.set(20)
    except OptionError as exc:
        print(f"Rejected: {exc}")

    # Step 4: Resolve right before applying the patch
    print(f"Resolved: {patch.resolve_options()}")

    # Step 5: Back to defaults
    patch.options.reset_all()
    print(f"Retries after reset: {patch.retries.get()}")


if __name__ == "__main__":
    main()
