"""CLI entry point for patch-options.

Invoked as::

    patch-options [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m patchopts.cli.main

Commands
--------
describe    Show the option metadata of a patch
check       Apply values to a patch's options and resolve them
version     Show version information

TARGET arguments name a patch as ``module:attribute``.  A class is
instantiated without arguments; any other object is used as is.
"""
from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from patchopts.options.registry import OptionRegistry

console = Console()
err_console = Console(stderr=True)


def _load_target(target: str, app_dir: str) -> "OptionRegistry":
    """Import ``module:attribute`` and return its option registry, exiting on error."""
    from patchopts.options.registry import OptionRegistry

    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        err_console.print(
            "[red]Error:[/red] Target must look like 'module:attribute', "
            f"got {escape(repr(target))}"
        )
        sys.exit(1)

    search_path = str(Path(app_dir).resolve())
    added_path = search_path not in sys.path
    if added_path:
        sys.path.insert(0, search_path)
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            f"[red]Error:[/red] Cannot import {escape(repr(module_name))}: {escape(str(exc))}"
        )
        sys.exit(1)
    finally:
        if added_path:
            sys.path.remove(search_path)

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            err_console.print(
                f"[red]Error:[/red] {escape(repr(module_name))} has no attribute "
                f"{escape(repr(attribute))}"
            )
            sys.exit(1)

    if isinstance(obj, type):
        try:
            obj = obj()
        except Exception as exc:  # noqa: BLE001
            err_console.print(
                f"[red]Error:[/red] Cannot create {escape(repr(target))}: {escape(str(exc))}"
            )
            sys.exit(1)

    registry = obj if isinstance(obj, OptionRegistry) else getattr(obj, "options", None)
    if not isinstance(registry, OptionRegistry):
        err_console.print(
            f"[red]Error:[/red] {escape(repr(target))} is neither a patch nor an option registry"
        )
        sys.exit(1)
    return registry


def _format_value(value: Any) -> str:
    if value is None:
        return "[dim]<unset>[/dim]"
    if isinstance(value, list):
        return escape("[" + ", ".join(repr(item) for item in value) + "]")
    return escape(repr(value))


def _split_assignment(assignment: str) -> tuple[str, str]:
    key, sep, text = assignment.partition("=")
    if not sep or not key:
        err_console.print(
            f"[red]Error:[/red] Expected KEY=VALUE, got {escape(repr(assignment))}"
        )
        sys.exit(1)
    return key, text


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="patch-options")
def cli() -> None:
    """Inspect and check typed patch options."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from patchopts import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]patch-options[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# describe command
# ---------------------------------------------------------------------------


@cli.command(name="describe")
@click.argument("target")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option("--app-dir", default=".", help="Directory to import TARGET from")
def describe_command(target: str, output_format: str, app_dir: str) -> None:
    """Show the option metadata of a patch.

    TARGET is the patch to inspect, as module:attribute.
    """
    registry = _load_target(target, app_dir)
    descriptors = registry.describe()

    if output_format == "json":
        text = json.dumps([d.to_dict() for d in descriptors], indent=2, default=str)
        console.print(Syntax(text, "json"))
        return
    if output_format == "yaml":
        text = yaml.safe_dump([d.to_dict() for d in descriptors], sort_keys=False)
        console.print(Syntax(text, "yaml"))
        return

    if not descriptors:
        console.print(f"[yellow]{escape(target)}[/yellow] declares no options")
        return

    table = Table(title=f"Options: {escape(target)}", show_lines=True)
    table.add_column("Key", style="bold")
    table.add_column("Type")
    table.add_column("Required")
    table.add_column("Default")
    table.add_column("Description")

    for d in descriptors:
        # Titles, descriptions and labels are author text, not markup.
        details = escape(d.title or "")
        if d.description:
            description = escape(d.description)
            details = f"{details}\n[dim]{description}[/dim]" if details else description
        if d.values:
            details += "\n[dim]values: " + escape(", ".join(d.values)) + "[/dim]"
        table.add_row(
            escape(d.key),
            d.value_type.tag,
            "[red]yes[/red]" if d.required else "no",
            _format_value(d.default),
            details,
        )

    console.print(table)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("target")
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set an option from text; arrays take comma-separated items",
)
@click.option(
    "--unset",
    "unset_keys",
    multiple=True,
    metavar="KEY",
    help="Set an option to no value; applied before any --set",
)
@click.option("--app-dir", default=".", help="Directory to import TARGET from")
def check_command(
    target: str, assignments: tuple[str, ...], unset_keys: tuple[str, ...], app_dir: str
) -> None:
    """Apply values to a patch's options and resolve every option.

    TARGET is the patch to check, as module:attribute.  Exits with status
    1 if any value cannot be applied or any option fails its checks.
    """
    from patchopts.options.errors import OptionError

    registry = _load_target(target, app_dir)
    parsed = [_split_assignment(assignment) for assignment in assignments]

    conflicting = sorted(set(unset_keys) & {key for key, _ in parsed})
    if conflicting:
        err_console.print(
            "[red]Error:[/red] Both --set and --unset given for "
            + escape(", ".join(repr(key) for key in conflicting))
        )
        sys.exit(1)

    try:
        for key in unset_keys:
            registry.set(key, None)
        for key, text in parsed:
            registry.set_from_str(key, text)
        resolved = registry.resolve()
    except OptionError as exc:
        err_console.print(f"[red]Option error:[/red] {escape(str(exc))}")
        sys.exit(1)
    except ValueError as exc:
        err_console.print(f"[red]Invalid value:[/red] {escape(str(exc))}")
        sys.exit(1)

    table = Table(title=f"Resolved: {escape(target)}", show_lines=True)
    table.add_column("Key", style="bold")
    table.add_column("Type")
    table.add_column("Value")
    for option in registry.all():
        table.add_row(
            escape(option.key), option.value_type.tag, _format_value(resolved[option.key])
        )

    console.print(table)
    console.print(f"[green]OK[/green] {len(resolved)} option(s) resolved")


if __name__ == "__main__":
    cli()
