"""clisettings command-line interface.

This module provides the root Typer application and the ``config``
sub-commands for listing, setting and deleting persisted settings. Stored
``labels`` and ``logo`` switches are applied once in the root callback,
before any command runs.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Final, TypeVar

import typer

from clisettings.constants import LOG_FORMAT
from clisettings.errors import ClisettingsError
from clisettings.output.console import ConsoleOutput
from clisettings.settings.commands import SettingsCommands
from clisettings.settings.startup import apply_global_settings
from clisettings.settings.store import SettingsStore

T = TypeVar("T")

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Manage local clisettings preferences", add_completion=False)
config_app = typer.Typer(help="Commands to manage your local settings")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "clisettings.cli"

JSON_OPTION = typer.Option(False, "--json", help="Use JSON output")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
NAME_ARGUMENT = typer.Argument(..., help="Setting name")
VALUE_ARGUMENT = typer.Argument(..., help="Setting value")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    json_output: bool = JSON_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Apply stored output switches, then dispatch to the sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )

    store = SettingsStore.default()
    context = apply_global_settings(store, json_output=json_output)
    output = ConsoleOutput(context)
    ctx.obj = SettingsCommands(store, output)

    if ctx.invoked_subcommand is None:
        output.banner()
        typer.echo(ctx.get_help())


def _run(ctx: typer.Context, action: Callable[[SettingsCommands], T]) -> T:
    """Run a settings command, turning domain errors into exit code 1."""
    commands: SettingsCommands = ctx.obj
    try:
        return action(commands)
    except ClisettingsError as exc:
        logger.debug("Command failed", exc_info=exc)
        commands.output.error(exc.message)
        raise typer.Exit(code=1) from exc


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("list")
def list_settings(ctx: typer.Context) -> None:
    """List config settings."""
    _run(ctx, lambda commands: commands.list())


@config_app.command("delete")
def delete_setting(ctx: typer.Context, name: str = NAME_ARGUMENT) -> None:
    """Delete a config setting."""
    _run(ctx, lambda commands: commands.delete(name))


@config_app.command("set")
def set_setting(
    ctx: typer.Context,
    name: str = NAME_ARGUMENT,
    value: str = VALUE_ARGUMENT,
) -> None:
    """Update a config setting."""
    _run(ctx, lambda commands: commands.set(name, value))


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
