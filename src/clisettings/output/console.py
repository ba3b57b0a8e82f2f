"""Terminal rendering of command output via Typer."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Final

import typer

from clisettings.output.context import OutputContext

logger: Final = logging.getLogger(__name__)

LOGO: Final = r"""
      _ _          _   _   _
  ___| (_)___  ___| |_| |_(_)_ __   __ _ ___
 / __| | / __|/ _ \ __| __| | '_ \ / _` / __|
| (__| | \__ \  __/ |_| |_| | | | | (_| \__ \
 \___|_|_|___/\___|\__|\__|_|_| |_|\__, |___/
                                   |___/
"""

# Width of the padded level labels, e.g. "info:    "
LABEL_WIDTH: Final = 9


class ConsoleOutput:
    """Writes command output to the terminal.

    Human-readable lines carry a level label (``info:``, ``warn:``,
    ``data:``, ``error:``) unless the context is terse. In JSON mode only
    structured results reach stdout; informational messages are dropped and
    warnings and errors go to stderr.
    """

    def __init__(self, context: OutputContext | None = None) -> None:
        self.context = context or OutputContext()

    def _label(self, level: str) -> str:
        if self.context.terse:
            return ""
        return f"{level}:".ljust(LABEL_WIDTH)

    def info(self, message: str) -> None:
        if self.context.json_output:
            logger.debug("info suppressed in JSON mode: %s", message)
            return
        typer.echo(f"{self._label('info')}{message}")

    def warn(self, message: str) -> None:
        if self.context.json_output:
            typer.echo(json.dumps({"warning": message}), err=True)
            return
        typer.secho(f"{self._label('warn')}{message}", fg=typer.colors.YELLOW)

    def error(self, message: str) -> None:
        if self.context.json_output:
            typer.echo(json.dumps({"error": message}), err=True)
            return
        typer.secho(f"{self._label('error')}{message}", fg=typer.colors.RED, err=True)

    def table(self, rows: Mapping[str, str], headers: tuple[str, str]) -> None:
        if self.context.json_output:
            self.structured(dict(rows))
            return

        first = max([len(headers[0]), *(len(k) for k in rows)])
        second = max([len(headers[1]), *(len(v) for v in rows.values())])
        lines = [
            f"{headers[0]:<{first}}  {headers[1]}",
            f"{'-' * first}  {'-' * second}",
            *(f"{name:<{first}}  {value}" for name, value in rows.items()),
        ]
        label = self._label("data")
        for line in lines:
            typer.echo(f"{label}{line}".rstrip())

    def structured(self, data: Any) -> None:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))

    def banner(self) -> None:
        """Print the logo unless it is turned off or output is JSON."""
        if self.context.logo_enabled and not self.context.json_output:
            typer.secho(LOGO, fg=typer.colors.CYAN)
