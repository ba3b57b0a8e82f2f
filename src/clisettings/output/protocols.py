from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from clisettings.output.context import OutputContext


@runtime_checkable
class Output(Protocol):
    """Protocol defining where commands send user-facing output.

    Commands only talk to this interface so rendering, labels and the
    structured output mode stay out of the settings logic.
    """

    context: OutputContext

    def info(self, message: str) -> None:
        """Emit an informational message."""
        ...

    def warn(self, message: str) -> None:
        """Emit a warning that does not fail the command."""
        ...

    def error(self, message: str) -> None:
        """Report a failure."""
        ...

    def table(self, rows: Mapping[str, str], headers: tuple[str, str]) -> None:
        """Render a two-column table of name/value rows.

        Args:
            rows: Mapping rendered one row per entry, in iteration order
            headers: Column headers
        """
        ...

    def structured(self, data: Any) -> None:
        """Emit a structured result."""
        ...


class MockOutput:
    """Mock implementation of Output for testing."""

    def __init__(self, context: OutputContext | None = None):
        self.context = context or OutputContext()
        self.messages: list[tuple[str, str]] = []
        self.tables: list[dict[str, object]] = []
        self.structured_calls: list[Any] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def table(self, rows: Mapping[str, str], headers: tuple[str, str]) -> None:
        self.tables.append({"rows": list(rows.items()), "headers": headers})

    def structured(self, data: Any) -> None:
        self.structured_calls.append(data)

    def messages_at(self, level: str) -> list[str]:
        """Return the recorded messages for one level."""
        return [msg for lvl, msg in self.messages if lvl == level]

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.messages = []
        self.tables = []
        self.structured_calls = []
