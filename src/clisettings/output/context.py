"""Per-process output behaviour derived at startup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OutputContext(BaseModel):
    """How the current process renders its output.

    Computed once when the process starts and passed explicitly to the
    output sink; never persisted.
    """

    model_config = ConfigDict(frozen=True)

    terse: bool = Field(False, description="Suppress the level labels on output lines")
    logo_enabled: bool = Field(True, description="Show the banner when run without a command")
    json_output: bool = Field(False, description="Emit machine-readable JSON instead of text")
