"""Output layer: the derived OutputContext and the sinks commands write to."""

from clisettings.output.console import ConsoleOutput
from clisettings.output.context import OutputContext
from clisettings.output.protocols import MockOutput, Output

__all__ = [
    "ConsoleOutput",
    "MockOutput",
    "Output",
    "OutputContext",
]
