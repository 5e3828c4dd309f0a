"""
Debugger shell command definitions.
"""
from typing import List, Optional

from .config import Config
from .errors import ErrorHandler
from .models import SourceResult
from .output import OutputSink
from .services import SourceService
from .session import DebuggerSession


class SourceCommand:
    """The ``source``/``src`` debugger command."""

    names: List[str] = ["source", "src"]
    summary = "Show the source for the current stack frame."
    syntax = "source|src [lower] [upper]"
    help = (
        "Prints the source for the current stack frame and highlights the current\n"
        "line.\n"
        "\n"
        "If arguments are given, they specify how many lines to print before and\n"
        "after the current line."
    )

    def __init__(self, error_handler: Optional[ErrorHandler] = None, config: Optional[Config] = None):
        self.service = SourceService(error_handler, config)

    def matches(self, name: str) -> bool:
        return name in self.names

    def process(self, args: str, session: DebuggerSession, sink: OutputSink) -> SourceResult:
        return self.service.show_source(args, session, sink)
