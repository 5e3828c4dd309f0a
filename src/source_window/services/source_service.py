"""
SourceService for the source command.

This service runs one invocation of ``source|src [lower] [upper]``:
argument parsing, location resolution and rendering, and turns any
failure into a single error message plus a structured error response.
"""

import logging
import time
from typing import Optional

from ..arguments import parse_window_bounds
from ..config import Config
from ..errors import ErrorHandler, ErrorContext, NoSourceInfoError, SourceCommandError
from ..models import SourceResult
from ..output import OutputSink
from ..renderer import SourceWindowRenderer
from ..session import DebuggerSession, current_location

logger = logging.getLogger(__name__)


class SourceService:
    """
    Service for showing the source around the current stack frame.

    Holds no state between invocations; every call reads the session afresh
    and opens its own file handle.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None, config: Optional[Config] = None):
        """Initialize the SourceService with required dependencies."""
        self.error_handler = error_handler or ErrorHandler()
        self.config = config or Config()
        self.renderer = SourceWindowRenderer(self.config)

    def show_source(self, args: str, session: DebuggerSession, sink: OutputSink) -> SourceResult:
        """
        Execute the source command.

        Args:
            args: Raw argument string following the command name
            session: Debugger session supplying the active frame and executable
            sink: Destination for error, notice and source line messages

        Returns:
            SourceResult describing what was shown or why the command failed
        """
        start_time = time.time()
        result = SourceResult(args=args)
        context = ErrorContext(component="source_service", operation="show_source")

        try:
            location = current_location(session)
            result.bounds = parse_window_bounds(args, self.config)
            result.location = location
            context.file_path = location.file_path
            context.line_number = location.line

            if not location.has_source():
                raise NoSourceInfoError()

            stats = self.renderer.render(
                location.file_path,
                location.line,
                result.bounds,
                session.current_executable,
                sink
            )
            result.lines_emitted = stats.lines_emitted
            result.stale_notice = stats.stale_notice
        except SourceCommandError as e:
            sink.error(str(e))
            result.error = self.error_handler.handle_command_error(e, context)

        result.execution_time_seconds = time.time() - start_time
        logger.debug(f"source {args!r}: {result.get_summary()}")
        return result
