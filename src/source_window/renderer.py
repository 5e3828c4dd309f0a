"""
Rendering of the source window around the current execution point.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from .config import Config
from .errors import SourceFileUnreadableError
from .file_processing import SourceFileService
from .models import LineRole, Message, MessageKind, WindowBounds
from .output import OutputSink
from .session import Executable
from .window import classify_lines

logger = logging.getLogger(__name__)

_KIND_BY_ROLE = {
    LineRole.EMPHASIS: MessageKind.EMPHASIS,
    LineRole.INFO: MessageKind.INFO,
}


@dataclass
class RenderStats:
    lines_emitted: int = 0
    stale_notice: bool = False


def _strip_newlines(handle: TextIO) -> Iterator[str]:
    for line in handle:
        yield line[:-1] if line.endswith("\n") else line


class SourceWindowRenderer:
    """Scans a source file once and emits the lines inside the window."""

    def __init__(self, config: Optional[Config] = None, file_service: Optional[SourceFileService] = None):
        self.config = config or Config()
        self.file_service = file_service or SourceFileService(self.config)

    def render(self, file_path: str, line: int, bounds: WindowBounds,
               executable: Optional[Executable], sink: OutputSink) -> RenderStats:
        """
        Emit the window of ``file_path`` around ``line`` to ``sink``.

        Args:
            file_path: Source file of the paused frame
            line: Line number reported by the frame
            bounds: Lines to show before and after the current line
            executable: Debuggee executable used for the staleness check, if known
            sink: Destination for the emitted messages

        Returns:
            Counts of what was emitted

        Raises:
            SourceFileNotFoundError: If the file does not exist
            SourceFileUnreadableError: If the file cannot be opened or read
        """
        stats = RenderStats()
        handle = self.file_service.open_source(file_path)

        with handle:
            if self.config.check_staleness and self.file_service.is_newer_than(file_path, executable):
                sink.notice(f"Source file '{file_path}' is newer than the debuggee executable")
                stats.stale_notice = True

            try:
                for classified in classify_lines(_strip_newlines(handle), line, bounds):
                    if classified.role == LineRole.SKIPPED:
                        continue
                    sink.emit(Message(_KIND_BY_ROLE[classified.role], classified.text, classified.index))
                    stats.lines_emitted += 1
            except OSError as e:
                raise SourceFileUnreadableError(file_path, e) from e

        logger.debug(f"Rendered {stats.lines_emitted} lines of {file_path} around line {line}")
        return stats
