"""
Data models for the source window command.
"""
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from .errors import ErrorResponse


class LineRole(Enum):
    """How a scanned source line is presented."""
    EMPHASIS = "emphasis"  # The marked current line
    INFO = "info"          # Ordinary line inside the window
    SKIPPED = "skipped"    # Outside the window, never emitted


class MessageKind(Enum):
    """Severities understood by an output sink."""
    ERROR = "error"
    NOTICE = "notice"
    INFO = "info"
    EMPHASIS = "emphasis"


@dataclass(frozen=True)
class WindowBounds:
    """Number of lines to show before (lower) and after (upper) the current line."""

    lower: int = 10
    upper: int = 10


@dataclass(frozen=True)
class ExecutionLocation:
    """Read-only snapshot of where the debuggee is paused."""

    file_path: Optional[str]
    line: Optional[int]

    def has_source(self) -> bool:
        return self.file_path is not None and self.line is not None


@dataclass(frozen=True)
class ClassifiedLine:
    index: int
    text: str
    role: LineRole


@dataclass(frozen=True)
class Message:
    """A single message sent to an output sink."""

    kind: MessageKind
    text: str
    index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text, "index": self.index}


@dataclass
class SourceResult:
    """Structured result of one source command invocation."""

    args: str
    bounds: Optional[WindowBounds] = None
    location: Optional[ExecutionLocation] = None
    lines_emitted: int = 0
    stale_notice: bool = False
    error: Optional[ErrorResponse] = None
    execution_time_seconds: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    def is_successful(self) -> bool:
        """Check if the command completed without an error."""
        return self.error is None

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the command result."""
        return {
            "args": self.args,
            "lower": self.bounds.lower if self.bounds else None,
            "upper": self.bounds.upper if self.bounds else None,
            "file_path": self.location.file_path if self.location else None,
            "line": self.location.line if self.location else None,
            "lines_emitted": self.lines_emitted,
            "stale_notice": self.stale_notice,
            "successful": self.is_successful(),
            "error": self.error.message if self.error else None,
            "execution_time_seconds": self.execution_time_seconds,
            "timestamp": self.timestamp.isoformat()
        }
