"""
Debugger session collaborators consumed by the source command.

The command never reaches for process-wide debugger state. Anything exposing
``active_frame`` and ``current_executable`` can be passed in as the session.
"""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

from .errors import NoActiveFrameError
from .models import ExecutionLocation

UNKNOWN_LINE = -1


@dataclass(frozen=True)
class SourceLocation:
    """Source position reported by a stack frame; line -1 means unknown."""

    file_name: Optional[str] = None
    line: int = UNKNOWN_LINE


@dataclass(frozen=True)
class StackFrame:
    source_location: SourceLocation


class Executable:
    """The debuggee executable on disk."""

    def __init__(self, path: str):
        self.path = path

    @property
    def last_write_time(self) -> float:
        """Modification time of the executable, in seconds since the epoch."""
        return os.path.getmtime(self.path)

    def __repr__(self) -> str:
        return f"Executable(path={self.path!r})"


class DebuggerSession(Protocol):
    """What the source command needs from the debugger session."""

    @property
    def active_frame(self) -> Optional[StackFrame]: ...

    @property
    def current_executable(self) -> Optional[Executable]: ...


@dataclass
class StaticSession:
    """A session whose frame and executable are given up front."""

    active_frame: Optional[StackFrame] = None
    current_executable: Optional[Executable] = None

    @classmethod
    def from_values(cls, file_name: Optional[str] = None, line: int = UNKNOWN_LINE,
                    executable_path: Optional[str] = None) -> "StaticSession":
        """Build a session; no file and an unknown line means no active frame."""
        frame = None
        if file_name is not None or line != UNKNOWN_LINE:
            frame = StackFrame(SourceLocation(file_name, line))
        executable = Executable(executable_path) if executable_path else None
        return cls(active_frame=frame, current_executable=executable)


def current_location(session: DebuggerSession) -> ExecutionLocation:
    """
    Resolve the paused execution point of the session.

    Raises:
        NoActiveFrameError: If no stack frame is selected
    """
    frame = session.active_frame
    if frame is None:
        raise NoActiveFrameError()

    loc = frame.source_location
    line = None if loc.line == UNKNOWN_LINE else loc.line
    return ExecutionLocation(file_path=loc.file_name, line=line)
